from app.features.contact.schemas.contact import ContactRequest, EnquiryRequest


def test_enquiry_schema_example():
    schema = EnquiryRequest.model_json_schema()

    assert schema["example"]["product"] == "HDPE granules"
    assert set(schema["example"]) == set(EnquiryRequest.model_fields)


def test_enquiry_config_is_model_config():
    assert "json_schema_extra" in EnquiryRequest.model_config


def test_contact_request_accepts_alias_and_field_name():
    by_alias = ContactRequest(otpId="abc")
    by_name = ContactRequest(otp_id="abc")

    assert by_alias.otp_id == by_name.otp_id == "abc"
