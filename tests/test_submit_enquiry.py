from unittest.mock import patch

import pytest

ENQUIRY = {
    "name": "Ravi",
    "email": "ravi@example.com",
    "phone": "+91 98765 43210",
    "product": "HDPE granules",
    "message": "Pricing for 5 tonnes?",
}


def test_submit_enquiry_success(client):
    with patch("app.features.contact.routes.contact.send_enquiry_email", return_value=True) as mock_send:
        response = client.post("/api/submit-enquiry", json=ENQUIRY)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Enquiry submitted successfully"}
    enquiry = mock_send.call_args.args[0]
    assert enquiry.product == "HDPE granules"
    assert enquiry.phone == "+91 98765 43210"


@pytest.mark.parametrize("missing", list(ENQUIRY))
def test_submit_enquiry_missing_field(client, missing):
    body = {**ENQUIRY, missing: ""}

    with patch("app.features.contact.routes.contact.send_enquiry_email") as mock_send:
        response = client.post("/api/submit-enquiry", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "All fields are required"}
    mock_send.assert_not_called()


def test_submit_enquiry_delivery_failure(client):
    with patch("app.features.contact.routes.contact.send_enquiry_email", return_value=False):
        response = client.post("/api/submit-enquiry", json=ENQUIRY)

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Failed to submit enquiry"}


@pytest.mark.parametrize("sent", [True, False])
def test_submit_enquiry_never_touches_otp_store(client, store, sent):
    pending_id, _ = store.create("a@x.com")
    verified_id, code = store.create("b@x.com")
    store.verify(verified_id, code)

    with patch("app.features.contact.routes.contact.send_enquiry_email", return_value=sent):
        client.post("/api/submit-enquiry", json={**ENQUIRY, "otpId": verified_id})
        client.post("/api/submit-enquiry", json={})

    assert len(store) == 2
    assert store.get(pending_id).verified is False
    assert store.get(verified_id).verified is True
