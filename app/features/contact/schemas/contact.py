from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    """Contact form submission, only accepted after the OTP has been verified."""

    model_config = ConfigDict(populate_by_name=True)

    otp_id: Optional[str] = Field(None, alias="otpId")
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class EnquiryRequest(BaseModel):
    """Product enquiry from the website popup form. No OTP involved."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    product: Optional[str] = None
    message: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ravi Patel",
                "email": "ravi@example.com",
                "phone": "+91 98765 43210",
                "product": "HDPE granules",
                "message": "Please share pricing for 5 tonnes.",
            }
        }
    )
