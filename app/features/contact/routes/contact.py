from fastapi import APIRouter, Depends

from app.features.contact.schemas.contact import ContactRequest, EnquiryRequest
from app.features.contact.services.emailer import send_contact_email, send_enquiry_email
from app.features.otp.services.otp_store import OtpStore, get_otp_store
from app.platform.exceptions import DeliveryError
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.utils.validation import require_fields

logger = get_logger(__name__)

router = APIRouter(tags=["Contact"])


@router.post("/submit-contact")
def submit_contact(request: ContactRequest, store: OtpStore = Depends(get_otp_store)):
    """
    Contact form submission, gated by a verified OTP.

    - Checks the OTP is verified and unexpired (kept in the store)
    - Sends the submission to the sales inbox
    - Retires the OTP only after the email went out, so a failed send can be retried
    """
    require_fields(
        "All fields are required",
        request.otp_id,
        request.name,
        request.email,
        request.subject,
        request.message,
    )

    store.require_verified(request.otp_id)

    # The record stays live while the email is in flight; a duplicate
    # submission racing this one can pass the check above as well.
    if not send_contact_email(request):
        raise DeliveryError("Failed to submit contact form")

    store.delete(request.otp_id)
    logger.info(f"Contact form from {request.email} submitted with OTP {request.otp_id}")

    return api_response(message="Contact form submitted successfully")


@router.post("/submit-enquiry")
def submit_enquiry(request: EnquiryRequest):
    require_fields(
        "All fields are required",
        request.name,
        request.email,
        request.phone,
        request.product,
        request.message,
    )

    if not send_enquiry_email(request):
        raise DeliveryError("Failed to submit enquiry")

    logger.info(f"Enquiry from {request.email} about {request.product} submitted")

    return api_response(message="Enquiry submitted successfully")
