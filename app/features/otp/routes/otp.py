from fastapi import APIRouter, Depends, status

from app.features.otp.schemas.otp import SendOtpRequest, VerifyOtpRequest
from app.features.otp.services.emailer import send_otp_email
from app.features.otp.services.otp_store import OtpStore, get_otp_store
from app.platform.exceptions import DeliveryError
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.utils.validation import require_fields

logger = get_logger(__name__)

router = APIRouter(tags=["OTP"])


@router.post("/send-otp")
def send_otp(request: SendOtpRequest, store: OtpStore = Depends(get_otp_store)):
    """
    Issue a one-time password and email it to the requester.

    The record is kept even when the email cannot be sent; it expires unused.
    """
    require_fields("Email is required", request.email)

    otp_id, otp = store.create(request.email)
    logger.info(f"OTP {otp_id} issued for {request.email}")

    if not send_otp_email(request.email, otp):
        raise DeliveryError("Failed to send OTP email")

    return api_response(
        message="OTP sent successfully",
        data={"otpId": otp_id},
        status_code=status.HTTP_200_OK,
    )


@router.post("/verify-otp")
def verify_otp(request: VerifyOtpRequest, store: OtpStore = Depends(get_otp_store)):
    require_fields("OTP ID and OTP are required", request.otp_id, request.otp)

    store.verify(request.otp_id, request.otp)
    logger.info(f"OTP {request.otp_id} verified")

    return api_response(message="OTP verified successfully")
