from fastapi import APIRouter, Depends, status

from app.features.otp.services.otp_store import OtpStore, get_otp_store
from app.platform.config import settings
from app.platform.response import api_response


router = APIRouter()

@router.get("/health", tags=["health"])
async def health_check(store: OtpStore = Depends(get_otp_store)):
    return api_response(
        data={"status": "ok", "service": settings.APP_NAME, "pendingOtps": len(store)},
        message="Service is healthy",
        status_code=status.HTTP_200_OK,
    )
