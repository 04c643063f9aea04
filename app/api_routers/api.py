from fastapi import APIRouter

from app.features.contact.routes.contact import router as contact_router
from app.features.otp.routes.otp import router as otp_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(otp_router)
api_router.include_router(contact_router)
