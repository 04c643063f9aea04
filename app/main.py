from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api_routers.api import api_router
from app.features.health.routes.health import router as health_router
from app.features.otp.services.otp_store import otp_store
from app.features.otp.workers.sweep import start_sweep_scheduler, stop_sweep_scheduler
from app.middlewares.security_headers import SecurityHeadersMiddleware
from app.platform.config import settings
from app.platform.exceptions import add_exception_handlers
from app.platform.logger import get_logger

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.mail_configured:
        logger.warning("Mail credentials missing: set EMAIL_USER and EMAIL_PASS (or MAIL_USERNAME/MAIL_PASSWORD)")

    sched = start_sweep_scheduler(otp_store) if settings.OTP_SWEEP_ENABLED else None
    app.state.scheduler = sched
    try:
        yield
    finally:
        stop_sweep_scheduler(sched)


app = FastAPI(
    title=settings.APP_NAME,
    description="Contact and enquiry forms with email OTP verification",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


# Root endpoint for basic info
@app.get("/", tags=["Info"])
def root():
    return {
        "app_name": settings.APP_NAME,
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_base": "/api",
    }


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

app.include_router(health_router)
app.include_router(api_router, prefix="/api")
