"""
Periodic removal of expired OTP records.

Expiry is already enforced on every read, so the sweep only keeps memory
bounded for codes that were never used.
"""
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from app.features.otp.services.otp_store import OtpStore, otp_store
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)

SWEEP_JOB_ID = "sweep_expired_otps"


def sweep_expired_otps(store: OtpStore = otp_store) -> int:
    removed = store.sweep()
    if removed:
        logger.info(f"Swept {removed} expired OTP record(s)")
    return removed


def start_sweep_scheduler(
    store: OtpStore = otp_store,
    interval_minutes: Optional[int] = None,
) -> BackgroundScheduler:
    interval = interval_minutes or settings.OTP_SWEEP_INTERVAL_MINUTES
    sched = BackgroundScheduler(timezone="UTC")
    sched.add_job(
        sweep_expired_otps,
        "interval",
        minutes=interval,
        args=[store],
        id=SWEEP_JOB_ID,
        replace_existing=True,
    )
    sched.start()
    logger.info(f"OTP sweep scheduled every {interval} minute(s)")
    return sched


def stop_sweep_scheduler(sched: Optional[BackgroundScheduler]) -> None:
    if sched and sched.running:
        sched.shutdown(wait=False)
