"""
In-memory OTP store.

Records live only in process memory and are lost on restart. Every access to
the underlying dict goes through ``self._lock``: sync route handlers run on
FastAPI's thread pool and the sweep job runs on the scheduler's thread.
"""
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Callable, Dict, Optional, Tuple

from app.features.otp.models.otp_record import OtpRecord
from app.platform.config import settings
from app.platform.exceptions import (
    OtpExpiredError,
    OtpMismatchError,
    OtpNotFoundError,
    OtpNotVerifiedError,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_otp() -> str:
    """6-digit code, uniform over 100000-999999."""
    return str(secrets.randbelow(900000) + 100000)


class OtpStore:
    def __init__(
        self,
        ttl_minutes: int = 10,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.ttl = timedelta(minutes=ttl_minutes)
        self.clock = clock
        self._records: Dict[str, OtpRecord] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, otp_id: str) -> bool:
        with self._lock:
            return otp_id in self._records

    def create(self, destination: str) -> Tuple[str, str]:
        code = generate_otp()
        record = OtpRecord(
            id=str(uuid.uuid4()),
            code=code,
            destination=destination,
            expires_at=self.clock() + self.ttl,
        )
        with self._lock:
            self._records[record.id] = record
        return record.id, code

    def get(self, otp_id: str) -> Optional[OtpRecord]:
        """Return the record whether or not it has expired."""
        with self._lock:
            return self._records.get(otp_id)

    def delete(self, otp_id: str) -> bool:
        with self._lock:
            return self._records.pop(otp_id, None) is not None

    def verify(self, otp_id: str, code: str) -> OtpRecord:
        """
        Mark the record verified if ``code`` matches.

        A wrong code leaves the record untouched so the user can try again.
        Verifying an already verified record with the right code succeeds again.
        """
        with self._lock:
            record = self._live_record(otp_id)
            if record.code != code:
                raise OtpMismatchError()
            record.verified = True
            return record

    def require_verified(self, otp_id: str) -> OtpRecord:
        """Check a record is verified and unexpired without retiring it."""
        with self._lock:
            return self._verified_record(otp_id)

    def consume(self, otp_id: str) -> OtpRecord:
        """Check and retire a verified record in one step."""
        with self._lock:
            record = self._verified_record(otp_id)
            del self._records[otp_id]
            return record

    def sweep(self) -> int:
        """Drop every expired record. Returns how many were removed."""
        now = self.clock()
        with self._lock:
            expired = [otp_id for otp_id, record in self._records.items() if record.is_expired(now)]
            for otp_id in expired:
                del self._records[otp_id]
        return len(expired)

    # Callers must hold self._lock.

    def _live_record(self, otp_id: str) -> OtpRecord:
        record = self._records.get(otp_id)
        if record is None:
            raise OtpNotFoundError()
        if record.is_expired(self.clock()):
            del self._records[otp_id]
            raise OtpExpiredError()
        return record

    def _verified_record(self, otp_id: str) -> OtpRecord:
        record = self._records.get(otp_id)
        if record is None:
            raise OtpNotFoundError()
        if not record.verified:
            raise OtpNotVerifiedError()
        if record.is_expired(self.clock()):
            del self._records[otp_id]
            raise OtpExpiredError()
        return record


# Global instance
otp_store = OtpStore(ttl_minutes=settings.OTP_EXPIRE_MINUTES)


def get_otp_store() -> OtpStore:
    return otp_store
