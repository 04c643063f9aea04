from dataclasses import dataclass
from datetime import datetime


@dataclass
class OtpRecord:
    """One pending email verification, keyed by ``id`` in the OTP store."""

    id: str
    code: str
    destination: str
    expires_at: datetime
    verified: bool = False

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
