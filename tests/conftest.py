"""
Test configuration and fixtures for the contact API.

Each test gets its own OTP store driven by a manual clock, injected through
FastAPI's dependency overrides, so expiry can be tested without sleeping.
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Generator

os.environ.setdefault("OTP_SWEEP_ENABLED", "false")
os.environ.setdefault("EMAIL_RELAY_URL", "")
os.environ.setdefault("EMAIL_RELAY_API_KEY", "")

import pytest
from fastapi.testclient import TestClient

from app.features.otp.services.otp_store import OtpStore, get_otp_store


class ManualClock:
    """Clock that only moves when a test tells it to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store(clock) -> OtpStore:
    return OtpStore(ttl_minutes=10, clock=clock)


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture
def client(test_app, store) -> Generator[TestClient, None, None]:
    """
    Test client wired to the per-test store.

    Server exceptions are turned into responses so the generic 500 handler
    can be asserted on.
    """
    test_app.dependency_overrides[get_otp_store] = lambda: store

    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client

    test_app.dependency_overrides.pop(get_otp_store, None)


@pytest.fixture
def verified_otp(store):
    """An OTP issued to a@x.com and already verified. Returns (otp_id, code)."""
    otp_id, code = store.create("a@x.com")
    store.verify(otp_id, code)
    return otp_id, code
