"""
Pytest Configuration and Fixtures

Provides reusable fixtures for testing the OTP Auth service.
"""

from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from otpauth.core.config import Settings


# ==================== Time Fixtures ====================

class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at a fixed instant."""
    return FakeClock()


# ==================== Settings Fixtures ====================

@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with the default OTP policy and a fast timer tick.

    A tick of 10ms lets timer tests run through many ticks quickly.
    """
    return Settings(
        ENVIRONMENT="test",
        OTP_LENGTH=6,
        OTP_EXPIRE_SECONDS=60,
        OTP_MAX_ATTEMPTS=3,
        TIMER_TICK_SECONDS=0.01,
    )


# ==================== Service Fixtures ====================

@pytest.fixture
def mock_analytics() -> MagicMock:
    """Analytics sink recording every call."""
    return MagicMock()


@pytest.fixture
def otp_manager(clock, test_settings):
    """OTP manager on the fake clock."""
    from otpauth.services.otp_service import OtpManager

    return OtpManager(clock=clock, settings=test_settings)


@pytest.fixture
def auth_machine(otp_manager, mock_analytics, clock, test_settings):
    """
    Auth state machine on the fake clock.

    Timers are stopped after each test.
    """
    from otpauth.services.auth_service import AuthStateMachine

    machine = AuthStateMachine(
        otp_manager, mock_analytics, clock=clock, settings=test_settings
    )
    yield machine
    machine.close()


# ==================== API Fixtures ====================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client with the application lifespan running."""
    from otpauth.main import app

    with TestClient(app) as test_client:
        yield test_client
