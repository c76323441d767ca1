"""
Configuration Tests

Tests for settings defaults, environment overrides and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Verify the OTP policy defaults."""
        from otpauth.core.config import Settings

        for name in ("OTP_LENGTH", "OTP_EXPIRE_SECONDS", "OTP_MAX_ATTEMPTS", "TIMER_TICK_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.OTP_LENGTH == 6
        assert settings.OTP_EXPIRE_SECONDS == 60
        assert settings.OTP_MAX_ATTEMPTS == 3
        assert settings.TIMER_TICK_SECONDS == 1.0

    def test_environment_override(self, monkeypatch):
        """Verify values are read from the environment."""
        from otpauth.core.config import Settings

        monkeypatch.setenv("OTP_EXPIRE_SECONDS", "120")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.OTP_EXPIRE_SECONDS == 120
        assert settings.is_development is False

    def test_rejects_non_positive_tick(self):
        """Verify a zero tick interval is invalid."""
        from otpauth.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, TIMER_TICK_SECONDS=0)

    def test_cors_origins_list(self):
        """Verify CORS origins are split and trimmed."""
        from otpauth.core.config import Settings

        settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_does_not_stack_handlers(self):
        """Verify repeated setup installs one handler."""
        from otpauth.core.config import Settings
        from otpauth.core.logging import HANDLER_NAME, configure_logging

        settings = Settings(_env_file=None, ENVIRONMENT="production", LOG_LEVEL="warning")

        configure_logging(settings)
        configure_logging(settings)

        logger = logging.getLogger("otpauth")
        ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert logger.level == logging.WARNING

    def test_development_logs_debug(self):
        """Verify development runs log at DEBUG."""
        from otpauth.core.config import Settings
        from otpauth.core.logging import configure_logging

        configure_logging(Settings(_env_file=None, ENVIRONMENT="development"))

        assert logging.getLogger("otpauth").level == logging.DEBUG
