"""
Analytics Service

Event sink for the authentication flow: OTP generated, validation success,
validation failure and logout. Events are written to the ``otpauth.analytics``
logger with the email masked.
"""

import logging
from typing import Protocol


logger = logging.getLogger("otpauth.analytics")


def mask_email(email: str) -> str:
    """
    Mask an email address for logs.

    Keeps the first two characters of the local part and the domain:
    ``"user@example.com" -> "us***@example.com"``. Local parts of two
    characters or fewer, or values without an "@", are masked entirely.
    """
    at_index = email.find("@")
    if at_index > 2:
        return f"{email[:2]}***{email[at_index:]}"
    if at_index == -1:
        return "***"
    return f"***{email[at_index:]}"


class AnalyticsLogger(Protocol):
    """Interface the auth flow reports events through."""

    def log_generated(self, email: str) -> None: ...

    def log_success(self, email: str) -> None: ...

    def log_failure(self, email: str, reason: str) -> None: ...

    def log_logout(self, email: str) -> None: ...


class LoggingAnalytics:
    """AnalyticsLogger that writes masked events through stdlib logging."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def log_generated(self, email: str) -> None:
        self._log.info("OTP Generated for: %s", mask_email(email))

    def log_success(self, email: str) -> None:
        self._log.info("OTP Validation Success for: %s", mask_email(email))

    def log_failure(self, email: str, reason: str) -> None:
        self._log.warning(
            "OTP Validation Failed for: %s, Reason: %s", mask_email(email), reason
        )

    def log_logout(self, email: str) -> None:
        self._log.info("User Logged Out: %s", mask_email(email))


# Default sink shared by the application
analytics = LoggingAnalytics()
