"""
Domain Enums
"""

import enum


class OtpResult(str, enum.Enum):
    """Outcome of validating a submitted OTP."""
    SUCCESS = "SUCCESS"
    EXPIRED = "EXPIRED"
    INVALID_CODE = "INVALID_CODE"
    MAX_ATTEMPTS_EXCEEDED = "MAX_ATTEMPTS_EXCEEDED"
    NO_CODE_FOUND = "NO_CODE_FOUND"
