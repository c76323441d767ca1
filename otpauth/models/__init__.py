"""
OTP Auth - Models Module

Domain records and enums.
"""

from otpauth.models.enums import OtpResult
from otpauth.models.otp_record import OtpRecord

__all__ = ["OtpResult", "OtpRecord"]
