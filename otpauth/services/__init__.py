"""
OTP Auth - Services Module

Business logic layer.
"""

from otpauth.services import analytics_service
from otpauth.services import otp_service
from otpauth.services import auth_service

__all__ = [
    "analytics_service",
    "otp_service",
    "auth_service",
]
