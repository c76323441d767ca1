"""
OTP Auth - Schemas Module

Pydantic models for auth states and API payloads.
"""

from otpauth.schemas.auth_state import AuthState, EmailInput, OtpEntry, Session
from otpauth.schemas.auth import CodeRequest, EmailRequest, StateResponse, format_clock

__all__ = [
    "AuthState",
    "EmailInput",
    "OtpEntry",
    "Session",
    "CodeRequest",
    "EmailRequest",
    "StateResponse",
    "format_clock",
]
