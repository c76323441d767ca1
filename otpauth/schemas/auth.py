"""
Auth Schemas

Pydantic models for the auth endpoints' request/response validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from otpauth.schemas.auth_state import AuthState, OtpEntry, Session


def format_clock(total_seconds: int) -> str:
    """Format seconds as ``mm:ss``; minutes are not wrapped at an hour."""
    minutes, seconds = divmod(max(0, int(total_seconds)), 60)
    return f"{minutes:02d}:{seconds:02d}"


class EmailRequest(BaseModel):
    """Schema for submitting or editing the email address."""

    email: str = Field(..., max_length=320, description="Email address as typed")


class CodeRequest(BaseModel):
    """Schema for submitting an OTP code."""

    code: str = Field(..., max_length=32, description="OTP code as typed")


class StateResponse(BaseModel):
    """Current auth state plus the timer text shown on screen."""

    state: AuthState
    display_time: Optional[str] = None

    @classmethod
    def from_state(cls, state: AuthState) -> "StateResponse":
        if isinstance(state, OtpEntry):
            display_time = format_clock(state.remaining_seconds)
        elif isinstance(state, Session):
            display_time = format_clock(state.session_duration_seconds)
        else:
            display_time = None
        return cls(state=state, display_time=display_time)
