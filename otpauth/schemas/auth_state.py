"""
Auth State Schemas

The three mutually exclusive screens of the login flow, as immutable
Pydantic models joined into a discriminated union on ``kind``.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EmailInput(BaseModel):
    """Initial state - user enters their email address."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["email_input"] = "email_input"
    email: str = ""
    is_loading: bool = False
    error: Optional[str] = None


class OtpEntry(BaseModel):
    """
    OTP entry state - user enters the code issued to their email.

    Attributes:
        email: Identity the code was issued to.
        code: The issued code, exposed for the demo since nothing delivers it.
        remaining_seconds: Countdown until the code expires.
        remaining_attempts: Validation attempts left.
        error: Message from the last failed submission.
        is_loading: Validation in progress.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["otp_entry"] = "otp_entry"
    email: str
    code: str
    remaining_seconds: int = Field(..., ge=0)
    remaining_attempts: int = Field(..., ge=0)
    error: Optional[str] = None
    is_loading: bool = False


class Session(BaseModel):
    """
    Session state - user is logged in.

    Attributes:
        email: The logged-in user's email.
        session_start_time: Epoch seconds when the session started.
        session_duration_seconds: Live-updating session duration.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["session"] = "session"
    email: str
    session_start_time: float
    session_duration_seconds: int = Field(default=0, ge=0)


AuthState = Annotated[
    Union[EmailInput, OtpEntry, Session],
    Field(discriminator="kind"),
]
