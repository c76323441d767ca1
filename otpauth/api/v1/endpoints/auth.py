"""
Authentication Routes

Presentation endpoints for the email + OTP login flow. Each action returns
the resulting auth state.
"""

from fastapi import APIRouter

from otpauth.api.deps import AuthMachine
from otpauth.schemas.auth import CodeRequest, EmailRequest, StateResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get(
    "/state",
    response_model=StateResponse,
    summary="Get the current auth state",
)
async def get_state(machine: AuthMachine) -> StateResponse:
    return StateResponse.from_state(machine.state)


@router.put(
    "/email",
    response_model=StateResponse,
    summary="Edit the email draft",
)
async def update_email(payload: EmailRequest, machine: AuthMachine) -> StateResponse:
    return StateResponse.from_state(machine.update_email(payload.email))


@router.post(
    "/email",
    response_model=StateResponse,
    summary="Submit an email and request an OTP",
)
async def submit_email(payload: EmailRequest, machine: AuthMachine) -> StateResponse:
    """
    Issue an OTP for the email and move to OTP entry.

    **Flow:**
    1. Check the email shape (stays on email input with an error if malformed)
    2. Generate a code, replacing any earlier code for the email
    3. Start the expiry countdown

    The code is included in the returned state; there is no email delivery.
    """
    return StateResponse.from_state(machine.submit_email(payload.email))


@router.post(
    "/code",
    response_model=StateResponse,
    summary="Submit the OTP code",
)
async def submit_code(payload: CodeRequest, machine: AuthMachine) -> StateResponse:
    """
    Validate the code.

    A correct code starts a session. Wrong, expired or exhausted codes keep
    the OTP entry state with an error message.
    """
    return StateResponse.from_state(machine.submit_code(payload.code))


@router.post(
    "/resend",
    response_model=StateResponse,
    summary="Issue a new OTP for the current email",
)
async def resend(machine: AuthMachine) -> StateResponse:
    return StateResponse.from_state(machine.resend())


@router.post(
    "/back",
    response_model=StateResponse,
    summary="Leave OTP entry and return to email input",
)
async def back(machine: AuthMachine) -> StateResponse:
    return StateResponse.from_state(machine.back())


@router.post(
    "/logout",
    response_model=StateResponse,
    summary="End the session",
)
async def logout(machine: AuthMachine) -> StateResponse:
    return StateResponse.from_state(machine.logout())
