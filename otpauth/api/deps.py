"""
API Dependencies

Reusable dependencies for API routes.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from otpauth.services.auth_service import AuthStateMachine


def get_auth_machine(request: Request) -> AuthStateMachine:
    """
    Dependency returning the process-wide auth state machine.

    The machine is created by the application lifespan.

    Raises:
        HTTPException: 503 if the application has not finished starting.
    """
    machine = getattr(request.app.state, "auth_machine", None)
    if machine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Auth service not initialised",
        )
    return machine


AuthMachine = Annotated[AuthStateMachine, Depends(get_auth_machine)]
