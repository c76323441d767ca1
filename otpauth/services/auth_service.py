"""
Auth Service

State machine driving the passwordless login flow:

    EmailInput --submit_email--> OtpEntry --submit_code(success)--> Session
    OtpEntry --resend--> OtpEntry (fresh code, timers and attempts reset)
    OtpEntry --back--> EmailInput
    Session --logout--> EmailInput

The machine is the single writer of the current state. Every change replaces
the whole (immutable) state value. Actions must be called from the running
event loop, since entering OtpEntry or Session starts a timer on it.
"""

import logging
import math
import time
from typing import Callable, Optional

from otpauth.core.config import Settings, settings as default_settings
from otpauth.core.timers import PeriodicTimer
from otpauth.models.enums import OtpResult
from otpauth.schemas.auth_state import AuthState, EmailInput, OtpEntry, Session
from otpauth.services.analytics_service import AnalyticsLogger, analytics as default_analytics
from otpauth.services.otp_service import OtpManager


logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
EXPIRED_MESSAGE = "OTP has expired. Please request a new one."
MAX_ATTEMPTS_MESSAGE = "Maximum attempts exceeded. Please request a new OTP."
NO_CODE_MESSAGE = "No OTP found. Please request a new one."


def is_valid_email(email: str) -> bool:
    """
    Basic email shape check.

    Requires a non-blank value with an "@" that comes before the last ".".
    """
    return (
        bool(email.strip())
        and "@" in email
        and "." in email
        and email.index("@") < email.rindex(".")
    )


class AuthStateMachine:
    """
    Owns the current AuthState, the OTP countdown and the session timer.
    """

    def __init__(
        self,
        otp_manager: OtpManager,
        analytics: Optional[AnalyticsLogger] = None,
        *,
        clock: Callable[[], float] = time.time,
        settings: Settings = None,
    ):
        """
        Args:
            otp_manager: Store that issues and validates codes.
            analytics: Sink for generated/success/failure/logout events.
            clock: Returns the current time in epoch seconds.
            settings: Supplies the timer tick interval.
        """
        settings = settings or default_settings
        self._otp_manager = otp_manager
        self._analytics = analytics or default_analytics
        self._clock = clock
        self._tick_seconds = settings.TIMER_TICK_SECONDS
        self._state: AuthState = EmailInput()
        self._otp_timer: Optional[PeriodicTimer] = None
        self._session_timer: Optional[PeriodicTimer] = None

    @property
    def state(self) -> AuthState:
        """Snapshot of the current state."""
        return self._state

    @property
    def otp_timer(self) -> Optional[PeriodicTimer]:
        return self._otp_timer

    @property
    def session_timer(self) -> Optional[PeriodicTimer]:
        return self._session_timer

    # ============== Actions ==============

    def update_email(self, email: str) -> AuthState:
        """Edit the email draft, clearing any previous error."""
        current = self._state
        if isinstance(current, EmailInput):
            self._state = current.model_copy(update={"email": email, "error": None})
        return self._state

    def submit_email(self, email: str) -> AuthState:
        """
        Request a code for ``email`` and move to OtpEntry.

        An address that fails the shape check stays on EmailInput with an
        error and no code is issued.
        """
        if isinstance(self._state, Session):
            logger.debug("Ignoring submit_email while a session is active")
            return self._state

        if not is_valid_email(email):
            self._state = EmailInput(email=email, error=INVALID_EMAIL_MESSAGE)
            return self._state

        code = self._otp_manager.generate(email)
        self._analytics.log_generated(email)
        self._state = OtpEntry(
            email=email,
            code=code,
            remaining_seconds=self._otp_manager.expire_seconds,
            remaining_attempts=self._otp_manager.max_attempts,
        )
        self._start_otp_countdown(email)
        return self._state

    def resend(self) -> AuthState:
        """Issue a fresh code for the current email, resetting timer and attempts."""
        current = self._state
        if isinstance(current, OtpEntry):
            return self.submit_email(current.email)
        return self._state

    def submit_code(self, code: str) -> AuthState:
        """Validate ``code`` against the code issued for the current email."""
        current = self._state
        if not isinstance(current, OtpEntry):
            logger.debug("Ignoring submit_code outside OTP entry")
            return self._state

        email = current.email
        result = self._otp_manager.validate(email, code)

        if result is OtpResult.SUCCESS:
            self._analytics.log_success(email)
            self._cancel_otp_timer()
            start_time = self._clock()
            self._state = Session(email=email, session_start_time=start_time)
            self._start_session_timer(start_time)

        elif result is OtpResult.EXPIRED:
            self._analytics.log_failure(email, "OTP Expired")
            self._cancel_otp_timer()
            self._state = current.model_copy(
                update={"error": EXPIRED_MESSAGE, "remaining_seconds": 0}
            )

        elif result is OtpResult.INVALID_CODE:
            remaining_attempts = self._otp_manager.remaining_attempts(email)
            self._analytics.log_failure(email, "Invalid OTP")
            self._state = current.model_copy(
                update={
                    "error": f"Invalid OTP. {remaining_attempts} attempt(s) remaining.",
                    "remaining_attempts": remaining_attempts,
                }
            )

        elif result is OtpResult.MAX_ATTEMPTS_EXCEEDED:
            self._analytics.log_failure(email, "Max Attempts Exceeded")
            self._cancel_otp_timer()
            self._state = current.model_copy(
                update={
                    "error": MAX_ATTEMPTS_MESSAGE,
                    "remaining_attempts": 0,
                    "remaining_seconds": 0,
                }
            )

        elif result is OtpResult.NO_CODE_FOUND:
            self._analytics.log_failure(email, "No OTP Found")
            self._state = current.model_copy(update={"error": NO_CODE_MESSAGE})

        else:
            raise ValueError(f"Unhandled OTP result: {result!r}")

        return self._state

    def back(self) -> AuthState:
        """Abandon OTP entry. Shares the logout transition."""
        if isinstance(self._state, OtpEntry):
            return self.logout()
        return self._state

    def logout(self) -> AuthState:
        """
        Return to a blank EmailInput.

        Clears the OTP record for the current email and stops both timers.
        The logout event is only reported when a session was active.
        """
        current = self._state
        if isinstance(current, Session):
            self._analytics.log_logout(current.email)
        if isinstance(current, (Session, OtpEntry)):
            self._otp_manager.clear(current.email)

        self._cancel_otp_timer()
        self._cancel_session_timer()
        self._state = EmailInput()
        return self._state

    def close(self) -> None:
        """Stop both timers; the state is left as is."""
        self._cancel_otp_timer()
        self._cancel_session_timer()

    async def aclose(self) -> None:
        """Stop both timers and wait for their tasks to finish."""
        timers = [t for t in (self._otp_timer, self._session_timer) if t is not None]
        self.close()
        for timer in timers:
            await timer.join()

    # ============== Timers ==============

    def _start_otp_countdown(self, email: str) -> None:
        self._cancel_otp_timer()
        remaining = self._otp_manager.expire_seconds

        def tick() -> bool:
            nonlocal remaining
            remaining -= 1
            current = self._state
            if not (isinstance(current, OtpEntry) and current.email == email):
                return False
            self._state = current.model_copy(update={"remaining_seconds": max(0, remaining)})
            return remaining > 0

        self._otp_timer = PeriodicTimer(
            self._tick_seconds, tick, name="otp-countdown"
        ).start()

    def _start_session_timer(self, start_time: float) -> None:
        self._cancel_session_timer()

        def tick() -> bool:
            current = self._state
            if not (isinstance(current, Session) and current.session_start_time == start_time):
                return False
            duration = max(0, math.floor(self._clock() - start_time))
            self._state = current.model_copy(update={"session_duration_seconds": duration})
            return True

        self._session_timer = PeriodicTimer(
            self._tick_seconds, tick, name="session-timer", run_immediately=True
        ).start()

    def _cancel_otp_timer(self) -> None:
        if self._otp_timer is not None:
            self._otp_timer.cancel()
            self._otp_timer = None

    def _cancel_session_timer(self) -> None:
        if self._session_timer is not None:
            self._session_timer.cancel()
            self._session_timer = None
