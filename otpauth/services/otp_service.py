"""
OTP Service

Handles OTP generation, storage, and validation.

Records live in a single lock-guarded in-memory mapping keyed by email
(exact, case-sensitive match). At most one record exists per email; issuing a
new code replaces the previous one and resets its attempt count.
"""

import logging
import random
import threading
import time
from typing import Callable, Dict

from otpauth.core.config import Settings, settings as default_settings
from otpauth.models.enums import OtpResult
from otpauth.models.otp_record import OtpRecord


logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def generate_otp(length: int = 6, rng: random.Random = None) -> str:
    """
    Generate a numeric OTP code.

    Each digit is drawn independently; demo grade, not for real secrets.
    """
    rng = rng or random
    return "".join(str(rng.randrange(10)) for _ in range(length))


class OtpManager:
    """
    Per-email OTP store with expiry and attempt limiting.

    Every public method holds the store lock for its whole duration.
    """

    def __init__(
        self,
        *,
        clock: Clock = time.time,
        settings: Settings = None,
        rng: random.Random = None,
    ):
        """
        Args:
            clock: Returns the current time in epoch seconds.
            settings: OTP length, expiry and attempt limit.
            rng: Random source for code digits.
        """
        settings = settings or default_settings
        self._records: Dict[str, OtpRecord] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._rng = rng
        self.code_length = settings.OTP_LENGTH
        self.expire_seconds = settings.OTP_EXPIRE_SECONDS
        self.max_attempts = settings.OTP_MAX_ATTEMPTS

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def has_record(self, email: str) -> bool:
        with self._lock:
            return email in self._records

    def generate(self, email: str) -> str:
        """
        Issue a fresh OTP for the email, invalidating any existing one.

        Args:
            email: Identity the code is issued to.

        Returns:
            str: The plaintext code (there is no delivery channel in the demo).
        """
        code = generate_otp(self.code_length, self._rng)
        with self._lock:
            replaced = email in self._records
            self._records[email] = OtpRecord(
                code=code,
                expires_at=self._clock() + self.expire_seconds,
            )
        logger.debug("Issued OTP (replaced existing: %s)", replaced)
        return code

    def validate(self, email: str, code: str) -> OtpResult:
        """
        Validate a submitted code.

        Checks run in a fixed order: missing record, attempts exhausted,
        expiry, then code equality. A match consumes the record; a mismatch
        counts as a failed attempt.

        Args:
            email: Identity the code was issued to.
            code: Code entered by the user.

        Returns:
            OtpResult: Outcome of the validation.
        """
        with self._lock:
            record = self._records.get(email)
            if record is None:
                return OtpResult.NO_CODE_FOUND

            if record.is_max_attempts_exceeded(self.max_attempts):
                return OtpResult.MAX_ATTEMPTS_EXCEEDED

            if record.is_expired(self._clock()):
                return OtpResult.EXPIRED

            if record.code == code:
                del self._records[email]
                return OtpResult.SUCCESS

            record.attempt_count += 1
            if record.is_max_attempts_exceeded(self.max_attempts):
                return OtpResult.MAX_ATTEMPTS_EXCEEDED
            return OtpResult.INVALID_CODE

    def remaining_time(self, email: str) -> int:
        """Seconds until the email's code expires, or 0 if there is none."""
        with self._lock:
            record = self._records.get(email)
            if record is None:
                return 0
            return record.remaining_seconds(self._clock())

    def remaining_attempts(self, email: str) -> int:
        """Validation attempts left for the email's code, or 0 if there is none."""
        with self._lock:
            record = self._records.get(email)
            if record is None:
                return 0
            return record.remaining_attempts(self.max_attempts)

    def clear(self, email: str) -> None:
        """Drop the email's code, if any."""
        with self._lock:
            self._records.pop(email, None)
