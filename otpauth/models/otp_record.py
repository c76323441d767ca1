"""
OTP Record Model

In-memory record of the one live OTP issued to an identity.
"""

import math
from dataclasses import dataclass


@dataclass
class OtpRecord:
    """
    A single OTP issued to an email address.

    Attributes:
        code: Plaintext numeric code.
        expires_at: Epoch seconds after which the code is expired.
        attempt_count: Failed validation attempts so far.
    """
    code: str
    expires_at: float
    attempt_count: int = 0

    def is_expired(self, now: float) -> bool:
        """Check if the record has expired at ``now``."""
        return now > self.expires_at

    def is_max_attempts_exceeded(self, max_attempts: int) -> bool:
        """Check if no validation attempts remain."""
        return self.attempt_count >= max_attempts

    def remaining_seconds(self, now: float) -> int:
        """Whole seconds until expiry, clamped at 0."""
        return max(0, math.floor(self.expires_at - now))

    def remaining_attempts(self, max_attempts: int) -> int:
        """Attempts left before lock-out, clamped at 0."""
        return max(0, max_attempts - self.attempt_count)
