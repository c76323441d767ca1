"""
Logging Setup

Configures stdlib logging for the application process.
"""

import logging
import sys

from otpauth.core.config import Settings


LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
HANDLER_NAME = "otpauth"


def configure_logging(settings: Settings) -> None:
    """
    Install a single stream handler on the ``otpauth`` logger.

    Development runs log at DEBUG regardless of LOG_LEVEL.
    Calling this more than once does not stack handlers.
    """
    level = logging.DEBUG if settings.is_development else settings.LOG_LEVEL.upper()

    root = logging.getLogger("otpauth")
    root.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
