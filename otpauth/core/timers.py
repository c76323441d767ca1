"""
Periodic Timers

Cancellable once-per-interval background tasks running on the asyncio loop.

The state machine owns one timer per timed state (OTP countdown, session
duration). A timer handle must be cancelled before it is replaced.
"""

import asyncio
import contextlib
import logging
from typing import Callable, Optional


logger = logging.getLogger(__name__)

# A tick callback returns False to stop the timer.
TickCallback = Callable[[], bool]


class PeriodicTimer:
    """
    Runs ``callback`` every ``interval`` seconds until it returns False
    or the timer is cancelled.
    """

    def __init__(
        self,
        interval: float,
        callback: TickCallback,
        *,
        name: str = "timer",
        run_immediately: bool = False,
    ):
        """
        Args:
            interval: Seconds between ticks.
            callback: Invoked on each tick; return False to stop.
            name: Label used in logs and as the asyncio task name.
            run_immediately: Tick once before the first sleep.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.name = name
        self._callback = callback
        self._run_immediately = run_immediately
        self._task: Optional[asyncio.Task] = None
        self._cancelled = False

    @property
    def active(self) -> bool:
        """True while the timer is started, not cancelled and not finished."""
        return (
            self._task is not None
            and not self._task.done()
            and not self._cancelled
        )

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> "PeriodicTimer":
        """
        Schedule the timer on the running event loop.

        Raises:
            RuntimeError: If called outside a running loop or started twice.
        """
        if self._task is not None:
            raise RuntimeError(f"{self.name} already started")
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name=self.name)
        logger.debug("Started %s (interval=%ss)", self.name, self.interval)
        return self

    def cancel(self) -> None:
        """
        Stop the timer.

        Takes effect immediately: no tick runs after this returns, even if the
        underlying task has not yet observed the cancellation.
        """
        if self._cancelled:
            return
        self._cancelled = True
        task = self._task
        if task is not None and not task.done() and not task.get_loop().is_closed():
            task.cancel()
        logger.debug("Cancelled %s", self.name)

    async def join(self) -> None:
        """Wait for the timer to finish, either naturally or by cancellation."""
        if self._task is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await self._task

    def _tick(self) -> bool:
        if self._cancelled:
            return False
        return bool(self._callback())

    async def _run(self) -> None:
        if self._run_immediately and not self._tick():
            return
        while True:
            await asyncio.sleep(self.interval)
            if not self._tick():
                logger.debug("%s stopped", self.name)
                return
