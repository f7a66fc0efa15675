"""Debounce timer with an injectable clock.

The timer holds the most recent value and fires it once the clock has moved
``quiet_period`` seconds past the last ``submit``. Every new submission
resets the deadline. Nothing runs in the background: callers either ``poll``
from their own loop or ``await wait()``.
"""

import asyncio
import time
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class Debouncer(Generic[T]):
    """Cancellable, resettable quiet-period timer."""

    def __init__(
        self,
        quiet_period: float,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize debouncer.

        Args:
            quiet_period: Seconds without new input before the value fires
            clock: Monotonic clock in seconds
            sleep: Awaitable sleep used by ``wait``
        """
        if quiet_period < 0:
            raise ValueError("quiet_period must not be negative")
        self.quiet_period = quiet_period
        self._clock = clock
        self._sleep = sleep
        self._value: Optional[T] = None
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        """Whether a value is waiting to fire."""
        return self._deadline is not None

    def submit(self, value: T) -> None:
        """Schedule ``value``, replacing any pending one and restarting the timer."""
        self._value = value
        self._deadline = self._clock() + self.quiet_period

    def cancel(self) -> None:
        """Drop the pending value without firing it."""
        self._value = None
        self._deadline = None

    def ready(self) -> bool:
        """Whether the quiet period has elapsed for the pending value."""
        return self._deadline is not None and self._clock() >= self._deadline

    def poll(self) -> Optional[T]:
        """Fire and return the pending value if it is due, else None."""
        if not self.ready():
            return None
        return self._take()

    def flush(self) -> Optional[T]:
        """Fire the pending value now, skipping the rest of the quiet period."""
        if self._deadline is None:
            return None
        return self._take()

    async def wait(self) -> Optional[T]:
        """Sleep until the pending value fires.

        Submissions made while waiting push the deadline back. Returns None
        if nothing is pending or the timer is cancelled meanwhile.
        """
        while self._deadline is not None:
            remaining = self._deadline - self._clock()
            if remaining <= 0:
                return self._take()
            await self._sleep(remaining)
        return None

    def _take(self) -> Optional[T]:
        value = self._value
        self._value = None
        self._deadline = None
        return value
