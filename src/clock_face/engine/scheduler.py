"""Repeating timers driven by the engine's frame updates."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Relative slack for float error from summing frame deltas
# (ten 0.1s steps sum to 0.999...)
_TOLERANCE = 1e-9


class TimerHandle:
    """Handle to a repeating timer. Cancel it to stop the callback."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        """Initialize the handle.

        Args:
            interval: Seconds between callbacks.
            callback: Function called on every fire.
        """
        self.interval = interval
        self.callback = callback
        self.fire_count = 0
        self._accumulated = 0.0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        """Whether the timer has been cancelled."""
        return self._cancelled

    def cancel(self) -> None:
        """Stop the timer. Safe to call more than once."""
        self._cancelled = True

    def _advance(self, dt: float) -> None:
        """Add time and fire once per full interval that elapsed."""
        self._accumulated += dt
        due = self.interval * (1.0 - _TOLERANCE)
        while self._accumulated >= due and not self._cancelled:
            self._accumulated -= self.interval
            self.fire_count += 1
            self.callback()


class Scheduler:
    """Fires repeating callbacks on scheduler time.

    Time only moves when the host calls update(), so every callback runs
    on the host's thread, between frames.
    """

    def __init__(self):
        """Initialize with no timers at time zero."""
        self._timers: list[TimerHandle] = []
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """Total scheduler time in seconds."""
        return self._elapsed

    @property
    def active_count(self) -> int:
        """Number of timers that have not been cancelled."""
        return sum(1 for timer in self._timers if not timer.cancelled)

    def schedule_repeating(
        self,
        interval: float,
        callback: Callable[[], None],
    ) -> TimerHandle:
        """Register a callback to fire every interval seconds.

        Args:
            interval: Seconds between callbacks.
            callback: Function to call.

        Returns:
            A handle whose cancel() stops the timer.

        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        handle = TimerHandle(interval, callback)
        self._timers.append(handle)
        logger.debug("Scheduled repeating timer every %.3fs", interval)
        return handle

    def update(self, dt: float) -> int:
        """Advance scheduler time and fire due callbacks.

        Args:
            dt: Seconds elapsed since the last update.

        Returns:
            Number of callbacks fired.

        Raises:
            ValueError: If dt is negative.
        """
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")

        self._elapsed += dt
        fired = 0
        # Timers scheduled from inside a callback start on the next update
        for timer in self._timers[:]:
            if timer.cancelled:
                continue
            before = timer.fire_count
            timer._advance(dt)
            fired += timer.fire_count - before

        self._timers = [timer for timer in self._timers if not timer.cancelled]
        return fired

    def cancel_all(self) -> None:
        """Cancel every timer."""
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()
