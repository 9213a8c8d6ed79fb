"""Absolute tick policy: set each hand from a tracked wall-clock time."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from clock_face.types import ClockHands

DEGREES_PER_SECOND_MARK = 6.0
DEGREES_PER_MINUTE_MARK = 6.0
DEGREES_PER_HOUR_MARK = 30.0

ONE_SECOND = timedelta(seconds=1)


def absolute_angles(moment: datetime) -> tuple[float, float, float]:
    """Compute (second, minute, hour) hand angles for a moment.

    The hour hand wraps at 24 and ignores the minutes into the hour, so it
    jumps 30 degrees on the hour and points past the dial after noon.

    Args:
        moment: The time to show.

    Returns:
        Angles in degrees for the second, minute and hour hands.
    """
    return (
        (moment.second % 60) * DEGREES_PER_SECOND_MARK,
        (moment.minute % 60) * DEGREES_PER_MINUTE_MARK,
        (moment.hour % 24) * DEGREES_PER_HOUR_MARK,
    )


class AbsolutePolicy:
    """Policy that recomputes every angle from a tracked time each tick."""

    def __init__(
        self,
        now: Optional[Callable[[], datetime]] = None,
        start_time: Optional[datetime] = None,
    ):
        """Initialize the policy.

        Args:
            now: Wall-clock source read on start. Defaults to datetime.now.
            start_time: Fixed time to start from instead of reading now().
        """
        self._now = now or datetime.now
        self._start_time = start_time
        self.current_time: Optional[datetime] = None

    def start(self, hands: ClockHands) -> None:
        """Capture the time the dial starts from."""
        self.current_time = self._start_time or self._now()

    def tick(self, hands: ClockHands) -> None:
        """Set every hand from the tracked time, then advance it one second.

        Args:
            hands: The hands to set.
        """
        if self.current_time is None:
            self.current_time = self._now()

        second, minute, hour = absolute_angles(self.current_time)
        hands.second.set_rotation(second)
        hands.minute.set_rotation(minute)
        hands.hour.set_rotation(hour)

        self.current_time += ONE_SECOND
