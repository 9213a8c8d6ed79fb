"""Incremental tick policy: turn each hand by a fixed step."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clock_face.types import ClockHands

DEGREES_PER_SECOND = 360 / 60
DEGREES_PER_MINUTE = DEGREES_PER_SECOND / 60
DEGREES_PER_HOUR = DEGREES_PER_MINUTE / 12


class IncrementalPolicy:
    """Policy that accumulates a fixed rotation per tick.

    The hands themselves hold the accumulated angle, so the dial is only
    right if no tick is ever missed or counted twice.
    """

    def __init__(
        self,
        second_step: float = DEGREES_PER_SECOND,
        minute_step: float = DEGREES_PER_MINUTE,
        hour_step: float = DEGREES_PER_HOUR,
    ):
        """Initialize the policy.

        Args:
            second_step: Degrees added to the second hand each tick.
            minute_step: Degrees added to the minute hand each tick.
            hour_step: Degrees added to the hour hand each tick.
        """
        self.second_step = second_step
        self.minute_step = minute_step
        self.hour_step = hour_step

    def start(self, hands: ClockHands) -> None:
        """Nothing to capture; the hands carry the state."""

    def tick(self, hands: ClockHands) -> None:
        """Turn every hand by its step.

        Args:
            hands: The hands to rotate.
        """
        hands.second.rotate(self.second_step)
        hands.minute.rotate(self.minute_step)
        hands.hour.rotate(self.hour_step)
