"""Clock face component."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional, Union

from clock_face.types import (
    ClockFaceStatus,
    ClockHands,
    ClockPolicyKind,
    HandKind,
    Rotatable,
)
from .errors import ClockConfigurationError
from .systems import TickPolicy, create_policy

if TYPE_CHECKING:
    from .scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class ClockFace:
    """Turns three hands once per interval while active.

    The hands are references into the host's scene. The clock face never
    creates or destroys them.
    """

    def __init__(
        self,
        second_hand: Optional[Rotatable] = None,
        minute_hand: Optional[Rotatable] = None,
        hour_hand: Optional[Rotatable] = None,
        policy: Union[TickPolicy, ClockPolicyKind, str] = ClockPolicyKind.INCREMENTAL,
        interval: float = 1.0,
        now: Optional[Callable[[], datetime]] = None,
        start_time: Optional[datetime] = None,
        name: str = "clock",
    ):
        """Initialize the clock face.

        Args:
            second_hand: Hand turned by the seconds.
            minute_hand: Hand turned by the minutes.
            hour_hand: Hand turned by the hours.
            policy: A tick policy, or the kind of policy to build.
            interval: Seconds between ticks.
            now: Wall-clock source for the absolute policy.
            start_time: Fixed start time for the absolute policy.
            name: Name used in log lines.

        Raises:
            ClockConfigurationError: If the policy kind is unknown or the
                interval is not positive.
        """
        if interval <= 0:
            raise ClockConfigurationError(f"interval must be positive, got {interval}")

        if isinstance(policy, (ClockPolicyKind, str)):
            try:
                policy = create_policy(policy, now=now, start_time=start_time)
            except ValueError as exc:
                raise ClockConfigurationError(f"Unknown clock policy: {policy!r}") from exc

        self.name = name
        self.hands = ClockHands(second=second_hand, minute=minute_hand, hour=hour_hand)
        self.policy = policy
        self.interval = interval
        self.status = ClockFaceStatus.STOPPED
        self.tick_count = 0

        self._scheduler: Optional[Scheduler] = None
        self._timer: Optional[TimerHandle] = None

    @property
    def is_running(self) -> bool:
        """Whether the clock is ticking."""
        return self.status is ClockFaceStatus.RUNNING

    def assign_hand(self, kind: HandKind, hand: Optional[Rotatable]) -> None:
        """Point one of the hands at a scene object.

        Args:
            kind: Which hand to assign.
            hand: The rotatable object, or None to clear it.
        """
        setattr(self.hands, kind.value, hand)

    def activate(self, scheduler: Scheduler) -> None:
        """Start ticking.

        Ticks once right away, then once per interval of scheduler time.

        Args:
            scheduler: The host's scheduler.

        Raises:
            ClockConfigurationError: If a hand is unassigned or not
                rotatable, or the clock is already running.
        """
        if self.is_running:
            raise ClockConfigurationError(f"Clock {self.name!r} is already running")

        missing = self.hands.missing()
        if missing:
            names = ", ".join(kind.value for kind in missing)
            raise ClockConfigurationError(
                f"Clock {self.name!r} has no {names} hand assigned"
            )

        invalid = [
            kind for kind in HandKind if not isinstance(self.hands.get(kind), Rotatable)
        ]
        if invalid:
            names = ", ".join(kind.value for kind in invalid)
            raise ClockConfigurationError(
                f"Clock {self.name!r} has a {names} hand that cannot be rotated"
            )

        self._scheduler = scheduler
        self.status = ClockFaceStatus.RUNNING
        try:
            self.policy.start(self.hands)
            self.tick()
        except Exception:
            self.deactivate()
            raise

        logger.info("Clock %r started (%s)", self.name, type(self.policy).__name__)
        self._timer = scheduler.schedule_repeating(self.interval, self.tick)

    def tick(self) -> None:
        """Move the hands one step. Ignored while stopped."""
        if not self.is_running:
            logger.debug("Clock %r is stopped, tick ignored", self.name)
            return

        self.policy.tick(self.hands)
        self.tick_count += 1

        elapsed = self._scheduler.elapsed if self._scheduler else 0.0
        logger.debug("Clock %r tick %d at %.3fs", self.name, self.tick_count, elapsed)

    def deactivate(self) -> None:
        """Stop ticking. Safe to call when already stopped."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        if self.is_running:
            logger.info("Clock %r stopped after %d ticks", self.name, self.tick_count)
        self.status = ClockFaceStatus.STOPPED
        self._scheduler = None
