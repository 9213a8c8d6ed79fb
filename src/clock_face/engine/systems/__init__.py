"""Tick policies for Clock Face."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Protocol, Union

from clock_face.types import ClockHands, ClockPolicyKind

from .incremental import (
    IncrementalPolicy,
    DEGREES_PER_SECOND,
    DEGREES_PER_MINUTE,
    DEGREES_PER_HOUR,
)
from .absolute import AbsolutePolicy, absolute_angles


class TickPolicy(Protocol):
    """What a clock face calls to move its hands."""

    def start(self, hands: ClockHands) -> None:
        ...

    def tick(self, hands: ClockHands) -> None:
        ...


def create_policy(
    kind: Union[ClockPolicyKind, str],
    now: Optional[Callable[[], datetime]] = None,
    start_time: Optional[datetime] = None,
) -> TickPolicy:
    """Build a tick policy by kind.

    Args:
        kind: Policy kind or its string value.
        now: Wall-clock source for the absolute policy.
        start_time: Fixed start time for the absolute policy.

    Returns:
        A new policy.

    Raises:
        ValueError: If kind is not a known policy.
    """
    kind = ClockPolicyKind(kind)
    if kind is ClockPolicyKind.ABSOLUTE:
        return AbsolutePolicy(now=now, start_time=start_time)
    return IncrementalPolicy()


__all__ = [
    "TickPolicy",
    "create_policy",
    "IncrementalPolicy",
    "AbsolutePolicy",
    "absolute_angles",
    "DEGREES_PER_SECOND",
    "DEGREES_PER_MINUTE",
    "DEGREES_PER_HOUR",
]
