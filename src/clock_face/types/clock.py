"""Clock face enums and frame snapshot types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .transform import Rotatable


class HandKind(Enum):
    """The three hands of a clock face."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"


class ClockPolicyKind(Enum):
    """How a clock face computes its hand angles each tick."""

    INCREMENTAL = "incremental"
    ABSOLUTE = "absolute"


class ClockFaceStatus(Enum):
    """Lifecycle of a clock face component."""

    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class FrameState:
    """Snapshot of everything a renderer needs for one frame."""

    elapsed: float
    rotations: dict[HandKind, float] = field(default_factory=dict)
    status: ClockFaceStatus = ClockFaceStatus.STOPPED
    tick_count: int = 0

    @property
    def is_running(self) -> bool:
        """Whether the clock was ticking when the snapshot was taken."""
        return self.status is ClockFaceStatus.RUNNING

    def rotation(self, hand: HandKind) -> float:
        """Get the rotation of a hand, 0.0 if it is not on the dial."""
        return self.rotations.get(hand, 0.0)


@dataclass
class ClockHands:
    """References to the three hands of a dial.

    The hands belong to the scene; this only points at them. Any hand may
    be None until the host assigns it.
    """

    second: Optional[Rotatable] = None
    minute: Optional[Rotatable] = None
    hour: Optional[Rotatable] = None

    def missing(self) -> list[HandKind]:
        """List the hands that have not been assigned."""
        return [kind for kind in HandKind if self.get(kind) is None]

    def get(self, kind: HandKind) -> Optional[Rotatable]:
        """Get a hand by kind."""
        return getattr(self, kind.value)

    def rotations(self) -> dict[HandKind, float]:
        """Current rotation of every assigned hand."""
        return {
            kind: hand.rotation
            for kind in HandKind
            if (hand := self.get(kind)) is not None
        }
