"""Engine for Clock Face."""

from __future__ import annotations

from .game_engine import GameEngine
from .clock_face import ClockFace
from .scheduler import Scheduler, TimerHandle
from .errors import ClockFaceError, ClockConfigurationError
from .systems import IncrementalPolicy, AbsolutePolicy, create_policy

__all__ = [
    "GameEngine",
    "ClockFace",
    "Scheduler",
    "TimerHandle",
    "ClockFaceError",
    "ClockConfigurationError",
    "IncrementalPolicy",
    "AbsolutePolicy",
    "create_policy",
]
