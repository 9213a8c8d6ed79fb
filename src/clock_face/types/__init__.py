"""Type definitions for Clock Face."""

from .transform import (
    Rotatable,
    Transform,
    normalize_angle,
)
from .clock import (
    HandKind,
    ClockPolicyKind,
    ClockFaceStatus,
    FrameState,
    ClockHands,
)
from .scene import Scene

__all__ = [
    # Transforms
    "Rotatable",
    "Transform",
    "normalize_angle",
    # Clock
    "HandKind",
    "ClockPolicyKind",
    "ClockFaceStatus",
    "FrameState",
    "ClockHands",
    # Scene
    "Scene",
]
