"""Clock scene construction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from clock_face.engine import ClockFace, GameEngine
from clock_face.types import ClockPolicyKind, Scene


@dataclass
class ClockSceneConfig:
    """Configuration for a clock scene."""

    policy: ClockPolicyKind = ClockPolicyKind.INCREMENTAL
    interval: float = 1.0  # seconds between ticks

    # Absolute policy only (None = read the wall clock on activation)
    start_time: Optional[datetime] = None

    # Transform names in the scene
    second_hand_name: str = "second_hand"
    minute_hand_name: str = "minute_hand"
    hour_hand_name: str = "hour_hand"

    # Engine settings
    max_step: float = 0.25


def create_clock_scene(
    config: Optional[ClockSceneConfig] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> GameEngine:
    """Build a scene with three hands and a running clock face.

    Args:
        config: Optional scene configuration.
        now: Wall-clock source for the absolute policy.

    Returns:
        An engine whose clock face is already ticking.
    """
    config = config or ClockSceneConfig()

    scene = Scene(name=f"{ClockPolicyKind(config.policy).value}-clock")
    second_hand = scene.create_transform(config.second_hand_name)
    minute_hand = scene.create_transform(config.minute_hand_name)
    hour_hand = scene.create_transform(config.hour_hand_name)

    engine = GameEngine(scene=scene, config={"max_step": config.max_step})
    face = ClockFace(
        second_hand=second_hand,
        minute_hand=minute_hand,
        hour_hand=hour_hand,
        policy=config.policy,
        interval=config.interval,
        now=now,
        start_time=config.start_time,
        name=scene.name,
    )
    engine.add_component(face)
    return engine
