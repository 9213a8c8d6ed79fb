"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest

from clock_face.engine import ClockFace, GameEngine, Scheduler
from clock_face.types import ClockHands, ClockPolicyKind, Scene, Transform


@pytest.fixture
def scene() -> Scene:
    """Create a scene with three hands."""
    scene = Scene(name="test-scene")
    scene.create_transform("second_hand")
    scene.create_transform("minute_hand")
    scene.create_transform("hour_hand")
    return scene


@pytest.fixture
def hands(scene) -> ClockHands:
    """Create hand references into the test scene."""
    return ClockHands(
        second=scene.get("second_hand"),
        minute=scene.get("minute_hand"),
        hour=scene.get("hour_hand"),
    )


@pytest.fixture
def scheduler() -> Scheduler:
    """Create a fresh scheduler at time zero."""
    return Scheduler()


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed wall-clock time for absolute clocks."""
    return datetime(2024, 3, 9, 14, 25, 37)


@pytest.fixture
def fixed_now(fixed_time):
    """A wall-clock source that always returns the fixed time."""
    return lambda: fixed_time


@pytest.fixture
def incremental_face(hands) -> ClockFace:
    """Create a stopped incremental clock face."""
    return ClockFace(
        second_hand=hands.second,
        minute_hand=hands.minute,
        hour_hand=hands.hour,
        policy=ClockPolicyKind.INCREMENTAL,
    )


@pytest.fixture
def absolute_face(hands, fixed_now) -> ClockFace:
    """Create a stopped absolute clock face."""
    return ClockFace(
        second_hand=hands.second,
        minute_hand=hands.minute,
        hour_hand=hands.hour,
        policy=ClockPolicyKind.ABSOLUTE,
        now=fixed_now,
    )


@pytest.fixture
def engine(scene) -> GameEngine:
    """Create an engine around the test scene, with no components."""
    return GameEngine(scene=scene)


@pytest.fixture
def loose_transform() -> Transform:
    """A transform not owned by any scene."""
    return Transform(name="loose")
