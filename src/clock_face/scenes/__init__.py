"""Scene construction and loading package."""

from __future__ import annotations

from .clock_scene import ClockSceneConfig, create_clock_scene
from .scene_loader import SceneLoader

__all__ = [
    "ClockSceneConfig",
    "create_clock_scene",
    "SceneLoader",
]
