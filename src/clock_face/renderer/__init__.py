"""Renderer package for Clock Face."""

from __future__ import annotations

from .geometry import hand_tip, hand_points, tick_marks
from .headless import HeadlessRenderer
from .image import ImageRenderer

__all__ = [
    "hand_tip",
    "hand_points",
    "tick_marks",
    "HeadlessRenderer",
    "ImageRenderer",
]
