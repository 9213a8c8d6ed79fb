"""Dial geometry shared by the renderers.

Angles are in degrees, measured clockwise from 12 o'clock. Screen
coordinates grow right and down.
"""

from __future__ import annotations

import numpy as np


def hand_tip(
    center: tuple[float, float],
    angle: float,
    length: float,
    aspect: float = 1.0,
) -> tuple[float, float]:
    """Get the screen position of a hand's tip.

    Args:
        center: Dial center (x, y).
        angle: Hand angle in degrees.
        length: Hand length in vertical units.
        aspect: Horizontal stretch (2.0 for terminal cells, which are
            about twice as tall as they are wide).

    Returns:
        Tip position (x, y).
    """
    theta = np.deg2rad(angle)
    x = center[0] + np.sin(theta) * length * aspect
    y = center[1] - np.cos(theta) * length
    return float(x), float(y)


def hand_points(
    center: tuple[float, float],
    angle: float,
    length: float,
    aspect: float = 1.0,
    samples: int = 0,
) -> np.ndarray:
    """Sample points along a hand from the center to its tip.

    Args:
        center: Dial center (x, y).
        angle: Hand angle in degrees.
        length: Hand length in vertical units.
        aspect: Horizontal stretch.
        samples: Number of points; 0 picks one per unit of length.

    Returns:
        Array of shape (samples, 2) with (x, y) rows.
    """
    if samples <= 0:
        samples = max(2, int(np.ceil(length * max(aspect, 1.0))) + 1)
    tip = np.array(hand_tip(center, angle, length, aspect))
    origin = np.array(center, dtype=float)
    t = np.linspace(0.0, 1.0, samples)[:, np.newaxis]
    return origin + (tip - origin) * t


def tick_marks(
    center: tuple[float, float],
    radius: float,
    count: int = 12,
    aspect: float = 1.0,
) -> np.ndarray:
    """Positions of evenly spaced marks around the dial.

    Returns:
        Array of shape (count, 2); the first mark is at 12 o'clock.
    """
    angles = np.deg2rad(np.arange(count) * 360.0 / count)
    xs = center[0] + np.sin(angles) * radius * aspect
    ys = center[1] - np.cos(angles) * radius
    return np.stack([xs, ys], axis=1)
