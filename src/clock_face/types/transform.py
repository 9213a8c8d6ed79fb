"""Rotatable scene object types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


def normalize_angle(degrees: float) -> float:
    """Reduce an angle to the range [0, 360).

    Args:
        degrees: Angle in degrees, any sign or magnitude.

    Returns:
        The equivalent angle in [0, 360).
    """
    angle = degrees % 360.0
    # -1e-17 % 360 rounds up to exactly 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


@runtime_checkable
class Rotatable(Protocol):
    """Anything the clock can turn: a hand on the dial."""

    @property
    def rotation(self) -> float:
        """Current z-axis rotation in degrees."""
        ...

    def rotate(self, degrees: float) -> None:
        """Rotate relative to the current orientation."""
        ...

    def set_rotation(self, degrees: float) -> None:
        """Set an absolute orientation."""
        ...


@dataclass
class Transform:
    """A named scene object with a z-axis rotation.

    Transforms are owned by the Scene. Components only hold references.
    """

    name: str
    rotation: float = 0.0  # degrees, kept in [0, 360)
    destroyed: bool = False

    def __post_init__(self):
        self.rotation = normalize_angle(self.rotation)

    def rotate(self, degrees: float) -> None:
        """Rotate about the forward axis by a relative amount.

        Args:
            degrees: Degrees to add to the current rotation.
        """
        self.rotation = normalize_angle(self.rotation + degrees)

    def set_rotation(self, degrees: float) -> None:
        """Set the rotation about the forward axis.

        Args:
            degrees: New absolute rotation in degrees.
        """
        self.rotation = normalize_angle(degrees)

    def copy(self) -> "Transform":
        """Create a copy."""
        return Transform(name=self.name, rotation=self.rotation, destroyed=self.destroyed)
