"""Raster renderer that draws the dial with Pillow."""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Union

from PIL import Image, ImageDraw

from clock_face.types import HandKind
from .geometry import hand_tip, tick_marks

if TYPE_CHECKING:
    from clock_face.types import FrameState


class ImageRenderer:
    """Renders the clock face to a square RGBA image."""

    COLORS = {
        "background": (24, 26, 32, 255),
        "face": (240, 236, 224, 255),
        "rim": (60, 60, 70, 255),
        "mark": (40, 40, 48, 255),
        "second": (200, 40, 40, 255),
        "minute": (30, 30, 36, 255),
        "hour": (30, 30, 36, 255),
        "hub": (200, 40, 40, 255),
    }

    # (fraction of radius, stroke width as fraction of radius)
    HAND_STYLES = {
        HandKind.HOUR: (0.5, 0.06),
        HandKind.MINUTE: (0.78, 0.04),
        HandKind.SECOND: (0.9, 0.015),
    }

    def __init__(self, size: int = 256):
        """Initialize the renderer.

        Args:
            size: Width and height of the frame in pixels.
        """
        if size < 16:
            raise ValueError(f"size must be at least 16 pixels, got {size}")

        self.size = size
        self.frame = Image.new("RGBA", (size, size), self.COLORS["background"])
        self.draw = ImageDraw.Draw(self.frame)
        self.last_render_time = 0.0
        self._frame_count = 0

    @property
    def center(self) -> tuple[float, float]:
        """Dial center in pixels."""
        return (self.size / 2, self.size / 2)

    @property
    def radius(self) -> float:
        """Dial radius in pixels."""
        return self.size * 0.45

    def render_frame(self, state: FrameState) -> None:
        """Render a complete frame."""
        start = time.perf_counter()
        self._frame_count += 1

        self.frame.close()
        self.frame = Image.new("RGBA", (self.size, self.size), self.COLORS["background"])
        self.draw = ImageDraw.Draw(self.frame)

        self._draw_face()

        # Hour hand underneath, second hand on top
        for hand in (HandKind.HOUR, HandKind.MINUTE, HandKind.SECOND):
            if hand in state.rotations:
                self._draw_hand(hand, state.rotation(hand))

        self._draw_hub()
        self.last_render_time = time.perf_counter() - start

    def _draw_face(self) -> None:
        """Draw the face, the rim and the minute and hour marks."""
        cx, cy = self.center
        r = self.radius
        self.draw.ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            fill=self.COLORS["face"],
            outline=self.COLORS["rim"],
            width=max(1, int(r * 0.04)),
        )

        outer = tick_marks(self.center, r * 0.92, count=60)
        inner_minute = tick_marks(self.center, r * 0.87, count=60)
        inner_hour = tick_marks(self.center, r * 0.78, count=60)
        for i, (x1, y1) in enumerate(outer):
            is_hour = i % 5 == 0
            x0, y0 = (inner_hour if is_hour else inner_minute)[i]
            self.draw.line(
                [(x0, y0), (x1, y1)],
                fill=self.COLORS["mark"],
                width=max(1, int(r * (0.03 if is_hour else 0.01))),
            )

    def _draw_hand(self, hand: HandKind, angle: float) -> None:
        """Draw one hand as a line from the center."""
        length_fraction, width_fraction = self.HAND_STYLES[hand]
        tip = hand_tip(self.center, angle, self.radius * length_fraction)
        self.draw.line(
            [self.center, tip],
            fill=self.COLORS[hand.value],
            width=max(1, int(self.radius * width_fraction)),
        )

    def _draw_hub(self) -> None:
        """Draw the cap over the hand pivot."""
        cx, cy = self.center
        r = max(2.0, self.radius * 0.04)
        self.draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=self.COLORS["hub"])

    def save(self, path: Union[str, Path]) -> Path:
        """Save the current frame as an image file.

        Args:
            path: Destination; the format follows the extension.

        Returns:
            The path written.
        """
        path = Path(path)
        self.frame.save(path)
        return path
