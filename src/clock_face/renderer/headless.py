"""Headless renderer for testing."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from clock_face.types import HandKind
from .geometry import hand_points, tick_marks

if TYPE_CHECKING:
    from clock_face.types import FrameState


class HeadlessRenderer:
    """A headless renderer that draws the dial as ASCII art.

    Used for testing and demo environments.
    """

    # Terminal cells are roughly twice as tall as they are wide
    CELL_ASPECT = 2.0

    HAND_CHARS = {
        HandKind.SECOND: "s",
        HandKind.MINUTE: "m",
        HandKind.HOUR: "h",
    }

    # Fraction of the dial radius each hand reaches
    HAND_LENGTHS = {
        HandKind.SECOND: 0.95,
        HandKind.MINUTE: 0.8,
        HandKind.HOUR: 0.5,
    }

    def __init__(self, width: int = 41, height: int = 21):
        """Initialize the headless renderer.

        Args:
            width: Screen width in characters.
            height: Screen height in characters, including the status line.
        """
        self.width = width
        self.height = height
        self.screen: list[list[str]] = [[" " for _ in range(width)] for _ in range(height)]
        self.last_render_time: float = 0.0
        self._render_count = 0

    @property
    def center(self) -> tuple[float, float]:
        """Dial center in cell coordinates (below the status line)."""
        dial_height = self.height - 1
        return (float((self.width - 1) // 2), float(1 + (dial_height - 1) // 2))

    @property
    def radius(self) -> float:
        """Dial radius in rows."""
        dial_height = self.height - 1
        return float(max(1, min((dial_height - 1) // 2, int((self.width - 1) // (2 * self.CELL_ASPECT)))))

    def clear(self) -> None:
        """Clear the screen buffer."""
        self.screen = [[" " for _ in range(self.width)] for _ in range(self.height)]

    def render_frame(self, state: FrameState) -> None:
        """Render a complete frame.

        Args:
            state: The frame state to render.
        """
        self.clear()
        start_time = time.perf_counter()

        self._render_dial()

        # Longest hand first so shorter hands stay visible on top
        for hand in (HandKind.SECOND, HandKind.MINUTE, HandKind.HOUR):
            if hand in state.rotations:
                self._render_hand(hand, state.rotation(hand))

        cx, cy = self.center
        self.draw_text(int(round(cx)), int(round(cy)), "o")

        self._render_ui(state)

        self.last_render_time = time.perf_counter() - start_time
        self._render_count += 1

    def _render_dial(self) -> None:
        """Draw the hour marks, with 12 o'clock marked differently."""
        marks = tick_marks(self.center, self.radius, count=12, aspect=self.CELL_ASPECT)
        for i, (x, y) in enumerate(marks):
            self.draw_text(int(round(x)), int(round(y)), "|" if i == 0 else "+")

    def _render_hand(self, hand: HandKind, angle: float) -> None:
        """Draw one hand from the center outwards."""
        length = self.radius * self.HAND_LENGTHS[hand]
        char = self.HAND_CHARS[hand]
        points = hand_points(self.center, angle, length, aspect=self.CELL_ASPECT)
        # Skip the center cell
        for x, y in points[1:]:
            self.draw_text(int(round(x)), int(round(y)), char)

    def _render_ui(self, state: FrameState) -> None:
        """Render the status line."""
        status = "RUN" if state.is_running else "STOP"
        text = f"{status} t={state.elapsed:7.2f}s ticks={state.tick_count}"
        self.draw_text(0, 0, text[: self.width])

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Draw text at screen position."""
        if y < 0 or y >= self.height:
            return

        for i, char in enumerate(text):
            px = x + i
            if 0 <= px < self.width:
                self.screen[y][px] = char

    def hand_cells(self, hand: HandKind) -> list[tuple[int, int]]:
        """Cells currently showing a hand's character.

        Returns:
            List of (x, y) cell positions.
        """
        char = self.HAND_CHARS[hand]
        return [
            (x, y)
            for y, row in enumerate(self.screen)
            if y > 0
            for x, cell in enumerate(row)
            if cell == char
        ]

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)
