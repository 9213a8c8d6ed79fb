"""Game loop for coordinating engine and renderer."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from clock_face.engine import GameEngine
    from clock_face.types import FrameState


class FrameRenderer(Protocol):
    """Anything that can draw a frame state."""

    def render_frame(self, state: FrameState) -> None:
        ...


class GameLoop:
    """Main game loop that coordinates engine updates and rendering."""

    def __init__(
        self,
        engine: GameEngine,
        renderer: Optional[FrameRenderer] = None,
        target_fps: int = 30,
    ):
        """Initialize the game loop.

        Args:
            engine: The game engine.
            renderer: The renderer, or None to only update the engine.
            target_fps: Target frames per second.
        """
        if target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {target_fps}")

        self.engine = engine
        self.renderer = renderer
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps

        self._running = False
        self._last_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0

    def tick(self, dt: float) -> None:
        """Process a single game tick.

        Args:
            dt: Delta time in seconds.
        """
        self.engine.update(dt)

        if self.renderer is not None:
            self.renderer.render_frame(self.engine.get_state())

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

    def start(self) -> None:
        """Start the game loop."""
        self._running = True
        self._last_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running."""
        return self._running

    @property
    def fps(self) -> float:
        """Get current FPS."""
        return self._fps

    def process_frame(self) -> float:
        """Process a single frame with timing.

        Returns:
            Delta time used for this frame.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        # Cap delta time to prevent spiral of death
        if dt > self.engine.max_step:
            dt = self.engine.max_step

        self.tick(dt)

        return dt

    async def run_async(self, duration: Optional[float] = None) -> None:
        """Run the game loop asynchronously.

        Args:
            duration: Stop after this many seconds of wall time; None runs
                until stop() is called.
        """
        self.start()
        started = time.perf_counter()
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()

            if duration is not None and frame_start - started >= duration:
                self.stop()
                break

            # Calculate sleep time to maintain target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            # Always yield so other tasks can call stop()
            await asyncio.sleep(sleep_time)
