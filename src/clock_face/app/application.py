"""Main application entry point."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from clock_face.engine import GameEngine
from clock_face.renderer import HeadlessRenderer, ImageRenderer
from clock_face.scenes import SceneLoader

from .game_loop import GameLoop

logger = logging.getLogger(__name__)


class Application:
    """Main Clock Face application."""

    def __init__(
        self,
        headless: bool = True,
        scene_name: str = "incremental-clock",
        target_fps: int = 30,
        width: int = 41,
        height: int = 21,
        image_size: int = 256,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the application.

        Args:
            headless: Render ASCII instead of images.
            scene_name: Name of scene to load.
            target_fps: Target frames per second.
            width: ASCII renderer width in characters.
            height: ASCII renderer height in characters.
            image_size: Image renderer size in pixels.
            now: Wall-clock source for absolute clocks.
        """
        self.headless = headless
        self.scene_name = scene_name
        self.target_fps = target_fps
        self.width = width
        self.height = height
        self.image_size = image_size
        self._now = now

        # Components (created in initialize)
        self.engine: Optional[GameEngine] = None
        self.renderer: Optional[Union[HeadlessRenderer, ImageRenderer]] = None
        self.game_loop: Optional[GameLoop] = None

        self._initialized = False

    async def initialize(self) -> None:
        """Initialize all application components."""
        if self._initialized:
            return

        loader = SceneLoader(now=self._now)
        self.engine = loader.load(self.scene_name)

        if self.headless:
            self.renderer = HeadlessRenderer(width=self.width, height=self.height)
        else:
            self.renderer = ImageRenderer(size=self.image_size)

        self.game_loop = GameLoop(
            engine=self.engine,
            renderer=self.renderer,
            target_fps=self.target_fps,
        )

        self._initialized = True
        logger.info("Application initialized with scene %r", self.scene_name)

    async def run(self, duration: Optional[float] = None) -> None:
        """Run the game loop.

        Args:
            duration: Seconds to run for; None runs until shutdown().
        """
        await self.initialize()
        await self.game_loop.run_async(duration=duration)

    async def shutdown(self) -> None:
        """Stop the loop and tear down the engine."""
        if self.game_loop is not None:
            self.game_loop.stop()
        if self.engine is not None:
            self.engine.destroy()
        # The next initialize() or run() loads a fresh engine
        self._initialized = False
        logger.info("Application shut down")
