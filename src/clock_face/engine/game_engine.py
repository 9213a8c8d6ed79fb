"""Host engine that owns the scene, the scheduler and the clock faces."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from clock_face.types import FrameState, Scene
from .clock_face import ClockFace
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEP = 0.25


class GameEngine:
    """Main engine that drives clock faces from frame updates."""

    def __init__(
        self,
        scene: Optional[Scene] = None,
        config: Optional[dict] = None,
    ):
        """Initialize the engine.

        Args:
            scene: The scene that owns the transforms.
            config: Optional configuration dictionary.
        """
        self._config = config or {}
        self.scene = scene or Scene()
        self.scheduler = Scheduler()
        self.max_step = self._config.get("max_step", DEFAULT_MAX_STEP)

        self._components: list[ClockFace] = []
        self._listeners: list[Callable[[FrameState], None]] = []
        self._destroyed = False

    @property
    def components(self) -> list[ClockFace]:
        """Clock faces registered with the engine."""
        return list(self._components)

    @property
    def elapsed(self) -> float:
        """Engine time in seconds."""
        return self.scheduler.elapsed

    @property
    def is_destroyed(self) -> bool:
        """Whether destroy() has been called."""
        return self._destroyed

    def add_component(self, face: ClockFace) -> None:
        """Register a clock face and start it.

        Args:
            face: The clock face to add.

        Raises:
            RuntimeError: If the engine was destroyed.
            ClockConfigurationError: If the face cannot start.
        """
        if self._destroyed:
            raise RuntimeError("Cannot add components to a destroyed engine")

        face.activate(self.scheduler)
        self._components.append(face)

    def remove_component(self, face: ClockFace) -> None:
        """Stop a clock face and forget it. Unknown faces are ignored."""
        if face in self._components:
            face.deactivate()
            self._components.remove(face)

    def update(self, dt: float) -> None:
        """Advance engine time.

        Args:
            dt: Delta time in seconds, clamped to max_step.
        """
        if self._destroyed:
            return

        fired = self.scheduler.update(min(dt, self.max_step))
        if fired:
            self._notify_listeners()

    def get_state(self) -> FrameState:
        """Snapshot the first clock face for rendering.

        Returns:
            A frame state; empty if no clock face is registered.
        """
        if not self._components:
            return FrameState(elapsed=self.elapsed)

        face = self._components[0]
        return FrameState(
            elapsed=self.elapsed,
            rotations=face.hands.rotations(),
            status=face.status,
            tick_count=face.tick_count,
        )

    def subscribe(self, listener: Callable[[FrameState], None]) -> Callable[[], None]:
        """Subscribe to hand changes.

        Args:
            listener: Called with a fresh frame state after each update
                that ticked at least once.

        Returns:
            An unsubscribe function.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def destroy(self) -> None:
        """Tear down: stop every clock face and destroy the scene."""
        if self._destroyed:
            return

        for face in self._components:
            face.deactivate()
        self.scheduler.cancel_all()
        self.scene.destroy()
        self._destroyed = True
        logger.info("Engine destroyed at %.3fs", self.elapsed)

    def _notify_listeners(self) -> None:
        """Notify all listeners of a state change."""
        state = self.get_state()
        for listener in self._listeners:
            listener(state)

