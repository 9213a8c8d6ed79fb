"""Scene loading by name."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from clock_face.engine import GameEngine
from clock_face.types import ClockPolicyKind

from .clock_scene import ClockSceneConfig, create_clock_scene


class SceneLoader:
    """Loads clock scenes by name."""

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        """Initialize the scene loader.

        Args:
            now: Wall-clock source passed to absolute clocks.
        """
        self._now = now
        self._scene_factories: Dict[str, Callable[..., GameEngine]] = {
            "incremental-clock": self._create_clock,
            "absolute-clock": self._create_clock,
        }
        self._configs: Dict[str, Any] = {
            "incremental-clock": ClockSceneConfig(policy=ClockPolicyKind.INCREMENTAL),
            "absolute-clock": ClockSceneConfig(policy=ClockPolicyKind.ABSOLUTE),
        }

    @property
    def available_scenes(self) -> list[str]:
        """Get list of available scene names.

        Returns:
            List of scene names.
        """
        return list(self._scene_factories.keys())

    def load(
        self,
        scene_name: str,
        config: Optional[Any] = None,
    ) -> GameEngine:
        """Load a scene by name.

        Args:
            scene_name: Name of the scene to load.
            config: Optional configuration override.

        Returns:
            An engine with the scene's clock running.

        Raises:
            ValueError: If scene name is not found.
        """
        if scene_name not in self._scene_factories:
            raise ValueError(
                f"Unknown scene: {scene_name}. "
                f"Available: {', '.join(self.available_scenes)}"
            )

        factory = self._scene_factories[scene_name]
        return factory(config or replace(self._configs[scene_name]))

    def get_config(self, scene_name: str) -> Any:
        """Get the default configuration for a scene.

        Raises:
            ValueError: If scene name is not found.
        """
        if scene_name not in self._configs:
            raise ValueError(f"Unknown scene: {scene_name}")

        return self._configs[scene_name]

    def register_scene(
        self,
        name: str,
        factory: Callable[..., GameEngine],
        config: Any,
    ) -> None:
        """Register a new scene.

        Args:
            name: Scene name.
            factory: Factory taking a config and returning a GameEngine.
            config: Default configuration for the scene.
        """
        self._scene_factories[name] = factory
        self._configs[name] = config

    def _create_clock(self, config: ClockSceneConfig) -> GameEngine:
        return create_clock_scene(config, now=self._now)
