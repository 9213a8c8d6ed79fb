"""Scene graph that owns transforms."""

from __future__ import annotations

from typing import Iterator, Optional

from .transform import Transform


class Scene:
    """Owns the transforms in a scene.

    Components receive references to transforms but never create or
    destroy them; that is the scene's job.
    """

    def __init__(self, name: str = "scene"):
        """Initialize an empty scene.

        Args:
            name: Scene name, used in logs and the status line.
        """
        self.name = name
        self._transforms: dict[str, Transform] = {}

    def create_transform(self, name: str, rotation: float = 0.0) -> Transform:
        """Create a transform owned by this scene.

        Args:
            name: Unique transform name.
            rotation: Initial rotation in degrees.

        Returns:
            The new transform.

        Raises:
            ValueError: If a transform with that name already exists.
        """
        if name in self._transforms:
            raise ValueError(f"Transform already exists: {name}")
        transform = Transform(name=name, rotation=rotation)
        self._transforms[name] = transform
        return transform

    def get(self, name: str) -> Optional[Transform]:
        """Look up a transform by name."""
        return self._transforms.get(name)

    def remove(self, name: str) -> None:
        """Remove and destroy a transform. Unknown names are ignored."""
        transform = self._transforms.pop(name, None)
        if transform is not None:
            transform.destroyed = True

    def destroy(self) -> None:
        """Destroy every transform in the scene."""
        for name in list(self._transforms):
            self.remove(name)

    def __contains__(self, name: str) -> bool:
        return name in self._transforms

    def __iter__(self) -> Iterator[Transform]:
        return iter(list(self._transforms.values()))

    def __len__(self) -> int:
        return len(self._transforms)
