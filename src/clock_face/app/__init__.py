"""Main application package."""

from __future__ import annotations

from .game_loop import GameLoop
from .application import Application

__all__ = [
    "GameLoop",
    "Application",
]
