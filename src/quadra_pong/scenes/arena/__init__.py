"""
Four-paddle arena scene.
"""

from __future__ import annotations

from .models import ArenaWorld, GameState, build_world
from .scene import KEY_BINDINGS, ArenaScene

__all__ = [
    "KEY_BINDINGS",
    "ArenaScene",
    "ArenaWorld",
    "GameState",
    "build_world",
]
