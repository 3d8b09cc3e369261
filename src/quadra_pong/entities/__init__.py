"""
Entities package for Quadra Pong.
This package contains the rectangle primitive, the paddles and the ball.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import HorizontalPad, Movable, VerticalPad
from .rectangle import Rectangle

__all__ = [
    "Ball",
    "HorizontalPad",
    "Movable",
    "Rectangle",
    "VerticalPad",
]
