"""
Arena settings for Quadra Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from quadra_pong.constants import (
    BACKGROUND,
    BALL_COLOR,
    PAD_HORIZONTAL_COLOR,
    PAD_VERTICAL_COLOR,
)
from quadra_pong.display import Color


# Justification: a flat settings record is easier to override than nesting
# pylint: disable=too-many-instance-attributes
@dataclass
class ArenaSettings:
    """
    Tunable settings for one arena.

    - initial_pace: milliseconds between ball moves when a game starts
    - min_pace / max_pace: bounds for speeding up (A) and slowing down (Z)
    - horizontal_pad_width: width of the top and bottom pads
    - vertical_pad_height: height of the left and right pads
    """

    initial_pace: int = 200
    min_pace: int = 50  # fastest
    max_pace: int = 800  # slowest
    horizontal_pad_width: int = 10
    vertical_pad_height: int = 5
    horizontal_pad_color: Color = PAD_HORIZONTAL_COLOR
    vertical_pad_color: Color = PAD_VERTICAL_COLOR
    ball_color: Color = BALL_COLOR
    background_color: Color = BACKGROUND

    def __post_init__(self):
        if self.min_pace <= 0:
            raise ValueError(f"min_pace must be positive, got {self.min_pace}")
        if not self.min_pace <= self.initial_pace <= self.max_pace:
            raise ValueError(
                "initial_pace must lie within "
                f"[{self.min_pace}, {self.max_pace}], got {self.initial_pace}"
            )
        if self.horizontal_pad_width <= 0 or self.vertical_pad_height <= 0:
            raise ValueError("pad sizes must be positive")


# pylint: enable=too-many-instance-attributes
