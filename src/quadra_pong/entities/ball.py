"""
Ball entity for the arena.
"""

from __future__ import annotations

import random
from typing import Optional

from mini_arcade_core.utils import logger

from quadra_pong.constants import (
    BACKGROUND,
    BALL_COLOR,
    BALL_GLYPH,
    EMPTY_GLYPH,
)
from quadra_pong.display import Color, Display
from quadra_pong.entities.paddle import HorizontalPad, VerticalPad

DIRECTIONS = (-1, 1)

# Reflection passes per move before the ball keeps its direction as is.
MAX_REFLECTION_PASSES = 4


# Justification: the ball needs all four pads plus its own drawing state
# pylint: disable=too-many-instance-attributes
class Ball:
    """
    Ball moving one cell diagonally per tick.

    The direction components are always -1 or +1; reflection only flips
    their sign.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        left: int,
        top: int,
        *,
        top_pad: HorizontalPad,
        bottom_pad: HorizontalPad,
        left_pad: VerticalPad,
        right_pad: VerticalPad,
        display: Display,
        rng: Optional[random.Random] = None,
        foreground: Color = BALL_COLOR,
        background: Color = BACKGROUND,
    ):
        """
        :param left: Starting column.
        :type left: int

        :param top: Starting row.
        :type top: int

        :param display: Display to draw the ball on.
        :type display: Display

        :param rng: Source for the starting diagonal. Inject a seeded
            ``random.Random`` for reproducible trajectories.
        :type rng: random.Random, optional
        """
        rng = rng or random.Random()
        self.left = left
        self.top = top
        self.dx = rng.choice(DIRECTIONS)
        self.dy = rng.choice(DIRECTIONS)
        self.top_pad = top_pad
        self.bottom_pad = bottom_pad
        self.left_pad = left_pad
        self.right_pad = right_pad
        self.display = display
        self.foreground = foreground
        self.background = background
        self._draw_ball()

    # pylint: enable=too-many-arguments

    @property
    def position(self) -> tuple[int, int]:
        """Current ``(left, top)`` cell."""
        return self.left, self.top

    @property
    def direction(self) -> tuple[int, int]:
        """Current ``(dx, dy)``."""
        return self.dx, self.dy

    def move(self):
        """Resolve reflections, then advance one cell on each axis."""
        passes = 0
        while self._maybe_reflect_horizontally() or (
            self._maybe_reflect_vertically()
        ):
            passes += 1
            if passes >= MAX_REFLECTION_PASSES:
                logger.warning(
                    f"Ball at {self.position} still reflecting after "
                    f"{passes} passes, keeping direction {self.direction}"
                )
                break

        self.erase()
        self.left += self.dx
        self.top += self.dy
        if not self.is_dead():
            self._draw_ball()

    def is_dead(self) -> bool:
        """
        Whether the ball has slipped past a paddle's outer boundary.

        :rtype: bool
        """
        return (
            self.top < self.top_pad.bottom
            or self.top > self.bottom_pad.top
            or self.left < self.left_pad.right
            or self.left > self.right_pad.left
        )

    def erase(self):
        """Clear the ball from the display, leaving any pad drawn over it."""
        if not self._under_pad():
            self._erase_ball()

    def _under_pad(self) -> bool:
        # a pad may have slid over the ball since it was drawn
        return any(
            pad.covers(self.left, self.top)
            for pad in (
                self.top_pad,
                self.bottom_pad,
                self.left_pad,
                self.right_pad,
            )
        )

    def _draw(self, glyph: str):
        self.display.set_cell(
            self.left, self.top, glyph, self.foreground, self.background
        )

    def _draw_ball(self):
        self._draw(BALL_GLYPH)

    def _erase_ball(self):
        self._draw(EMPTY_GLYPH)

    def _maybe_reflect_horizontally(self) -> bool:
        new_left = self.left + self.dx
        new_top = self.top + self.dy
        top, bottom = self.top_pad, self.bottom_pad
        if (
            new_top == top.bottom - 1 and top.left <= new_left <= top.right
        ) or (
            new_top == bottom.top and bottom.left <= new_left <= bottom.right
        ):
            self.dy = -self.dy
            return True
        return False

    def _maybe_reflect_vertically(self) -> bool:
        new_left = self.left + self.dx
        new_top = self.top + self.dy
        left, right = self.left_pad, self.right_pad
        if (
            new_left == left.right - 1 and left.top <= new_top <= left.bottom
        ) or (
            new_left == right.left and right.top <= new_top <= right.bottom
        ):
            self.dx = -self.dx
            return True
        return False


# pylint: enable=too-many-instance-attributes
