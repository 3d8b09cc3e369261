"""
Arena scene model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quadra_pong.constants import VERTICAL_PAD_THICKNESS
from quadra_pong.display import Display
from quadra_pong.entities import Ball, HorizontalPad, VerticalPad
from quadra_pong.errors import ArenaTooSmallError
from quadra_pong.pace import Pace
from quadra_pong.settings import ArenaSettings

# Horizontal pads keep this many columns clear at each end so they never
# cover the vertical pads' columns.
HORIZONTAL_PAD_INSET = 2
# Vertical pads keep one row clear at each end for the horizontal pads.
VERTICAL_PAD_INSET = 1


class GameState(Enum):
    """Where the arena loop is."""

    RUNNING = "running"
    GAME_OVER = "game_over"
    STOPPED = "stopped"


# Justification: the world is the whole game state
# pylint: disable=too-many-instance-attributes
@dataclass
class ArenaWorld:
    """
    Arena world state.

    :ivar viewport (tuple[int, int]): Arena size (width, height) in cells.
    :ivar top_pad (HorizontalPad): Pad along the top row.
    :ivar bottom_pad (HorizontalPad): Pad along the bottom row.
    :ivar left_pad (VerticalPad): Pad along the left columns.
    :ivar right_pad (VerticalPad): Pad along the right columns.
    :ivar pace (Pace): Milliseconds between ball moves.
    :ivar ball (Ball | None): Ball in play, None until the first reset.
    :ivar running (bool): False once the player asked to quit.
    """

    viewport: tuple[int, int]
    top_pad: HorizontalPad
    bottom_pad: HorizontalPad
    left_pad: VerticalPad
    right_pad: VerticalPad
    pace: Pace
    ball: Optional[Ball] = None
    running: bool = True

    # set while the game over prompt is on screen
    prompt_shown: bool = False

    @property
    def center(self) -> tuple[int, int]:
        """Center cell of the arena."""
        width, height = self.viewport
        return width // 2, height // 2

    @property
    def state(self) -> GameState:
        """Current game state."""
        if not self.running:
            return GameState.STOPPED
        if self.ball is not None and self.ball.is_dead():
            return GameState.GAME_OVER
        return GameState.RUNNING


# pylint: enable=too-many-instance-attributes


def check_viewport(width: int, height: int, settings: ArenaSettings):
    """
    Fail fast when the viewport cannot fit the pads.

    :raises ArenaTooSmallError: If either dimension is too small.
    """
    min_width = settings.horizontal_pad_width + 2 * HORIZONTAL_PAD_INSET
    min_height = settings.vertical_pad_height + 2 * VERTICAL_PAD_INSET
    if width < min_width or height < min_height:
        raise ArenaTooSmallError(
            f"arena {width}x{height} is too small, "
            f"need at least {min_width}x{min_height}",
            width=width,
            height=height,
        )


def build_world(display: Display, settings: ArenaSettings) -> ArenaWorld:
    """
    Lay out the four pads for the display's viewport and draw them.

    :param display: Display to size the arena from and draw on.
    :type display: Display

    :param settings: Arena settings.
    :type settings: ArenaSettings

    :return: A world with no ball yet.
    :rtype: ArenaWorld
    """
    width, height = display.get_viewport_size()
    check_viewport(width, height, settings)

    horizontal = {
        "pad_color": settings.horizontal_pad_color,
        "background_color": settings.background_color,
    }
    vertical = {
        "pad_color": settings.vertical_pad_color,
        "background_color": settings.background_color,
    }
    h_margins = (HORIZONTAL_PAD_INSET, width - HORIZONTAL_PAD_INSET)
    v_margins = (VERTICAL_PAD_INSET, height - VERTICAL_PAD_INSET)

    top_pad = HorizontalPad(
        settings.horizontal_pad_width, 0, *h_margins, display, **horizontal
    )
    bottom_pad = HorizontalPad(
        settings.horizontal_pad_width,
        height - 1,
        *h_margins,
        display,
        **horizontal,
    )
    left_pad = VerticalPad(
        settings.vertical_pad_height, 0, *v_margins, display, **vertical
    )
    right_pad = VerticalPad(
        settings.vertical_pad_height,
        width - VERTICAL_PAD_THICKNESS,
        *v_margins,
        display,
        **vertical,
    )

    return ArenaWorld(
        viewport=(width, height),
        top_pad=top_pad,
        bottom_pad=bottom_pad,
        left_pad=left_pad,
        right_pad=right_pad,
        pace=Pace(
            settings.initial_pace,
            floor=settings.min_pace,
            ceiling=settings.max_pace,
        ),
    )
