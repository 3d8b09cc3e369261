"""
Paddles for Quadra Pong.

Both paddle kinds wrap a ``Rectangle`` and slide along one axis inside a
margin range. A step that would leave the range is refused, the paddle does
not snap to the edge.
"""

from __future__ import annotations

from typing import Protocol

from quadra_pong.constants import (
    HORIZONTAL_PAD_THICKNESS,
    VERTICAL_PAD_THICKNESS,
)
from quadra_pong.display import Color, Display
from quadra_pong.entities.rectangle import Rectangle
from quadra_pong.errors import ArenaTooSmallError


class Movable(Protocol):
    """Something that slides one cell at a time along a single axis."""

    def move_by(self, delta: int) -> bool:
        """
        Move by ``delta`` cells.

        :return: True if the move was accepted.
        :rtype: bool
        """


def _centered(margin_start: int, margin_end: int, extent: int) -> int:
    if extent > margin_end - margin_start:
        raise ArenaTooSmallError(
            f"pad of size {extent} does not fit in margins "
            f"[{margin_start}, {margin_end}]"
        )
    return (margin_start + margin_end - extent) // 2


class _Pad:
    """Geometry and redraw logic shared by both paddle kinds."""

    def __init__(
        self,
        rect: Rectangle,
        display: Display,
        pad_color: Color,
        background_color: Color,
    ):
        self.rect = rect
        self.display = display
        self.pad_color = pad_color
        self.background_color = background_color
        self.draw()

    @property
    def left(self) -> int:
        """Left column."""
        return self.rect.left

    @property
    def top(self) -> int:
        """Top row."""
        return self.rect.top

    @property
    def right(self) -> int:
        """First column past the pad."""
        return self.rect.right

    @property
    def bottom(self) -> int:
        """First row past the pad."""
        return self.rect.bottom

    @property
    def width(self) -> int:
        """Width in cells."""
        return self.rect.width

    @property
    def height(self) -> int:
        """Height in cells."""
        return self.rect.height

    def covers(self, x: int, y: int) -> bool:
        """Whether the pad currently occupies cell ``(x, y)``."""
        return self.rect.contains(x, y)

    def draw(self):
        """Draw the pad in its own color."""
        self.rect.draw(self.display, self.pad_color)

    def erase(self):
        """Paint the pad's cells with the background color."""
        self.rect.draw(self.display, self.background_color)


class VerticalPad(_Pad):
    """
    Left or right paddle; slides up and down between two row margins.

    :ivar top_margin (int): Smallest row the pad's top may reach.
    :ivar bottom_margin (int): Row the pad's bottom may not pass.
    """

    def __init__(
        self,
        height: int,
        column: int,
        top_margin: int,
        bottom_margin: int,
        display: Display,
        *,
        pad_color: Color,
        background_color: Color,
    ):
        # pylint: disable=too-many-arguments
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        top = _centered(top_margin, bottom_margin, height)
        super().__init__(
            Rectangle(column, top, VERTICAL_PAD_THICKNESS, height),
            display,
            pad_color,
            background_color,
        )

    def move_by(self, delta: int) -> bool:
        new_top = self.rect.top + delta
        if (
            new_top < self.top_margin
            or new_top > self.bottom_margin - self.rect.height
        ):
            return False

        self.erase()
        self.rect.top = new_top
        self.draw()
        return True

    def move_up(self) -> bool:
        """Move one row up."""
        return self.move_by(-1)

    def move_down(self) -> bool:
        """Move one row down."""
        return self.move_by(1)


class HorizontalPad(_Pad):
    """
    Top or bottom paddle; slides left and right between two column margins.

    :ivar left_margin (int): Smallest column the pad's left may reach.
    :ivar right_margin (int): Column the pad's right may not pass.
    """

    def __init__(
        self,
        width: int,
        row: int,
        left_margin: int,
        right_margin: int,
        display: Display,
        *,
        pad_color: Color,
        background_color: Color,
    ):
        # pylint: disable=too-many-arguments
        self.left_margin = left_margin
        self.right_margin = right_margin
        left = _centered(left_margin, right_margin, width)
        super().__init__(
            Rectangle(left, row, width, HORIZONTAL_PAD_THICKNESS),
            display,
            pad_color,
            background_color,
        )

    def move_by(self, delta: int) -> bool:
        new_left = self.rect.left + delta
        if (
            new_left < self.left_margin
            or new_left > self.right_margin - self.rect.width
        ):
            return False

        self.erase()
        self.rect.left = new_left
        self.draw()
        return True

    def move_left(self) -> bool:
        """Move one column left."""
        return self.move_by(-1)

    def move_right(self) -> bool:
        """Move one column right."""
        return self.move_by(1)
