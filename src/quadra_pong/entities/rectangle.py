"""
Axis-aligned rectangle of terminal cells.
"""

from __future__ import annotations

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from quadra_pong.display import Color, Display


class Rectangle:
    """
    Rectangle shared by every paddle.

    :ivar position (Position2D): Top-left cell; moves with the paddle.
    :ivar size (Size2D): Size in cells, fixed once built.
    """

    def __init__(self, left: int, top: int, width: int, height: int):
        """
        :param left: Left column.
        :type left: int

        :param top: Top row.
        :type top: int

        :param width: Width in cells.
        :type width: int

        :param height: Height in cells.
        :type height: int
        """
        if width <= 0 or height <= 0:
            raise ValueError(
                f"rectangle size must be positive, got {width}x{height}"
            )
        self.position = Position2D(left, top)
        self._size = Size2D(width, height)

    def __repr__(self) -> str:
        return (
            f"Rectangle(left={self.left}, top={self.top}, "
            f"width={self.width}, height={self.height})"
        )

    @property
    def size(self) -> Size2D:
        """Size in cells."""
        return self._size

    @property
    def left(self) -> int:
        """Left column."""
        return int(self.position.x)

    @left.setter
    def left(self, value: int):
        self.position = Position2D(value, self.position.y)

    @property
    def top(self) -> int:
        """Top row."""
        return int(self.position.y)

    @top.setter
    def top(self, value: int):
        self.position = Position2D(self.position.x, value)

    @property
    def width(self) -> int:
        """Width in cells."""
        return int(self._size.width)

    @property
    def height(self) -> int:
        """Height in cells."""
        return int(self._size.height)

    @property
    def right(self) -> int:
        """First column past the rectangle."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        """First row past the rectangle."""
        return self.top + self.height

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell ``(x, y)`` lies inside the rectangle."""
        return self.left <= x < self.right and self.top <= y < self.bottom

    def draw(self, display: Display, color: Color):
        """
        Fill the rectangle's current cells with ``color``.

        :param display: Display to draw on.
        :type display: Display

        :param color: Fill color.
        :type color: Color
        """
        display.set_cell_block_color(
            self.left, self.top, self.width, self.height, color
        )
