"""
Display and input collaborators used by the arena.

The game never talks to the terminal directly: every draw goes through a
``Display`` and every key through a ``KeySource``. ``quadra_pong.terminal``
provides the blessed-backed implementations; tests use in-memory fakes.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from mini_arcade_core.backend.keys import Key


class Color(str, Enum):
    """
    Cell colors understood by the display.

    Values are the color names used by terminal formatters.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class Display(Protocol):
    """Cell-based output surface."""

    def set_cell_block_color(
        self, x: int, y: int, width: int, height: int, color: Color
    ) -> None:
        """
        Fill a block of cells with a background color.

        :param x: Left column of the block.
        :type x: int

        :param y: Top row of the block.
        :type y: int

        :param width: Block width in cells.
        :type width: int

        :param height: Block height in cells.
        :type height: int

        :param color: Fill color.
        :type color: Color
        """

    def set_cell(
        self,
        x: int,
        y: int,
        glyph: str,
        foreground: Color,
        background: Color,
    ) -> None:
        """Write a single glyph at ``(x, y)``."""

    def get_viewport_size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in cells."""

    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the cursor."""


class KeySource(Protocol):
    """Non-blocking key input."""

    def poll_key(self) -> Optional[Key]:
        """Return the next pending key, or ``None`` if nothing is pending."""
