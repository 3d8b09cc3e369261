"""
Terminal display and key input backed by blessed.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterator, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke
from mini_arcade_core.backend.keys import Key

from quadra_pong.display import Color

SEQUENCE_KEYS = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ESCAPE": Key.ESCAPE,
}

CHARACTER_KEYS = {
    "r": Key.R,
    "z": Key.Z,
    "a": Key.A,
}


def key_from_keystroke(keystroke: Keystroke) -> Optional[Key]:
    """
    Translate a blessed keystroke into a game key.

    :param keystroke: Keystroke returned by ``Terminal.inkey``.
    :type keystroke: Keystroke

    :return: The matching key, or None for empty or unbound keystrokes.
    :rtype: Key | None
    """
    if not keystroke:
        return None
    if keystroke.is_sequence:
        return SEQUENCE_KEYS.get(keystroke.name)
    return CHARACTER_KEYS.get(str(keystroke).lower())


class TerminalDisplay:
    """
    Display that writes colored cells to a blessed terminal.

    The current pen (foreground, background) is explicit state; each draw
    switches it inside ``pen`` and restores it afterwards.
    """

    def __init__(
        self,
        term: Optional[Terminal] = None,
        stream: Optional[IO[str]] = None,
    ):
        self.term = term or Terminal()
        self.stream = stream or sys.stdout
        self.foreground = Color.WHITE
        self.background = Color.BLACK

    @contextmanager
    def pen(
        self,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
    ) -> Iterator[str]:
        """
        Switch pen colors for the duration of the block.

        :return: The formatting sequence for the active pen.
        """
        saved = (self.foreground, self.background)
        if foreground is not None:
            self.foreground = foreground
        if background is not None:
            self.background = background
        try:
            yield getattr(
                self.term,
                f"{self.foreground.value}_on_{self.background.value}",
            )
        finally:
            self.foreground, self.background = saved

    def clear(self):
        """Clear the screen to the current background."""
        with self.pen() as style:
            self._write(self.term.home + style + self.term.clear)

    def _write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def set_cell_block_color(
        self, x: int, y: int, width: int, height: int, color: Color
    ):
        row = " " * width
        with self.pen(background=color) as style:
            lines = [
                self.term.move_xy(x, y + i) + style + row + self.term.normal
                for i in range(height)
            ]
            self._write("".join(lines))

    def set_cell(
        self,
        x: int,
        y: int,
        glyph: str,
        foreground: Color,
        background: Color,
    ):
        with self.pen(foreground, background) as style:
            self._write(
                self.term.move_xy(x, y) + style + glyph + self.term.normal
            )

    def get_viewport_size(self) -> tuple[int, int]:
        return self.term.width, self.term.height

    def set_cursor_visible(self, visible: bool):
        self._write(
            self.term.normal_cursor if visible else self.term.hide_cursor
        )


class TerminalKeys:
    """Non-blocking key source reading from a blessed terminal."""

    def __init__(self, term: Terminal):
        self.term = term

    def poll_key(self) -> Optional[Key]:
        return key_from_keystroke(self.term.inkey(timeout=0))


@contextmanager
def terminal_session(
    term: Optional[Terminal] = None,
) -> Iterator[tuple[TerminalDisplay, TerminalKeys]]:
    """
    Put the terminal in game mode and yield the display and key source.

    The terminal is restored on exit, including when the game raises.
    """
    term = term or Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        display = TerminalDisplay(term)
        display.clear()
        yield display, TerminalKeys(term)
