"""
Shared fakes for the Quadra Pong tests.
"""

from __future__ import annotations

from collections import deque

import pytest

from quadra_pong.display import Color
from quadra_pong.timing import Stopwatch


class RecordingDisplay:
    """Display that records every call and keeps a cell grid."""

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.blocks = []
        self.cells = {}
        self.cursor_visible = True

    def set_cell_block_color(self, x, y, width, height, color):
        self.blocks.append((x, y, width, height, color))
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.cells[(col, row)] = (" ", color, color)

    def set_cell(self, x, y, glyph, foreground, background):
        self.cells[(x, y)] = (glyph, foreground, background)

    def get_viewport_size(self):
        return self.width, self.height

    def set_cursor_visible(self, visible):
        self.cursor_visible = visible

    def glyph_at(self, x, y):
        return self.cells.get((x, y), (" ", None, None))[0]

    def row_text(self, y):
        return "".join(self.glyph_at(x, y) for x in range(self.width))

    def color_at(self, x, y):
        return self.cells.get((x, y), (" ", None, Color.BLACK))[2]


class ScriptedKeys:
    """Key source that hands out a fixed sequence, then nothing."""

    def __init__(self, *keys):
        self.pending = deque(keys)

    def push(self, *keys):
        self.pending.extend(keys)

    def poll_key(self):
        return self.pending.popleft() if self.pending else None


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms / 1000.0


class FixedChoice:
    """RNG stand-in whose ``choice`` always picks the same index."""

    def __init__(self, index):
        self.index = index

    def choice(self, seq):
        return seq[self.index]


# (-1, 1)[0] == -1, (-1, 1)[1] == +1
NEGATIVE = FixedChoice(0)
POSITIVE = FixedChoice(1)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stopwatch(clock):
    return Stopwatch(clock)
