"""
Constants for Quadra Pong.
"""

from __future__ import annotations

from quadra_pong.display import Color

# Colors
PAD_HORIZONTAL_COLOR = Color.RED
PAD_VERTICAL_COLOR = Color.BLUE
BALL_COLOR = Color.GREEN
BACKGROUND = Color.BLACK
PROMPT_FOREGROUND = Color.WHITE
PROMPT_BACKGROUND = Color.RED

# Glyphs
BALL_GLYPH = "O"
EMPTY_GLYPH = " "

# Paddle thickness across the axis they slide on (cells)
VERTICAL_PAD_THICKNESS = 2
HORIZONTAL_PAD_THICKNESS = 1

GAME_OVER_PROMPT = "Game Over! Press R to reset."
