"""
Errors raised by Quadra Pong.
"""

from __future__ import annotations


class ArenaTooSmallError(ValueError):
    """
    Raised when the viewport cannot fit the paddle layout.

    :ivar width (int): Width that was requested.
    :ivar height (int): Height that was requested.
    """

    def __init__(self, message: str, width: int = 0, height: int = 0):
        super().__init__(message)
        self.width = width
        self.height = height
