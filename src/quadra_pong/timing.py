"""
Stopwatch used to throttle ball movement.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]


class Stopwatch:
    """
    Monotonic stopwatch that accumulates time while running.

    ``start`` resumes without clearing, ``restart`` clears and runs,
    ``stop`` freezes the elapsed value.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        :param clock: Source of seconds; defaults to ``time.monotonic``.
        :type clock: Callable[[], float], optional
        """
        self._clock = clock or time.monotonic
        self._accumulated = 0.0
        self._started_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        """Whether the stopwatch is currently measuring."""
        return self._started_at is not None

    @property
    def elapsed_ms(self) -> float:
        """Elapsed milliseconds."""
        elapsed = self._accumulated
        if self._started_at is not None:
            elapsed += self._clock() - self._started_at
        return elapsed * 1000.0

    def start(self):
        """Start or resume measuring. No-op if already running."""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self):
        """Freeze the elapsed time. No-op if already stopped."""
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def reset(self):
        """Stop and clear the elapsed time."""
        self._accumulated = 0.0
        self._started_at = None

    def restart(self):
        """Clear the elapsed time and start measuring."""
        self.reset()
        self.start()
