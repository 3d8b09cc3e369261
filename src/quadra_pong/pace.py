"""
Tick pace for the ball.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger


@dataclass
class Pace:
    """
    Milliseconds between two ball moves. Lower is faster.

    :ivar value (int): Current pace.
    :ivar floor (int): Fastest allowed pace.
    :ivar ceiling (int): Slowest allowed pace.
    """

    value: int
    floor: int = 50
    ceiling: int = 800

    def __post_init__(self):
        if not 0 < self.floor <= self.ceiling:
            raise ValueError(
                f"invalid pace bounds: floor={self.floor}, "
                f"ceiling={self.ceiling}"
            )
        self.value = max(self.floor, min(self.ceiling, self.value))

    def speed_up(self) -> bool:
        """
        Halve the pace, never going below ``floor``.

        :return: True if the pace changed.
        :rtype: bool
        """
        if self.value <= self.floor:
            return False
        self.value = max(self.floor, self.value // 2)
        logger.info(f"Pace sped up to {self.value}ms")
        return True

    def slow_down(self) -> bool:
        """
        Double the pace, never going above ``ceiling``.

        :return: True if the pace changed.
        :rtype: bool
        """
        if self.value >= self.ceiling:
            return False
        self.value = min(self.ceiling, self.value * 2)
        logger.info(f"Pace slowed down to {self.value}ms")
        return True
