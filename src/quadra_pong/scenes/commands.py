"""
Module defining arena commands for Quadra Pong.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from mini_arcade_core.engine.commands import Command
from mini_arcade_core.utils import logger

if TYPE_CHECKING:
    from quadra_pong.entities import Movable
    from quadra_pong.scenes.arena.scene import ArenaScene


Axis = Literal["VERTICAL", "HORIZONTAL"]


class MovePadsCommand(Command):
    """
    Move both pads of one axis by one cell, in lockstep.
    """

    def __init__(self, axis: Axis, delta: int):
        """
        :param axis: "VERTICAL" for the left/right pads, "HORIZONTAL" for
            the top/bottom pads.
        :type axis: Axis

        :param delta: -1 (up/left) or +1 (down/right).
        :type delta: int
        """
        self.axis = axis
        self.delta = delta

    def execute(self, context: ArenaScene):
        world = context.world
        pads: tuple[Movable, Movable]
        if self.axis == "VERTICAL":
            pads = (world.left_pad, world.right_pad)
        else:
            pads = (world.top_pad, world.bottom_pad)
        for pad in pads:
            pad.move_by(self.delta)


class ResetBallCommand(Command):
    """Serve a fresh ball from the arena center."""

    def execute(self, context: ArenaScene):
        context.reset()


class SpeedUpCommand(Command):
    """Halve the pace."""

    def execute(self, context: ArenaScene):
        context.world.pace.speed_up()


class SlowDownCommand(Command):
    """Double the pace."""

    def execute(self, context: ArenaScene):
        context.world.pace.slow_down()


class ExitArenaCommand(Command):
    """
    Command to leave the arena loop.
    """

    def execute(self, context: ArenaScene):
        logger.info("Exit requested")
        context.world.running = False
