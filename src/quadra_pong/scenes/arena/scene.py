"""
Four-paddle arena scene: owns the pads and the ball and runs the game loop.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.commands import Command
from mini_arcade_core.utils import logger

from quadra_pong.constants import (
    GAME_OVER_PROMPT,
    PROMPT_BACKGROUND,
    PROMPT_FOREGROUND,
)
from quadra_pong.display import Display, KeySource
from quadra_pong.entities import Ball
from quadra_pong.scenes.arena.models import ArenaWorld, GameState, build_world
from quadra_pong.scenes.commands import (
    ExitArenaCommand,
    MovePadsCommand,
    ResetBallCommand,
    SlowDownCommand,
    SpeedUpCommand,
)
from quadra_pong.settings import ArenaSettings
from quadra_pong.timing import Stopwatch

KEY_BINDINGS: dict[Key, Callable[[], Command]] = {
    Key.UP: lambda: MovePadsCommand("VERTICAL", -1),
    Key.DOWN: lambda: MovePadsCommand("VERTICAL", 1),
    Key.LEFT: lambda: MovePadsCommand("HORIZONTAL", -1),
    Key.RIGHT: lambda: MovePadsCommand("HORIZONTAL", 1),
    Key.R: ResetBallCommand,
    Key.A: SpeedUpCommand,
    Key.Z: SlowDownCommand,
    Key.ESCAPE: ExitArenaCommand,
}


class ArenaScene:
    """
    Game loop for the four-paddle arena.

    Every iteration: advance the ball if the pace has elapsed, show the game
    over prompt while the ball is dead, then handle at most one key.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        display: Display,
        keys: KeySource,
        *,
        settings: Optional[ArenaSettings] = None,
        stopwatch: Optional[Stopwatch] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        :param display: Display to draw on; its viewport sizes the arena.
        :type display: Display

        :param keys: Non-blocking key source.
        :type keys: KeySource

        :param settings: Arena settings.
        :type settings: ArenaSettings, optional

        :param stopwatch: Tick timer.
        :type stopwatch: Stopwatch, optional

        :param rng: Random source for serve directions.
        :type rng: random.Random, optional

        :raises ArenaTooSmallError: If the viewport cannot fit the pads.
        """
        self.display = display
        self.keys = keys
        self.settings = settings or ArenaSettings()
        self.stopwatch = stopwatch or Stopwatch()
        self.rng = rng or random.Random()
        self.world: ArenaWorld = build_world(display, self.settings)

    # pylint: enable=too-many-arguments

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self.world.state

    def reset(self):
        """Serve a new ball from the center and start the tick timer."""
        world = self.world
        if world.prompt_shown:
            self._erase_prompt()
        if world.ball is not None and not world.ball.is_dead():
            world.ball.erase()
        x, y = world.center
        world.ball = Ball(
            x,
            y,
            top_pad=world.top_pad,
            bottom_pad=world.bottom_pad,
            left_pad=world.left_pad,
            right_pad=world.right_pad,
            display=self.display,
            rng=self.rng,
            foreground=self.settings.ball_color,
            background=self.settings.background_color,
        )
        self.stopwatch.restart()
        logger.info(
            f"Ball served from {world.ball.position} "
            f"heading {world.ball.direction}"
        )

    def step(self):
        """Run one loop iteration."""
        world = self.world
        ball = world.ball

        if ball is not None:
            if (
                not ball.is_dead()
                and self.stopwatch.elapsed_ms >= world.pace.value
            ):
                self.stopwatch.restart()
                ball.move()

            if ball.is_dead():
                self.stopwatch.stop()
                if not world.prompt_shown:
                    logger.info(f"Game over, ball left at {ball.position}")
                self._write_prompt()

        key = self.keys.poll_key()
        if key is None:
            return
        factory = KEY_BINDINGS.get(key)
        if factory is None:
            return
        factory().execute(self)

    def run(self):
        """Serve the first ball and loop until the player exits."""
        self.display.set_cursor_visible(False)
        logger.info(
            f"Arena {self.world.viewport[0]}x{self.world.viewport[1]} "
            f"ready, pace {self.world.pace.value}ms"
        )
        try:
            self.reset()
            while self.world.running:
                self.step()
        finally:
            self.stopwatch.stop()
            self.display.set_cursor_visible(True)
        logger.info("Arena closed")

    def _prompt_span(self) -> tuple[int, int, str]:
        """Row, first column and visible text of the prompt."""
        width, height = self.world.viewport
        x = (width - len(GAME_OVER_PROMPT)) // 2
        text = GAME_OVER_PROMPT
        if x < 0:
            # narrow arena: keep the middle of the prompt
            text = text[-x : -x + width]
            x = 0
        return height // 2, x, text

    def _write_prompt(self):
        y, x, text = self._prompt_span()
        for offset, glyph in enumerate(text):
            self.display.set_cell(
                x + offset, y, glyph, PROMPT_FOREGROUND, PROMPT_BACKGROUND
            )
        self.world.prompt_shown = True

    def _erase_prompt(self):
        y, x, text = self._prompt_span()
        self.display.set_cell_block_color(
            x, y, len(text), 1, self.settings.background_color
        )
        self.world.prompt_shown = False
        # the prompt row may cross the side pads in a narrow arena
        self.world.left_pad.draw()
        self.world.right_pad.draw()
