"""
Minimal main application for Quadra Pong.
"""

from __future__ import annotations

from mini_arcade_core.utils import logger

from quadra_pong.errors import ArenaTooSmallError
from quadra_pong.scenes.arena import ArenaScene
from quadra_pong.settings import ArenaSettings
from quadra_pong.terminal import terminal_session


def run(settings: ArenaSettings | None = None):
    """
    Main entry point for Quadra Pong.

    - Switches the terminal to fullscreen, cbreak mode with a hidden cursor.
    - Lays out the four pads for the current terminal size.
    - Runs the arena loop until Escape is pressed.

    :raises ArenaTooSmallError: If the terminal is too small for the pads.
    """
    logger.info("Starting Quadra Pong...")
    with terminal_session() as (display, keys):
        scene = ArenaScene(display, keys, settings=settings)
        scene.run()


def main() -> int:
    """
    Console script wrapper around ``run``.

    :return: Process exit status.
    :rtype: int
    """
    try:
        run()
    except ArenaTooSmallError as exc:
        logger.error(f"Cannot start: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
