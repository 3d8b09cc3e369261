import random

import pytest
from conftest import NEGATIVE, POSITIVE

from quadra_pong.display import Color
from quadra_pong.entities import ball as ball_module
from quadra_pong.entities import Ball, HorizontalPad, VerticalPad
from quadra_pong.scenes.arena.models import build_world
from quadra_pong.settings import ArenaSettings

COLORS = {"pad_color": Color.RED, "background_color": Color.BLACK}


class RecordingLogger:
    def __init__(self):
        self.warnings = []

    def warning(self, message, *args, **kwargs):
        self.warnings.append(message)


@pytest.fixture
def world(display):
    # 80x24: top/bottom pads span columns 35..45, side pads rows 9..14
    return build_world(display, ArenaSettings())


def serve(world, display, left, top, rng):
    return Ball(
        left,
        top,
        top_pad=world.top_pad,
        bottom_pad=world.bottom_pad,
        left_pad=world.left_pad,
        right_pad=world.right_pad,
        display=display,
        rng=rng,
    )


def test_ball_draws_itself_when_served(world, display):
    serve(world, display, 40, 12, POSITIVE)
    assert display.glyph_at(40, 12) == "O"


def test_deterministic_trajectory_from_center(world, display):
    ball = serve(world, display, 40, 12, POSITIVE)
    assert ball.direction == (1, 1)

    positions = []
    for _ in range(5):
        ball.move()
        positions.append(ball.position)

    assert positions == [(41, 13), (42, 14), (43, 15), (44, 16), (45, 17)]
    assert display.glyph_at(45, 17) == "O"
    assert display.glyph_at(44, 16) == " "


def test_same_seed_same_serve(world, display):
    first = serve(world, display, 40, 12, random.Random(1234))
    second = serve(world, display, 40, 12, random.Random(1234))
    assert first.direction == second.direction


def test_unit_steps_with_unit_direction(world, display):
    ball = serve(world, display, 40, 12, random.Random(7))
    for _ in range(200):
        if ball.is_dead():
            break
        before = ball.position
        ball.move()
        assert ball.dx in (-1, 1) and ball.dy in (-1, 1)
        assert abs(ball.left - before[0]) == 1
        assert abs(ball.top - before[1]) == 1


def test_bounces_off_bottom_pad(world, display):
    ball = serve(world, display, 38, 20, POSITIVE)
    ball.move()
    ball.move()
    assert ball.position == (40, 22)

    ball.move()
    assert ball.position == (41, 21)
    assert ball.direction == (1, -1)


def test_bounces_off_left_pad(world, display):
    ball = serve(world, display, 4, 12, NEGATIVE)
    ball.move()
    ball.move()
    assert ball.position == (2, 10)
    assert not ball.is_dead()

    ball.move()
    assert ball.position == (3, 9)
    assert ball.direction == (1, -1)


def test_corner_flips_both_axes_in_one_move(display):
    top = HorizontalPad(10, 0, 0, 10, display, **COLORS)
    bottom = HorizontalPad(10, 10, 0, 10, display, **COLORS)
    left = VerticalPad(5, 0, 0, 5, display, **COLORS)
    right = VerticalPad(5, 20, 0, 5, display, **COLORS)
    assert (top.left, left.top) == (0, 0)

    ball = Ball(
        2,
        1,
        top_pad=top,
        bottom_pad=bottom,
        left_pad=left,
        right_pad=right,
        display=display,
        rng=NEGATIVE,
    )
    assert ball.direction == (-1, -1)

    ball.move()
    assert ball.direction == (1, 1)
    assert ball.position == (3, 2)


def test_reflection_loop_is_capped(display, monkeypatch):
    log = RecordingLogger()
    monkeypatch.setattr(ball_module, "logger", log)

    # top pad face on row 0, bottom pad face on row 2: the ball on row 1
    # would bounce between them forever
    top = HorizontalPad(10, 0, 0, 10, display, **COLORS)
    bottom = HorizontalPad(10, 2, 0, 10, display, **COLORS)
    left = VerticalPad(1, 0, 0, 3, display, **COLORS)
    right = VerticalPad(1, 20, 0, 3, display, **COLORS)
    ball = Ball(
        5,
        1,
        top_pad=top,
        bottom_pad=bottom,
        left_pad=left,
        right_pad=right,
        display=display,
        rng=POSITIVE,
    )

    ball.move()
    assert ball.dx in (-1, 1) and ball.dy in (-1, 1)
    assert abs(ball.left - 5) == 1 and abs(ball.top - 1) == 1
    assert len(log.warnings) == 1
    assert "still reflecting after 4 passes" in log.warnings[0]


def test_not_dead_when_served_and_is_dead_is_stable(world, display):
    ball = serve(world, display, 40, 12, POSITIVE)
    assert ball.is_dead() is False
    assert ball.is_dead() is False
    assert ball.position == (40, 12)


def test_dies_through_gap_and_stays_erased(world, display):
    ball = serve(world, display, 40, 12, POSITIVE)
    for _ in range(11):
        ball.move()
    assert ball.position == (51, 23)
    assert not ball.is_dead()

    ball.move()
    assert ball.position == (52, 24)
    assert ball.is_dead()
    assert ball.is_dead()
    assert display.glyph_at(51, 23) == " "
    assert (52, 24) not in display.cells


def test_moving_off_a_pad_cell_keeps_the_pad_drawn(world, display):
    # column 78 is the right pad's face, still in play
    ball = serve(world, display, 78, 14, NEGATIVE)
    assert not ball.is_dead()

    world.right_pad.move_down()
    world.right_pad.move_down()
    assert world.right_pad.covers(78, 14)

    ball.move()
    assert ball.position == (77, 13)
    assert display.color_at(78, 14) == Color.BLUE
    assert display.glyph_at(77, 13) == "O"


def test_erase_clears_ball_cell(world, display):
    ball = serve(world, display, 40, 12, POSITIVE)
    ball.erase()
    assert display.glyph_at(40, 12) == " "
