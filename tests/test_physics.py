from __future__ import annotations

import math
import random

from paddleduel.entities import Ball, Playfield, Side, create_paddles
from paddleduel.physics import advance_ball, deflection_angle, random_direction, serve_ball

FIELD = Playfield(800, 500)


def _paddles(left_y: float = 0, right_y: float = 0):
    left, right = create_paddles(FIELD)
    left.y = left_y
    right.y = right_y
    return left, right


def _step(ball: Ball, left_y: float = 0, right_y: float = 0, seed: int = 1):
    left, right = _paddles(left_y, right_y)
    return advance_ball(ball, left, right, FIELD, random.Random(seed)), left, right


def test_free_flight_keeps_velocity() -> None:
    ball = Ball(x=300, y=200, dx=6, dy=2.5)
    outcome, _, _ = _step(ball)
    assert (outcome.ball.x, outcome.ball.y) == (306, 202.5)
    assert (outcome.ball.dx, outcome.ball.dy) == (6, 2.5)
    assert outcome.scorer is None and outcome.paddle_hit is None


def test_input_ball_is_not_mutated() -> None:
    ball = Ball(x=300, y=200, dx=6, dy=2)
    _step(ball)
    assert (ball.x, ball.y) == (300, 200)


def test_top_wall_bounce_flips_dy_and_clamps() -> None:
    outcome, _, _ = _step(Ball(x=300, y=2, dx=6, dy=-5))
    assert outcome.ball.y == 0
    assert outcome.ball.dy == 5


def test_bottom_wall_bounce_flips_dy_and_clamps() -> None:
    outcome, _, _ = _step(Ball(x=300, y=480, dx=6, dy=5))
    assert outcome.ball.y == FIELD.height - outcome.ball.size
    assert outcome.ball.dy == -5


def test_center_hit_returns_flat() -> None:
    # Ball center lands exactly on the left paddle center (y=250).
    outcome, _, _ = _step(Ball(x=16, y=242, dx=-6, dy=0), left_y=200)
    assert outcome.paddle_hit is Side.LEFT
    assert outcome.ball.dx == 6
    assert math.isclose(outcome.ball.dy, 0, abs_tol=1e-9)


def test_edge_hit_on_right_paddle_is_steep_and_leftward() -> None:
    outcome, _, _ = _step(Ball(x=768, y=192, dx=6, dy=0), right_y=200)
    assert outcome.paddle_hit is Side.RIGHT
    assert math.isclose(outcome.ball.dx, -6 * math.cos(math.pi / 4))
    assert math.isclose(outcome.ball.dy, -6 * math.sin(math.pi / 4))


def test_deflection_is_capped_at_45_degrees() -> None:
    _, right = _paddles(right_y=200)
    ball = Ball(x=780, y=185)
    assert deflection_angle(ball, right) == -math.pi / 4


def test_left_paddle_always_sends_ball_right() -> None:
    # Even a ball already moving right leaves the left paddle moving right.
    outcome, _, _ = _step(Ball(x=2, y=60, dx=3, dy=1), left_y=20)
    assert outcome.paddle_hit is Side.LEFT
    assert outcome.ball.dx > 0


def test_ball_past_left_edge_scores_for_right_and_serves_left() -> None:
    outcome, left, right = _step(Ball(x=2, y=300, dx=-6, dy=0))
    assert outcome.scorer is Side.RIGHT
    assert (left.score, right.score) == (0, 1)
    assert not outcome.game_over
    served = outcome.ball
    assert served.x == FIELD.width / 2 - served.size / 2
    assert served.y == FIELD.height / 2 - served.size / 2
    assert served.dx == -served.speed
    assert -served.speed / 2 <= served.dy < served.speed / 2


def test_ball_past_right_edge_scores_for_left_and_serves_right() -> None:
    outcome, left, right = _step(Ball(x=782, y=300, dx=6, dy=0))
    assert outcome.scorer is Side.LEFT
    assert (left.score, right.score) == (1, 0)
    assert outcome.ball.dx == outcome.ball.speed


def test_winning_point_ends_without_serve() -> None:
    left, right = _paddles()
    right.score = 4
    outcome = advance_ball(Ball(x=2, y=300, dx=-6, dy=0), left, right, FIELD, random.Random(3))
    assert outcome.game_over
    assert right.score == 5
    assert outcome.ball.x < 0


def test_serve_dy_stays_in_range() -> None:
    rng = random.Random(42)
    ball = Ball.centered(FIELD)
    for _ in range(200):
        served = serve_ball(ball, FIELD, random_direction(rng), rng)
        assert abs(served.dx) == ball.speed
        assert -ball.speed / 2 <= served.dy < ball.speed / 2
