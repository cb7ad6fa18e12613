"""Ball integration, collision response and scoring."""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
import random

from .entities import Ball, Paddle, Playfield, Side
from .utils import MAX_BOUNCE_ANGLE, WIN_SCORE, clamp


@dataclass(slots=True)
class StepOutcome:
    """Result of advancing the ball by one frame."""

    ball: Ball
    paddle_hit: Side | None = None
    scorer: Side | None = None
    game_over: bool = False


def random_direction(rng: random.Random) -> int:
    """Pick the horizontal direction of an opening serve."""
    return 1 if rng.random() > 0.5 else -1


def serve_ball(ball: Ball, playfield: Playfield, direction: int, rng: random.Random) -> Ball:
    """Return the ball recentred with a fresh serve velocity.

    The horizontal component is the full speed towards ``direction``; the
    vertical component is drawn uniformly from ``[-speed/2, speed/2)``.
    """
    return replace(
        ball,
        x=playfield.width / 2 - ball.size / 2,
        y=playfield.height / 2 - ball.size / 2,
        dx=ball.speed * direction,
        dy=(rng.random() - 0.5) * ball.speed,
    )


def deflection_angle(ball: Ball, paddle: Paddle) -> float:
    """Angle in radians for a return off ``paddle``.

    The offset of the ball center from the paddle center is normalised to the
    paddle half-height, so edge hits give steep returns and center hits give
    flat ones.
    """
    half = paddle.height / 2
    offset = (ball.y + ball.size / 2) - (paddle.y + half)
    normalised = clamp(offset / half, -1.0, 1.0)
    return normalised * MAX_BOUNCE_ANGLE


def hits_left_paddle(ball: Ball, paddle: Paddle) -> bool:
    return ball.x <= paddle.x + paddle.width and _overlaps_vertically(ball, paddle)


def hits_right_paddle(ball: Ball, paddle: Paddle) -> bool:
    return ball.x + ball.size >= paddle.x and _overlaps_vertically(ball, paddle)


def _overlaps_vertically(ball: Ball, paddle: Paddle) -> bool:
    return ball.y + ball.size >= paddle.y and ball.y <= paddle.y + paddle.height


def bounce_off_walls(ball: Ball, playfield: Playfield) -> None:
    """Reflect off the top or bottom edge and clamp inside the playfield."""
    lowest = playfield.height - ball.size
    if ball.y <= 0 or ball.y >= lowest:
        ball.dy = -ball.dy
        ball.y = clamp(ball.y, 0, lowest)


def bounce_off_paddle(ball: Ball, paddle: Paddle) -> None:
    """Send the ball back away from ``paddle`` at its deflection angle."""
    angle = deflection_angle(ball, paddle)
    away = 1 if paddle.side is Side.LEFT else -1
    ball.dx = away * ball.speed * math.cos(angle)
    ball.dy = ball.speed * math.sin(angle)


def advance_ball(
    ball: Ball,
    left: Paddle,
    right: Paddle,
    playfield: Playfield,
    rng: random.Random,
    winning_score: int = WIN_SCORE,
) -> StepOutcome:
    """Advance the ball by one fixed step and resolve what happened.

    The incoming ball is left untouched. On a point the scoring paddle's
    score is incremented; the ball is re-served towards the side that
    conceded unless the point wins the game, in which case it stays where
    it left the playfield.
    """
    moved = replace(ball, x=ball.x + ball.dx, y=ball.y + ball.dy)
    outcome = StepOutcome(ball=moved)

    bounce_off_walls(moved, playfield)

    if hits_left_paddle(moved, left):
        bounce_off_paddle(moved, left)
        outcome.paddle_hit = Side.LEFT
    if hits_right_paddle(moved, right):
        bounce_off_paddle(moved, right)
        outcome.paddle_hit = Side.RIGHT

    if moved.x < 0:
        scorer, serve_direction = right, -1
    elif moved.x + moved.size > playfield.width:
        scorer, serve_direction = left, 1
    else:
        return outcome

    scorer.score += 1
    outcome.scorer = scorer.side
    if scorer.score >= winning_score:
        outcome.game_over = True
        return outcome

    outcome.ball = serve_ball(moved, playfield, serve_direction, rng)
    return outcome
