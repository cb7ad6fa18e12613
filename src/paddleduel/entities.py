"""Paddle, ball and playfield state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .utils import (
    BALL_SIZE,
    BALL_SPEED,
    CYAN,
    DEFAULT_NAMES,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    YELLOW,
    Color,
    clamp,
)


class Side(str, Enum):
    """Which end of the playfield a paddle defends."""

    LEFT = "left"
    RIGHT = "right"


class ControlMode(str, Enum):
    """Input device driving a paddle."""

    POINTER = "pointer"
    KEYBOARD = "keyboard"


@dataclass(frozen=True, slots=True)
class Playfield:
    """Fixed drawing area dimensions."""

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT


@dataclass(slots=True)
class Paddle:
    """State for one player's paddle."""

    side: Side
    x: float
    y: float
    name: str
    control_mode: ControlMode
    color: Color
    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    score: int = 0

    def max_y(self, playfield: Playfield) -> float:
        """Return the lowest legal top edge inside the playfield."""
        return playfield.height - self.height

    def move_to(self, y: float, playfield: Playfield) -> None:
        """Place the paddle's top edge at y, clamped to the playfield."""
        self.y = clamp(y, 0, self.max_y(playfield))

    def move_by(self, delta: float, playfield: Playfield) -> None:
        """Shift the paddle vertically, clamped to the playfield."""
        self.move_to(self.y + delta, playfield)

    def recenter(self, playfield: Playfield) -> None:
        self.move_to(playfield.height / 2 - self.height / 2, playfield)


@dataclass(slots=True)
class Ball:
    """Ball position (top-left corner), size and velocity."""

    x: float
    y: float
    size: float = BALL_SIZE
    speed: float = BALL_SPEED
    dx: float = BALL_SPEED
    dy: float = BALL_SPEED / 2
    color: Color = field(default=WHITE)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.size / 2, self.y + self.size / 2)

    @classmethod
    def centered(cls, playfield: Playfield, size: float = BALL_SIZE, speed: float = BALL_SPEED) -> "Ball":
        """Create a ball resting at the exact playfield center."""
        return cls(
            x=playfield.width / 2 - size / 2,
            y=playfield.height / 2 - size / 2,
            size=size,
            speed=speed,
            dx=speed,
            dy=speed / 2,
        )


def create_paddles(playfield: Playfield) -> tuple[Paddle, Paddle]:
    """Build the pointer-driven left paddle and keyboard-driven right paddle."""
    left = Paddle(
        side=Side.LEFT,
        x=0,
        y=0,
        name=DEFAULT_NAMES[0],
        control_mode=ControlMode.POINTER,
        color=CYAN,
    )
    right = Paddle(
        side=Side.RIGHT,
        x=playfield.width - PADDLE_WIDTH,
        y=0,
        name=DEFAULT_NAMES[1],
        control_mode=ControlMode.KEYBOARD,
        color=YELLOW,
    )
    left.recenter(playfield)
    right.recenter(playfield)
    return left, right
