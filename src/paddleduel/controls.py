"""Pointer and keyboard input mapping for the two paddles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

from .entities import Paddle, Playfield
from .utils import KEYBOARD_STEP


class KeyAction(str, Enum):
    """Keyboard paddle movement actions."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class KeyEdge:
    """A key press or release waiting to be applied on the next frame."""

    action: KeyAction
    pressed: bool


class InputMapper:
    """Queues raw input and applies it to the paddles once per frame.

    Event handlers only record input; paddle motion happens in :meth:`apply`,
    which the session calls from inside its frame step. Pointer samples
    overwrite one another, key edges are queued in order and never dropped.
    """

    def __init__(self, step: float = KEYBOARD_STEP) -> None:
        self.step = step
        self.accepting = False
        self.up_held = False
        self.down_held = False
        self._pointer_target: float | None = None
        self._edges: deque[KeyEdge] = deque()

    def pointer_moved(self, pointer_y: float) -> None:
        """Record a pointer position in playfield coordinates."""
        if not self.accepting:
            return
        self._pointer_target = pointer_y

    def key_pressed(self, action: KeyAction) -> None:
        if not self.accepting:
            return
        self._edges.append(KeyEdge(action, pressed=True))

    def key_released(self, action: KeyAction) -> None:
        # Releases are always queued so a latch cannot stay stuck across phases.
        self._edges.append(KeyEdge(action, pressed=False))

    def reset(self) -> None:
        """Drop queued input and release both latches."""
        self._pointer_target = None
        self._edges.clear()
        self.up_held = False
        self.down_held = False

    @property
    def pending(self) -> int:
        return len(self._edges) + (self._pointer_target is not None)

    def apply(self, pointer_paddle: Paddle, keyboard_paddle: Paddle, playfield: Playfield) -> None:
        """Drain queued input, then move both paddles for this frame."""
        while self._edges:
            edge = self._edges.popleft()
            self._set_latch(edge.action, edge.pressed)

        target, self._pointer_target = self._pointer_target, None
        if target is not None:
            pointer_paddle.move_to(target - pointer_paddle.height / 2, playfield)

        # Both latches apply independently: holding up and down cancels out.
        delta = 0.0
        if self.up_held:
            delta -= self.step
        if self.down_held:
            delta += self.step
        keyboard_paddle.move_by(delta, playfield)

    def _set_latch(self, action: KeyAction, held: bool) -> None:
        if action is KeyAction.UP:
            self.up_held = held
        elif action is KeyAction.DOWN:
            self.down_held = held


def key_bindings(up_key: int, down_key: int) -> dict[int, KeyAction]:
    """Map configured key codes to keyboard paddle actions."""
    return {up_key: KeyAction.UP, down_key: KeyAction.DOWN}
