"""Game session state machine and frame loop."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Protocol
import logging
import random

from .controls import InputMapper, KeyAction
from .entities import Ball, Paddle, Playfield, Side, create_paddles
from .physics import StepOutcome, advance_ball, random_direction, serve_ball
from .scheduler import FrameScheduler
from .scores import MemoryScoreStore, PlayerRecord, ScoreRecord
from .utils import DEFAULT_NAMES, MAX_NAME_LENGTH, SERVE_DELAY_MS, WIN_SCORE

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Coarse session states."""

    IDLE = auto()
    RUNNING = auto()
    ENDED = auto()


class ScoreStorage(Protocol):
    def load(self) -> ScoreRecord: ...

    def save(self, record: ScoreRecord) -> bool: ...


class FrameRenderer(Protocol):
    def draw(self, snapshot: "SessionSnapshot") -> None: ...


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only copy of everything a renderer needs."""

    phase: Phase
    playfield: Playfield
    left: Paddle
    right: Paddle
    ball: Ball
    winner: str | None
    winning_score: int = WIN_SCORE


class SessionListener:
    """Hooks for the surface around the session. All are no-ops by default."""

    def phase_changed(self, phase: Phase, winner: str | None) -> None:
        pass

    def paddle_hit(self, side: Side) -> None:
        pass

    def point_scored(self, side: Side, score: int) -> None:
        pass


def clean_name(raw: str | None, default: str) -> str:
    """Trim a typed player name, substituting the default when blank."""
    name = (raw or "").strip()[:MAX_NAME_LENGTH].strip()
    return name or default


class GameSession:
    """Owns both paddles and the ball, and drives them through the phases.

    Nothing moves unless the phase is RUNNING. Each frame callback schedules
    the next one, so exactly one frame is ever in flight and the loop stops
    by simply not rescheduling.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        store: ScoreStorage | None = None,
        renderer: FrameRenderer | None = None,
        listener: SessionListener | None = None,
        rng: random.Random | None = None,
        playfield: Playfield | None = None,
        winning_score: int = WIN_SCORE,
        serve_delay_ms: int = SERVE_DELAY_MS,
    ) -> None:
        self.scheduler = scheduler
        self.store = store if store is not None else MemoryScoreStore()
        self.renderer = renderer
        self.listener = listener or SessionListener()
        self.rng = rng or random.Random()
        self.playfield = playfield or Playfield()
        self.winning_score = winning_score
        self.serve_delay_ms = serve_delay_ms

        self.phase = Phase.IDLE
        self.winner: str | None = None
        self.frame_count = 0
        self.input = InputMapper()
        self.left, self.right = create_paddles(self.playfield)
        self.ball = Ball.centered(self.playfield)

        self._load_scores()
        self.render()

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.left, self.right)

    def paddle(self, side: Side) -> Paddle:
        return self.left if side is Side.LEFT else self.right

    def _load_scores(self) -> None:
        record = self.store.load()
        self.left.name, self.left.score = record.player1.name, record.player1.score
        self.right.name, self.right.score = record.player2.name, record.player2.score
        logger.info(
            "Loaded scores %s %d - %d %s",
            self.left.name,
            self.left.score,
            self.right.score,
            self.right.name,
        )

    def save_scores(self) -> bool:
        record = ScoreRecord(
            player1=PlayerRecord(self.left.name, self.left.score),
            player2=PlayerRecord(self.right.name, self.right.score),
        )
        return self.store.save(record)

    def start(self, name1: str | None, name2: str | None) -> bool:
        """Begin a new match; ignored while one is already running."""
        if self.phase is Phase.RUNNING:
            logger.warning("Start requested while a match is running; ignoring")
            return False

        self.left.name = clean_name(name1, DEFAULT_NAMES[0])
        self.right.name = clean_name(name2, DEFAULT_NAMES[1])
        for paddle in self.paddles:
            paddle.score = 0
            paddle.recenter(self.playfield)
        self.save_scores()

        self.winner = None
        self.frame_count = 0
        self.input.reset()
        self.input.accepting = True
        self.ball = serve_ball(self.ball, self.playfield, random_direction(self.rng), self.rng)
        self._set_phase(Phase.RUNNING)
        logger.info("Match started: %s vs %s", self.left.name, self.right.name)

        self.render()
        self.scheduler.request_next_frame(self.frame, self.serve_delay_ms)
        return True

    def frame(self) -> None:
        """Advance one frame: input, physics, scoring, render, reschedule."""
        if self.phase is not Phase.RUNNING:
            return
        self.frame_count += 1

        self.input.apply(self.left, self.right, self.playfield)
        outcome = advance_ball(
            self.ball,
            self.left,
            self.right,
            self.playfield,
            self.rng,
            self.winning_score,
        )
        self.ball = outcome.ball
        self._handle_outcome(outcome)
        self.render()

        if self.phase is Phase.RUNNING:
            self.scheduler.request_next_frame(self.frame)

    def _handle_outcome(self, outcome: StepOutcome) -> None:
        if outcome.paddle_hit is not None:
            self.listener.paddle_hit(outcome.paddle_hit)
        if outcome.scorer is None:
            return

        scorer = self.paddle(outcome.scorer)
        logger.info("%s scores (%d - %d)", scorer.name, self.left.score, self.right.score)
        self.save_scores()
        self.listener.point_scored(scorer.side, scorer.score)
        if outcome.game_over:
            self._end(scorer)

    def _end(self, winner: Paddle) -> None:
        self.winner = winner.name
        self.input.accepting = False
        self._set_phase(Phase.ENDED)
        logger.info("%s wins %d - %d", winner.name, self.left.score, self.right.score)

    def _set_phase(self, phase: Phase) -> None:
        self.phase = phase
        self.listener.phase_changed(phase, self.winner)

    def pointer_moved(self, pointer_y: float) -> None:
        self.input.pointer_moved(pointer_y)

    def key_pressed(self, action: KeyAction) -> None:
        self.input.key_pressed(action)

    def key_released(self, action: KeyAction) -> None:
        self.input.key_released(action)

    def snapshot(self) -> SessionSnapshot:
        """Copy the current state for drawing."""
        return SessionSnapshot(
            phase=self.phase,
            playfield=self.playfield,
            left=replace(self.left),
            right=replace(self.right),
            ball=replace(self.ball),
            winner=self.winner,
            winning_score=self.winning_score,
        )

    def render(self) -> None:
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())

