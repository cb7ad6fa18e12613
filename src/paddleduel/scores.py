"""Persistence of the two players' names and scores."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import logging

from .utils import DEFAULT_NAMES, SCORES_FILE, load_json, save_json

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayerRecord:
    """Persisted name and score for one player."""

    name: str
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "score": self.score}


@dataclass(slots=True)
class ScoreRecord:
    """The single stored record holding both players."""

    player1: PlayerRecord
    player2: PlayerRecord

    @classmethod
    def defaults(cls) -> "ScoreRecord":
        return cls(PlayerRecord(DEFAULT_NAMES[0]), PlayerRecord(DEFAULT_NAMES[1]))

    def to_dict(self) -> dict[str, Any]:
        return {"player1": self.player1.to_dict(), "player2": self.player2.to_dict()}


def parse_record(raw: Any) -> ScoreRecord:
    """Build a record from decoded JSON, defaulting every malformed field."""
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Ignoring stored scores of unexpected type %s", type(raw).__name__)
        return ScoreRecord.defaults()
    return ScoreRecord(
        player1=_parse_player(raw.get("player1"), DEFAULT_NAMES[0]),
        player2=_parse_player(raw.get("player2"), DEFAULT_NAMES[1]),
    )


def _parse_player(payload: Any, default_name: str) -> PlayerRecord:
    if not isinstance(payload, dict):
        return PlayerRecord(default_name)

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        name = default_name

    score = payload.get("score")
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        if score is not None:
            logger.warning("Ignoring invalid stored score %r for %s", score, name)
        score = 0
    return PlayerRecord(name.strip(), score)


class ScoreStore:
    """Reads and writes the score record as a JSON file."""

    def __init__(self, path: Path = SCORES_FILE) -> None:
        self.path = path

    def load(self) -> ScoreRecord:
        """Load the stored record, falling back to defaults silently."""
        raw = load_json(self.path, None)
        record = parse_record(raw)
        logger.debug("Loaded scores from %s: %s", self.path, record)
        return record

    def save(self, record: ScoreRecord) -> bool:
        """Persist the record; return False if the write failed."""
        try:
            save_json(self.path, record.to_dict())
        except OSError as exc:
            logger.warning("Could not save scores to '%s': %s", self.path, exc)
            return False
        return True


class MemoryScoreStore:
    """Score store kept in memory, for headless sessions."""

    def __init__(self, record: ScoreRecord | None = None) -> None:
        self.record = record or ScoreRecord.defaults()
        self.saves = 0

    def load(self) -> ScoreRecord:
        return parse_record(self.record.to_dict())

    def save(self, record: ScoreRecord) -> bool:
        self.record = parse_record(record.to_dict())
        self.saves += 1
        return True
