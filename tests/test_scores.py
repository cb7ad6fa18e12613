from __future__ import annotations

import json
from pathlib import Path

from paddleduel.scores import MemoryScoreStore, PlayerRecord, ScoreRecord, ScoreStore, parse_record


def test_round_trip_through_file(tmp_path: Path) -> None:
    store = ScoreStore(tmp_path / "pong-scores.json")
    assert store.save(ScoreRecord(PlayerRecord("Abe", 3), PlayerRecord("Zoe", 0)))

    loaded = ScoreStore(tmp_path / "pong-scores.json").load()
    assert loaded.player1 == PlayerRecord("Abe", 3)
    assert loaded.player2 == PlayerRecord("Zoe", 0)


def test_saved_file_has_expected_shape(tmp_path: Path) -> None:
    path = tmp_path / "pong-scores.json"
    ScoreStore(path).save(ScoreRecord(PlayerRecord("Abe", 3), PlayerRecord("Zoe", 2)))
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "player1": {"name": "Abe", "score": 3},
        "player2": {"name": "Zoe", "score": 2},
    }


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    record = ScoreStore(tmp_path / "absent.json").load()
    assert record.player1 == PlayerRecord("Player 1", 0)
    assert record.player2 == PlayerRecord("Player 2", 0)


def test_corrupt_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "pong-scores.json"
    path.write_text("{not json", encoding="utf-8")
    record = ScoreStore(path).load()
    assert record == ScoreRecord.defaults()


def test_deeply_nested_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "pong-scores.json"
    path.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")
    assert ScoreStore(path).load() == ScoreRecord.defaults()


def test_malformed_fields_default_individually() -> None:
    record = parse_record(
        {
            "player1": {"name": "", "score": -2},
            "player2": {"name": "Zoe", "score": "four"},
        }
    )
    assert record.player1 == PlayerRecord("Player 1", 0)
    assert record.player2 == PlayerRecord("Zoe", 0)


def test_wrong_top_level_shapes_give_defaults() -> None:
    assert parse_record([1, 2]) == ScoreRecord.defaults()
    assert parse_record({"player1": "Abe"}) == ScoreRecord.defaults()
    assert parse_record({"player1": {"name": "Abe", "score": True}}).player1 == PlayerRecord("Abe", 0)


def test_failed_write_is_reported_not_raised(tmp_path: Path) -> None:
    # A directory cannot be opened for writing.
    store = ScoreStore(tmp_path)
    assert store.save(ScoreRecord.defaults()) is False


def test_memory_store_keeps_a_copy() -> None:
    store = MemoryScoreStore()
    record = ScoreRecord(PlayerRecord("Abe", 3), PlayerRecord("Zoe", 1))
    store.save(record)
    record.player1.score = 4
    assert store.load().player1 == PlayerRecord("Abe", 3)
    assert store.saves == 1
