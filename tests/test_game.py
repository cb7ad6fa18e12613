from __future__ import annotations

import logging
import random
from pathlib import Path

import pygame

from paddleduel.logging_config import setup_logging
from paddleduel.session import Phase


def test_integration_start_and_play_frames(tmp_path: Path) -> None:
    from paddleduel.game import PaddleDuelGame

    game = PaddleDuelGame(root=Path.cwd(), data_dir=tmp_path, rng=random.Random(4))
    assert game.lobby.visible
    assert game.session.phase is Phase.IDLE

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, unicode="\r", mod=0))
    assert game._handle_events()
    assert game.session.phase is Phase.RUNNING
    assert not game.lobby.visible

    game.scheduler.run_due(10_000)
    game.scheduler.run_due(10_001)
    assert game.session.frame_count == 2
    assert (tmp_path / "pong-scores.json").exists()
    pygame.quit()


def test_integration_match_end_reveals_setup(tmp_path: Path) -> None:
    from paddleduel.game import PaddleDuelGame

    game = PaddleDuelGame(root=Path.cwd(), data_dir=tmp_path)
    game.session.start("Alice", "Bob")
    game.phase_changed(Phase.ENDED, "Bob")
    assert game.lobby.visible
    assert game.lobby.winner_message == "Bob wins!"
    pygame.quit()


def test_setup_logging_attaches_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "game.log"
    logger = setup_logging(logging.DEBUG, log_file)
    logging.getLogger("paddleduel.session").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
