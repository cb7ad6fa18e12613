"""Shared constants and utility helpers for Paddle Duel."""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import math

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 500
FPS = 60

PADDLE_WIDTH = 12
PADDLE_HEIGHT = 100
BALL_SIZE = 16
BALL_SPEED = 6.0
KEYBOARD_STEP = 7
WIN_SCORE = 5
MAX_BOUNCE_ANGLE = math.pi / 4
SERVE_DELAY_MS = 300

DEFAULT_NAMES = ("Player 1", "Player 2")
MAX_NAME_LENGTH = 16

BG_COLOR = (16, 18, 28)
NET_COLOR = (170, 170, 170)
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (15, 24, 45)
PANEL_COLOR = (28, 32, 48)
CYAN = (0, 234, 255)
YELLOW = (253, 201, 0)
WHITE = (255, 255, 255)

Color = tuple[int, int, int]

DATA_DIR = Path(".paddleduel")
SETTINGS_FILE = DATA_DIR / "settings.json"
SCORES_KEY = "pong-scores"
SCORES_FILE = DATA_DIR / f"{SCORES_KEY}.json"


def ensure_data_dirs(data_dir: Path = DATA_DIR) -> None:
    """Create the data directory for save files."""
    data_dir.mkdir(parents=True, exist_ok=True)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (ValueError, RecursionError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
