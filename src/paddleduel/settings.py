"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
import logging
import pygame

from .utils import SETTINGS_FILE, clamp, load_json, save_json

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    fullscreen: bool = False
    show_fps: bool = False


@dataclass(slots=True)
class ControlScheme:
    """Key bindings for the keyboard-driven paddle."""

    up: int = pygame.K_UP
    down: int = pygame.K_DOWN


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    sfx_volume: float = 0.8
    display: DisplaySettings = field(default_factory=DisplaySettings)
    controls: ControlScheme = field(default_factory=ControlScheme)


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        settings = GameSettings()
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            return settings

        try:
            settings.sfx_volume = clamp(float(raw.get("sfx_volume", settings.sfx_volume)), 0.0, 1.0)
        except (TypeError, ValueError):
            logger.warning("Invalid sfx_volume %r, using default", raw.get("sfx_volume"))

        display = raw.get("display", {})
        if isinstance(display, dict):
            settings.display.fullscreen = bool(display.get("fullscreen", settings.display.fullscreen))
            settings.display.show_fps = bool(display.get("show_fps", settings.display.show_fps))

        controls = raw.get("controls", {})
        if isinstance(controls, dict):
            settings.controls = self._load_controls(controls, settings.controls)
        return settings

    @staticmethod
    def _load_controls(payload: dict[str, int], defaults: ControlScheme) -> ControlScheme:
        try:
            return ControlScheme(
                up=int(payload.get("up", defaults.up)),
                down=int(payload.get("down", defaults.down)),
            )
        except (TypeError, ValueError):
            logger.warning("Invalid key bindings %r, using defaults", payload)
            return defaults

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))

    def adjust_volume(self, delta: float) -> float:
        """Adjust the effects volume, save, and return the new value."""
        self.settings.sfx_volume = clamp(self.settings.sfx_volume + delta, 0.0, 1.0)
        self.save()
        return self.settings.sfx_volume

    def toggle_fps(self) -> bool:
        self.settings.display.show_fps = not self.settings.display.show_fps
        self.save()
        return self.settings.display.show_fps
