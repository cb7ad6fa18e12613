"""Sound effect loading and playback."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

logger = logging.getLogger(__name__)

SOUND_NAMES = ("hit", "score", "win")


class AudioManager:
    """Plays paddle, point and match sounds; silent when assets or device are absent."""

    def __init__(self, root: Path, volume: float = 0.8) -> None:
        self.root = root
        self.volume = volume
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.info("Audio disabled: %s", exc)
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Load whichever effect files exist under assets/sounds."""
        if not self.sound_enabled:
            return
        for key in SOUND_NAMES:
            path = self.root / "assets" / "sounds" / f"{key}.wav"
            if not path.exists():
                continue
            try:
                sound = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning("Could not load sound '%s': %s", path, exc)
                continue
            sound.set_volume(self.volume)
            self.sounds[key] = sound

    def set_volume(self, volume: float) -> None:
        self.volume = volume
        for sound in self.sounds.values():
            sound.set_volume(volume)

    def play(self, key: str) -> None:
        """Play a named sound effect."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()
