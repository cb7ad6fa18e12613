"""Application shell: window, event pump, and wiring around the session."""

from __future__ import annotations

from pathlib import Path
import logging
import random
import pygame

from .audio import AudioManager
from .controls import key_bindings
from .entities import Playfield, Side
from .lobby import START_ACTION, SetupScreen
from .renderer import PygameCanvas, Renderer
from .scheduler import ClockFrameScheduler
from .scores import ScoreStore
from .session import GameSession, Phase, SessionListener
from .settings import GameSettings, SettingsManager
from .utils import (
    DATA_DIR,
    FPS,
    SCORES_FILE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SETTINGS_FILE,
    TEXT_COLOR,
    ensure_data_dirs,
)

logger = logging.getLogger(__name__)


class PaddleDuelGame(SessionListener):
    """Pygame front end: forwards input to the session and shows its frames."""

    def __init__(self, root: Path, data_dir: Path = DATA_DIR, rng: random.Random | None = None) -> None:
        pygame.init()
        pygame.font.init()
        ensure_data_dirs(data_dir)

        self.root = root
        self.settings_manager = SettingsManager(data_dir / SETTINGS_FILE.name)
        self.settings: GameSettings = self.settings_manager.settings

        flags = pygame.FULLSCREEN if self.settings.display.fullscreen else 0
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        pygame.display.set_caption("Paddle Duel")
        self.clock = pygame.time.Clock()

        self.title_font = pygame.font.SysFont("arialblack", 40, bold=True)
        self.body_font = pygame.font.SysFont("arial", 22, bold=True)
        self.small_font = pygame.font.SysFont("consolas", 16)

        self.audio = AudioManager(self.root, self.settings.sfx_volume)
        self.audio.load_assets()

        self.bindings = key_bindings(self.settings.controls.up, self.settings.controls.down)
        self.playfield_surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.scheduler = ClockFrameScheduler()
        self.session = GameSession(
            scheduler=self.scheduler,
            store=ScoreStore(data_dir / SCORES_FILE.name),
            renderer=Renderer(PygameCanvas(self.playfield_surface)),
            listener=self,
            rng=rng,
            playfield=Playfield(SCREEN_WIDTH, SCREEN_HEIGHT),
        )
        left, right = self.session.paddles
        self.lobby = SetupScreen(SCREEN_WIDTH, SCREEN_HEIGHT, left.name, right.name)

    def phase_changed(self, phase: Phase, winner: str | None) -> None:
        if phase is Phase.RUNNING:
            self.lobby.hide()
        elif phase is Phase.ENDED:
            self.audio.play("win")
            self.lobby.show(winner)

    def paddle_hit(self, side: Side) -> None:
        self.audio.play("hit")

    def point_scored(self, side: Side, score: int) -> None:
        self.audio.play("score")

    def run(self) -> None:
        """Main event/update/render loop."""
        running = True
        while running:
            self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break
            self.scheduler.run_due(pygame.time.get_ticks())
            self._present()

        logger.info("Shutting down")
        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE and self.lobby.visible:
                return False

            if self.lobby.handle_event(event) == START_ACTION:
                name1, name2 = self.lobby.names
                self.session.start(name1, name2)
                continue

            if event.type == pygame.KEYUP and event.key in self.bindings:
                self.session.key_released(self.bindings[event.key])
            elif self.lobby.visible:
                continue
            elif event.type == pygame.MOUSEMOTION:
                self.session.pointer_moved(event.pos[1])
            elif event.type == pygame.KEYDOWN and event.key in self.bindings:
                self.session.key_pressed(self.bindings[event.key])
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
                self.settings_manager.toggle_fps()
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_MINUS, pygame.K_EQUALS):
                delta = -0.1 if event.key == pygame.K_MINUS else 0.1
                self.audio.set_volume(self.settings_manager.adjust_volume(delta))
        return True

    def _present(self) -> None:
        self.screen.blit(self.playfield_surface, (0, 0))
        self.lobby.render(self.screen, self.title_font, self.body_font)
        if self.settings.display.show_fps:
            fps = self.small_font.render(f"{self.clock.get_fps():.0f} fps", True, TEXT_COLOR)
            self.screen.blit(fps, (8, SCREEN_HEIGHT - fps.get_height() - 6))
        pygame.display.flip()

