"""Setup screen: player name entry, start trigger and winner notice."""

from __future__ import annotations

from dataclasses import dataclass, field
import pygame

from .utils import MAX_NAME_LENGTH, PANEL_COLOR, SHADOW_COLOR, TEXT_COLOR, YELLOW

START_ACTION = "start"


@dataclass(slots=True)
class NameField:
    """Single-line text input for a player name."""

    label: str
    text: str = ""
    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 260, 40))

    def insert(self, value: str) -> None:
        printable = "".join(ch for ch in value if ch.isprintable())
        self.text = (self.text + printable)[:MAX_NAME_LENGTH]

    def backspace(self) -> None:
        self.text = self.text[:-1]


class SetupScreen:
    """Overlay shown while no match is running.

    Feeds two name strings and a start trigger to the session and shows the
    last winner, if any.
    """

    def __init__(self, width: int, height: int, name1: str = "", name2: str = "") -> None:
        self.visible = True
        self.winner_message = ""
        self.fields = [NameField("Player 1 (mouse)", name1), NameField("Player 2 (arrows)", name2)]
        self.focus = 0

        center_x = width // 2
        top = height // 2 - 60
        for idx, name_field in enumerate(self.fields):
            name_field.rect.center = (center_x, top + idx * 70)
        self.start_button = pygame.Rect(0, 0, 160, 44)
        self.start_button.center = (center_x, top + 2 * 70)

    @property
    def names(self) -> tuple[str, str]:
        return (self.fields[0].text, self.fields[1].text)

    def show(self, winner: str | None = None) -> None:
        """Reveal the screen, optionally announcing a winner."""
        self.visible = True
        self.winner_message = f"{winner} wins!" if winner else ""

    def hide(self) -> None:
        self.visible = False

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """Process one pygame event; return START_ACTION when a match should begin."""
        if not self.visible:
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.start_button.collidepoint(event.pos):
                return START_ACTION
            for idx, name_field in enumerate(self.fields):
                if name_field.rect.collidepoint(event.pos):
                    self.focus = idx
            return None
        if event.type != pygame.KEYDOWN:
            return None

        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return START_ACTION
        if event.key == pygame.K_TAB:
            self.focus = (self.focus + 1) % len(self.fields)
        elif event.key == pygame.K_BACKSPACE:
            self.fields[self.focus].backspace()
        elif event.unicode:
            self.fields[self.focus].insert(event.unicode)
        return None

    def render(self, surface: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font) -> None:
        """Draw the setup overlay on top of the playfield."""
        if not self.visible:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        surface.blit(overlay, (0, 0))

        if self.winner_message:
            shadow = title_font.render(self.winner_message, True, SHADOW_COLOR)
            title = title_font.render(self.winner_message, True, YELLOW)
            x = surface.get_width() // 2 - title.get_width() // 2
            surface.blit(shadow, (x + 3, 123))
            surface.blit(title, (x, 120))

        for idx, name_field in enumerate(self.fields):
            label = body_font.render(name_field.label, True, TEXT_COLOR)
            surface.blit(label, (name_field.rect.x, name_field.rect.y - label.get_height() - 2))
            pygame.draw.rect(surface, PANEL_COLOR, name_field.rect, border_radius=4)
            border = YELLOW if idx == self.focus else TEXT_COLOR
            pygame.draw.rect(surface, border, name_field.rect, width=2, border_radius=4)
            text = body_font.render(name_field.text, True, TEXT_COLOR)
            surface.blit(text, (name_field.rect.x + 8, name_field.rect.centery - text.get_height() // 2))

        pygame.draw.rect(surface, YELLOW, self.start_button, border_radius=6)
        caption = body_font.render("Start", True, PANEL_COLOR)
        surface.blit(caption, caption.get_rect(center=self.start_button.center))
