"""Drawing the session onto a 2D surface."""

from __future__ import annotations

from typing import Literal, Protocol
import pygame

from .entities import Paddle
from .session import SessionSnapshot
from .utils import BG_COLOR, NET_COLOR, TEXT_COLOR, Color

Align = Literal["left", "center"]

NET_DASH = (6, 12)
NAME_FONT_SIZE = 32
SCORE_FONT_SIZE = 44
NAME_BASELINE = 40
SCORE_BASELINE = 75
FOOTER_FONT_SIZE = 16
FOOTER_MARGIN = 12


class Canvas(Protocol):
    """Drawing primitives the renderer relies on."""

    def clear(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None: ...

    def dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: Color,
        dash: tuple[int, int] = NET_DASH,
    ) -> None: ...

    def text(
        self,
        value: str,
        x: float,
        y: float,
        size: int,
        color: Color = TEXT_COLOR,
        bold: bool = False,
        align: Align = "center",
    ) -> None: ...


class Renderer:
    """Stateless drawing of a session snapshot."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def draw(self, snapshot: SessionSnapshot) -> None:
        width = snapshot.playfield.width
        height = snapshot.playfield.height

        self.canvas.clear()
        self.canvas.dashed_line((width / 2, 0), (width / 2, height), NET_COLOR, NET_DASH)
        self._draw_scoreboard(snapshot.left, width / 4)
        self._draw_scoreboard(snapshot.right, 3 * width / 4)

        for paddle in (snapshot.left, snapshot.right):
            self.canvas.fill_rect(paddle.x, paddle.y, paddle.width, paddle.height, paddle.color)

        ball = snapshot.ball
        cx, cy = ball.center
        self.canvas.fill_circle(cx, cy, ball.size / 2, ball.color)
        self.canvas.text(
            f"First to {snapshot.winning_score}",
            FOOTER_MARGIN,
            height - FOOTER_MARGIN,
            FOOTER_FONT_SIZE,
            NET_COLOR,
            align="left",
        )

    def _draw_scoreboard(self, paddle: Paddle, anchor_x: float) -> None:
        self.canvas.text(paddle.name, anchor_x, NAME_BASELINE, NAME_FONT_SIZE)
        self.canvas.text(str(paddle.score), anchor_x, SCORE_BASELINE, SCORE_FONT_SIZE, bold=True)


class PygameCanvas:
    """Canvas backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface, font_name: str = "arialblack") -> None:
        self.surface = surface
        self.font_name = font_name
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(self.font_name, size, bold=bold)
        return self._fonts[key]

    def clear(self) -> None:
        self.surface.fill(BG_COLOR)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(width), round(height)))

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.surface, color, (round(cx), round(cy)), round(radius))

    def dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: Color,
        dash: tuple[int, int] = NET_DASH,
    ) -> None:
        """Draw a straight line as alternating dash and gap segments."""
        x0, y0 = start
        x1, y1 = end
        length = ((x1 - x0) ** 2 + (y1 - y0) ** 2) ** 0.5
        if length == 0:
            return
        ux, uy = (x1 - x0) / length, (y1 - y0) / length
        on, off = dash
        travelled = 0.0
        while travelled < length:
            stop = min(travelled + on, length)
            pygame.draw.line(
                self.surface,
                color,
                (x0 + ux * travelled, y0 + uy * travelled),
                (x0 + ux * stop, y0 + uy * stop),
            )
            travelled = stop + off

    def text(
        self,
        value: str,
        x: float,
        y: float,
        size: int,
        color: Color = TEXT_COLOR,
        bold: bool = False,
        align: Align = "center",
    ) -> None:
        """Draw text with its baseline at y, anchored left or centered on x."""
        font = self._font(size, bold)
        image = font.render(value, True, color)
        top = round(y - font.get_ascent())
        if align == "center":
            rect = image.get_rect(midtop=(round(x), top))
        else:
            rect = image.get_rect(topleft=(round(x), top))
        self.surface.blit(image, rect)
