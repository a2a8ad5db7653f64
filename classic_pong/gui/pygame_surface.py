"""
PyGame implementation of the Surface protocol
"""

import pygame

from classic_pong.core.interfaces import Color
from classic_pong.core.interfaces import Font


class PygameSurface:
    """Adapts a pygame.Surface to the drawing calls of the render pass"""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._fonts: dict[Font, pygame.font.Font] = {}

    def _font(self, font: Font) -> pygame.font.Font:
        if font not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[font] = pygame.font.SysFont(font.name, font.size, bold=font.bold)
        return self._fonts[font]

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        if len(color) == 4:
            # Semi-transparent fill through an alpha surface
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(color)
            self.screen.blit(overlay, rect.topleft)
        else:
            pygame.draw.rect(self.screen, color, rect)

    def fill_oval(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.ellipse(self.screen, color, rect)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: int = 1
    ) -> None:
        pygame.draw.line(self.screen, color, (int(x1), int(y1)), (int(x2), int(y2)), width)

    def draw_text(self, text: str, x: float, y: float, font: Font, color: Color) -> None:
        """Draws text with its baseline at y"""
        pg_font = self._font(font)
        text_surface = pg_font.render(text, True, color)
        self.screen.blit(text_surface, (int(x), int(y) - pg_font.get_ascent()))

    def text_width(self, text: str, font: Font) -> int:
        return int(self._font(font).size(text)[0])
