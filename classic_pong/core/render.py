"""
Render pass for Classic Pong: draws a match onto any Surface
"""

import logging
from collections.abc import Callable
from typing import Any

from classic_pong.core.interfaces import Color
from classic_pong.core.interfaces import Font
from classic_pong.core.interfaces import Surface
from classic_pong.core.match import Match

logger = logging.getLogger(__name__)

SCORE_FONT = Font("arial", 48, bold=True)
HINT_FONT = Font("arial", 16)
WINNER_FONT = Font("arial", 72, bold=True)
RESTART_FONT = Font("arial", 24)

DASH_LENGTH = 10
DASH_GAP = 10


class MatchRenderer:
    """Draws HUD, entities and overlays for a match"""

    def __init__(
        self,
        width: int,
        height: int,
        background: Color,
        foreground: Color,
        overlay_alpha: int = 180,
    ):
        self.width = width
        self.height = height
        self.background = background
        self.foreground = foreground
        self.overlay_alpha = overlay_alpha
        self.skipped_calls = 0

    def _safe(self, draw_call: Callable[..., Any], *args: Any) -> Any:
        """Runs a surface call, logging and skipping it if the backend fails"""
        try:
            return draw_call(*args)
        except Exception as e:
            self.skipped_calls += 1
            logger.warning("Skipping %s: %s", getattr(draw_call, "__name__", draw_call), e)
            return None

    def _centered_x(self, surface: Surface, text: str, font: Font, center_x: float) -> float:
        text_width = self._safe(surface.text_width, text, font) or 0
        return center_x - text_width / 2

    def draw(self, surface: Surface, match: Match) -> None:
        """Draws one full frame"""
        self._safe(surface.fill_rect, 0, 0, self.width, self.height, self.background)
        self.draw_center_line(surface)
        self.draw_entities(surface, match)
        self.draw_scores(surface, match.left_score, match.right_score)
        self.draw_controls(surface)
        if match.is_game_over():
            self.draw_game_over(surface, match.winner_label)

    def draw_center_line(self, surface: Surface) -> None:
        """Dashed line splitting the field"""
        center_x = self.width // 2
        y = 0
        while y < self.height:
            end_y = min(y + DASH_LENGTH, self.height)
            self._safe(surface.draw_line, center_x, y, center_x, end_y, self.foreground, 2)
            y += DASH_LENGTH + DASH_GAP

    def draw_entities(self, surface: Surface, match: Match) -> None:
        for paddle in (match.left_paddle, match.right_paddle):
            self._safe(surface.fill_rect, *paddle.rect, self.foreground)
        self._safe(surface.fill_oval, *match.ball.rect, self.foreground)

    def draw_scores(self, surface: Surface, left_score: int, right_score: int) -> None:
        for score, center_x in ((left_score, self.width / 4), (right_score, 3 * self.width / 4)):
            text = str(score)
            x = self._centered_x(surface, text, SCORE_FONT, center_x)
            self._safe(surface.draw_text, text, x, 80, SCORE_FONT, self.foreground)

    def draw_controls(self, surface: Surface) -> None:
        y = self.height - 60
        self._safe(surface.draw_text, "Player 1: W/S", 20, y, HINT_FONT, self.foreground)
        self._safe(
            surface.draw_text, "Player 2: ↑/↓", self.width - 120, y, HINT_FONT, self.foreground
        )

    def draw_game_over(self, surface: Surface, winner_label: str) -> None:
        """Translucent overlay with the winner and restart instructions"""
        overlay = (*self.background[:3], self.overlay_alpha)
        self._safe(surface.fill_rect, 0, 0, self.width, self.height, overlay)

        x = self._centered_x(surface, winner_label, WINNER_FONT, self.width / 2)
        self._safe(
            surface.draw_text, winner_label, x, self.height / 2 - 50, WINNER_FONT, self.foreground
        )

        restart_text = "Press R to restart"
        x = self._centered_x(surface, restart_text, RESTART_FONT, self.width / 2)
        self._safe(
            surface.draw_text, restart_text, x, self.height / 2 + 30, RESTART_FONT, self.foreground
        )
