"""
Surface protocol - immediate-mode drawing target for the render pass
"""

from dataclasses import dataclass
from typing import Protocol

Color = tuple[int, ...]  # RGB or RGBA


@dataclass(frozen=True)
class Font:
    """Font request; backends pick the closest match they have"""

    name: str = "arial"
    size: int = 16
    bold: bool = False


class Surface(Protocol):
    """
    Protocol for drawing surfaces.

    Enables multiple rendering backends: Pygame, headless recorders for
    tests, etc. All calls draw synchronously into the current frame.
    """

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill an axis-aligned rectangle. A 4-component color is alpha blended."""
        ...

    def fill_oval(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill the ellipse inscribed in the given rectangle"""
        ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: int = 1
    ) -> None:
        """Draw a straight line segment"""
        ...

    def draw_text(self, text: str, x: float, y: float, font: Font, color: Color) -> None:
        """Draw text with its baseline-left corner at (x, y)"""
        ...

    def text_width(self, text: str, font: Font) -> int:
        """Width in pixels of text rendered with font"""
        ...
