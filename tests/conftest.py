"""
Shared test doubles for Classic Pong tests
"""

import os

import numpy as np
import pytest

from classic_pong.core.interfaces import Font
from classic_pong.utils.config import GameConfig

# Headless pygame for the GUI tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeClock:
    """Clock whose time only moves when told to (or when slept on)"""

    def __init__(self, start: float = 0.0):
        self.time = start
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self.time

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.time += seconds

    def advance(self, seconds: float) -> None:
        self.time += seconds


class RecordingSurface:
    """Surface that records every draw call instead of drawing"""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def fill_rect(self, x, y, width, height, color) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_oval(self, x, y, width, height, color) -> None:
        self.calls.append(("fill_oval", x, y, width, height, color))

    def draw_line(self, x1, y1, x2, y2, color, width=1) -> None:
        self.calls.append(("draw_line", x1, y1, x2, y2, color, width))

    def draw_text(self, text, x, y, font, color) -> None:
        self.calls.append(("draw_text", text, x, y, font, color))

    def text_width(self, text: str, font: Font) -> int:
        return 10 * len(text)

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def texts(self) -> list[str]:
        return [call[1] for call in self.named("draw_text")]


@pytest.fixture
def config() -> GameConfig:
    """Default configuration (1200x800 window, 60 ticks per second)"""
    return GameConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
