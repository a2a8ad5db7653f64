"""
Classic Pong game: the Simulatable the loop runs
"""

from typing import Any

import numpy as np

from classic_pong.core.input import InputState
from classic_pong.core.interfaces import Surface
from classic_pong.core.match import Match
from classic_pong.core.render import MatchRenderer
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


class PongGame:
    """Two player Pong, owning its match and render pass"""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.config = config or game_config
        self.match = Match(self.config, rng=rng, seed=seed)
        self.renderer = MatchRenderer(
            self.config.WINDOW_WIDTH,
            self.config.WINDOW_HEIGHT,
            self.config.BACKGROUND_COLOR,
            self.config.FOREGROUND_COLOR,
            self.config.OVERLAY_ALPHA,
        )
        self.last_events: dict[str, Any] = {}

    def tick(self, input_state: InputState) -> None:
        self.last_events = self.match.update(input_state)

    def render(self, surface: Surface) -> None:
        self.renderer.draw(surface, self.match)
