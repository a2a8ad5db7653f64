"""
Match state machine for Classic Pong: scoring, win detection and restart
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from classic_pong.core.collision import CollisionDetector
from classic_pong.core.collision import PaddleSide
from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.input import InputState
from classic_pong.core.input import Key
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class MatchPhase(Enum):
    """Coarse match lifecycle state"""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Controls:
    """Keys driving one paddle"""

    up: Key
    down: Key


LEFT_CONTROLS = Controls(up=Key.W, down=Key.S)
RIGHT_CONTROLS = Controls(up=Key.UP, down=Key.DOWN)
RESTART_KEY = Key.R

WINNER_LABELS = {
    PaddleSide.LEFT: "Player 1 Wins!",
    PaddleSide.RIGHT: "Player 2 Wins!",
}


class Match:
    """Two player match owning both paddles and the ball"""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.config = config or game_config
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.collision_detector = CollisionDetector(
            self.config.WINDOW_HEIGHT, self.config.SPIN_STRENGTH
        )

        self.left_score = 0
        self.right_score = 0
        self.phase = MatchPhase.PLAYING
        self.winner: PaddleSide | None = None
        self.ticks_played = 0

        self.reset_layout()

    @property
    def width(self) -> int:
        return self.config.WINDOW_WIDTH

    @property
    def height(self) -> int:
        return self.config.WINDOW_HEIGHT

    @property
    def winner_label(self) -> str:
        """Winner message; empty unless the game is over"""
        if self.winner is None:
            return ""
        return WINNER_LABELS[self.winner]

    @property
    def score(self) -> tuple[int, int]:
        return (self.left_score, self.right_score)

    def is_game_over(self) -> bool:
        return self.phase is MatchPhase.GAME_OVER

    def reset_layout(self) -> None:
        """Places both paddles and the ball at their starting positions"""
        config = self.config
        paddle_y = self.height // 2 - config.PADDLE_HEIGHT // 2
        self.left_paddle = Paddle.from_config(config.PADDLE_MARGIN, paddle_y, config)
        self.right_paddle = Paddle.from_config(
            self.width - config.PADDLE_MARGIN - config.PADDLE_WIDTH, paddle_y, config
        )

        # The opening serve goes to the left player
        ball_x, ball_y = config.serve_position
        self.ball = Ball(ball_x, ball_y, direction=-1, config=config, rng=self.rng)

    def restart(self) -> None:
        """Resets scores and layout and starts a new game"""
        self.left_score = 0
        self.right_score = 0
        self.phase = MatchPhase.PLAYING
        self.winner = None
        self.reset_layout()
        logger.debug("Match restarted")

    def update(self, input_state: InputState) -> dict[str, Any]:
        """
        Advances the match by one tick

        Args:
            input_state: Keyboard state sampled for this tick

        Returns:
            Dictionary with the events that occurred during the tick:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "goals": [...],
                "game_over": bool,
                "restarted": bool,
            }
        """
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "game_over": False,
            "restarted": False,
        }

        if self.phase is MatchPhase.GAME_OVER:
            if input_state.was_typed(RESTART_KEY):
                self.restart()
                events["restarted"] = True
            return events

        self.ticks_played += 1
        self._apply_input(self.left_paddle, LEFT_CONTROLS, input_state)
        self._apply_input(self.right_paddle, RIGHT_CONTROLS, input_state)

        self.left_paddle.clamp_to_bounds(0, self.height)
        self.right_paddle.clamp_to_bounds(0, self.height)

        self.ball.advance()

        wall = self.collision_detector.check_ball_walls(self.ball)
        if wall != "none":
            events["wall_bounces"].append(wall)

        # Both paddles are checked every tick, left first
        for side, paddle in (
            (PaddleSide.LEFT, self.left_paddle),
            (PaddleSide.RIGHT, self.right_paddle),
        ):
            if self.collision_detector.check_ball_paddle(self.ball, paddle, side):
                events["paddle_hits"].append({"side": side.value})
                logger.debug("Ball hit %s paddle at tick %d", side.value, self.ticks_played)

        scorer = self._resolve_scoring()
        if scorer is not None:
            events["goals"].append({"side": scorer.value, "score": self.score})
            if self._check_game_over(scorer):
                events["game_over"] = True

        return events

    @staticmethod
    def _apply_input(paddle: Paddle, controls: Controls, input_state: InputState) -> None:
        if input_state.is_pressed(controls.up):
            paddle.move_up()
        if input_state.is_pressed(controls.down):
            paddle.move_down()

    def _resolve_scoring(self) -> PaddleSide | None:
        """Awards a point when the ball leaves the field and serves again"""
        if self.ball.position.x < -self.ball.size:
            scorer = PaddleSide.RIGHT
            self.right_score += 1
        elif self.ball.position.x > self.width:
            scorer = PaddleSide.LEFT
            self.left_score += 1
        else:
            return None

        # Serve toward the player who lost the point
        direction = -1 if scorer is PaddleSide.RIGHT else 1
        self.ball.reset_for_rally(*self.config.serve_position, direction)
        logger.info("%s player scores (%d - %d)", scorer.value.capitalize(), *self.score)
        return scorer

    def _check_game_over(self, scorer: PaddleSide) -> bool:
        score = self.left_score if scorer is PaddleSide.LEFT else self.right_score
        if score < self.config.WINNING_SCORE:
            return False

        self.phase = MatchPhase.GAME_OVER
        self.winner = scorer
        logger.info("Game over: %s (%d - %d)", self.winner_label, *self.score)
        return True
