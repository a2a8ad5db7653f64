"""
Unit tests for the match state machine

Tests match behaviour including:
- Starting layout and input handling
- Scoring and serve direction
- Game over and restart transitions
- Per-tick invariants over long random games
"""

import numpy as np
import pytest

from classic_pong.core.collision import PaddleSide
from classic_pong.core.entities import Paddle, Vector2D
from classic_pong.core.input import InputState, Key
from classic_pong.core.match import Match, MatchPhase
from classic_pong.utils.config import GameConfig

NO_INPUT = InputState()


def force_point(match: Match, side: PaddleSide) -> dict:
    """Puts the ball just past a goal line and runs one tick"""
    if side is PaddleSide.RIGHT:
        match.ball.position = Vector2D(-20, 300)
        match.ball.velocity = Vector2D(-4.0, 0.0)
    else:
        match.ball.position = Vector2D(match.width + 10, 300)
        match.ball.velocity = Vector2D(4.0, 0.0)
    return match.update(NO_INPUT)


class TestMatchSetup:
    """Test the fresh-game layout"""

    def test_initial_state(self, config):
        match = Match(config, seed=1)

        assert match.score == (0, 0)
        assert match.phase is MatchPhase.PLAYING
        assert match.winner is None
        assert match.winner_label == ""

    def test_initial_layout(self, config):
        match = Match(config, seed=1)

        assert match.left_paddle.position.to_tuple() == (30, 360)
        assert match.right_paddle.position.to_tuple() == (1155, 360)
        assert match.ball.position.to_tuple() == (592, 392)
        assert match.ball.velocity.x == -config.BALL_BASE_SPEED


class TestInput:
    """Test that each paddle reads only its own keys"""

    def test_left_paddle_keys(self, config):
        match = Match(config, seed=1)
        match.update(InputState.of(Key.W))
        assert match.left_paddle.position.y == 355
        assert match.right_paddle.position.y == 360

        match.update(InputState.of(Key.S))
        assert match.left_paddle.position.y == 360

    def test_right_paddle_keys(self, config):
        match = Match(config, seed=1)
        match.update(InputState.of(Key.DOWN))
        assert match.right_paddle.position.y == 365
        assert match.left_paddle.position.y == 360

        match.update(InputState.of(Key.UP, Key.UP))
        assert match.right_paddle.position.y == 360

    def test_both_paddles_move_together(self, config):
        match = Match(config, seed=1)
        match.update(InputState.of(Key.W, Key.DOWN))
        assert match.left_paddle.position.y == 355
        assert match.right_paddle.position.y == 365

    def test_paddle_clamped_at_top(self, config):
        match = Match(config, seed=1)
        for _ in range(200):
            match.update(InputState.of(Key.W))
        assert match.left_paddle.position.y == 0

    def test_paddle_clamped_at_bottom(self, config):
        match = Match(config, seed=1)
        for _ in range(200):
            match.update(InputState.of(Key.DOWN))
        assert match.right_paddle.position.y == config.WINDOW_HEIGHT - config.PADDLE_HEIGHT


class TestScoring:
    """Test goals, serve position and serve direction"""

    def test_right_player_scores(self, config):
        """Ball past the left edge gives the right player a point"""
        match = Match(config, seed=1)
        events = force_point(match, PaddleSide.RIGHT)

        assert match.score == (0, 1)
        assert events["goals"] == [{"side": "right", "score": (0, 1)}]
        # Centred and snapped to whole pixels
        assert match.ball.position.to_tuple() == (592, 392)
        # Served toward the left player, who lost the point
        assert match.ball.velocity.x == -config.BALL_BASE_SPEED

    def test_left_player_scores(self, config):
        """Ball past the right edge gives the left player a point"""
        match = Match(config, seed=1)
        events = force_point(match, PaddleSide.LEFT)

        assert match.score == (1, 0)
        assert events["goals"] == [{"side": "left", "score": (1, 0)}]
        assert match.ball.position.to_tuple() == (592, 392)
        assert match.ball.velocity.x == config.BALL_BASE_SPEED

    def test_ball_at_edge_is_not_a_goal(self, config):
        """The left goal line is one ball width past the edge"""
        match = Match(config, seed=1)
        match.ball.position = Vector2D(-10, 100)
        match.ball.velocity = Vector2D(-4.0, 0.0)
        events = match.update(NO_INPUT)

        assert events["goals"] == []
        assert match.score == (0, 0)

    def test_scoring_does_not_move_paddles(self, config):
        match = Match(config, seed=1)
        match.update(InputState.of(Key.W))
        force_point(match, PaddleSide.LEFT)
        assert match.left_paddle.position.y == 355


class TestPaddleHits:
    """Test paddle collisions during a tick"""

    def test_left_paddle_returns_ball(self, config):
        match = Match(config, seed=1)
        match.ball.position = Vector2D(48, 392.5)
        match.ball.velocity = Vector2D(-4.0, 0.0)
        events = match.update(NO_INPUT)

        assert events["paddle_hits"] == [{"side": "left"}]
        assert match.ball.velocity.x > 0
        assert match.ball.position.x == 46

    def test_both_paddles_may_hit_in_one_tick(self, config):
        """Degenerate overlap: both paddles apply, left first"""
        match = Match(config, seed=1)
        match.left_paddle = Paddle(100, 360, width=15, height=80, speed=5)
        match.right_paddle = Paddle(100, 360, width=40, height=80, speed=5)
        match.ball.position = Vector2D(105, 392.5)
        match.ball.velocity = Vector2D(-4.0, 0.0)

        events = match.update(NO_INPUT)

        assert events["paddle_hits"] == [{"side": "left"}, {"side": "right"}]
        assert match.ball.velocity.x < 0
        assert match.ball.position.x == 100 - config.BALL_SIZE - 1


class TestGameOver:
    """Test win detection and restart"""

    @pytest.fixture
    def short_config(self) -> GameConfig:
        return GameConfig(WINNING_SCORE=2)

    def test_game_over_at_winning_score(self, short_config):
        match = Match(short_config, seed=1)

        events = force_point(match, PaddleSide.RIGHT)
        assert not events["game_over"]
        assert match.phase is MatchPhase.PLAYING

        events = force_point(match, PaddleSide.RIGHT)
        assert events["game_over"]
        assert match.phase is MatchPhase.GAME_OVER
        assert match.winner is PaddleSide.RIGHT
        assert match.winner_label == "Player 2 Wins!"

    def test_left_winner_label(self, short_config):
        match = Match(short_config, seed=1)
        force_point(match, PaddleSide.LEFT)
        force_point(match, PaddleSide.LEFT)
        assert match.winner_label == "Player 1 Wins!"

    def test_no_simulation_after_game_over(self, short_config):
        match = Match(short_config, seed=1)
        force_point(match, PaddleSide.RIGHT)
        force_point(match, PaddleSide.RIGHT)

        ball_position = match.ball.position.to_tuple()
        paddle_y = match.left_paddle.position.y
        ticks = match.ticks_played
        for _ in range(10):
            events = match.update(InputState.of(Key.W))
            assert events["goals"] == [] and events["paddle_hits"] == []

        assert match.ball.position.to_tuple() == ball_position
        assert match.left_paddle.position.y == paddle_y
        assert match.ticks_played == ticks
        assert match.score == (0, 2)

    def test_restart(self, short_config):
        """Restart resets scores, phase and the fresh-game layout"""
        match = Match(short_config, seed=1)
        match.update(InputState.of(Key.W, Key.DOWN))
        force_point(match, PaddleSide.LEFT)
        force_point(match, PaddleSide.LEFT)

        events = match.update(InputState.of(typed=(Key.R,)))

        fresh = Match(short_config, seed=2)
        assert events["restarted"]
        assert match.score == (0, 0)
        assert match.phase is MatchPhase.PLAYING
        assert match.winner is None
        assert match.left_paddle.position == fresh.left_paddle.position
        assert match.right_paddle.position == fresh.right_paddle.position
        assert match.ball.position == fresh.ball.position
        assert match.ball.velocity.x == fresh.ball.velocity.x

    def test_restart_key_ignored_while_playing(self, config):
        match = Match(config, seed=1)
        force_point(match, PaddleSide.LEFT)
        events = match.update(InputState.of(typed=(Key.R,)))

        assert not events["restarted"]
        assert match.score == (1, 0)

    def test_held_restart_key_does_not_restart(self, short_config):
        """Restart needs a typed (press and release) key"""
        match = Match(short_config, seed=1)
        force_point(match, PaddleSide.LEFT)
        force_point(match, PaddleSide.LEFT)

        match.update(InputState.of(Key.R))
        assert match.is_game_over()


class TestInvariants:
    """Long random games checked after every tick"""

    KEYS = [Key.W, Key.S, Key.UP, Key.DOWN]

    def test_random_play(self, config):
        match = Match(config, seed=7)
        chooser = np.random.default_rng(99)
        previous_score = match.score

        for _ in range(20000):
            pressed = [key for key in self.KEYS if chooser.random() < 0.4]
            match.update(InputState.of(*pressed))

            for paddle in (match.left_paddle, match.right_paddle):
                assert 0 <= paddle.position.y
                assert paddle.position.y + paddle.height <= config.WINDOW_HEIGHT

            assert abs(match.ball.velocity.x) <= config.MAX_BALL_SPEED
            assert match.left_score >= previous_score[0]
            assert match.right_score >= previous_score[1]
            assert match.is_game_over() == (max(match.score) >= config.WINNING_SCORE)
            previous_score = match.score
