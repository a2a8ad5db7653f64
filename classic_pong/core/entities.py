"""
Classic Pong game entities: ball and paddles
"""

import math
from dataclasses import dataclass

import numpy as np

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

Rect = tuple[float, float, float, float]


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Square ball moving a fixed number of pixels per tick"""

    def __init__(
        self,
        x: float,
        y: float,
        direction: int = -1,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        config = config or game_config
        self.size = config.BALL_SIZE
        self.base_speed = config.BALL_BASE_SPEED
        self.max_speed = config.MAX_BALL_SPEED
        self.acceleration = config.BALL_ACCELERATION
        self.rng = rng if rng is not None else np.random.default_rng()

        self.position = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.reset_for_rally(x, y, direction)

    def advance(self) -> None:
        """Moves the ball by one tick and speeds it up slightly"""
        self.position += self.velocity

        speed_x = abs(self.velocity.x)
        if speed_x < self.max_speed:
            # Capped so the compounding growth never overshoots max_speed
            self.velocity.x = math.copysign(
                min(speed_x * self.acceleration, self.max_speed), self.velocity.x
            )

    def reverse_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def reverse_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def adjust_vertical(self, delta: float) -> None:
        """Adds spin to the vertical velocity, clamped to +/- max_speed"""
        self.velocity.y = max(-self.max_speed, min(self.max_speed, self.velocity.y + delta))

    def reset_for_rally(self, x: float, y: float, direction: int) -> None:
        """Places the ball and serves it horizontally toward direction (-1 left, 1 right)"""
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction}")
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(self.base_speed * direction, float(self.rng.uniform(-1.0, 1.0)))

    @property
    def center_y(self) -> float:
        return self.position.y + self.size / 2

    @property
    def rect(self) -> Rect:
        """Returns the collision rectangle (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size, self.size)


class Paddle:
    """Player paddle, moved a fixed step per tick"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = speed if speed is not None else game_config.PADDLE_SPEED

    @classmethod
    def from_config(cls, x: float, y: float, config: GameConfig) -> "Paddle":
        return cls(x, y, config.PADDLE_WIDTH, config.PADDLE_HEIGHT, config.PADDLE_SPEED)

    def move_up(self) -> None:
        self.position.y -= self.speed

    def move_down(self) -> None:
        self.position.y += self.speed

    def clamp_to_bounds(self, min_y: float, max_y: float) -> None:
        """Keeps the paddle between min_y and max_y (both edges checked)"""
        if self.position.y < min_y:
            self.position.y = min_y
        if self.position.y + self.height > max_y:
            self.position.y = max_y - self.height

    @property
    def rect(self) -> Rect:
        """Returns the collision rectangle (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)
