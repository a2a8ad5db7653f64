"""
Classic Pong game configuration with Pydantic validation
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

KEYBOARD_LAYOUT_NAMES = ("qwerty", "azerty", "qwertz")

Color = tuple[int, int, int]


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Window
    WINDOW_WIDTH: int = Field(default=1200, gt=0, description="Window width in pixels")
    WINDOW_HEIGHT: int = Field(default=800, gt=0, description="Window height in pixels")
    TITLE: str = Field(default="Two Player Pong", description="Window title")

    # Timing
    TICKS_PER_SECOND: int = Field(default=60, gt=0, description="Simulation ticks per second")
    MAX_FRAME_TIME: float = Field(
        default=0.25, gt=0, description="Longest real-time gap simulated in one frame (seconds)"
    )

    # Paddles
    PADDLE_WIDTH: int = Field(default=15, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: int = Field(default=80, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: int = Field(default=5, gt=0, description="Paddle speed in pixels per tick")
    PADDLE_MARGIN: int = Field(default=30, ge=0, description="Paddle margin from window edge")

    # Ball physics (velocities are pixels per tick)
    BALL_SIZE: int = Field(default=15, gt=0, description="Ball diameter in pixels")
    MAX_BALL_SPEED: float = Field(default=8.0, gt=0, description="Maximum ball speed per axis")
    BALL_BASE_SPEED: float = Field(default=4.0, gt=0, description="Horizontal speed on serve")
    BALL_ACCELERATION: float = Field(
        default=1.001, description="Per-tick horizontal speed growth factor"
    )
    SPIN_STRENGTH: float = Field(default=2.0, ge=0, description="Vertical kick for an edge hit")

    # Gameplay
    WINNING_SCORE: int = Field(default=10, gt=0, description="Winning score")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    OVERLAY_ALPHA: int = Field(default=180, ge=0, le=255, description="Game over overlay alpha")

    @field_validator("BALL_ACCELERATION")
    @classmethod
    def validate_acceleration(cls, v: float) -> float:
        """The ball must never slow down during a rally"""
        if v < 1.0:
            raise ValueError(f"BALL_ACCELERATION ({v}) must be at least 1.0")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUT_NAMES:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUT_NAMES)}"
            )
        return v

    @model_validator(mode="after")
    def validate_ball_speed(self) -> "GameConfig":
        """Validate that the serve speed doesn't exceed max speed"""
        if self.BALL_BASE_SPEED > self.MAX_BALL_SPEED:
            raise ValueError(
                f"BALL_BASE_SPEED ({self.BALL_BASE_SPEED}) must not exceed "
                f"MAX_BALL_SPEED ({self.MAX_BALL_SPEED})"
            )
        return self

    @model_validator(mode="after")
    def validate_window_dimensions(self) -> "GameConfig":
        """Validate window is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.WINDOW_WIDTH < min_width:
            raise ValueError(f"WINDOW_WIDTH must be at least {min_width} pixels")

        min_height = self.PADDLE_HEIGHT + self.BALL_SIZE
        if self.WINDOW_HEIGHT < min_height:
            raise ValueError(f"WINDOW_HEIGHT must be at least {min_height} pixels")

        return self

    @property
    def serve_position(self) -> tuple[int, int]:
        """Top-left corner of the ball when it is served from the centre, in whole pixels"""
        return (
            (self.WINDOW_WIDTH - self.BALL_SIZE) // 2,
            (self.WINDOW_HEIGHT - self.BALL_SIZE) // 2,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        return self.model_dump()

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance with validation
game_config = GameConfig()
