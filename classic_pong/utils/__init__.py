"""
Utility modules for Classic Pong
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
