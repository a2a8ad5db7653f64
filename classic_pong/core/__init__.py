"""
Core module of Classic Pong game
"""

from classic_pong.core.collision import CollisionDetector
from classic_pong.core.collision import CollisionSide
from classic_pong.core.collision import PaddleSide
from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Vector2D
from classic_pong.core.game import PongGame
from classic_pong.core.input import InputState
from classic_pong.core.input import Key
from classic_pong.core.input import KeyTracker
from classic_pong.core.loop import FixedTimestepLoop
from classic_pong.core.loop import MonotonicClock
from classic_pong.core.match import Match
from classic_pong.core.match import MatchPhase

__all__ = [
    "Ball",
    "Paddle",
    "Vector2D",
    "CollisionDetector",
    "CollisionSide",
    "PaddleSide",
    "InputState",
    "Key",
    "KeyTracker",
    "Match",
    "MatchPhase",
    "PongGame",
    "FixedTimestepLoop",
    "MonotonicClock",
]
