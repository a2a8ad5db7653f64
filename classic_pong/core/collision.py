"""
Collision detection system for Classic Pong
"""

from enum import Enum

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Rect


class CollisionSide(Enum):
    """Side of a stationary rectangle hit by a moving one"""

    RIGHT = 0
    TOP = 1
    LEFT = 2
    BOTTOM = 3


class PaddleSide(Enum):
    """Which end of the field a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Checks if two rectangles overlap (touching edges do not count)"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def collision_direction(stationary: Rect, projectile: Rect, dx: float, dy: float) -> CollisionSide:
    """
    Classifies which side of `stationary` the moving `projectile` came through.

    The projectile's position before its last displacement (dx, dy) is rebuilt
    and each boundary is tested in the order top, left, bottom. When no
    boundary was crossed the hit is reported as coming from the right.

    Args:
        stationary: Rectangle being hit (x, y, width, height)
        projectile: Moving rectangle at its current position
        dx: Horizontal displacement during the last tick
        dy: Vertical displacement during the last tick

    Returns:
        CollisionSide: Side of the stationary rectangle that was hit
    """
    sx, sy, _, sh = stationary
    px, py, pw, ph = projectile
    previous_x = px - dx
    previous_y = py - dy

    if previous_y + ph <= sy and py + ph >= sy:
        return CollisionSide.TOP
    if previous_x + pw <= sx and px + pw >= sx:
        return CollisionSide.LEFT
    if previous_y >= sy + sh and py <= sy + sh:
        return CollisionSide.BOTTOM
    return CollisionSide.RIGHT


def apply_spin(ball: Ball, paddle: Paddle, strength: float) -> float:
    """Kicks the ball vertically depending on where it met the paddle.

    Returns the spin factor: -1 at the paddle top, 0 at its centre, 1 at its
    bottom. It is not clamped, so grazing hits can go beyond that range.
    """
    relative_hit = (ball.center_y - paddle.position.y) / paddle.height
    spin_factor = (relative_hit - 0.5) * 2.0
    ball.adjust_vertical(spin_factor * strength)
    return spin_factor


class CollisionDetector:
    """Main collision manager"""

    def __init__(self, field_height: float, spin_strength: float = 2.0) -> None:
        self.field_height = field_height
        self.spin_strength = spin_strength

    def check_ball_walls(self, ball: Ball) -> str:
        """Bounces the ball off the top/bottom walls. Returns the wall hit."""
        # No positional correction: the ball may sit past the wall for a tick
        if ball.position.y <= 0:
            ball.reverse_vertical()
            return "top"
        if ball.position.y + ball.size >= self.field_height:
            ball.reverse_vertical()
            return "bottom"
        return "none"

    def check_ball_paddle(self, ball: Ball, paddle: Paddle, side: PaddleSide) -> bool:
        """Checks and handles a ball-paddle collision"""
        if not rects_intersect(ball.rect, paddle.rect):
            return False

        ball.reverse_horizontal()
        # Push the ball just outside the paddle's outer face so the same
        # overlap is not handled again on the next tick
        if side is PaddleSide.LEFT:
            ball.position.x = paddle.position.x + paddle.width + 1
        else:
            ball.position.x = paddle.position.x - ball.size - 1
        apply_spin(ball, paddle, self.spin_strength)
        return True
