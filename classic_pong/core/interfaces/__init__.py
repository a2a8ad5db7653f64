"""
Protocols between the simulation core and the platform layer
"""

from classic_pong.core.interfaces.clock import Clock
from classic_pong.core.interfaces.simulatable import Simulatable
from classic_pong.core.interfaces.surface import Color
from classic_pong.core.interfaces.surface import Font
from classic_pong.core.interfaces.surface import Surface

__all__ = ["Clock", "Color", "Font", "Simulatable", "Surface"]
