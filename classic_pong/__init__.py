"""
Classic Pong: a fixed-timestep 2D game loop with a two player Pong match
"""

__version__ = "1.0.0"
