"""
Simulatable protocol - what the fixed-timestep loop drives
"""

from typing import Protocol

from classic_pong.core.input import InputState
from classic_pong.core.interfaces.surface import Surface


class Simulatable(Protocol):
    """
    Protocol for anything the game loop can run.

    The loop only depends on this interface, so other games or test doubles
    can be substituted for the Pong game.
    """

    def tick(self, input_state: InputState) -> None:
        """
        Advance the simulation by exactly one fixed step.

        Args:
            input_state: Keyboard state sampled for this tick
        """
        ...

    def render(self, surface: Surface) -> None:
        """Draw the current state onto surface"""
        ...
