"""
Keyboard layouts: physical pygame keys to game keys
"""

import pygame

from classic_pong.core.input import Key

_ARROWS_AND_SYSTEM = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_r: Key.R,
    pygame.K_ESCAPE: Key.ESCAPE,
}

# Game keys are named after their QWERTY position; AZERTY players use Z for W.
# QWERTZ only swaps Y and Z, so its W/S keys coincide with QWERTY's
KEYBOARD_LAYOUTS: dict[str, dict[int, Key]] = {
    "qwerty": {pygame.K_w: Key.W, pygame.K_s: Key.S, **_ARROWS_AND_SYSTEM},
    "azerty": {pygame.K_z: Key.W, pygame.K_s: Key.S, **_ARROWS_AND_SYSTEM},
    "qwertz": {pygame.K_w: Key.W, pygame.K_s: Key.S, **_ARROWS_AND_SYSTEM},
}


def get_keymap(layout: str) -> dict[int, Key]:
    """Returns the key mapping for a layout name, defaulting to QWERTY"""
    return KEYBOARD_LAYOUTS.get(layout, KEYBOARD_LAYOUTS["qwerty"])
