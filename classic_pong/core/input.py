"""
Keyboard input state for Classic Pong

The platform layer feeds key events into a KeyTracker; the game loop takes
one immutable InputState snapshot per simulation tick.
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum


class Key(Enum):
    """Keys the game reacts to, named after their QWERTY position"""

    W = "w"
    S = "s"
    UP = "up"
    DOWN = "down"
    R = "r"
    ESCAPE = "escape"


@dataclass(frozen=True)
class InputState:
    """Keyboard state sampled for a single tick"""

    pressed: frozenset[Key] = field(default_factory=frozenset)
    typed: frozenset[Key] = field(default_factory=frozenset)

    def is_pressed(self, key: Key) -> bool:
        """True while the key is held down"""
        return key in self.pressed

    def was_typed(self, key: Key) -> bool:
        """True if the key completed a press/release since the previous snapshot"""
        return key in self.typed

    @classmethod
    def of(cls, *pressed: Key, typed: tuple[Key, ...] = ()) -> "InputState":
        return cls(frozenset(pressed), frozenset(typed))


class KeyTracker:
    """Collects key events between ticks"""

    def __init__(self) -> None:
        self._pressed: set[Key] = set()
        self._typed: set[Key] = set()

    def press(self, key: Key) -> None:
        self._pressed.add(key)

    def release(self, key: Key) -> None:
        """Releases a key; a release completes a "typed" edge"""
        self._pressed.discard(key)
        self._typed.add(key)

    def is_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def typed_and_clear(self, key: Key) -> bool:
        """Returns True once per press/release edge, consuming it"""
        if key in self._typed:
            self._typed.discard(key)
            return True
        return False

    def snapshot(self) -> InputState:
        """Hands pending typed keys to a single InputState and clears them"""
        state = InputState(frozenset(self._pressed), frozenset(self._typed))
        self._typed.clear()
        return state

    def reset(self) -> None:
        self._pressed.clear()
        self._typed.clear()
