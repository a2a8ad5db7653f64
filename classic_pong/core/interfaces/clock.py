"""
Clock protocol - time source and scheduler for the game loop
"""

from typing import Protocol


class Clock(Protocol):
    """Protocol for loop timing, replaceable by a fake clock in tests"""

    def now(self) -> float:
        """Current time in seconds from an arbitrary, monotonic origin"""
        ...

    def sleep(self, seconds: float) -> None:
        """Block the calling thread for the given number of seconds"""
        ...
