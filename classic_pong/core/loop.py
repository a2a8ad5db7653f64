"""
Fixed-timestep game loop

Real time is accumulated in units of ticks: every whole tick in the
accumulator runs one simulation step, then a single frame is rendered. Idle
time until the next tick boundary is spent sleeping on the clock.
"""

import logging
import time
from collections.abc import Callable

from classic_pong.core.input import InputState
from classic_pong.core.interfaces import Clock
from classic_pong.core.interfaces import Simulatable
from classic_pong.core.interfaces import Surface

logger = logging.getLogger(__name__)


class MonotonicClock:
    """Wall clock backed by time.perf_counter"""

    def now(self) -> float:
        return time.perf_counter()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class FixedTimestepLoop:
    """Runs a Simulatable at a fixed tick rate with one render per frame"""

    def __init__(
        self,
        game: Simulatable,
        input_source: Callable[[], InputState],
        ticks_per_second: int = 60,
        clock: Clock | None = None,
        max_frame_time: float = 0.25,
    ) -> None:
        if ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be positive")
        if max_frame_time <= 0:
            raise ValueError("max_frame_time must be positive")

        self.game = game
        self.input_source = input_source
        self.clock: Clock = clock or MonotonicClock()
        self._tps = ticks_per_second
        self._max_frame_time = max_frame_time

        self._accumulator = 0.0
        self._last_time: float | None = None
        self._running = False
        self._tick_count = 0
        self._frame_count = 0

    @property
    def ticks_per_second(self) -> int:
        return self._tps

    @property
    def tick_duration(self) -> float:
        return 1.0 / self._tps

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def accumulator(self) -> float:
        """Pending simulation time, in ticks"""
        return self._accumulator

    @property
    def running(self) -> bool:
        return self._running

    def on_tick(self, input_state: InputState) -> None:
        """Performs one simulation step"""
        self.game.tick(input_state)
        self._tick_count += 1

    def on_frame(self, surface: Surface) -> None:
        """Performs one render pass"""
        self.game.render(surface)
        self._frame_count += 1

    def run_frame(self, surface: Surface) -> int:
        """Catches the simulation up with real time and renders one frame.

        Returns the number of ticks that ran.
        """
        now = self.clock.now()
        if self._last_time is None:
            self._last_time = now
        elapsed = now - self._last_time
        self._last_time = now

        if elapsed > self._max_frame_time:
            logger.debug("Frame took %.3fs, simulating only %.3fs", elapsed, self._max_frame_time)
            elapsed = self._max_frame_time
        self._accumulator += max(elapsed, 0.0) * self._tps

        ticks = 0
        while self._accumulator >= 1.0:
            self.on_tick(self.input_source())
            self._accumulator -= 1.0
            ticks += 1

        self.on_frame(surface)
        return ticks

    def time_until_next_tick(self) -> float:
        """Seconds of real time left before the next tick is due"""
        return max(0.0, (1.0 - self._accumulator) / self._tps)

    def stop(self) -> None:
        self._running = False

    def run(
        self,
        surface: Surface,
        present: Callable[[], None] | None = None,
        poll_events: Callable[[], None] | None = None,
        max_frames: int | None = None,
    ) -> None:
        """
        Runs frames until stop() is called or max_frames frames were drawn

        Args:
            surface: Drawing target handed to every render pass
            present: Called after each frame to show it (e.g. flip buffers)
            poll_events: Called before each frame to pump platform events
            max_frames: Optional frame limit, mostly for tests and demos
        """
        self._running = True
        self._last_time = self.clock.now()
        frames = 0
        logger.info("Game loop started at %d ticks per second", self._tps)

        while self._running and (max_frames is None or frames < max_frames):
            if poll_events is not None:
                poll_events()
                if not self._running:
                    break
            self.run_frame(surface)
            if present is not None:
                present()
            frames += 1
            self.clock.sleep(self.time_until_next_tick())

        self._running = False
        logger.info(
            "Game loop stopped after %d ticks and %d frames", self._tick_count, self._frame_count
        )
