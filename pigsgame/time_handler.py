"""Frame timing: elapsed milliseconds per frame and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class GameTimeHandler:
    """Measures the time between updates with a clock returning seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._current = clock()
        self._fps_countdown = 1000.0
        self._fps_counter = 0
        self.fps = 0
        self.elapsed_time = 0.0

    def update(self) -> None:
        last = self._current
        self._current = self._clock()
        self.elapsed_time = (self._current - last) * 1000.0
        self._fps_countdown -= self.elapsed_time
        self._fps_counter += 1
        if self._fps_countdown < 0.0:
            self.fps = self._fps_counter
            self._fps_counter = 0
            self._fps_countdown = 1000.0