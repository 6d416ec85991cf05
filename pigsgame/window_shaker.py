"""A short random jitter of the camera, used on hits."""

from __future__ import annotations

import random
from typing import Optional

from pigsgame.geometry import Vector2D
from pigsgame.state_timeout import StateTimeout

SHAKE_DURATION = 300.0


class WindowShaker:
    """Shakes for a fixed time after ``start_shake``."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.is_shaking = False
        self._timeout = StateTimeout(SHAKE_DURATION, self._stop)

    def _stop(self) -> None:
        self.is_shaking = False

    def get_shake(self) -> Vector2D:
        if not self.is_shaking:
            return Vector2D(0, 0)
        return Vector2D(self._rng.randint(-1, 1), self._rng.randint(-1, 1))

    def start_shake(self) -> None:
        self.is_shaking = True
        self._timeout.restart()

    def update(self, elapsed_time: float) -> None:
        self._timeout.update(elapsed_time)