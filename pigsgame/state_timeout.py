"""A one-shot countdown that calls a function when it runs out."""

from __future__ import annotations

from typing import Callable, Optional


class StateTimeout:
    """Counts down from ``timeout`` milliseconds once restarted, then fires."""

    def __init__(self, timeout: float = 0.0, callback: Optional[Callable[[], None]] = None) -> None:
        self.timeout = timeout
        self.callback = callback
        self.current_time = 0.0
        self.started = False

    def restart(self) -> None:
        self.current_time = self.timeout
        self.started = True

    def update(self, elapsed_time: float) -> None:
        if not self.started:
            return
        self.current_time -= elapsed_time
        if self.current_time <= 0.0:
            if self.callback is not None:
                self.callback()
            self.started = False