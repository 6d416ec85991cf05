"""A screen wipe that blacks out the screen left to right, waits, then clears."""

from __future__ import annotations

import enum
from typing import Callable, Optional

import pygame

from pigsgame.drawing import SCREEN_HEIGHT, SCREEN_WIDTH

_BLACK = (0, 0, 0)


class TransitionAnimationState(enum.Enum):
    BLACKING = 0
    WAITING = 1
    CLEARING = 2
    FINISHED = 3


class TransitionAnimation:
    """Accelerating black wipe; the callback runs when the screen is fully black."""

    def __init__(self) -> None:
        self._state = TransitionAnimationState.FINISHED
        self._wait_timeout = 0.0
        self._acceleration = 0.0
        self._velocity = 0.0
        self._width = 0.0
        self._callback: Optional[Callable[[], None]] = None

    @property
    def state(self) -> TransitionAnimationState:
        return self._state

    def reset(self) -> None:
        self._state = TransitionAnimationState.BLACKING
        self._wait_timeout = 500.0
        self._acceleration = 0.01
        self._velocity = 0.0
        self._width = 0.0

    def register_transition_callback(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def run(self, surface, elapsed_time: float) -> None:
        if self._state is TransitionAnimationState.BLACKING:
            self._velocity += self._acceleration * elapsed_time
            self._width += self._velocity * elapsed_time
            if self._width >= SCREEN_WIDTH:
                self._width = float(SCREEN_WIDTH)
                self._velocity = 0.0
                self._state = TransitionAnimationState.WAITING
                if self._callback is not None:
                    self._callback()
            pygame.draw.rect(surface, _BLACK, pygame.Rect(0, 0, int(self._width), SCREEN_HEIGHT))
        elif self._state is TransitionAnimationState.WAITING:
            self._wait_timeout -= elapsed_time
            if self._wait_timeout <= 0.0:
                self._state = TransitionAnimationState.CLEARING
            pygame.draw.rect(surface, _BLACK, pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT))
        elif self._state is TransitionAnimationState.CLEARING:
            self._velocity += self._acceleration * elapsed_time
            self._width -= self._velocity * elapsed_time
            if self._width <= 0.0:
                self._width = 0.0
                self._velocity = 0.0
                self._state = TransitionAnimationState.FINISHED
            width = int(self._width)
            pygame.draw.rect(surface, _BLACK, pygame.Rect(SCREEN_WIDTH - width, 0, width, SCREEN_HEIGHT))