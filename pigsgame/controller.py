"""Keyboard state tracking for the game's logical actions."""

from __future__ import annotations

import enum
from typing import Mapping, Optional

import pygame


class ControllerAction(enum.Enum):
    START = enum.auto()
    DASH = enum.auto()
    ATTACK = enum.auto()
    JUMP = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    DEBUG = enum.auto()


class ControllerState(enum.Enum):
    NOT_PRESSED = 0
    JUST_PRESSED = 1
    PRESSED = 2


DEFAULT_KEYCONFIG: Mapping[ControllerAction, int] = {
    ControllerAction.START: pygame.K_RETURN,
    ControllerAction.DEBUG: pygame.K_TAB,
    ControllerAction.ATTACK: pygame.K_LCTRL,
    ControllerAction.DASH: pygame.K_LSHIFT,
    ControllerAction.JUMP: pygame.K_SPACE,
    ControllerAction.UP: pygame.K_UP,
    ControllerAction.DOWN: pygame.K_DOWN,
    ControllerAction.LEFT: pygame.K_LEFT,
    ControllerAction.RIGHT: pygame.K_RIGHT,
}


class GameController:
    """Maps keys to actions and tracks whether each was just or long pressed."""

    def __init__(self, keyconfig: Optional[Mapping[ControllerAction, int]] = None) -> None:
        self._keyconfig = dict(DEFAULT_KEYCONFIG if keyconfig is None else keyconfig)
        self._keystate = {action: ControllerState.NOT_PRESSED for action in self._keyconfig}

    def update(self, keyboard_state=None) -> None:
        """Advance key states from a key-indexed pressed table (defaults to pygame's)."""
        if keyboard_state is None:
            keyboard_state = pygame.key.get_pressed()
        for action, key in self._keyconfig.items():
            if keyboard_state[key]:
                if self._keystate[action] is ControllerState.NOT_PRESSED:
                    self._keystate[action] = ControllerState.JUST_PRESSED
                else:
                    self._keystate[action] = ControllerState.PRESSED
            else:
                self._keystate[action] = ControllerState.NOT_PRESSED

    def get_state(self, action: ControllerAction) -> ControllerState:
        return self._keystate[action]

    def just_pressed(self, action: ControllerAction) -> bool:
        return self._keystate[action] is ControllerState.JUST_PRESSED

    def is_pressed(self, action: ControllerAction) -> bool:
        return self._keystate[action] is ControllerState.PRESSED


game_controller = GameController()