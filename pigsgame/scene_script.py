"""Scripted cut-scene steps that drive a pig character line by line."""

from __future__ import annotations

import abc
import enum
from typing import Callable, Iterable, Optional

from pigsgame.controller import ControllerAction, ControllerState, GameController, game_controller
from pigsgame.geometry import RGBColor

SCENE_SCRIPT_LINE_PROPERTY_ID = 1


class SceneHandler(abc.ABC):
    """One step of a scene script; it is done once ``finished`` is set."""

    def __init__(self) -> None:
        self.finished = False

    @abc.abstractmethod
    def run(self, character, script: "SceneScript", elapsed_time: float) -> None:
        """Advance this step for ``character``."""


class WaitTime(SceneHandler):
    """Finishes once ``desired_time`` ms have passed."""

    def __init__(self, desired_time: float) -> None:
        super().__init__()
        self.desired_time = desired_time
        self.current_time = 0.0

    def run(self, character, script, elapsed_time):
        self.current_time += elapsed_time
        if self.current_time >= self.desired_time:
            self.finished = True


class WalkTo(SceneHandler):
    """Runs the character towards a world x coordinate and stops there."""

    def __init__(self, desired_position_x: int) -> None:
        super().__init__()
        self.desired_position_x = desired_position_x

    def run(self, character, script, elapsed_time):
        pos_x = character.position.x
        if abs(pos_x - self.desired_position_x) < 1:
            character.stop()
            self.finished = True
        elif pos_x < self.desired_position_x:
            character.run_right()
        elif pos_x > self.desired_position_x:
            character.run_left()


class FaceTo(SceneHandler):
    """Turns the character to face a side (+1 or -1)."""

    def __init__(self, desired_face: int) -> None:
        super().__init__()
        self.desired_face = desired_face

    def run(self, character, script, elapsed_time):
        character.turn_to(self.desired_face)
        self.finished = True


class TalkState(enum.Enum):
    NOT_STARTED = 0
    TALKING = 1
    FINISHED = 2


class Talk(SceneHandler):
    """Shows a speech balloon until the attack key is pressed."""

    def __init__(
        self,
        message: str,
        talk_color: RGBColor,
        controller: Optional[GameController] = None,
    ) -> None:
        super().__init__()
        self.message = message
        self.talk_color = talk_color
        self.state = TalkState.NOT_STARTED
        self._controller = controller

    def run(self, character, script, elapsed_time):
        if self.state is TalkState.NOT_STARTED:
            character.talk(self.message, self.talk_color)
            self.state = TalkState.TALKING
        elif self.state is TalkState.TALKING:
            controller = self._controller if self._controller is not None else game_controller
            if controller.get_state(ControllerAction.ATTACK) is ControllerState.JUST_PRESSED:
                self.state = TalkState.FINISHED
                character.is_talking = False
        elif self.state is TalkState.FINISHED:
            self.finished = True


class WaitScriptEvent(SceneHandler):
    """Waits until another character's script has gone past ``line_number``."""

    def __init__(self, other_character, line_number: int) -> None:
        super().__init__()
        self.other_character = other_character
        self.line_number = line_number

    def run(self, character, script, elapsed_time):
        other_line = self.other_character.get_dynamic_property(SCENE_SCRIPT_LINE_PROPERTY_ID)
        if self.line_number < other_line:
            self.finished = True


class SetAngry(SceneHandler):
    def __init__(self, is_angry: bool) -> None:
        super().__init__()
        self.is_angry = is_angry

    def run(self, character, script, elapsed_time):
        character.set_angry(self.is_angry)
        self.finished = True


class SetFear(SceneHandler):
    def __init__(self, is_fear: bool) -> None:
        super().__init__()
        self.is_fear = is_fear

    def run(self, character, script, elapsed_time):
        character.set_fear(self.is_fear)
        self.finished = True


class RunLambdaEvent(SceneHandler):
    """Calls a function once."""

    def __init__(self, function: Callable[[], None]) -> None:
        super().__init__()
        self.function = function

    def run(self, character, script, elapsed_time):
        self.function()
        self.finished = True


class SceneScript:
    """A sequence of numbered steps, run one after another."""

    def __init__(self, script: Iterable[tuple[int, SceneHandler]]) -> None:
        self.full_script = list(script)
        self._index = 0

    def run(self, character, elapsed_time: float) -> None:
        if self._index >= len(self.full_script):
            return
        _, action = self.full_script[self._index]
        action.run(character, self, elapsed_time)
        if action.finished:
            self._index += 1

    @property
    def active_script_line(self) -> int:
        """Number of the running line, or one past the last line once done."""
        if self._index < len(self.full_script):
            return self.full_script[self._index][0]
        if not self.full_script:
            raise IndexError("scene script is empty")
        return self.full_script[self._index - 1][0] + 1