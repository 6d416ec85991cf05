"""Frame-based sprite animation over a spritesheet grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from pigsgame.drawing import draw_sprite
from pigsgame.geometry import Vector2D


@dataclass
class Animation:
    """Cycles through ``frames`` (grid cells), advancing every ``animation_time`` ms.

    When the last frame is left and a finish callback is set, the callback runs
    and nothing is drawn for that call.
    """

    spritesheet: object
    frames: list[tuple[int, int]]
    sprite_offset: Vector2D
    framesize_x: int
    framesize_y: int
    animation_time: float
    state: int = 0
    counter: float = 0.0
    on_finish_animation: Optional[Callable[[], None]] = field(default=None)

    def set_on_finish_animation_callback(self, callback: Callable[[], None]) -> None:
        self.on_finish_animation = callback

    def run(self, surface, elapsed_time: float, face: int, world_position: Vector2D, camera_offset: Vector2D) -> None:
        self.counter += elapsed_time
        if self.counter >= self.animation_time:
            self.state += 1
            if self.state % len(self.frames) == 0:
                self.state = 0
                if self.on_finish_animation is not None:
                    self.on_finish_animation()
                    return
            self.counter = 0.0

        frame_x, frame_y = self.frames[self.state]
        offset = Vector2D(frame_x * self.framesize_x, frame_y * self.framesize_y)
        size = Vector2D(self.framesize_x, self.framesize_y)
        draw_position = world_position - self.sprite_offset
        draw_sprite(surface, self.spritesheet, offset, draw_position, size, camera_offset, face != 1)