"""A pig that periodically lights a match and fires its cannon."""

from __future__ import annotations

from pigsgame.animation import Animation
from pigsgame.characters.base import GameCharacter
from pigsgame.characters.cannon import Cannon
from pigsgame.geometry import CollisionRegionInformation, Vector2D


class PigWithMatches(GameCharacter):
    IDLE_ANIMATION = 0
    ACTIVATE_CANNON = 1
    PREPARE_NEXT_MATCH = 2
    MATCH_ON_HAND = 3

    DEFAULT_THINK_TIMEOUT = 500.0

    SPRITESHEET_OFFSET = Vector2D(39, 32)
    collision_size = Vector2D(18, 18)
    FRAME_SIZE = 96

    def __init__(self, surface, pos_x: float, pos_y: float, face: int, cannon: Cannon, spritesheet) -> None:
        self.surface = surface
        self.spritesheet = spritesheet
        self.face = face
        self.position = Vector2D(float(pos_x), float(pos_y))
        self.old_position = Vector2D(float(pos_x), float(pos_y))
        self.velocity = Vector2D(0.0, 0.0)
        self.think_timeout = self.DEFAULT_THINK_TIMEOUT
        self.start_attack = False
        self.preparing_next_match = False
        self.cannon = cannon
        self.animations: dict[int, Animation] = {}
        self._register_animation(self.IDLE_ANIMATION, [(0, 3), (1, 3), (2, 3), (1, 3)], 200.0)
        self._register_animation(
            self.ACTIVATE_CANNON,
            [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2), (1, 2), (1, 2), (1, 2), (2, 2)],
            100.0,
        )
        self.animations[self.ACTIVATE_CANNON].set_on_finish_animation_callback(self._fire_cannon)

    def _register_animation(self, animation_id: int, frames, time: float) -> None:
        self.animations[animation_id] = Animation(
            self.spritesheet, list(frames), self.SPRITESHEET_OFFSET, self.FRAME_SIZE, self.FRAME_SIZE, time
        )

    def _fire_cannon(self) -> None:
        self.start_attack = False
        self.cannon.trigger_attack()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2D(x, y)

    def set_velocity(self, x: float, y: float) -> None:
        self.velocity = Vector2D(x, y)

    def collision_region_information(self) -> CollisionRegionInformation:
        return CollisionRegionInformation(self.position, self.old_position, self.collision_size)

    def handle_collision(self, collision_type, side) -> None:
        pass

    def on_after_collision(self) -> None:
        pass

    def update(self, elapsed_time: float) -> None:
        self.think(elapsed_time)
        self.old_position = self.position
        self.position = self.position + self.velocity * elapsed_time

    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        if self.start_attack:
            current = self.ACTIVATE_CANNON
        elif self.preparing_next_match:
            current = self.PREPARE_NEXT_MATCH
        else:
            current = self.IDLE_ANIMATION
        self.animations[current].run(
            self.surface, elapsed_time, -self.face, self.position.as_int(), camera_offset
        )

    def think(self, elapsed_time: float) -> None:
        """Count down while idle and start lighting the cannon when time is up."""
        if self.start_attack or self.preparing_next_match:
            return
        self.think_timeout -= elapsed_time
        if self.think_timeout <= 0.0:
            self.start_attack = True
            self.preparing_next_match = False
            self.think_timeout = self.DEFAULT_THINK_TIMEOUT