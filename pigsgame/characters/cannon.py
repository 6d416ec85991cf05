"""A stationary cannon that plays a firing animation when triggered."""

from __future__ import annotations

from typing import Callable, Optional

from pigsgame.animation import Animation
from pigsgame.characters.base import GameCharacter
from pigsgame.geometry import CollisionRegionInformation, Vector2D


class Cannon(GameCharacter):
    IDLE_ANIMATION = 0
    ATTACKING_ANIMATION = 1

    collision_offset_x = 35.0
    collision_offset_y = 43.0
    collision_size = Vector2D(24, 21)

    SPRITESHEET_OFFSET = Vector2D(37, 32)
    FRAME_SIZE = 96

    def __init__(self, surface, pos_x: float, pos_y: float, face: int, spritesheet) -> None:
        self.surface = surface
        self.spritesheet = spritesheet
        self.face = face
        self.position = Vector2D(float(pos_x), float(pos_y))
        self.is_attacking = False
        self.on_before_fire: Optional[Callable[[], None]] = None
        self.animations: dict[int, Animation] = {}
        self._register_animation(self.IDLE_ANIMATION, [(0, 0)], 100.0)
        self._register_animation(self.ATTACKING_ANIMATION, [(1, 0), (2, 0), (3, 0), (4, 0)], 100.0)

    def _register_animation(self, animation_id: int, frames, time: float) -> None:
        self.animations[animation_id] = Animation(
            self.spritesheet, list(frames), self.SPRITESHEET_OFFSET, self.FRAME_SIZE, self.FRAME_SIZE, time
        )

    @property
    def velocity(self) -> Vector2D:
        return Vector2D(0.0, 0.0)

    def update(self, elapsed_time: float) -> None:
        pass

    def set_position(self, x: float, y: float) -> None:
        pass

    def set_velocity(self, x: float, y: float) -> None:
        pass

    def collision_region_information(self) -> CollisionRegionInformation:
        return CollisionRegionInformation(self.position, self.position, self.collision_size)

    def handle_collision(self, collision_type, side) -> None:
        pass

    def on_after_collision(self) -> None:
        pass

    def trigger_attack(self) -> None:
        """Start firing unless already firing; ``on_before_fire`` runs first."""
        if self.is_attacking:
            return
        self.is_attacking = True
        if self.on_before_fire is not None:
            self.on_before_fire()
        self.animations[self.ATTACKING_ANIMATION].set_on_finish_animation_callback(self._finish_attack)

    def _finish_attack(self) -> None:
        self.is_attacking = False

    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        current = self.ATTACKING_ANIMATION if self.is_attacking else self.IDLE_ANIMATION
        self.animations[current].run(
            self.surface, elapsed_time, self.face, self.position.as_int(), camera_offset
        )