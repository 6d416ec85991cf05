"""A cannon ball that flies until it hits the tile map, then explodes."""

from __future__ import annotations

import enum

from pigsgame.animation import Animation
from pigsgame.characters.base import GameCharacter
from pigsgame.geometry import CollisionRegionInformation, CollisionType, Vector2D


class CannonBallState(enum.Enum):
    ACTIVE = 0
    EXPLODING = 1
    FINISHED = 2


class CannonBall(GameCharacter):
    IDLE_ANIMATION = 0
    collision_size = Vector2D(20, 20)

    def __init__(self, surface, pos_x: float, pos_y: float, spritesheet, boom_spritesheet) -> None:
        self.surface = surface
        self.spritesheet = spritesheet
        self.boom_spritesheet = boom_spritesheet
        self.position = Vector2D(float(pos_x), float(pos_y))
        self.old_position = Vector2D(float(pos_x), float(pos_y))
        self.velocity = Vector2D(0.0, 0.0)
        self.state = CannonBallState.ACTIVE
        self.animations = {
            self.IDLE_ANIMATION: Animation(spritesheet, [(0, 0)], Vector2D(20, 0), 44, 28, 1000.0),
        }
        self.boom_animation = Animation(
            boom_spritesheet,
            [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)],
            Vector2D(30, 27),
            80,
            80,
            100.0,
        )
        self.boom_animation.set_on_finish_animation_callback(self._finish)

    def _finish(self) -> None:
        self.state = CannonBallState.FINISHED

    def update(self, elapsed_time: float) -> None:
        self.old_position = self.position
        self.position = self.position + self.velocity * elapsed_time

    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        if self.state is CannonBallState.ACTIVE:
            self.animations[self.IDLE_ANIMATION].run(
                self.surface, elapsed_time, 1, self.position.as_int(), camera_offset
            )
        elif self.state is CannonBallState.EXPLODING:
            self.boom_animation.run(self.surface, elapsed_time, 1, self.position.as_int(), camera_offset)

    def set_position(self, x: float, y: float) -> None:
        pass

    def set_velocity(self, x: float, y: float) -> None:
        self.velocity = Vector2D(x, y)

    def handle_collision(self, collision_type, side) -> None:
        if collision_type is CollisionType.TILEMAP_COLLISION:
            self.state = CannonBallState.EXPLODING

    def collision_region_information(self) -> CollisionRegionInformation:
        if self.state in (CannonBallState.ACTIVE, CannonBallState.EXPLODING):
            return CollisionRegionInformation(self.position, self.old_position, self.collision_size)
        zero = Vector2D(0, 0)
        return CollisionRegionInformation(zero, zero, zero)

    def on_after_collision(self) -> None:
        pass