"""Liv, the player character: runs, double-jumps, dashes and takes damage."""

from __future__ import annotations

from typing import Callable, Optional

from pigsgame.animation import Animation
from pigsgame.characters.base import GameCharacter
from pigsgame.controller import ControllerAction, GameController
from pigsgame.geometry import (
    CollisionRegionInformation,
    CollisionSide,
    CollisionType,
    Region2D,
    Vector2D,
)
from pigsgame.state_timeout import StateTimeout

GRAVITY = -0.001

AfterRunCallback = Callable[[object, "Liv", float], None]


class Liv(GameCharacter):
    IDLE_ANIMATION = 0
    RUNNING_ANIMATION = 1
    JUMPING_ANIMATION = 2
    FALLING_ANIMATION = 3
    ATTACKING_ANIMATION = 4
    JUST_TOUCHED_GROUND_ANIMATION = 5
    TAKING_DAMAGE_ANIMATION = 6
    DYING_ANIMATION = 7
    DEAD_ANIMATION = 8
    DASHING_ANIMATION = 9

    FRAME_SIZE_X = 23
    FRAME_SIZE_Y = 26
    collision_size = Vector2D(12, 20)
    SPRITESHEET_OFFSET = Vector2D(6, 2)

    walk_speed = 0.1
    dash_speed = 0.25
    jump_speed = 0.3
    double_jump_speed = 0.25
    reset_dash_timeout = 200.0
    reset_no_dash_timeout = 500.0
    after_taking_damage_time = 500.0

    def __init__(
        self,
        surface,
        pos_x: float,
        pos_y: float,
        spritesheet,
        jump_spritesheet,
        gravity: float = GRAVITY,
    ) -> None:
        self.surface = surface
        self.spritesheet = spritesheet
        self.jump_spritesheet = jump_spritesheet
        self.gravity = gravity

        self.running_side = 0
        self.face = 1
        self.life = 2
        self.old_position = Vector2D(float(pos_x), float(pos_y))
        self.position = Vector2D(float(pos_x), float(pos_y))
        self.velocity = Vector2D(0.0, 0.0)

        self.is_jumping = False
        self.is_falling = True
        self.start_jumping = False
        self.is_grounded = False
        self.just_touched_ground = False
        self.is_taking_damage = False
        self.after_taking_damage = False
        self.is_dying = False
        self.is_dead = False
        self.start_dashing = False
        self.dashing_timeout = -0.1
        self.no_dash_timeout = -0.1
        self.jump_count = 0

        self.on_dead_callback: Optional[Callable[[], None]] = None
        self.on_start_taking_damage: Optional[Callable[[], None]] = None
        self.on_start_dashing: Optional[Callable[[], None]] = None
        self.on_after_run_animation_callbacks: list[AfterRunCallback] = []
        self.jump_animations: list[tuple[Vector2D, Animation]] = []

        self.animations: dict[int, Animation] = {}
        self._register_animation(self.IDLE_ANIMATION, [(0, 0), (1, 0), (0, 0), (2, 0)], 250.0)
        self._register_animation(self.RUNNING_ANIMATION, [(0, 1), (1, 1), (2, 1), (0, 2)], 100.0)
        self._register_animation(self.JUMPING_ANIMATION, [(1, 2)], 100.0)
        self._register_animation(self.FALLING_ANIMATION, [(2, 2)], 100.0)
        self._register_animation(self.JUST_TOUCHED_GROUND_ANIMATION, [(2, 2)], 100.0)
        self._register_animation(self.DASHING_ANIMATION, [(0, 3)], 100.0)
        self._register_animation(
            self.TAKING_DAMAGE_ANIMATION, [(1, 3), (2, 3), (1, 3), (2, 3), (1, 3)], 60.0
        )
        self._register_animation(
            self.DYING_ANIMATION, [(2, 3), (0, 4), (1, 4), (2, 4), (0, 5), (1, 5), (2, 5)], 60.0
        )
        self._register_animation(self.DEAD_ANIMATION, [(2, 5)], 150.0)

        self.animations[self.JUST_TOUCHED_GROUND_ANIMATION].set_on_finish_animation_callback(
            self._finish_touching_ground
        )
        self.animations[self.TAKING_DAMAGE_ANIMATION].set_on_finish_animation_callback(
            self._finish_taking_damage
        )
        self.animations[self.DYING_ANIMATION].set_on_finish_animation_callback(self._finish_dying)
        self.after_taking_damage_timeout = StateTimeout(
            self.after_taking_damage_time, self._finish_after_taking_damage
        )

    def _register_animation(self, animation_id: int, frames, time: float) -> None:
        self.animations[animation_id] = Animation(
            self.spritesheet,
            list(frames),
            self.SPRITESHEET_OFFSET,
            self.FRAME_SIZE_X,
            self.FRAME_SIZE_Y,
            time,
        )

    def _finish_touching_ground(self) -> None:
        self.just_touched_ground = False

    def _finish_taking_damage(self) -> None:
        self.is_taking_damage = False
        if self.life > 0:
            self.after_taking_damage = True
            self.after_taking_damage_timeout.restart()
        else:
            self.is_dying = True

    def _finish_after_taking_damage(self) -> None:
        self.after_taking_damage = False

    def _finish_dying(self) -> None:
        self.is_taking_damage = False
        self.after_taking_damage = False
        self.is_dying = False
        self.is_dead = True
        if self.on_dead_callback is not None:
            self.on_dead_callback()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2D(x, y)

    def set_velocity(self, x: float, y: float) -> None:
        self.velocity = Vector2D(x, y)

    def collision_region_information(self) -> CollisionRegionInformation:
        return CollisionRegionInformation(self.position, self.old_position, self.collision_size)

    def handle_collision(self, collision_type: CollisionType, side: CollisionSide) -> None:
        if collision_type is CollisionType.TILEMAP_COLLISION and side is CollisionSide.TOP_COLLISION:
            self.set_velocity(0.0, 0.01)

        if side is CollisionSide.BOTTOM_COLLISION and collision_type in (
            CollisionType.TILEMAP_COLLISION,
            CollisionType.BOTTOM_ONLY_COLLISION,
        ):
            self.is_grounded = True
            self.jump_count = 0

        if collision_type is CollisionType.DANGEROUS_COLLISION and side is CollisionSide.BOTTOM_COLLISION:
            self.is_grounded = True
            self.start_taking_damage()

    def on_after_collision(self) -> None:
        self.is_falling = not self.is_grounded and self.velocity.y < 0.0
        self.is_jumping = not self.is_grounded and self.velocity.y > 0.0
        if self.is_grounded and self.position.y + 0.5 < self.old_position.y:
            self.just_touched_ground = True

    def handle_controller(self, controller: GameController) -> None:
        """Read running, jumping and dashing intents from the controller."""
        if self.is_taking_damage or self.is_dying or self.is_dead:
            return

        if controller.is_pressed(ControllerAction.LEFT):
            self.running_side = -1
            self.face = -1
        elif controller.is_pressed(ControllerAction.RIGHT):
            self.running_side = 1
            self.face = 1
        else:
            self.running_side = 0

        if controller.just_pressed(ControllerAction.JUMP):
            can_jump = (not self.is_jumping and not self.is_falling) or (
                self.jump_count < 2 and (self.is_jumping or self.is_falling)
            )
            if can_jump:
                if self.is_grounded:
                    self._create_jump_animation()
                self.start_jumping = True

        if controller.just_pressed(ControllerAction.DASH):
            if not self.start_dashing and self.dashing_timeout <= 0.0 and self.no_dash_timeout <= 0.0:
                self.start_dashing = True
                if self.on_start_dashing is not None:
                    self.on_start_dashing()

    def register_on_dead_callback(self, callback: Callable[[], None]) -> None:
        self.on_dead_callback = callback

    def update(self, elapsed_time: float) -> None:
        if not (self.is_taking_damage or self.is_dying or self.is_dead):
            self.velocity.x = self.running_side * self.walk_speed

            if self.start_jumping:
                self.start_jumping = False
                self.is_grounded = False
                if self.jump_count == 0:
                    self.velocity.y = self.jump_speed
                elif self.jump_count == 1:
                    self.velocity.y = self.double_jump_speed

                # A jump cancels a running dash.
                if self.dashing_timeout > 0.0:
                    self.start_dashing = False
                    self.dashing_timeout = 0.0
                    self.no_dash_timeout = self.reset_no_dash_timeout

                self.jump_count += 1

            if self.start_dashing:
                self.dashing_timeout = self.reset_dash_timeout
                self.start_dashing = False
            if self.dashing_timeout > 0.0:
                self.velocity.x = self.face * self.dash_speed
                self.velocity.y = 0.0
                self.dashing_timeout -= elapsed_time
                if self.dashing_timeout <= 0.0:
                    self.no_dash_timeout = self.reset_no_dash_timeout
            if self.no_dash_timeout > 0.0:
                self.no_dash_timeout -= elapsed_time

        if self.is_dead:
            self.velocity.x = 0.0
        self.velocity.y += self.gravity * elapsed_time

        self.old_position = self.position
        self.position = self.position + self.velocity * elapsed_time
        if self.is_grounded and self.velocity.y < -0.1:
            self.is_grounded = False
            self.jump_count += 1

        self.after_taking_damage_timeout.update(elapsed_time)

    def start_taking_damage(self) -> None:
        """Knock Liv back, lose one life and cancel any dash."""
        self.velocity = Vector2D(-self.face * 0.05, 0.1)
        self.is_taking_damage = True
        self.life -= 1
        self.start_dashing = False
        self.dashing_timeout = 0.0
        if self.on_start_taking_damage is not None:
            self.on_start_taking_damage()

    def _current_animation(self) -> int:
        if self.is_dead:
            return self.DEAD_ANIMATION
        if self.is_dying:
            return self.DYING_ANIMATION
        if self.is_taking_damage:
            return self.TAKING_DAMAGE_ANIMATION
        if self.dashing_timeout > 0.0:
            return self.DASHING_ANIMATION
        if self.just_touched_ground:
            return self.JUST_TOUCHED_GROUND_ANIMATION
        if self.is_falling:
            return self.FALLING_ANIMATION
        if self.is_jumping:
            return self.JUMPING_ANIMATION
        if self.running_side != 0:
            return self.RUNNING_ANIMATION
        return self.IDLE_ANIMATION

    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        self.animations[self._current_animation()].run(
            self.surface, elapsed_time, self.face, self.position.as_int(), camera_offset
        )
        for callback in self.on_after_run_animation_callbacks:
            callback(self.surface, self, elapsed_time)
        for jump_position, jump_animation in list(self.jump_animations):
            jump_animation.run(self.surface, elapsed_time, 1, jump_position.as_int(), camera_offset)

    def attack_region(self) -> Region2D:
        return Region2D(0, 0, 0, 0)

    def _create_jump_animation(self) -> None:
        animation = Animation(
            self.jump_spritesheet,
            [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (0, 5)],
            Vector2D(0, 0),
            21,
            4,
            50.0,
        )
        entry = (Vector2D(self.position.x - 5, self.position.y), animation)
        self.jump_animations.append(entry)

        def remove() -> None:
            if entry in self.jump_animations:
                self.jump_animations.remove(entry)

        animation.set_on_finish_animation_callback(remove)