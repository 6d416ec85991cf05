"""A pig enemy that wanders at random or follows a scene script."""

from __future__ import annotations

import random
from typing import Callable, Mapping, Optional

import pygame

from pigsgame.animation import Animation
from pigsgame.assets import AssetsRegistry, assets_registry
from pigsgame.characters.base import GameCharacter
from pigsgame.characters.liv import GRAVITY
from pigsgame.drawing import SCALE_SIZE, gout, to_camera_position
from pigsgame.geometry import (
    CollisionRegionInformation,
    CollisionSide,
    CollisionType,
    RGBColor,
    Vector2D,
)
from pigsgame.scene_script import SCENE_SCRIPT_LINE_PROPERTY_ID, SceneScript
from pigsgame.sound import SoundHandler, sound_handler

_WHITE = (255, 255, 255)

# (source rect in the balloon image, destination rect builder) pairs are laid
# out around the white talking area.
_BALLOON_PIECES = (
    ((0, 0, 5, 4), lambda r, s: (r.x - 5 * s, r.y - 4 * s, 5 * s, 4 * s)),
    ((20, 4, 1, 4), lambda r, s: (r.x, r.y - 4 * s, r.w, 5 * s)),
    ((10, 0, 5, 4), lambda r, s: (r.x + r.w, r.y - 4 * s, 5 * s, 4 * s)),
    ((25, 0, 5, 1), lambda r, s: (r.x + r.w, r.y, 5 * s, r.h)),
    ((15, 0, 5, 4), lambda r, s: (r.x + r.w, r.y + r.h, 5 * s, 4 * s)),
    ((20, 0, 1, 4), lambda r, s: (r.x, r.y + r.h, r.w, 4 * s)),
    ((5, 0, 5, 4), lambda r, s: (r.x - 5 * s, r.y + r.h, 5 * s, 4 * s)),
    ((25, 4, 5, 1), lambda r, s: (r.x - 5 * s, r.y, 5 * s, r.h)),
    ((0, 4, 5, 4), lambda r, s: (r.x + 15 * s, r.y + r.h + 3 * s, 5 * s, 4 * s)),
)


class Pig(GameCharacter):
    IDLE_ANIMATION = 0
    RUNNING_ANIMATION = 1
    TAKING_DAMAGE_ANIMATION = 2
    DYING_ANIMATION = 3
    TALKING_ANIMATION = 4
    ANGRY_ANIMATION = 5
    ANGRY_TALKING_ANIMATION = 6
    FEAR_ANIMATION = 7

    collision_size = Vector2D(18, 18)
    SPRITESHEET_OFFSET = Vector2D(31, 33)
    FRAME_SIZE = 80

    run_speed = 0.05
    think_time = 1000.0

    def __init__(
        self,
        surface,
        pos_x: float,
        pos_y: float,
        spritesheet,
        *,
        rng: Optional[random.Random] = None,
        sounds: Optional[SoundHandler] = None,
        assets: Optional[AssetsRegistry] = None,
        font_charmap: Optional[Mapping[str, Vector2D]] = None,
        gravity: float = GRAVITY,
    ) -> None:
        self.surface = surface
        self.spritesheet = spritesheet
        self.rng = rng if rng is not None else random.Random()
        self.sounds = sounds if sounds is not None else sound_handler
        self.assets = assets if assets is not None else assets_registry
        self.font_charmap = font_charmap
        self.gravity = gravity

        self.running_side = 0
        self.face = 1
        self.position = Vector2D(float(pos_x), float(pos_y))
        self.old_position = Vector2D(float(pos_x), float(pos_y))
        self.velocity = Vector2D(0.0, 0.0)
        self.think_timeout = self.think_time
        self.is_taking_damage = False
        self.life = 2
        self.is_dying = False
        self.is_dead = False
        self.is_talking = False
        self.is_angry = False
        self.is_fear = False
        self.talking_message = ""
        self.talk_color = RGBColor(0, 0, 0)

        self.on_start_taking_damage: Optional[Callable[[], None]] = None
        self.script: Optional[SceneScript] = None

        self.animations: dict[int, Animation] = {}
        self._register_animation(self.IDLE_ANIMATION, [(0, 1), (1, 1), (2, 1), (3, 1), (4, 1)])
        self._register_animation(
            self.RUNNING_ANIMATION, [(5, 1), (0, 2), (1, 2), (2, 2), (3, 2), (4, 2)]
        )
        self._register_animation(self.TAKING_DAMAGE_ANIMATION, [(1, 4), (2, 4), (1, 4), (2, 4)])
        self._register_animation(self.DYING_ANIMATION, [(3, 4), (4, 4), (5, 4), (0, 5)])
        self._register_animation(
            self.TALKING_ANIMATION, [(1, 5), (2, 5), (3, 5), (4, 5), (5, 5), (0, 6), (1, 6)]
        )
        self._register_animation(self.ANGRY_ANIMATION, [(5, 6), (0, 7)])
        self._register_animation(
            self.ANGRY_TALKING_ANIMATION, [(1, 7), (2, 7), (3, 7), (4, 7), (5, 7)]
        )
        self._register_animation(self.FEAR_ANIMATION, [(0, 8), (1, 8)])

        self.animations[self.TAKING_DAMAGE_ANIMATION].set_on_finish_animation_callback(
            self._finish_taking_damage
        )
        self.animations[self.DYING_ANIMATION].set_on_finish_animation_callback(self._finish_dying)

    def _register_animation(self, animation_id: int, frames) -> None:
        self.animations[animation_id] = Animation(
            self.spritesheet,
            list(frames),
            self.SPRITESHEET_OFFSET,
            self.FRAME_SIZE,
            self.FRAME_SIZE,
            100.0,
        )

    def _finish_taking_damage(self) -> None:
        self.is_taking_damage = False
        self.life -= 1
        if self.life <= 0:
            self.is_dying = True

    def _finish_dying(self) -> None:
        self.is_dead = True

    def set_script(self, script: SceneScript) -> None:
        self.script = script

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2D(x, y)

    def set_velocity(self, x: float, y: float) -> None:
        """Only the vertical component is taken; the horizontal one is kept."""
        self.velocity.y = x
        self.velocity.y = y

    def collision_region_information(self) -> CollisionRegionInformation:
        return CollisionRegionInformation(self.position, self.old_position, self.collision_size)

    def handle_collision(self, collision_type: CollisionType, side: CollisionSide) -> None:
        if collision_type is CollisionType.DANGEROUS_COLLISION and side is CollisionSide.BOTTOM_COLLISION:
            self.start_taking_damage()

    def on_after_collision(self) -> None:
        pass

    def update(self, elapsed_time: float) -> None:
        if not (self.is_taking_damage or self.is_dead or self.is_dying):
            self.think(elapsed_time)
        else:
            self.running_side = 0

        if self.running_side == 1:
            self.velocity.x = self.run_speed
        elif self.running_side == -1:
            self.velocity.x = -self.run_speed
        else:
            self.velocity.x = 0.0
        self.velocity.y += self.gravity * elapsed_time

        self.old_position = self.position
        self.position = self.position + self.velocity * elapsed_time

    def start_taking_damage(self) -> None:
        self.velocity = Vector2D(0.05, -0.1)
        self.is_taking_damage = True
        if self.on_start_taking_damage is not None:
            self.on_start_taking_damage()
        self.sounds.play("hit")

    def _current_animation(self) -> int:
        if self.is_dying:
            return self.DYING_ANIMATION
        if self.is_taking_damage:
            return self.TAKING_DAMAGE_ANIMATION
        if self.running_side != 0:
            return self.RUNNING_ANIMATION
        if self.is_fear:
            return self.FEAR_ANIMATION
        if self.is_angry and self.is_talking:
            return self.ANGRY_TALKING_ANIMATION
        if self.is_angry:
            return self.ANGRY_ANIMATION
        if self.is_talking:
            return self.TALKING_ANIMATION
        return self.IDLE_ANIMATION

    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        self.animations[self._current_animation()].run(
            self.surface, elapsed_time, -self.face, self.position.as_int(), camera_offset
        )
        if self.is_talking:
            self._draw_talk_balloon(camera_offset)

    def _draw_talk_balloon(self, camera_offset: Vector2D) -> None:
        scale = SCALE_SIZE
        anchor = to_camera_position(
            self.position.as_int() + Vector2D(10, 40), Vector2D(0, 0), camera_offset
        )
        area = pygame.Rect(
            int(anchor.x) - 5 * scale,
            int(anchor.y) - 5 * scale,
            (5 + len(self.talking_message) * 6 + 5) * scale,
            (5 + 6 + 5) * scale,
        )
        pygame.draw.rect(self.surface, _WHITE, area)

        balloon = self.assets.talk_baloon
        if balloon is not None:
            for source, place in _BALLOON_PIECES:
                x, y, w, h = place(area, scale)
                piece = pygame.transform.scale(balloon.subsurface(pygame.Rect(source)), (w, h))
                self.surface.blit(piece, (x, y))

        if self.assets.monogram is not None and self.font_charmap is not None:
            gout(
                self.surface,
                self.assets.monogram,
                anchor,
                self.talking_message,
                self.talk_color,
                self.font_charmap,
            )

    def think(self, elapsed_time: float) -> None:
        """Follow the script if there is one, otherwise pick a random move every second."""
        if self.script is not None:
            self.script.run(self, elapsed_time)
            return
        self.think_timeout -= elapsed_time
        if self.think_timeout <= 0.0:
            choice = self.rng.randint(0, 2)
            if choice == 0:
                self.run_left()
            elif choice == 1:
                self.stop()
            elif choice == 2:
                self.run_right()
            self.think_timeout = self.think_time

    def get_dynamic_property(self, property_id: int) -> int:
        if property_id == SCENE_SCRIPT_LINE_PROPERTY_ID and self.script is not None:
            return self.script.active_script_line
        raise ValueError(f"Unknown Pig property with property_id={property_id}")

    def run_left(self) -> None:
        self.running_side = -1
        self.face = -1

    def run_right(self) -> None:
        self.running_side = 1
        self.face = 1

    def stop(self) -> None:
        self.running_side = 0

    def turn_to(self, face: int) -> None:
        self.face = face

    def talk(self, message: str, talk_color: RGBColor) -> None:
        self.stop()
        self.is_talking = True
        self.talking_message = message
        self.talk_color = talk_color

    def set_angry(self, angry: bool) -> None:
        self.is_angry = angry

    def set_fear(self, fear: bool) -> None:
        self.is_fear = fear