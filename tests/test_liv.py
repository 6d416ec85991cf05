from collections import defaultdict

import pygame
import pytest

from pigsgame.characters.liv import Liv
from pigsgame.controller import GameController
from pigsgame.geometry import CollisionSide, CollisionType, Region2D, Vector2D

CAMERA = Vector2D(0, 0)


def press(controller, *keys):
    controller.update(defaultdict(bool, {key: True for key in keys}))


@pytest.fixture
def liv():
    surface = pygame.Surface((960, 540))
    sheet = pygame.Surface((80, 160))
    jump_sheet = pygame.Surface((21, 24))
    return Liv(surface, 10.0, 20.0, sheet, jump_sheet, gravity=0.0)


@pytest.fixture
def controller():
    return GameController()


def ground(liv):
    liv.handle_collision(CollisionType.TILEMAP_COLLISION, CollisionSide.BOTTOM_COLLISION)
    liv.on_after_collision()


def test_initial_state(liv):
    assert liv.life == 2
    assert liv.face == 1
    assert liv.is_falling
    assert not liv.is_grounded


def test_collision_region_uses_collision_size(liv):
    liv.set_position(3.0, 4.0)
    region = liv.collision_region_information().collision_region
    assert region == Region2D(3.0, 4.0, float(Liv.collision_size.x), float(Liv.collision_size.y))


def test_bottom_collision_grounds(liv):
    liv.jump_count = 2
    liv.handle_collision(CollisionType.BOTTOM_ONLY_COLLISION, CollisionSide.BOTTOM_COLLISION)
    assert liv.is_grounded
    assert liv.jump_count == 0


def test_top_collision_forces_downward_response(liv):
    liv.set_velocity(0.2, 0.3)
    liv.handle_collision(CollisionType.TILEMAP_COLLISION, CollisionSide.TOP_COLLISION)
    assert liv.velocity == Vector2D(0.0, 0.01)


def test_dangerous_floor_hurts(liv):
    hits = []
    liv.on_start_taking_damage = lambda: hits.append(True)
    liv.handle_collision(CollisionType.DANGEROUS_COLLISION, CollisionSide.BOTTOM_COLLISION)
    assert liv.is_taking_damage
    assert liv.life == 1
    assert liv.velocity == Vector2D(-0.05, 0.1)
    assert hits == [True]


def test_running_left(liv, controller):
    press(controller, pygame.K_LEFT)
    press(controller, pygame.K_LEFT)
    liv.handle_controller(controller)
    assert liv.running_side == -1
    assert liv.face == -1
    liv.update(10.0)
    assert liv.velocity.x == -Liv.walk_speed
    assert liv.position.x < liv.old_position.x


def test_jump_then_double_jump_then_no_more(liv, controller):
    ground(liv)
    press(controller, pygame.K_SPACE)
    liv.handle_controller(controller)
    assert liv.start_jumping
    assert len(liv.jump_animations) == 1
    liv.update(10.0)
    assert liv.velocity.y == Liv.jump_speed
    assert liv.jump_count == 1
    assert not liv.is_grounded

    liv.on_after_collision()
    assert liv.is_jumping
    press(controller)
    press(controller, pygame.K_SPACE)
    liv.handle_controller(controller)
    liv.update(10.0)
    assert liv.velocity.y == Liv.double_jump_speed
    assert liv.jump_count == 2

    liv.on_after_collision()
    press(controller)
    press(controller, pygame.K_SPACE)
    liv.handle_controller(controller)
    assert not liv.start_jumping


def test_dash_and_cooldown(liv, controller):
    dashes = []
    liv.on_start_dashing = lambda: dashes.append(True)
    press(controller, pygame.K_LSHIFT)
    liv.handle_controller(controller)
    assert dashes == [True]
    liv.update(10.0)
    assert liv.velocity == Vector2D(Liv.dash_speed, 0.0)
    liv.update(Liv.reset_dash_timeout)
    assert liv.dashing_timeout <= 0.0
    assert liv.no_dash_timeout > 0.0

    press(controller)
    press(controller, pygame.K_LSHIFT)
    liv.handle_controller(controller)
    assert not liv.start_dashing
    assert dashes == [True]


def test_jump_cancels_dash(liv, controller):
    ground(liv)
    liv.dashing_timeout = 100.0
    liv.start_jumping = True
    liv.update(1.0)
    assert liv.dashing_timeout == 0.0
    assert liv.no_dash_timeout > 0.0


def test_controller_ignored_while_taking_damage(liv, controller):
    liv.start_taking_damage()
    press(controller, pygame.K_RIGHT)
    press(controller, pygame.K_RIGHT)
    liv.handle_controller(controller)
    assert liv.running_side == 0


def test_damage_recovery_cycle(liv):
    liv.start_taking_damage()
    for _ in range(5):
        liv.run_animation(60.0, CAMERA)
    assert not liv.is_taking_damage
    assert liv.after_taking_damage
    liv.update(Liv.after_taking_damage_time)
    assert not liv.after_taking_damage


def test_death_cycle(liv):
    deaths = []
    liv.register_on_dead_callback(lambda: deaths.append(True))
    liv.life = 1
    liv.start_taking_damage()
    assert liv.life == 0
    for _ in range(5):
        liv.run_animation(60.0, CAMERA)
    assert liv.is_dying
    for _ in range(7):
        liv.run_animation(60.0, CAMERA)
    assert liv.is_dead
    assert not liv.is_dying
    assert deaths == [True]
    liv.update(10.0)
    assert liv.velocity.x == 0.0


def test_landing_sets_just_touched_ground(liv):
    liv.old_position = Vector2D(10.0, 30.0)
    liv.set_position(10.0, 20.0)
    ground(liv)
    assert liv.just_touched_ground
    assert not liv.is_falling


def test_after_run_animation_callbacks_get_liv(liv):
    seen = []
    liv.on_after_run_animation_callbacks.append(lambda surface, character, dt: seen.append((character, dt)))
    liv.run_animation(5.0, CAMERA)
    assert seen == [(liv, 5.0)]


def test_jump_animation_removed_when_finished(liv, controller):
    ground(liv)
    press(controller, pygame.K_SPACE)
    liv.handle_controller(controller)
    assert len(liv.jump_animations) == 1
    for _ in range(6):
        liv.run_animation(50.0, CAMERA)
    assert liv.jump_animations == []


def test_attack_region_is_empty(liv):
    assert liv.attack_region() == Region2D(0, 0, 0, 0)