import pygame
import pytest

from pigsgame.characters.cannon_ball import CannonBall, CannonBallState
from pigsgame.geometry import CollisionSide, CollisionType, Vector2D


@pytest.fixture
def ball():
    surface = pygame.Surface((960, 540))
    return CannonBall(surface, 40.0, 30.0, pygame.Surface((44, 28)), pygame.Surface((480, 80)))


def test_update_moves_by_velocity(ball):
    ball.set_velocity(0.5, -0.25)
    ball.update(4.0)
    assert ball.old_position == Vector2D(40.0, 30.0)
    assert ball.position.x == pytest.approx(42.0)
    assert ball.position.y == pytest.approx(29.0)


def test_set_position_is_ignored(ball):
    ball.set_position(0.0, 0.0)
    assert ball.position == Vector2D(40.0, 30.0)


def test_tilemap_collision_starts_explosion(ball):
    ball.handle_collision(CollisionType.TILEMAP_COLLISION, CollisionSide.LEFT_COLLISION)
    assert ball.state is CannonBallState.EXPLODING


@pytest.mark.parametrize(
    "collision_type",
    [CollisionType.NO_COLLISION, CollisionType.BOTTOM_ONLY_COLLISION, CollisionType.DANGEROUS_COLLISION],
)
def test_other_collisions_do_not_explode(ball, collision_type):
    ball.handle_collision(collision_type, CollisionSide.BOTTOM_COLLISION)
    assert ball.state is CannonBallState.ACTIVE


def test_collision_region_follows_ball_while_alive(ball):
    ball.set_velocity(1.0, 0.0)
    ball.update(2.0)
    info = ball.collision_region_information()
    assert info.collision_region.x == ball.position.x
    assert info.old_collision_region.x == ball.old_position.x
    assert (info.collision_region.w, info.collision_region.h) == (20.0, 20.0)


def test_explosion_finishes_after_boom_animation(ball):
    ball.handle_collision(CollisionType.TILEMAP_COLLISION, CollisionSide.TOP_COLLISION)
    frames = len(ball.boom_animation.frames)
    for _ in range(frames - 1):
        ball.run_animation(100.0, Vector2D(0, 0))
        assert ball.state is CannonBallState.EXPLODING
    ball.run_animation(100.0, Vector2D(0, 0))
    assert ball.state is CannonBallState.FINISHED


def test_finished_ball_has_empty_collision_region(ball):
    ball.state = CannonBallState.FINISHED
    info = ball.collision_region_information()
    assert (info.collision_region.w, info.collision_region.h) == (0.0, 0.0)
    assert (info.collision_region.x, info.collision_region.y) == (0.0, 0.0)


def test_active_ball_animation_keeps_state(ball):
    ball.run_animation(1000.0, Vector2D(0, 0))
    assert ball.state is CannonBallState.ACTIVE
    assert ball.animations[CannonBall.IDLE_ANIMATION].state == 0