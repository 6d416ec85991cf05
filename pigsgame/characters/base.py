"""The interface every character in a level implements."""

from __future__ import annotations

import abc

from pigsgame.geometry import CollisionRegionInformation, CollisionSide, CollisionType, Vector2D


class GameCharacter(abc.ABC):
    """A moving, colliding, animated thing in the world.

    Implementations expose ``position`` and ``velocity`` as ``Vector2D`` values
    in world coordinates (y pointing up).
    """

    position: Vector2D
    velocity: Vector2D

    @abc.abstractmethod
    def update(self, elapsed_time: float) -> None:
        """Advance the character's logic and physics by ``elapsed_time`` ms."""

    @abc.abstractmethod
    def run_animation(self, elapsed_time: float, camera_offset: Vector2D) -> None:
        """Advance and draw the current animation."""

    @abc.abstractmethod
    def set_position(self, x: float, y: float) -> None:
        """Move the character, if it can be moved."""

    @abc.abstractmethod
    def set_velocity(self, x: float, y: float) -> None:
        """Change the character's velocity, if it can move."""

    @abc.abstractmethod
    def handle_collision(self, collision_type: CollisionType, side: CollisionSide) -> None:
        """React to a collision on the given side."""

    @abc.abstractmethod
    def collision_region_information(self) -> CollisionRegionInformation:
        """Return the current and previous collision boxes."""

    @abc.abstractmethod
    def on_after_collision(self) -> None:
        """Called once all collisions of a frame were handled."""