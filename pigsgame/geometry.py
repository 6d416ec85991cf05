"""Vectors, regions, colours and the collision primitives built on them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class Vector2D:
    """A two-dimensional vector with component-wise arithmetic."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2D:
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_int(self) -> Vector2D:
        """Return a copy with both components truncated towards zero."""
        return Vector2D(int(self.x), int(self.y))


@dataclass(slots=True)
class Region2D:
    """An axis-aligned rectangle given by its corner and its size."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class RGBColor:
    """An opaque colour."""

    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b


class CollisionType(enum.Enum):
    NO_COLLISION = 0
    TILEMAP_COLLISION = 1
    BOTTOM_ONLY_COLLISION = 3
    DANGEROUS_COLLISION = 4


class CollisionSide(enum.Enum):
    LEFT_COLLISION = 0
    RIGHT_COLLISION = 1
    TOP_COLLISION = 2
    BOTTOM_COLLISION = 3


class CollisionRegionInformation:
    """The current and previous collision boxes of a character."""

    __slots__ = ("collision_region", "old_collision_region")

    def __init__(self, position: Vector2D, old_position: Vector2D, collision_size: Vector2D) -> None:
        width = float(collision_size.x)
        height = float(collision_size.y)
        self.collision_region = Region2D(position.x, position.y, width, height)
        self.old_collision_region = Region2D(old_position.x, old_position.y, width, height)

    def __repr__(self) -> str:
        return (
            f"CollisionRegionInformation(collision_region={self.collision_region!r}, "
            f"old_collision_region={self.old_collision_region!r})"
        )


def check_aabb_collision(a: Region2D, b: Region2D) -> bool:
    """Return whether two regions overlap; touching edges do not count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y