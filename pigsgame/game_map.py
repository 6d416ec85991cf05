"""The tile map of a level and the interactable objects placed on it."""

from __future__ import annotations

from dataclasses import dataclass, field

from pigsgame.geometry import Vector2D


@dataclass
class InteractableInfo:
    position: Vector2D
    id: int
    flip: int


@dataclass
class GameMap:
    """A ``height`` by ``width`` grid of tile ids, all zero to start."""

    width: int
    height: int
    tilemap: list[list[int]] = field(init=False)
    interactables: list[InteractableInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"map size must not be negative: {self.width}x{self.height}")
        self.tilemap = [[0] * self.width for _ in range(self.height)]