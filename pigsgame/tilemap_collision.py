"""Collisions between a character and the solid tiles of a map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pigsgame.characters.base import GameCharacter
from pigsgame.game_map import GameMap
from pigsgame.geometry import CollisionSide, CollisionType, Region2D, Vector2D, check_aabb_collision

TILE_SIZE = 32

TILE_COLLISION_TYPE: dict[int, CollisionType] = {
    13: CollisionType.DANGEROUS_COLLISION,
    16: CollisionType.BOTTOM_ONLY_COLLISION,
    17: CollisionType.BOTTOM_ONLY_COLLISION,
    18: CollisionType.BOTTOM_ONLY_COLLISION,
    19: CollisionType.BOTTOM_ONLY_COLLISION,
}

# Tiles of these kinds push the character out when hit from the side or from below.
_BLOCKING = (CollisionType.TILEMAP_COLLISION, CollisionType.DANGEROUS_COLLISION)


@dataclass(frozen=True)
class _TileInfo:
    region: Region2D
    is_collideable: bool
    collision_type: CollisionType


def _tile_at(game_map: GameMap, position: Vector2D) -> _TileInfo:
    """Describe the tile under a world position; outside the map counts as solid."""
    j = math.floor(position.x / TILE_SIZE)
    i = math.floor(position.y / TILE_SIZE)
    region = Region2D(float(TILE_SIZE * j), float(TILE_SIZE * i), float(TILE_SIZE), float(TILE_SIZE))

    if i < 0 or i >= game_map.height or j < 0 or j >= game_map.width:
        return _TileInfo(region, True, CollisionType.TILEMAP_COLLISION)

    tile_id = game_map.tilemap[game_map.height - i - 1][j]
    if tile_id == 0:
        return _TileInfo(region, False, CollisionType.NO_COLLISION)
    return _TileInfo(region, True, TILE_COLLISION_TYPE.get(tile_id, CollisionType.TILEMAP_COLLISION))


def _resolve(tile: _TileInfo, character: GameCharacter) -> None:
    info = character.collision_region_information()
    box = info.collision_region
    old = info.old_collision_region
    tile_region = tile.region
    kind = tile.collision_type
    position = Vector2D(character.position.x, character.position.y)
    velocity = Vector2D(character.velocity.x, character.velocity.y)

    if not check_aabb_collision(box, tile_region):
        return

    if box.x + box.w > tile_region.x and old.x + old.w <= tile_region.x:
        if kind in _BLOCKING:
            character.set_position(tile_region.x - box.w - 0.1, position.y)
            character.set_velocity(0.0, velocity.y)
        character.handle_collision(kind, CollisionSide.RIGHT_COLLISION)
    elif box.x < tile_region.x + tile_region.w and old.x >= tile_region.x + tile_region.w:
        if kind in _BLOCKING:
            character.set_position(tile_region.x + tile_region.w + 0.1, position.y)
            character.set_velocity(0.0, velocity.y)
        character.handle_collision(kind, CollisionSide.LEFT_COLLISION)
    elif box.y < tile_region.y + tile_region.h and old.y >= tile_region.y + tile_region.h:
        character.set_position(position.x, tile_region.y + tile_region.h + 0.25)
        character.set_velocity(velocity.x, 0.0)
        character.handle_collision(kind, CollisionSide.BOTTOM_COLLISION)
    elif box.y + box.h > tile_region.y and old.y + old.h <= tile_region.y:
        if kind in _BLOCKING:
            character.set_position(position.x, tile_region.y - box.h - 0.1)
            character.set_velocity(velocity.x, 0.0)
        character.handle_collision(kind, CollisionSide.TOP_COLLISION)


def compute_tilemap_collisions(game_map: GameMap, character: GameCharacter) -> None:
    """Push ``character`` out of the tiles it overlaps, then call ``on_after_collision``.

    Eight points of the collision box are probed: the corners and the middles
    of the bottom, the sides and the top.
    """
    box = character.collision_region_information().collision_region
    probes = (
        Vector2D(box.x, box.y),
        Vector2D(box.x + box.w / 2, box.y),
        Vector2D(box.x + box.w, box.y),
        Vector2D(box.x, box.y + box.h / 2),
        Vector2D(box.x + box.w, box.y + box.h / 2),
        Vector2D(box.x, box.y + box.h),
        Vector2D(box.x + box.w / 2, box.y + box.h),
        Vector2D(box.x + box.w, box.y + box.h),
    )
    for probe in probes:
        tile = _tile_at(game_map, probe)
        if tile.is_collideable:
            _resolve(tile, character)

    character.on_after_collision()