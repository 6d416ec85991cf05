"""Creates the characters of a level from the interactables on its map."""

from __future__ import annotations

from typing import Mapping

from pigsgame.characters.base import GameCharacter
from pigsgame.characters.liv import Liv
from pigsgame.characters.pig import Pig
from pigsgame.game_map import GameMap

PLAYER_ID = 0
PIG_ID = 1

LIV_SPRITESHEET = "liv23x26.png"
JUMP_SPRITESHEET = "jump-smoke.png"
PIG_SPRITESHEET = "pig80x80.png"


def build_game_characters(surface, game_map: GameMap, assets: Mapping[str, object]) -> list[GameCharacter]:
    """Return the player (first id-0 interactable) followed by every pig, in map order.

    ``assets`` maps sprite file names to loaded images.
    """
    characters: list[GameCharacter] = []

    player = next((info for info in game_map.interactables if info.id == PLAYER_ID), None)
    if player is not None:
        characters.append(
            Liv(
                surface,
                player.position.x,
                player.position.y,
                assets[LIV_SPRITESHEET],
                assets[JUMP_SPRITESHEET],
            )
        )

    characters.extend(
        Pig(surface, info.position.x, info.position.y, assets[PIG_SPRITESHEET])
        for info in game_map.interactables
        if info.id == PIG_ID
    )
    return characters