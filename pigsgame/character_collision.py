"""Collisions between characters: damage to Liv and pigs, removal of dead pigs."""

from __future__ import annotations

from itertools import combinations

from pigsgame.characters.base import GameCharacter
from pigsgame.characters.cannon_ball import CannonBall
from pigsgame.characters.liv import Liv
from pigsgame.characters.pig import Pig
from pigsgame.geometry import check_aabb_collision


def _liv_vulnerable(liv: Liv) -> bool:
    return not (liv.is_taking_damage or liv.after_taking_damage or liv.is_dying or liv.is_dead)


def _pig_vulnerable(pig: Pig) -> bool:
    return not (pig.is_taking_damage or pig.is_dying or pig.is_dead)


def _overlap(a: GameCharacter, b: GameCharacter) -> bool:
    return check_aabb_collision(
        a.collision_region_information().collision_region,
        b.collision_region_information().collision_region,
    )


def pig_liv_collision(pig: Pig, liv: Liv) -> None:
    """A healthy pig touching a vulnerable Liv hurts her."""
    if _liv_vulnerable(liv) and _pig_vulnerable(pig) and _overlap(liv, pig):
        liv.start_taking_damage()


def cannonball_liv_collision(cannonball: CannonBall, liv: Liv) -> None:
    if _liv_vulnerable(liv) and _overlap(cannonball, liv):
        liv.start_taking_damage()


def cannonball_pig_collision(cannonball: CannonBall, pig: Pig) -> None:
    if _pig_vulnerable(pig) and _overlap(cannonball, pig):
        pig.start_taking_damage()


_HANDLERS = (
    (Pig, Liv, pig_liv_collision),
    (CannonBall, Liv, cannonball_liv_collision),
    (CannonBall, Pig, cannonball_pig_collision),
)


def compute_characters_collisions(characters: list[GameCharacter]) -> None:
    """Resolve every pair of characters once, then drop dead pigs from the list in place."""
    for first, second in combinations(characters, 2):
        for kind_a, kind_b, handler in _HANDLERS:
            if isinstance(first, kind_a) and isinstance(second, kind_b):
                handler(first, second)
                break
            if isinstance(second, kind_a) and isinstance(first, kind_b):
                handler(second, first)
                break

    characters[:] = [c for c in characters if not (isinstance(c, Pig) and c.is_dead)]