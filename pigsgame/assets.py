"""Shared images used across screens: tiles, life bar, font, balloons, backgrounds."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame

SPRITES_DIR = Path("assets") / "sprites"

TILESET_FILE = "tiles.png"
LIFEBAR_FILE = "lifebar.png"
LIFEBAR_HEART_FILE = "small_heart18x14.png"
MONOGRAM_FILE = "monogram.png"
TALK_BALOON_FILE = "talk_baloon.png"
FOREST_BACKGROUND_FILE = "forest_background.png"


class AssetLoadError(Exception):
    """An image could not be read."""


def load_image(path: Union[str, Path]) -> pygame.Surface:
    """Read an image file into a surface, raising ``AssetLoadError`` on failure."""
    path = Path(path)
    if not path.is_file():
        raise AssetLoadError(f"Unable to load image {path}: no such file")
    try:
        return pygame.image.load(str(path))
    except pygame.error as exc:
        raise AssetLoadError(f"Unable to load image {path}: {exc}") from exc


class AssetsRegistry:
    """Holds the shared images once ``load`` has read them."""

    def __init__(self) -> None:
        self.tileset: Optional[pygame.Surface] = None
        self.lifebar: Optional[pygame.Surface] = None
        self.lifebar_heart: Optional[pygame.Surface] = None
        self.monogram: Optional[pygame.Surface] = None
        self.talk_baloon: Optional[pygame.Surface] = None
        self.forest_background: Optional[pygame.Surface] = None

    def load(self, base_dir: Union[str, Path] = ".") -> None:
        """Read every image from ``<base_dir>/assets/sprites``.

        Either all images are loaded or, on error, none are replaced.
        """
        sprites = Path(base_dir) / SPRITES_DIR
        tileset = load_image(sprites / TILESET_FILE)
        lifebar = load_image(sprites / LIFEBAR_FILE)
        lifebar_heart = load_image(sprites / LIFEBAR_HEART_FILE)
        monogram = load_image(sprites / MONOGRAM_FILE)
        talk_baloon = load_image(sprites / TALK_BALOON_FILE)
        forest_background = load_image(sprites / FOREST_BACKGROUND_FILE)

        self.tileset = tileset
        self.lifebar = lifebar
        self.lifebar_heart = lifebar_heart
        self.monogram = monogram
        self.talk_baloon = talk_baloon
        self.forest_background = forest_background


assets_registry = AssetsRegistry()