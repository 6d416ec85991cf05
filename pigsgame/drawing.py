"""Coordinate conversion and sprite, shape and bitmap-text drawing."""

from __future__ import annotations

from typing import Mapping

import pygame

from pigsgame.geometry import RGBColor, Region2D, Vector2D

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540
SCALE_SIZE = 3
GLYPH_SIZE = Vector2D(6, 9)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def to_world_position(camera_position: Vector2D, size: Vector2D, camera_offset: Vector2D) -> Vector2D:
    """Convert a window position (y down) to a world position (y up)."""
    return Vector2D(
        _trunc_div(camera_position.x, SCALE_SIZE) + camera_offset.x,
        -_trunc_div(camera_position.y - SCREEN_HEIGHT, SCALE_SIZE) - size.y + camera_offset.y,
    )


def to_camera_position(world_position: Vector2D, size: Vector2D, camera_offset: Vector2D) -> Vector2D:
    """Convert a world position (y up) to the window position of its top-left corner."""
    return Vector2D(
        SCALE_SIZE * (world_position.x - camera_offset.x),
        -SCALE_SIZE * (world_position.y + size.y - camera_offset.y) + SCREEN_HEIGHT,
    )


def _cut(spritesheet: pygame.Surface, sprite_offset: Vector2D, size: Vector2D) -> pygame.Surface:
    piece = pygame.Surface((int(size.x), int(size.y)), pygame.SRCALPHA)
    piece.blit(spritesheet, (0, 0), pygame.Rect(int(sprite_offset.x), int(sprite_offset.y), int(size.x), int(size.y)))
    return piece


def _blit_scaled(surface, spritesheet, sprite_offset, position, size, flip) -> None:
    piece = _cut(spritesheet, sprite_offset, size)
    piece = pygame.transform.scale(piece, (SCALE_SIZE * int(size.x), SCALE_SIZE * int(size.y)))
    if flip:
        piece = pygame.transform.flip(piece, True, False)
    surface.blit(piece, (int(position.x), int(position.y)))


def draw_sprite(surface, spritesheet, sprite_offset, world_position, size, camera_offset, flip=False) -> None:
    """Draw a sprite placed in world coordinates, optionally mirrored horizontally."""
    camera_position = to_camera_position(world_position, size, camera_offset)
    _blit_scaled(surface, spritesheet, sprite_offset, camera_position, size, flip)


def draw_static_sprite(surface, spritesheet, sprite_offset, static_camera_position, size, flip=False) -> None:
    """Draw a sprite at a fixed world-style position, ignoring the camera."""
    camera_position = to_camera_position(static_camera_position, size, Vector2D(0, 0))
    _blit_scaled(surface, spritesheet, sprite_offset, camera_position, size, flip)


def draw_direct_sprite(surface, spritesheet, sprite_offset, window_position, size) -> None:
    """Draw a sprite with its top-left corner at a window position."""
    _blit_scaled(surface, spritesheet, sprite_offset, window_position, size, False)


def draw_filled_region(surface, region: Region2D, fill_color: RGBColor) -> None:
    rect = pygame.Rect(int(region.x), int(region.y), int(region.w), int(region.h))
    pygame.draw.rect(surface, tuple(fill_color), rect)


def draw_line(surface, start_position: Vector2D, end_position: Vector2D, fill_color: RGBColor) -> None:
    pygame.draw.line(
        surface,
        tuple(fill_color),
        (int(start_position.x), int(start_position.y)),
        (int(end_position.x), int(end_position.y)),
    )


def gstr_width(text: str) -> int:
    """Width in window pixels of ``text`` written with the scaled bitmap font."""
    return len(text) * GLYPH_SIZE.x * SCALE_SIZE


def gout(
    surface,
    spritesheet,
    static_camera_position: Vector2D,
    message: str,
    text_color: RGBColor,
    charmap: Mapping[str, Vector2D],
    scale: bool = True,
) -> Region2D:
    """Write ``message`` with a bitmap font and return the region it covers.

    Characters missing from ``charmap`` are drawn as ``'?'``.
    """
    scale_size = SCALE_SIZE if scale else 1
    region = Region2D(static_camera_position.x, static_camera_position.y, 0, 0)
    x = int(static_camera_position.x)
    y = int(static_camera_position.y)
    glyph_w = GLYPH_SIZE.x * scale_size
    glyph_h = GLYPH_SIZE.y * scale_size

    for char in message:
        cell = charmap[char] if char in charmap else charmap["?"]
        glyph = _cut(spritesheet, Vector2D(GLYPH_SIZE.x * cell.x, GLYPH_SIZE.y * cell.y), GLYPH_SIZE)
        glyph.fill(tuple(text_color), special_flags=pygame.BLEND_RGB_MULT)
        if scale_size != 1:
            glyph = pygame.transform.scale(glyph, (glyph_w, glyph_h))
        surface.blit(glyph, (x, y))
        x += glyph_w
        region.w += glyph_w
    region.h += GLYPH_SIZE.y
    return region