import pygame
import pytest

from pigsgame.drawing import (
    GLYPH_SIZE,
    SCALE_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    draw_direct_sprite,
    draw_filled_region,
    draw_line,
    draw_sprite,
    draw_static_sprite,
    gout,
    gstr_width,
    to_camera_position,
    to_world_position,
)
from pigsgame.geometry import RGBColor, Region2D, Vector2D

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def _screen():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


def _rgb(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def _sheet(*colors, w=1, h=1):
    sheet = pygame.Surface((w * len(colors), h), pygame.SRCALPHA)
    for index, color in enumerate(colors):
        sheet.fill(color + (255,), pygame.Rect(index * w, 0, w, h))
    return sheet


@pytest.mark.parametrize(
    "world, size, offset",
    [
        (Vector2D(10, 20), Vector2D(4, 4), Vector2D(0, 0)),
        (Vector2D(-7, 3), Vector2D(12, 20), Vector2D(5, -2)),
        (Vector2D(0, 0), Vector2D(0, 0), Vector2D(100, 50)),
    ],
)
def test_camera_world_round_trip(world, size, offset):
    camera = to_camera_position(world, size, offset)
    assert to_world_position(camera, size, offset) == world


def test_world_origin_maps_to_bottom_of_screen():
    assert to_camera_position(Vector2D(0, 0), Vector2D(0, 0), Vector2D(0, 0)) == Vector2D(0, SCREEN_HEIGHT)


def test_camera_offset_shifts_consistently():
    world = Vector2D(10, 10)
    offset = Vector2D(3, 4)
    size = Vector2D(2, 2)
    assert to_camera_position(world + offset, size, offset) == to_camera_position(world, size, Vector2D(0, 0))


def test_gstr_width_scales_with_length():
    assert gstr_width("") == 0
    assert gstr_width("ab") == 2 * gstr_width("a")
    assert gstr_width("a") == GLYPH_SIZE.x * SCALE_SIZE


def test_draw_sprite_covers_scaled_area():
    screen = _screen()
    sheet = _sheet(RED, w=4, h=4)
    world, size = Vector2D(10, 10), Vector2D(4, 4)
    draw_sprite(screen, sheet, Vector2D(0, 0), world, size, Vector2D(0, 0))
    cam = to_camera_position(world, size, Vector2D(0, 0))
    assert _rgb(screen, cam.x, cam.y) == RED
    assert _rgb(screen, cam.x + 4 * SCALE_SIZE - 1, cam.y + 4 * SCALE_SIZE - 1) == RED
    assert _rgb(screen, cam.x + 4 * SCALE_SIZE, cam.y) == (0, 0, 0)


def test_draw_sprite_flip_mirrors_horizontally():
    sheet = _sheet(RED, BLUE)
    world, size = Vector2D(10, 10), Vector2D(2, 1)
    cam = to_camera_position(world, size, Vector2D(0, 0))

    plain = _screen()
    draw_sprite(plain, sheet, Vector2D(0, 0), world, size, Vector2D(0, 0), False)
    flipped = _screen()
    draw_sprite(flipped, sheet, Vector2D(0, 0), world, size, Vector2D(0, 0), True)

    assert _rgb(plain, cam.x, cam.y) == RED
    assert _rgb(flipped, cam.x, cam.y) == BLUE


def test_draw_sprite_uses_sprite_offset():
    screen = _screen()
    sheet = _sheet(RED, BLUE)
    world, size = Vector2D(10, 10), Vector2D(1, 1)
    draw_sprite(screen, sheet, Vector2D(1, 0), world, size, Vector2D(0, 0))
    cam = to_camera_position(world, size, Vector2D(0, 0))
    assert _rgb(screen, cam.x, cam.y) == BLUE


def test_draw_static_sprite_ignores_camera():
    screen = _screen()
    sheet = _sheet(RED, w=2, h=2)
    pos, size = Vector2D(5, 5), Vector2D(2, 2)
    draw_static_sprite(screen, sheet, Vector2D(0, 0), pos, size)
    cam = to_camera_position(pos, size, Vector2D(0, 0))
    assert _rgb(screen, cam.x, cam.y) == RED


def test_draw_direct_sprite_at_window_position():
    screen = _screen()
    sheet = _sheet(BLUE, w=2, h=2)
    draw_direct_sprite(screen, sheet, Vector2D(0, 0), Vector2D(20, 30), Vector2D(2, 2))
    assert _rgb(screen, 20, 30) == BLUE
    assert _rgb(screen, 20 + 2 * SCALE_SIZE, 30) == (0, 0, 0)


def test_draw_filled_region_and_line():
    screen = _screen()
    draw_filled_region(screen, Region2D(10, 10, 5, 5), RGBColor(*RED))
    draw_line(screen, Vector2D(100, 100), Vector2D(200, 100), RGBColor(*BLUE))
    assert _rgb(screen, 12, 12) == RED
    assert _rgb(screen, 15, 15) == (0, 0, 0)
    assert _rgb(screen, 150, 100) == BLUE


def _font():
    sheet = pygame.Surface((GLYPH_SIZE.x * 2, GLYPH_SIZE.y), pygame.SRCALPHA)
    sheet.fill(WHITE + (255,), pygame.Rect(0, 0, GLYPH_SIZE.x, GLYPH_SIZE.y))
    sheet.fill(RED + (255,), pygame.Rect(GLYPH_SIZE.x, 0, GLYPH_SIZE.x, GLYPH_SIZE.y))
    return sheet, {"a": Vector2D(0, 0), "?": Vector2D(1, 0)}


def test_gout_region_matches_text_width():
    screen = _screen()
    sheet, charmap = _font()
    region = gout(screen, sheet, Vector2D(10, 20), "aaa", RGBColor(*WHITE), charmap)
    assert region == Region2D(10, 20, gstr_width("aaa"), GLYPH_SIZE.y)


def test_gout_unscaled_width():
    screen = _screen()
    sheet, charmap = _font()
    region = gout(screen, sheet, Vector2D(0, 0), "aa", RGBColor(*WHITE), charmap, scale=False)
    assert region.w == 2 * GLYPH_SIZE.x


def test_gout_applies_text_color():
    screen = _screen()
    sheet, charmap = _font()
    gout(screen, sheet, Vector2D(10, 20), "a", RGBColor(0, 255, 0), charmap)
    assert _rgb(screen, 10, 20) == (0, 255, 0)


def test_gout_unknown_character_uses_question_mark():
    screen = _screen()
    sheet, charmap = _font()
    gout(screen, sheet, Vector2D(10, 20), "z", RGBColor(*WHITE), charmap)
    assert _rgb(screen, 10, 20) == RED


def test_gout_without_fallback_glyph_raises():
    screen = _screen()
    sheet, _ = _font()
    with pytest.raises(KeyError):
        gout(screen, sheet, Vector2D(0, 0), "z", RGBColor(*WHITE), {"a": Vector2D(0, 0)})