import math

import pytest

from cubecaster.cubfile import CubMap
from cubecaster.game import Game, Player
from cubecaster.image import Image, argb
from cubecaster.raycast import (
    ERROR_DISTANCE,
    HORIZONTAL,
    VERTICAL,
    cast_horizontal,
    cast_vertical,
    deg_to_rad,
    distance,
    fill_background,
    rad_to_deg,
    raycast,
)

ROOM = ("111", "101", "111")
FLOOR = argb(255, 10, 20, 30)
CEILING = argb(255, 200, 210, 220)
WALL_COLORS = {
    "north": argb(255, 255, 0, 0),
    "south": argb(255, 0, 255, 0),
    "west": argb(255, 0, 0, 255),
    "east": argb(255, 255, 255, 0),
}


def _textures():
    textures = {}
    for side, color in WALL_COLORS.items():
        image = Image(4, 4)
        image.fill(color)
        textures[side] = image
    return textures


def make_game(rot=0.0, x=96.0, y=96.0, rows=ROOM):
    scene = CubMap("n.xpm", "s.xpm", "w.xpm", "e.xpm", FLOOR, CEILING, tuple(rows))
    return Game(scene=scene, player=Player(x, y, rot), textures=_textures())


def test_angle_conversion_round_trip():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    for deg in (0.0, 45.0, 270.0, 359.5):
        assert rad_to_deg(deg_to_rad(deg)) == pytest.approx(deg)


def test_distance():
    assert distance(0, 0, 3, 4) == pytest.approx(5)
    assert distance(1, 2, 1, 2) == 0


def test_horizontal_ray_hits_south_wall():
    ray = cast_horizontal(make_game(), math.pi / 2)
    assert ray.side == HORIZONTAL
    assert ray.dist == pytest.approx(128 - 96)
    assert ray.y == pytest.approx(128)


def test_horizontal_ray_along_axis_misses():
    assert cast_horizontal(make_game(), 0).dist == ERROR_DISTANCE
    assert cast_horizontal(make_game(), math.pi).dist == ERROR_DISTANCE


def test_vertical_ray_hits_east_and_west_walls():
    east = cast_vertical(make_game(), 0.0)
    assert east.side == VERTICAL
    assert east.dist == pytest.approx(128 - 96)

    west = cast_vertical(make_game(), math.pi)
    assert west.dist == pytest.approx(96 - 64, abs=0.001)


def test_vertical_ray_along_axis_misses():
    assert cast_vertical(make_game(), math.pi / 2).dist == ERROR_DISTANCE
    assert cast_vertical(make_game(), 3 * math.pi / 2).dist == ERROR_DISTANCE


@pytest.mark.parametrize("angle", [0.1 * k for k in range(1, 63)])
def test_closed_room_always_hits_nearby(angle):
    game = make_game()
    best = min(cast_horizontal(game, angle).dist, cast_vertical(game, angle).dist)
    assert best <= math.hypot(32, 32) + 1


def test_ray_that_leaves_map_misses():
    game = make_game(rows=("000", "000", "000"))
    assert cast_vertical(game, 0.0).dist == ERROR_DISTANCE
    assert cast_horizontal(game, math.pi / 2).dist == ERROR_DISTANCE


def test_fill_background_splits_at_middle():
    image = Image(10, 10)
    fill_background(make_game(), image)
    assert image.get_pixel(3, 0) == CEILING
    assert image.get_pixel(3, 5) == CEILING
    assert image.get_pixel(3, 6) == FLOOR
    assert image.get_pixel(9, 9) == FLOOR


@pytest.mark.parametrize("rot, side", [(0.0, "east"), (270.0, "north"), (90.0, "south"), (180.0, "west")])
def test_facing_wall_draws_its_texture(rot, side):
    game = make_game(rot=rot)
    image = Image(96, 60)
    fill_background(game, image)
    raycast(game, image)
    column = [image.get_pixel(48, y) for y in range(image.height)]
    assert set(column) == {WALL_COLORS[side]}


def test_raycast_only_uses_known_colors():
    game = make_game(rot=45.0, x=100.0, y=90.0)
    image = Image(48, 30)
    fill_background(game, image)
    raycast(game, image)
    allowed = {FLOOR, CEILING, *WALL_COLORS.values()}
    pixels = {image.get_pixel(x, y) for x in range(image.width) for y in range(image.height)}
    assert pixels <= allowed
    assert pixels & set(WALL_COLORS.values())