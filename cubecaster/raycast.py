"""Ray casting of the map into a frame image."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .game import TILE, Game
from .image import Image

ERROR_DISTANCE = 1_000_000.0
RAY_COUNT = 480
HORIZONTAL = 0
VERTICAL = 1

_PI = math.pi
_TWO_PI = 2 * math.pi
_DEG = math.pi / 180
_HALF_FOV = 30
_EDGE = 0.0001
_MIN_DISTANCE = 1e-6


@dataclass
class Ray:
    """Where a ray met a wall, how far it travelled and which grid line it crossed."""

    x: float
    y: float
    dist: float = ERROR_DISTANCE
    side: int = HORIZONTAL
    rot: float = 0.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (_PI / 180)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180 / _PI)


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((bx - ax) * (bx - ax) + (by - ay) * (by - ay))


def _missed(game: Game, angle: float, side: int) -> Ray:
    return Ray(game.player.x, game.player.y, ERROR_DISTANCE, side, angle)


def _march(game: Game, angle: float, side: int,
           x: float, y: float, dx: float, dy: float) -> Ray:
    rows = game.rows
    while True:
        mx = int(x) >> 6
        my = int(y) >> 6
        if not (0 <= mx < game.width and 0 <= my < game.height) or mx >= len(rows[my]):
            return _missed(game, angle, side)
        if rows[my][mx] == "1":
            dist = distance(game.player.x, game.player.y, x, y)
            return Ray(x, y, dist, side, angle)
        x += dx
        y += dy


def _grid_line(coord: float) -> int:
    return (int(coord) >> 6) << 6


def cast_horizontal(game: Game, angle: float) -> Ray:
    """Follow a ray across horizontal grid lines until it meets a wall."""
    if angle == 0 or angle == _PI:
        return _missed(game, angle, HORIZONTAL)
    tangent = math.tan(angle)
    if tangent == 0:
        return _missed(game, angle, HORIZONTAL)
    atan = -1 / tangent
    player = game.player
    if angle > _PI:
        y = _grid_line(player.y) - _EDGE
        dy = -TILE
    else:
        y = _grid_line(player.y) + TILE
        dy = TILE
    x = (player.y - y) * atan + player.x
    return _march(game, angle, HORIZONTAL, x, y, -dy * atan, dy)


def cast_vertical(game: Game, angle: float) -> Ray:
    """Follow a ray across vertical grid lines until it meets a wall."""
    if angle == _PI / 2 or angle == 3 * _PI / 2:
        return _missed(game, angle, VERTICAL)
    ntan = -math.tan(angle)
    player = game.player
    if _PI / 2 < angle < 3 * _PI / 2:
        x = _grid_line(player.x) - _EDGE
        dx = -TILE
    else:
        x = _grid_line(player.x) + TILE
        dx = TILE
    y = (player.x - x) * ntan + player.y
    return _march(game, angle, VERTICAL, x, y, dx, -dx * ntan)


def fill_background(game: Game, image: Image) -> None:
    """Paint the ceiling colour on the upper half and the floor colour below."""
    middle = image.height // 2
    image.fill(game.scene.ceiling)
    floor = game.scene.floor
    for y in range(middle + 1, image.height):
        for x in range(image.width):
            image.put_pixel(x, y, floor)


def _wall_texture(game: Game, ray: Ray) -> tuple[Image, int] | None:
    rot = ray.rot
    if ray.side == VERTICAL:
        offset = math.fmod(ray.y, TILE)
        if rot < _PI / 2 or rot > 3 * _PI / 2:
            texture = game.textures["east"]
            return texture, int(offset * texture.width / TILE)
        if _PI / 2 < rot < 3 * _PI / 2:
            texture = game.textures["west"]
            return texture, int((TILE - offset) * texture.width / TILE)
        return None
    offset = math.fmod(ray.x, TILE)
    if rot > _PI:
        texture = game.textures["north"]
        return texture, int(offset * texture.width / TILE)
    if rot < _PI:
        texture = game.textures["south"]
        return texture, int((TILE - offset) * texture.width / TILE)
    return None


def _draw_column(game: Game, image: Image, ray: Ray, line_height: float, screen_x: int) -> None:
    hit = _wall_texture(game, ray)
    if hit is None:
        return
    texture, tex_x = hit
    width, height = image.width, image.height
    shown = min(line_height, height)
    top = height // 2 - int(shown) // 2
    bottom = height // 2 + int(shown) // 2
    overflow = (line_height - shown) / 2
    half = width // 960
    for x in range(max(screen_x - half, 0), min(screen_x + half, width - 1) + 1):
        for y in range(max(top, 0), min(bottom, height - 1) + 1):
            tex_y = int((y - top + overflow) / line_height * texture.height)
            image.put_pixel(x, y, texture.get_pixel(tex_x, tex_y))


def _fix_fisheye(game: Game, ray: Ray) -> float:
    diff = deg_to_rad(game.player.rot) - ray.rot
    if diff < 0:
        diff += _TWO_PI
    if diff > _TWO_PI:
        diff -= _TWO_PI
    return ray.dist * math.cos(diff)


def raycast(game: Game, image: Image) -> None:
    """Draw the textured walls seen by the player into ``image``."""
    width, height = image.width, image.height
    angle = deg_to_rad(game.player.rot) - _DEG * _HALF_FOV
    for column in range(RAY_COUNT):
        if angle < 0:
            angle += _TWO_PI
        if angle > _TWO_PI:
            angle -= _TWO_PI
        horizontal = cast_horizontal(game, angle)
        vertical = cast_vertical(game, angle)
        ray = horizontal if horizontal.dist < vertical.dist else vertical
        ray.rot = angle
        ray.dist = _fix_fisheye(game, ray)
        line_height = TILE * height / max(ray.dist, _MIN_DISTANCE)
        screen_x = column * width // RAY_COUNT + width // 960
        _draw_column(game, image, ray, line_height, screen_x)
        angle += _DEG / 8