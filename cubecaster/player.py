"""Keyboard state and player movement with wall collision."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from .game import TILE, Player

KEYCODE_ESCAPE = 65307
KEYCODE_RIGHT_ARROW = 65363
KEYCODE_LEFT_ARROW = 65361

_TURN_SPEED = 1.5
_MOVE_SPEED = 2.0
_REFERENCE_FPS = 60.0
_BODY = 10
_SHOULDER = 5


class Key(enum.IntFlag):
    """Movement keys that are currently held down."""

    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8
    TURN_LEFT = 16
    TURN_RIGHT = 32


_BINDINGS = {
    ord("w"): Key.UP,
    ord("s"): Key.DOWN,
    ord("a"): Key.LEFT,
    ord("d"): Key.RIGHT,
    KEYCODE_RIGHT_ARROW: Key.TURN_RIGHT,
    KEYCODE_LEFT_ARROW: Key.TURN_LEFT,
}


def press_key(keys: int, key: int) -> Key:
    """Return ``keys`` with the binding of ``key`` held.

    Escape ends the game by raising SystemExit; unbound keys change nothing.
    """
    if key == KEYCODE_ESCAPE:
        raise SystemExit(0)
    return Key(keys) | _BINDINGS.get(key, Key(0))


def release_key(keys: int, key: int) -> Key:
    """Return ``keys`` with the binding of ``key`` released."""
    return Key(keys) & ~_BINDINGS.get(key, Key(0))


def _cell(value: int) -> int:
    # Integer division that truncates toward zero.
    return int(value / TILE)


def _is_wall(rows: Sequence[str], row: int, col: int) -> bool:
    if row < 0 or row >= len(rows):
        return False
    line = rows[row]
    return 0 <= col < len(line) and line[col] == "1"


def check_collision(player: Player, rows: Sequence[str]) -> None:
    """Push the player back so that it keeps its distance from nearby walls."""
    x = int(player.x)
    y = int(player.y)
    near_top = _cell(y) * TILE + _BODY
    near_bottom = (_cell(y) + 1) * TILE - _BODY
    near_left = _cell(x) * TILE + _BODY
    near_right = (_cell(x) + 1) * TILE - _BODY

    if _is_wall(rows, _cell(y - _BODY), _cell(x)):
        player.y = near_top
    if _is_wall(rows, _cell(y + _BODY), _cell(x)):
        player.y = near_bottom
    if _is_wall(rows, _cell(y), _cell(x - _BODY)):
        player.x = near_left
    if _is_wall(rows, _cell(y), _cell(x + _BODY)):
        player.x = near_right
    if (_is_wall(rows, _cell(y - _BODY), _cell(x - _SHOULDER))
            or _is_wall(rows, _cell(y - _BODY), _cell(x + _SHOULDER))):
        player.y = near_top
    if (_is_wall(rows, _cell(y + _BODY), _cell(x - _SHOULDER))
            or _is_wall(rows, _cell(y + _BODY), _cell(x + _SHOULDER))):
        player.y = near_bottom
    if (_is_wall(rows, _cell(y - _SHOULDER), _cell(x - _BODY))
            or _is_wall(rows, _cell(y + _SHOULDER), _cell(x - _BODY))):
        player.x = near_left
    if (_is_wall(rows, _cell(y - _SHOULDER), _cell(x + _BODY))
            or _is_wall(rows, _cell(y + _SHOULDER), _cell(x + _BODY))):
        player.x = near_right


def _turn(player: Player, keys: Key, scale: float) -> None:
    if keys & Key.TURN_RIGHT:
        player.rot += _TURN_SPEED * scale
    if keys & Key.TURN_LEFT:
        player.rot -= _TURN_SPEED * scale
    if player.rot > 359:
        player.rot -= 360
    if player.rot < 0:
        player.rot += 360


def _move(player: Player, keys: Key, scale: float) -> None:
    angle = math.radians(player.rot)
    dx = math.cos(angle) * _MOVE_SPEED * scale
    dy = math.sin(angle) * _MOVE_SPEED * scale
    if keys & Key.UP:
        player.x += dx
        player.y += dy
    if keys & Key.DOWN:
        player.x -= dx
        player.y -= dy
    if keys & Key.RIGHT:
        player.x -= dy
        player.y += dx
    if keys & Key.LEFT:
        player.x += dy
        player.y -= dx


def update_player(player: Player, keys: int, fps: float, rows: Sequence[str]) -> Player:
    """Turn and move the player for one frame, then resolve collisions.

    Speeds are scaled so that motion per second does not depend on ``fps``.
    A frame rate that is not positive (no measurement yet) moves nothing.
    """
    held = Key(keys)
    if fps > 0:
        scale = _REFERENCE_FPS / fps
        _turn(player, held, scale)
        _move(player, held, scale)
    check_collision(player, rows)
    return player