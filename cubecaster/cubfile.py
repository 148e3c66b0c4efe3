"""Reading and checking of ``.cub`` scene descriptions.

A scene file holds four wall textures (``NO``, ``SO``, ``WE``, ``EA``), a
floor colour (``F``) and a ceiling colour (``C``), followed by the map: rows
of ``1`` (wall), ``0`` (floor), spaces (void) and one of ``NSWE`` for the
player's starting place and heading.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from os import PathLike, fspath

from .image import argb

WRONG_FILE_NAME = "Wrong file name"
CANNOT_OPEN = "Cannot open file"
EMPTY_FILE = "Empty file"
WRONG_DATA = "Wrong data in file"
NO_MAP = "No map in file"
EMPTY_LINES = "Map has empty lines"
INVALID_MAP = "Invalid map"

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {"F": "floor", "C": "ceiling"}
_HEADER_FIELDS = ("north", "south", "west", "east", "floor", "ceiling")
_MAP_CHARS = frozenset(" 01NSWE")
_PLAYER_CHARS = frozenset("NSWE")
_CLOSED = frozenset(" 1")
_DIGITS = frozenset("0123456789")
_NOT_MAP_START = frozenset("CFNSWE ")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(ValueError):
    """Raised when a scene file is unusable."""


@dataclass(frozen=True)
class CubMap:
    """The contents of a scene file: textures, colours and map rows."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    rows: tuple[str, ...] = ()

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return max(map(len, self.rows), default=0)

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.rows)


def _has_suffix(path: str | PathLike[str], suffix: str) -> bool:
    text = fspath(path)
    return len(text) >= 5 and text.endswith(suffix)


def check_file_name(path: str | PathLike[str]) -> bool:
    """Tell whether ``path`` names a scene file: at least 5 characters, ending in ``.cub``."""
    return _has_suffix(path, ".cub")


def check_texture_name(path: str | PathLike[str]) -> bool:
    """Tell whether ``path`` names a texture: at least 5 characters, ending in ``.xpm``."""
    return _has_suffix(path, ".xpm")


def parse_rgb(text: str) -> int:
    """Parse ``"R,G,B"`` into an opaque pixel value.

    Spaces and newlines anywhere are ignored, as are empty fields between
    commas.  Exactly three decimal values from 0 to 255 are required.
    """
    cleaned = text.replace(" ", "").replace("\n", "")
    parts = [part for part in cleaned.split(",") if part]
    if any(not set(part) <= _DIGITS for part in parts):
        raise MapError(f"invalid colour: {text!r}")
    values = [int(part) for part in parts]
    if len(values) != 3 or any(value > 255 for value in values):
        raise MapError(f"invalid colour: {text!r}")
    return argb(255, *values)


def _read_lines(path: str | PathLike[str]) -> list[str]:
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return _LINE.findall(text)


def _texture_path(value: str) -> str | None:
    candidate = value.strip(" \n")
    if not check_texture_name(candidate):
        return None
    try:
        with open(candidate, "rb"):
            pass
    except OSError:
        return None
    return candidate


def _assign(found: dict[str, object], line: str) -> None:
    line = line.lstrip(" ")
    texture = _TEXTURE_KEYS.get(line[:2])
    if texture is not None:
        if found.get(texture) is not None:
            raise MapError(WRONG_DATA)
        found[texture] = _texture_path(line[2:])
        return
    color = _COLOR_KEYS.get(line[:1])
    if color is None:
        return
    if found.get(color):
        raise MapError(WRONG_DATA)
    try:
        value = parse_rgb(line[1:])
    except MapError:
        raise MapError(WRONG_DATA) from None
    # A zero value is indistinguishable from "not set", so black is refused.
    if not value:
        raise MapError(WRONG_DATA)
    found[color] = value


def read_header(path: str | PathLike[str]) -> CubMap:
    """Read the texture and colour definitions of a scene file.

    The returned map has no rows.  Texture paths that are badly named or
    cannot be opened count as missing.
    """
    if not check_file_name(path):
        raise MapError(WRONG_FILE_NAME)
    try:
        lines = _read_lines(path)
    except OSError as exc:
        raise MapError(CANNOT_OPEN) from exc
    if not lines:
        raise MapError(EMPTY_FILE)
    found: dict[str, object] = {}
    for line in lines:
        _assign(found, line)
    if any(found.get(name) is None for name in _HEADER_FIELDS):
        raise MapError(WRONG_DATA)
    return CubMap(**{name: found[name] for name in _HEADER_FIELDS})


def _map_start(lines: list[str]) -> int | None:
    for index, line in enumerate(lines):
        probe = line if index == 0 else line.strip(" ")
        if "1" in probe and probe[0] not in _NOT_MAP_START:
            # The first line of the file is never taken as a map row.
            return index if index > 0 else None
    return None


def read_map_rows(path: str | PathLike[str]) -> list[str]:
    """Return the map rows of a scene file, without their newlines.

    The map starts at the first line (after the first) holding a ``1`` and not
    starting with a header letter.  Blank lines inside or after it are errors.
    """
    try:
        lines = _read_lines(path)
    except OSError as exc:
        raise MapError(CANNOT_OPEN) from exc
    start = _map_start(lines)
    if start is None:
        raise MapError(NO_MAP)
    rows: list[str] = []
    for line in lines[start:]:
        if not line.strip(" \n"):
            raise MapError(EMPTY_LINES)
        if len(line) > 1:
            rows.append(line.removesuffix("\n"))
    return rows


def pad_rows(rows: list[str], width: int) -> list[str]:
    """Return ``rows`` with each one padded with spaces to ``width``."""
    return [row.ljust(width) for row in rows]


def _cell_ok(grid: list[str], i: int, j: int, width: int, height: int) -> bool:
    cell = grid[i][j]
    if cell not in _MAP_CHARS:
        return False
    on_border = i == 0 or i == height - 1 or j == 0 or j == width - 1
    if on_border and cell not in _CLOSED:
        return False
    if cell == " " and j < width - 1:
        if i > 0 and grid[i - 1][j] not in _CLOSED:
            return False
        if i < height - 1 and grid[i + 1][j] not in _CLOSED:
            return False
        if j > 0 and grid[i][j - 1] not in _CLOSED:
            return False
        if grid[i][j + 1] not in _CLOSED:
            return False
    return True


def validate_map(rows: list[str]) -> list[str]:
    """Check that the map is closed and holds exactly one player.

    Returns the rows padded to a common width; raises MapError otherwise.
    """
    width = max(map(len, rows), default=0)
    grid = pad_rows(list(rows), width)
    height = len(grid)
    players = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if not _cell_ok(grid, i, j, width, height):
                raise MapError(INVALID_MAP)
            if cell in _PLAYER_CHARS:
                players += 1
        if players > 1:
            raise MapError(INVALID_MAP)
    if players == 0:
        raise MapError(INVALID_MAP)
    return grid


def load_cub(path: str | PathLike[str]) -> CubMap:
    """Read, check and return a whole scene file."""
    header = read_header(path)
    rows = validate_map(read_map_rows(path))
    return replace(header, rows=tuple(rows))