"""Game state: the loaded scene, its textures and the player."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from os import PathLike

from .cubfile import CubMap, MapError, read_header, read_map_rows, validate_map
from .image import Image
from .xpm import XpmError, load_xpm

TILE = 64
SIDES = ("north", "south", "west", "east")

_HEADINGS = {"N": 270.0, "S": 90.0, "E": 0.0, "W": 180.0}


@dataclass
class Player:
    """Position in map units (64 per tile) and heading in degrees."""

    x: float = 0.0
    y: float = 0.0
    rot: float = 0.0


def find_player(rows: list[str] | tuple[str, ...]) -> Player:
    """Place the player at the centre of the first ``N``, ``S``, ``E`` or ``W`` cell."""
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            heading = _HEADINGS.get(cell)
            if heading is not None:
                return Player(float(j * TILE + TILE // 2), float(i * TILE + TILE // 2), heading)
    raise MapError("No player on map")


def _load_textures(scene: CubMap) -> dict[str, Image]:
    textures: dict[str, Image] = {}
    for side in SIDES:
        path = getattr(scene, side)
        try:
            textures[side] = load_xpm(path)
        except XpmError as exc:
            raise MapError(f"Cannot load texture {path}") from exc
    return textures


@dataclass
class Game:
    """Everything a frame needs: scene, wall textures, player and input state."""

    scene: CubMap
    player: Player
    textures: dict[str, Image] = field(default_factory=dict)
    keys: int = 0
    fps: float = 0.0

    @property
    def rows(self) -> tuple[str, ...]:
        return self.scene.rows

    @property
    def width(self) -> int:
        return self.scene.width

    @property
    def height(self) -> int:
        return self.scene.height

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Game:
        """Load a scene file and its textures and place the player."""
        header = read_header(path)
        rows = read_map_rows(path)
        textures = _load_textures(header)
        scene = replace(header, rows=tuple(validate_map(rows)))
        return cls(scene=scene, player=find_player(scene.rows), textures=textures)