# cubecaster

A small first-person raycasting engine. It reads a `.cub` scene description
(four wall textures, floor and ceiling colours and a grid map) and lets you
walk through the maze in a 960x540 window drawn with pygame.

## Installing

```
pip install .
```

## Running

```
cubecaster path/to/level.cub
```

Exactly one argument is expected: the path of a `.cub` file. Controls:

- `W` / `S`: move forward / backward
- `A` / `D`: strafe left / right
- Left / Right arrows: turn
- `Esc` or closing the window: quit

The mouse pointer is hidden while the window is open and key repeat is
turned off; movement follows the keys that are held down and is scaled by
the measured frame rate, so speed does not depend on how fast frames are
drawn. The player is kept 10 map units away from walls.

Any error is printed on standard error as `Error` followed by a line
`cubecaster: <reason>`, and the command exits with status 1.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- The file name must end in `.cub`.
- `NO`, `SO`, `WE`, `EA` name XPM texture files. Each path must end in
  `.xpm` and be readable; otherwise the entry counts as missing. Each key may
  be given only once.
- `F` and `C` give the floor and ceiling colours as exactly three
  comma-separated decimal values from 0 to 255. Each may be given only once.
  Pure black (`0,0,0`) is refused.
- The map starts at the first line holding a `1` that does not begin with a
  header letter. It uses `1` for walls, `0` for floor, spaces for void and
  exactly one of `N`, `S`, `E`, `W` for the player's start and facing. Rows
  are padded with spaces to the longest one; the map must be closed by walls
  (no floor or player on its edge, no floor next to void) and may contain no
  blank lines.

## Using it as a library

```python
from cubecaster.cubfile import load_cub, MapError
from cubecaster.game import Game
from cubecaster.image import Image
from cubecaster.player import Key, update_player
from cubecaster.raycast import fill_background, raycast

scene = load_cub("level.cub")          # CubMap: textures, colours, rows
game = Game.from_file("level.cub")     # scene + loaded textures + player

frame = Image(960, 540)
game.keys = Key.UP
update_player(game.player, game.keys, 60.0, game.rows)
fill_background(game, frame)
raycast(game, frame)
```

Modules:

- `cubecaster.cubfile`: `load_cub`, `read_header`, `read_map_rows`,
  `validate_map`, `pad_rows`, `parse_rgb`, `check_file_name`,
  `check_texture_name`; errors are raised as `MapError`.
- `cubecaster.game`: `Game` (with `Game.from_file`), `Player` and
  `find_player`.
- `cubecaster.image`: `Image`, a buffer of 32-bit pixels with `put_pixel`,
  `get_pixel`, `fill` and `to_bytes`, and `argb` for packing colours.
- `cubecaster.xpm`: `load_xpm` and `parse_xpm` turn XPM data into an
  `Image`; helpers `strip_comments`, `extract_strings`, `split_words` and
  `text_to_rgb`; errors are raised as `XpmError`.
- `cubecaster.colors`: `lookup_color` for named X11 colours (case-insensitive;
  `none` gives -1).
- `cubecaster.player`: the `Key` flags, `press_key`, `release_key`,
  `check_collision` and `update_player`.
- `cubecaster.raycast`: `raycast`, `fill_background`, `cast_horizontal`,
  `cast_vertical`, the `Ray` record and small helpers `deg_to_rad`,
  `rad_to_deg` and `distance`.
- `cubecaster.app`: `main` (the command) and `run`, which opens the window.

## Limits

- The XPM reader only understands the `c` colour key; colours named `none`
  become a pixel value of `0xFF000000` rather than a transparency mask.
- There are no sprites, doors, minimap or mouse look: the renderer draws
  textured walls over a flat floor and ceiling.

## Tests

```
pip install .[test]
pytest
```