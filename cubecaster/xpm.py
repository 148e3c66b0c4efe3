"""Reading of XPM images into :class:`~cubecaster.image.Image` buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike

from .colors import lookup_color
from .image import Image

_TRANSPARENT = 0xFF000000
_MAX_NAME = 63

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)", re.ASCII)


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them.  The length of the text never changes.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        length = 3 if close == -1 else close + 2 - begin
        text = _blank(text, begin, length)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        length = 2 if newline == -1 else newline + 1 - begin
        text = _blank(text, begin, length)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of each double-quoted string in ``text``, in order."""
    return _QUOTED.findall(text)


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    ``#hex`` values are read as hexadecimal.  Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table; unknown
    names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    full = name if end is None else f"{name} {end}"[:_MAX_NAME]
    try:
        return lookup_color(full)
    except KeyError:
        return 0


def _next_line(lines, what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_palette(lines, ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without value: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        value = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        # Short keys let a later definition win; long keys keep the first one.
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then rows."""
    source = iter(lines)
    fields = split_words(_next_line(source, "header"))
    if len(fields) < 4:
        raise XpmError(f"header needs four values, got {fields!r}")
    width, height, ncolors, cpp = (_atoi(field) for field in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {fields[:4]!r}")

    palette = _read_palette(source, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, f"pixel row {y}")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(extract_strings(strip_comments(text)))