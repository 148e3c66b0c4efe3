"""An in-memory 32-bit pixel buffer and colour packing helpers."""

from __future__ import annotations

import sys
from array import array

_MASK32 = 0xFFFFFFFF


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack channels into a 32-bit pixel value.

    The top byte holds the inverse of ``a``: an alpha of 255 gives an opaque
    pixel whose top byte is zero.  Each channel is taken modulo 256.
    """
    a, r, g, b = (channel & 0xFF for channel in (a, r, g, b))
    return ((255 - a) << 24) | (r << 16) | (g << 8) | b


class Image:
    """A width x height grid of 32-bit pixels, stored row by row."""

    bits_per_pixel = 32
    endian = 0  # pixels are laid out little-endian in to_bytes()

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * (self.bits_per_pixel // 8)

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        self._pixels[self._index(x, y)] = color & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y), or 0 when the point lies outside."""
        if not self._inside(x, y):
            return 0
        return self._pixels[self._index(x, y)]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        value = color & _MASK32
        self._pixels = array("I", [value]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words, row after row."""
        data = array("I", self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()