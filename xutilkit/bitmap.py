"""Reading X11 bitmap (XBM) files, in both the X10 and X11 formats."""

from __future__ import annotations

import io
import os
import re
from dataclasses import dataclass

__all__ = ["BitmapError", "Bitmap", "parse_bitmap", "read_bitmap_file"]

_MAX_LINE = 255

_DEFINE_RE = re.compile(r"#define\s*(\S+)\s+([+-]?\d+)")
_SHORT_RE = re.compile(r"static\s*short\s*(\S+)")
_UCHAR_RE = re.compile(r"static\s*unsigned\s*char\s*(\S+)")
_CHAR_RE = re.compile(r"static\s*char\s*(\S+)")

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_DELIMITERS = frozenset(b" ,}\n\t")


class BitmapError(ValueError):
    """Raised when bitmap data is malformed or incomplete."""


@dataclass(frozen=True)
class Bitmap:
    """A bitmap image.

    ``data`` holds ``height`` rows of ``(width + 7) // 8`` bytes each, the
    leftmost pixel of each byte in its least significant bit. The hot spot
    coordinates are ``None`` when the file does not define them.
    """

    width: int
    height: int
    data: bytes
    x_hot: int | None = None
    y_hot: int | None = None

    @property
    def bytes_per_line(self) -> int:
        """Number of bytes in one row of :attr:`data`."""
        return (self.width + 7) // 8

    def pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at column ``x`` and row ``y`` is set."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        byte = self.data[y * self.bytes_per_line + x // 8]
        return bool(byte >> (x % 8) & 1)


def _suffix(name: str) -> str:
    """The part of ``name`` after its last underscore, or all of it."""
    _, sep, tail = name.rpartition("_")
    return tail if sep else name


def _next_int(stream: io.BytesIO) -> int | None:
    """Read the next hex value; ``None`` at end of data."""
    value = 0
    got_one = False
    while True:
        ch = stream.read(1)
        if not ch:
            return None
        c = ch[0]
        if c in _HEX_DIGITS:
            value = (value << 4) + int(chr(c), 16)
            got_one = True
        elif c in _DELIMITERS and got_one:
            return value


def _read_values(stream: io.BytesIO) -> int:
    value = _next_int(stream)
    if value is None:
        raise BitmapError("bitmap data ends too early")
    return value


def parse_bitmap(text: str | bytes) -> Bitmap:
    """Parse the contents of an XBM file.

    Raises :class:`BitmapError` if the data is not a complete bitmap.
    """
    raw = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    stream = io.BytesIO(raw)
    width = height = 0
    x_hot: int | None = None
    y_hot: int | None = None
    data: bytes | None = None

    while True:
        chunk = stream.readline(_MAX_LINE - 1)
        if not chunk:
            break
        if len(chunk) == _MAX_LINE - 1:
            raise BitmapError("line too long")
        line = chunk.decode("latin-1")

        define = _DEFINE_RE.match(line)
        if define:
            name, value = define.group(1), int(define.group(2))
            kind = _suffix(name)
            if kind == "width":
                width = value
            elif kind == "height":
                height = value
            elif kind == "hot":
                if name.endswith("x_hot"):
                    x_hot = value
                elif name.endswith("y_hot"):
                    y_hot = value
            continue

        match = _SHORT_RE.match(line)
        if match:
            version10 = True
        else:
            match = _UCHAR_RE.match(line) or _CHAR_RE.match(line)
            if not match:
                continue
            version10 = False

        if _suffix(match.group(1)) != "bits[]":
            continue

        if width <= 0 or height <= 0:
            raise BitmapError("bitmap width or height missing")

        padding = 1 if version10 and width % 16 and width % 16 < 9 else 0
        bytes_per_line = (width + 7) // 8 + padding
        size = bytes_per_line * height

        out = bytearray()
        if version10:
            for offset in range(0, size, 2):
                value = _read_values(stream)
                out.append(value & 0xFF)
                if not padding or (offset + 2) % bytes_per_line:
                    out.append((value >> 8) & 0xFF)
        else:
            for _ in range(size):
                out.append(_read_values(stream) & 0xFF)
        data = bytes(out)
        break

    if data is None:
        raise BitmapError("no bitmap data found")
    return Bitmap(width=width, height=height, data=data, x_hot=x_hot, y_hot=y_hot)


def read_bitmap_file(path: str | os.PathLike[str]) -> Bitmap:
    """Read and parse an XBM file.

    ``OSError`` propagates if the file cannot be opened.
    """
    with open(path, "rb") as handle:
        return parse_bitmap(handle.read())