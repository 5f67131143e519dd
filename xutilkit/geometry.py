"""Window geometry strings: parsing and placement computation.

A geometry string has the form ``[=][<width>][{xX}<height>][{+-}<xoff>[{+-}<yoff>]]``,
for example ``"=80x24+300-49"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "GeometryMask",
    "SizeHintFlag",
    "Gravity",
    "ParsedGeometry",
    "SizeHints",
    "Placement",
    "WMPlacement",
    "parse_geometry",
    "geometry",
    "wm_geometry",
]


class GeometryMask(IntFlag):
    """Which parts of a geometry string were present."""

    NO_VALUE = 0x0000
    X_VALUE = 0x0001
    Y_VALUE = 0x0002
    WIDTH_VALUE = 0x0004
    HEIGHT_VALUE = 0x0008
    ALL_VALUES = 0x000F
    X_NEGATIVE = 0x0010
    Y_NEGATIVE = 0x0020


class SizeHintFlag(IntFlag):
    """Flags telling which fields of :class:`SizeHints` are defined."""

    US_POSITION = 1 << 0
    US_SIZE = 1 << 1
    P_POSITION = 1 << 2
    P_SIZE = 1 << 3
    P_MIN_SIZE = 1 << 4
    P_MAX_SIZE = 1 << 5
    P_RESIZE_INC = 1 << 6
    P_ASPECT = 1 << 7
    P_BASE_SIZE = 1 << 8
    P_WIN_GRAVITY = 1 << 9
    P_ALL_HINTS = (
        P_POSITION | P_SIZE | P_MIN_SIZE | P_MAX_SIZE | P_RESIZE_INC | P_ASPECT
    )


class Gravity(IntEnum):
    """Window gravity values."""

    FORGET = 0
    NORTH_WEST = 1
    NORTH = 2
    NORTH_EAST = 3
    WEST = 4
    CENTER = 5
    EAST = 6
    SOUTH_WEST = 7
    SOUTH = 8
    SOUTH_EAST = 9
    STATIC = 10


@dataclass(frozen=True)
class ParsedGeometry:
    """Result of parsing a geometry string; absent fields are ``None``."""

    mask: GeometryMask = GeometryMask.NO_VALUE
    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None


@dataclass
class SizeHints:
    """Window manager normal size hints."""

    flags: SizeHintFlag = SizeHintFlag(0)
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    width_inc: int = 0
    height_inc: int = 0
    min_aspect: tuple[int, int] = (0, 0)
    max_aspect: tuple[int, int] = (0, 0)
    base_width: int = 0
    base_height: int = 0
    win_gravity: int = 0


@dataclass(frozen=True)
class Placement:
    """Window position and size computed by :func:`geometry`."""

    mask: GeometryMask
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class WMPlacement:
    """Window position, size and gravity computed by :func:`wm_geometry`."""

    mask: GeometryMask
    x: int
    y: int
    width: int
    height: int
    gravity: Gravity


_DIGITS = "0123456789"


def _read_integer(text: str, pos: int) -> tuple[int, int]:
    """Read an optionally signed decimal integer; return (value, new position)."""
    sign = 1
    if pos < len(text) and text[pos] == "+":
        pos += 1
    elif pos < len(text) and text[pos] == "-":
        pos += 1
        sign = -1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * result, pos


def _parse(string: str | None) -> ParsedGeometry | None:
    """Parse a geometry string, returning ``None`` if it is malformed."""
    if not string:
        return ParsedGeometry()
    text = string[1:] if string[0] == "=" else string
    n = len(text)

    def at(i: int) -> str:
        return text[i] if i < n else ""

    mask = GeometryMask.NO_VALUE
    width = height = x = y = 0
    pos = 0

    if at(pos) not in ("+", "-", "x"):
        width, nxt = _read_integer(text, pos)
        if nxt == pos:
            return None
        pos = nxt
        mask |= GeometryMask.WIDTH_VALUE

    if at(pos) in ("x", "X"):
        pos += 1
        height, nxt = _read_integer(text, pos)
        if nxt == pos:
            return None
        pos = nxt
        mask |= GeometryMask.HEIGHT_VALUE

    if at(pos) in ("+", "-"):
        negative = at(pos) == "-"
        pos += 1
        value, nxt = _read_integer(text, pos)
        if nxt == pos:
            return None
        pos = nxt
        if negative:
            x = -value
            mask |= GeometryMask.X_NEGATIVE
        else:
            x = value
        mask |= GeometryMask.X_VALUE

        if at(pos) in ("+", "-"):
            negative = at(pos) == "-"
            pos += 1
            value, nxt = _read_integer(text, pos)
            if nxt == pos:
                return None
            pos = nxt
            if negative:
                y = -value
                mask |= GeometryMask.Y_NEGATIVE
            else:
                y = value
            mask |= GeometryMask.Y_VALUE

    if pos != n:
        return None

    return ParsedGeometry(
        mask=mask,
        x=x if mask & GeometryMask.X_VALUE else None,
        y=y if mask & GeometryMask.Y_VALUE else None,
        width=width if mask & GeometryMask.WIDTH_VALUE else None,
        height=height if mask & GeometryMask.HEIGHT_VALUE else None,
    )


def parse_geometry(string: str | None) -> ParsedGeometry:
    """Parse a geometry string such as ``"=80x24+300-49"``.

    An empty string or ``None`` gives a result with no values.
    Raises ``ValueError`` if the string is malformed.
    """
    parsed = _parse(string)
    if parsed is None:
        raise ValueError(f"invalid geometry specification: {string!r}")
    return parsed


def _lenient(string: str | None) -> ParsedGeometry:
    """Parse, treating a malformed string as one with no values."""
    parsed = _parse(string)
    return parsed if parsed is not None else ParsedGeometry()


def geometry(
    position: str | None,
    default: str | None,
    display_width: int,
    display_height: int,
    border_width: int,
    font_width: int,
    font_height: int,
    x_add: int,
    y_add: int,
) -> Placement:
    """Compute a window placement from a user geometry and a full default.

    Sizes are in units of ``font_width`` x ``font_height``; the returned mask
    is the one parsed from ``position``.
    """
    user = _lenient(position)
    dflt = _lenient(default)

    dx = dflt.x or 0
    dy = dflt.y or 0
    dwidth = dflt.width or 0
    dheight = dflt.height or 0

    if dflt.mask & GeometryMask.X_NEGATIVE:
        x = display_width + dx - dwidth * font_width - 2 * border_width - x_add
    else:
        x = dx
    if dflt.mask & GeometryMask.Y_NEGATIVE:
        y = display_height + dy - dheight * font_height - 2 * border_width - y_add
    else:
        y = dy
    width = dwidth
    height = dheight

    if user.mask & GeometryMask.WIDTH_VALUE:
        width = user.width
    if user.mask & GeometryMask.HEIGHT_VALUE:
        height = user.height

    if user.mask & GeometryMask.X_VALUE:
        if user.mask & GeometryMask.X_NEGATIVE:
            x = display_width + user.x - width * font_width - 2 * border_width - x_add
        else:
            x = user.x
    if user.mask & GeometryMask.Y_VALUE:
        if user.mask & GeometryMask.Y_NEGATIVE:
            y = (
                display_height + user.y - height * font_height
                - 2 * border_width - y_add
            )
        else:
            y = user.y

    return Placement(mask=user.mask, x=x, y=y, width=width, height=height)


def _mask_to_gravity(mask: GeometryMask) -> Gravity:
    corner = mask & (GeometryMask.X_NEGATIVE | GeometryMask.Y_NEGATIVE)
    if corner == 0:
        return Gravity.NORTH_WEST
    if corner == GeometryMask.X_NEGATIVE:
        return Gravity.NORTH_EAST
    if corner == GeometryMask.Y_NEGATIVE:
        return Gravity.SOUTH_WEST
    return Gravity.SOUTH_EAST


def wm_geometry(
    user_geometry: str | None,
    default_geometry: str | None,
    border_width: int,
    hints: SizeHints | None,
    display_width: int,
    display_height: int,
) -> WMPlacement:
    """Compute a placement and gravity from user and default geometries.

    The size hints supply base size, minimum and maximum size and resize
    increments. The returned mask is the user mask, plus the negative flags
    of the default geometry when its offsets were used.
    """
    if hints is None:
        hints = SizeHints()
    flags = hints.flags

    if flags & SizeHintFlag.P_BASE_SIZE:
        base_width, base_height = hints.base_width, hints.base_height
    elif flags & SizeHintFlag.P_MIN_SIZE:
        base_width, base_height = hints.min_width, hints.min_height
    else:
        base_width = base_height = 0
    if flags & SizeHintFlag.P_MIN_SIZE:
        min_width, min_height = hints.min_width, hints.min_height
    else:
        min_width, min_height = base_width, base_height
    if flags & SizeHintFlag.P_RESIZE_INC:
        width_inc, height_inc = hints.width_inc, hints.height_inc
    else:
        width_inc = height_inc = 1

    user = _lenient(user_geometry)
    dflt = _lenient(default_geometry)
    umask = user.mask
    dmask = dflt.mask
    rmask = umask

    if umask & GeometryMask.WIDTH_VALUE:
        units_w = user.width
    elif dmask & GeometryMask.WIDTH_VALUE:
        units_w = dflt.width
    else:
        units_w = 1
    if umask & GeometryMask.HEIGHT_VALUE:
        units_h = user.height
    elif dmask & GeometryMask.HEIGHT_VALUE:
        units_h = dflt.height
    else:
        units_h = 1

    width = max(units_w * width_inc + base_width, min_width)
    height = max(units_h * height_inc + base_height, min_height)

    if flags & SizeHintFlag.P_MAX_SIZE:
        width = min(width, hints.max_width)
        height = min(height, hints.max_height)

    if umask & GeometryMask.X_VALUE:
        if umask & GeometryMask.X_NEGATIVE:
            x = display_width + user.x - width - 2 * border_width
        else:
            x = user.x
    elif dmask & GeometryMask.X_VALUE:
        if dmask & GeometryMask.X_NEGATIVE:
            x = display_width + dflt.x - width - 2 * border_width
            rmask |= GeometryMask.X_NEGATIVE
        else:
            x = dflt.x
    else:
        x = 0

    if umask & GeometryMask.Y_VALUE:
        if umask & GeometryMask.Y_NEGATIVE:
            y = display_height + user.y - height - 2 * border_width
        else:
            y = user.y
    elif dmask & GeometryMask.Y_VALUE:
        if dmask & GeometryMask.Y_NEGATIVE:
            y = display_height + dflt.y - height - 2 * border_width
            rmask |= GeometryMask.Y_NEGATIVE
        else:
            y = dflt.y
    else:
        y = 0

    return WMPlacement(
        mask=rmask,
        x=x,
        y=y,
        width=width,
        height=height,
        gravity=_mask_to_gravity(rmask),
    )