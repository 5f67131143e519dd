"""Text properties holding lists of NUL-separated strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "XA_STRING",
    "WELL_KNOWN_ATOMS",
    "TextProperty",
    "string_list_to_text_property",
    "text_property_to_string_list",
]

XA_STRING = 31
"""The predefined atom for the ``STRING`` type (ISO 8859-1 text)."""

WELL_KNOWN_ATOMS = (
    "UTF8_STRING",
    "WM_PROTOCOLS",
    "WM_DELETE_WINDOW",
    "_MOTIF_WM_HINTS",
    "WM_NAME",
    "_NET_WM_NAME",
    "WM_ICON_NAME",
    "_NET_WM_ICON_NAME",
    "_NET_WM_WINDOW_TYPE",
    "_NET_WM_WINDOW_TYPE_DROPDOWN_MENU",
    "_NET_WM_WINDOW_TYPE_POPUP_MENU",
    "_NET_WM_WINDOW_TYPE_NORMAL",
)
"""Names of the atoms that are interned for every connection."""

_ENCODING = "latin-1"


@dataclass
class TextProperty:
    """A window property holding text.

    ``nitems`` is the number of data items in ``value``; when not given it
    is the length of ``value``.
    """

    value: bytes = b""
    encoding: int = XA_STRING
    format: int = 8
    nitems: int | None = field(default=None)

    def __post_init__(self) -> None:
        self.value = bytes(self.value)
        if self.nitems is None:
            self.nitems = len(self.value)


def _to_bytes(item: str | bytes | None) -> bytes:
    if item is None:
        return b""
    if isinstance(item, bytes):
        return item
    return item.encode(_ENCODING)


def string_list_to_text_property(
    strings: Iterable[str | bytes | None],
) -> TextProperty:
    """Join strings with NUL separators into a ``STRING`` property.

    ``None`` entries count as empty strings. The trailing NUL is not part
    of the property.
    """
    parts = [_to_bytes(s) for s in strings]
    value = b"\0".join(parts)
    return TextProperty(value=value, encoding=XA_STRING, format=8, nitems=len(value))


def text_property_to_string_list(prop: TextProperty) -> list[str]:
    """Split a NUL-separated ``STRING`` property into its strings.

    Raises ``ValueError`` if the property is not 8-bit ``STRING`` data.
    """
    if prop.encoding != XA_STRING or prop.format != 8:
        raise ValueError(
            f"cannot convert property with encoding {prop.encoding} "
            f"and format {prop.format}"
        )
    nitems = prop.nitems if prop.nitems is not None else len(prop.value)
    if nitems == 0:
        return []
    data = prop.value[:nitems]
    return [part.decode(_ENCODING) for part in data.split(b"\0")]