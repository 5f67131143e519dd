# xutilkit

Pure-Python helpers for the self-contained parts of an X11 client library:
geometry strings, text properties, context tables, XBM bitmaps, command-line
option tables and the table of named colours. Only the standard library is used.

## Modules

### `xutilkit.geometry`

- `parse_geometry(string)` parses strings of the form
  `[=][<width>][{xX}<height>][{+-}<xoff>[{+-}<yoff>]]` and returns a
  `ParsedGeometry` with a `GeometryMask` and the `x`, `y`, `width` and `height`
  values that were present (absent ones are `None`). An empty string or `None`
  gives an empty result; a malformed string raises `ValueError`.
- `geometry(position, default, display_width, display_height, border_width,
  font_width, font_height, x_add, y_add)` combines a user geometry with a full
  default geometry, sizes counted in font units, and returns a `Placement`.
- `wm_geometry(user_geometry, default_geometry, border_width, hints,
  display_width, display_height)` does the same while honouring the base,
  minimum and maximum sizes and resize increments of a `SizeHints` (flags from
  `SizeHintFlag`), and returns a `WMPlacement` that also carries the window
  `Gravity`.

In `geometry` and `wm_geometry` a malformed geometry string is treated as one
with no values.

### `xutilkit.textprop`

`string_list_to_text_property(strings)` joins strings (`str`, `bytes` or `None`
for an empty entry) with NUL separators into a `TextProperty` of type
`XA_STRING` and format 8. `text_property_to_string_list(prop)` splits one back
into a list of strings, and raises `ValueError` for anything that is not 8-bit
`STRING` data. Text is encoded as Latin-1. `WELL_KNOWN_ATOMS` lists the atom
names a client interns for every connection.

### `xutilkit.context`

`ContextTable` stores one value per `(rid, context)` pair, guarded by a
re-entrant lock. `save` stores or replaces a value, `find` returns it and
`delete` removes it; the last two raise `ContextNotFound` (a `KeyError`) when
there is no entry. `len()` and `in` (with a `(rid, context)` tuple) work too.

### `xutilkit.bitmap`

`read_bitmap_file(path)` and `parse_bitmap(text)` read X10 (`static short`) and
X11 (`static char` / `static unsigned char`) XBM data into a `Bitmap` with
`width`, `height`, row-padded `data`, optional `x_hot` / `y_hot`,
`bytes_per_line` and `pixel(x, y)`. Malformed or incomplete data raises
`BitmapError`; a file that cannot be opened raises `OSError`.

### `xutilkit.cmdline`

`parse_command(options, prefix, argv)` matches the arguments after the program
name against a table of `OptionDesc` entries, accepting any unambiguous
abbreviation of an option. Each entry's `OptionKind` decides where its value
comes from. The result is a `ParsedCommand` whose `resources` map resource names
(`prefix` followed by the option's specifier) to values, and whose `argv` holds
the program name and every argument that was not consumed. An entry of kind
`SKIP_N_ARGS` without a non-negative integer value raises `CommandParseError`.

### `xutilkit.colors`

`lookup_color(name)` returns the `ColorEntry` (`name`, `red`, `green`, `blue`,
plus `rgb` and `hex`) for a colour name, matched without regard to case, and
raises `KeyError` for an unknown name. `color_names()` lists every name in table
order.

## What it does not do

There is no display connection. Nothing here talks to an X server: the geometry
functions take the display size as arguments, text properties are not read from
or written to windows, bitmaps are not turned into pixmaps, and command-line
resources are returned as a plain dictionary rather than stored in a resource
database. There is no command-line program.

## Installation

```
pip install .
```

Install with the `test` extra (`pip install .[test]`) and run `pytest` to run the
tests.

## Example

```python
from xutilkit.geometry import parse_geometry, GeometryMask
from xutilkit.colors import lookup_color

g = parse_geometry("=80x24+300-49")
assert g.width == 80 and g.height == 24
assert g.mask & GeometryMask.Y_NEGATIVE

print(lookup_color("CornflowerBlue").hex)  # "#6495ed"
```