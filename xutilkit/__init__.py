"""Standalone X11 client utilities: geometry strings, text properties, context tables, XBM bitmaps, command-line options and named colours."""

__version__ = "0.1.0"
__all__ = ["bitmap", "cmdline", "colors", "context", "geometry", "textprop"]