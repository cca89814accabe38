"""FontHub — searchable index over a directory of font metadata documents."""

__version__ = "0.1.0"
