"""Render text as large block-character terminal banners."""

from .glyphs import BLANK_GLYPH, CATALOG, GLYPH_HEIGHT, Glyph, lookup
from .render import render

__version__ = "0.1.0"

__all__ = ["render", "lookup", "Glyph", "GLYPH_HEIGHT", "BLANK_GLYPH", "CATALOG"]
