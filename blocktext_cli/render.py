"""Compose catalog glyphs into multi-line block banners."""
from typing import List

from .glyphs import BLANK_GLYPH, GLYPH_HEIGHT, Glyph, lookup

LINE_BREAK = '\n'


def resolve_glyph(char: str) -> Glyph:
    """Map one input character to the glyph it renders as.

    Letters stored only in uppercase are folded first; anything still
    missing from the catalog renders as the blank glyph.
    """
    glyph = lookup(char)
    if glyph is None:
        glyph = lookup(char.upper())
    if glyph is None:
        return BLANK_GLYPH
    return glyph


def render_block(line: str) -> List[str]:
    """Return the GLYPH_HEIGHT rows for a single logical line."""
    glyphs = [resolve_glyph(ch) for ch in line]
    rows = []
    for row_idx in range(GLYPH_HEIGHT):
        rows.append(''.join(g.rows[row_idx] for g in glyphs))
    return rows


def render(text: str) -> str:
    """Render ``text`` as block art.

    Each logical line becomes a block of GLYPH_HEIGHT rows; blocks are
    separated by one empty row. Empty lines still produce a full block.
    """
    blocks = ['\n'.join(render_block(line)) for line in text.split(LINE_BREAK)]
    return '\n\n'.join(blocks)
