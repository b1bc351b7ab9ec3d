"""Block glyph catalog for banner rendering."""
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

GLYPH_HEIGHT = 6


class Glyph(NamedTuple):
    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


BLANK_GLYPH = Glyph(('    ',) * GLYPH_HEIGHT)

# Glyph bitmaps: 6 rows tall, every row of a glyph padded to the same width.
# Latin letters are stored uppercase only; hiragana is matched as-is.
_FONT: Dict[str, List[str]] = {
    'A': [
        ' █████╗ ',
        '██╔══██╗',
        '███████║',
        '██╔══██║',
        '██║  ██║',
        '╚═╝  ╚═╝',
    ],
    'B': [
        '██████╗ ',
        '██╔══██╗',
        '██████╔╝',
        '██╔══██╗',
        '██████╔╝',
        '╚═════╝ ',
    ],
    'C': [
        ' ██████╗',
        '██╔════╝',
        '██║     ',
        '██║     ',
        '╚██████╗',
        ' ╚═════╝',
    ],
    'D': [
        '██████╗ ',
        '██╔══██╗',
        '██║  ██║',
        '██║  ██║',
        '██████╔╝',
        '╚═════╝ ',
    ],
    'E': [
        '███████╗',
        '██╔════╝',
        '█████╗  ',
        '██╔══╝  ',
        '███████╗',
        '╚══════╝',
    ],
    'F': [
        '███████╗',
        '██╔════╝',
        '█████╗  ',
        '██╔══╝  ',
        '██║     ',
        '╚═╝     ',
    ],
    'G': [
        ' ██████╗ ',
        '██╔════╝ ',
        '██║  ███╗',
        '██║   ██║',
        '╚██████╔╝',
        ' ╚═════╝ ',
    ],
    'H': [
        '██╗  ██╗',
        '██║  ██║',
        '███████║',
        '██╔══██║',
        '██║  ██║',
        '╚═╝  ╚═╝',
    ],
    'I': [
        '██╗',
        '██║',
        '██║',
        '██║',
        '██║',
        '╚═╝',
    ],
    'J': [
        '     ██╗',
        '     ██║',
        '     ██║',
        '██   ██║',
        '╚█████╔╝',
        ' ╚════╝ ',
    ],
    'K': [
        '██╗  ██╗',
        '██║ ██╔╝',
        '█████╔╝ ',
        '██╔═██╗ ',
        '██║  ██╗',
        '╚═╝  ╚═╝',
    ],
    'L': [
        '██╗     ',
        '██║     ',
        '██║     ',
        '██║     ',
        '███████╗',
        '╚══════╝',
    ],
    'M': [
        '███╗   ███╗',
        '████╗ ████║',
        '██╔████╔██║',
        '██║╚██╔╝██║',
        '██║ ╚═╝ ██║',
        '╚═╝     ╚═╝',
    ],
    'N': [
        '███╗   ██╗',
        '████╗  ██║',
        '██╔██╗ ██║',
        '██║╚██╗██║',
        '██║ ╚████║',
        '╚═╝  ╚═══╝',
    ],
    'O': [
        ' ██████╗ ',
        '██╔═══██╗',
        '██║   ██║',
        '██║   ██║',
        '╚██████╔╝',
        ' ╚═════╝ ',
    ],
    'P': [
        '██████╗ ',
        '██╔══██╗',
        '██████╔╝',
        '██╔═══╝ ',
        '██║     ',
        '╚═╝     ',
    ],
    'Q': [
        ' ██████╗ ',
        '██╔═══██╗',
        '██║   ██║',
        '██║▄▄ ██║',
        '╚██████╔╝',
        ' ╚══▀▀═╝ ',
    ],
    'R': [
        '██████╗ ',
        '██╔══██╗',
        '██████╔╝',
        '██╔══██╗',
        '██║  ██║',
        '╚═╝  ╚═╝',
    ],
    'S': [
        '███████╗',
        '██╔════╝',
        '███████╗',
        '╚════██║',
        '███████║',
        '╚══════╝',
    ],
    'T': [
        '████████╗',
        '╚══██╔══╝',
        '   ██║   ',
        '   ██║   ',
        '   ██║   ',
        '   ╚═╝   ',
    ],
    'U': [
        '██╗   ██╗',
        '██║   ██║',
        '██║   ██║',
        '██║   ██║',
        '╚██████╔╝',
        ' ╚═════╝ ',
    ],
    'V': [
        '██╗   ██╗',
        '██║   ██║',
        '██║   ██║',
        '╚██╗ ██╔╝',
        ' ╚████╔╝ ',
        '  ╚═══╝  ',
    ],
    'W': [
        '██╗    ██╗',
        '██║    ██║',
        '██║ █╗ ██║',
        '██║███╗██║',
        '╚███╔███╔╝',
        ' ╚══╝╚══╝ ',
    ],
    'X': [
        '██╗  ██╗',
        '╚██╗██╔╝',
        ' ╚███╔╝ ',
        ' ██╔██╗ ',
        '██╔╝ ██╗',
        '╚═╝  ╚═╝',
    ],
    'Y': [
        '██╗   ██╗',
        '╚██╗ ██╔╝',
        ' ╚████╔╝ ',
        '  ╚██╔╝  ',
        '   ██║   ',
        '   ╚═╝   ',
    ],
    'Z': [
        '███████╗',
        '╚══███╔╝',
        '  ███╔╝ ',
        ' ███╔╝  ',
        '███████╗',
        '╚══════╝',
    ],
    '0': [
        ' ██████╗ ',
        '██╔═████╗',
        '██║██╔██║',
        '████╔╝██║',
        '╚██████╔╝',
        ' ╚═════╝ ',
    ],
    '1': [
        ' ██╗',
        '███║',
        '╚██║',
        ' ██║',
        ' ██║',
        ' ╚═╝',
    ],
    '2': [
        '██████╗ ',
        '╚════██╗',
        ' █████╔╝',
        '██╔═══╝ ',
        '███████╗',
        '╚══════╝',
    ],
    '3': [
        '██████╗ ',
        '╚════██╗',
        ' █████╔╝',
        ' ╚═══██╗',
        '██████╔╝',
        '╚═════╝ ',
    ],
    '4': [
        '██╗  ██╗',
        '██║  ██║',
        '███████║',
        '╚════██║',
        '     ██║',
        '     ╚═╝',
    ],
    '5': [
        '███████╗',
        '██╔════╝',
        '███████╗',
        '╚════██║',
        '███████║',
        '╚══════╝',
    ],
    '6': [
        ' ██████╗ ',
        '██╔════╝ ',
        '███████╗ ',
        '██╔═══██╗',
        '╚██████╔╝',
        ' ╚═════╝ ',
    ],
    '7': [
        '███████╗',
        '╚════██║',
        '    ██╔╝',
        '   ██╔╝ ',
        '   ██║  ',
        '   ╚═╝  ',
    ],
    '8': [
        ' █████╗ ',
        '██╔══██╗',
        '╚█████╔╝',
        '██╔══██╗',
        '╚█████╔╝',
        ' ╚════╝ ',
    ],
    '9': [
        ' █████╗ ',
        '██╔══██╗',
        '╚██████║',
        ' ╚═══██║',
        ' █████╔╝',
        ' ╚════╝ ',
    ],
    ' ': list(BLANK_GLYPH.rows),
    '!': [
        '██╗',
        '██║',
        '██║',
        '╚═╝',
        '██╗',
        '╚═╝',
    ],
    '?': [
        '██████╗ ',
        '╚════██╗',
        '  ▄███╔╝',
        '  ▀▀══╝ ',
        '  ██╗   ',
        '  ╚═╝   ',
    ],
    '.': [
        '   ',
        '   ',
        '   ',
        '   ',
        '██╗',
        '╚═╝',
    ],
    ',': [
        '    ',
        '    ',
        '    ',
        '██╗ ',
        '▄█╔╝',
        '╚═╝ ',
    ],
    '-': [
        '      ',
        '      ',
        '█████╗',
        '╚════╝',
        '      ',
        '      ',
    ],
    'あ': [
        '  ██╗     ',
        '████████╗ ',
        ' ██╔████╗ ',
        '██╔██╔═██╗',
        '╚███╔╝██╔╝',
        ' ╚══╝ ╚═╝ ',
    ],
    'い': [
        '██╗       ',
        '██║   ██╗ ',
        '██║   ╚██╗',
        '██║    ██║',
        '╚██╗   ╚═╝',
        ' ╚═╝      ',
    ],
    'う': [
        '  █████╗  ',
        '  ╚════╝  ',
        '███████╗  ',
        '╚════██║  ',
        '  ████╔╝  ',
        '  ╚═══╝   ',
    ],
    'え': [
        '  █████╗  ',
        '  ╚════╝  ',
        '███████╗  ',
        '╚══██╔═╝  ',
        ' ██╔╝████╗',
        ' ╚═╝ ╚═══╝',
    ],
    'お': [
        ' ██╗  ██╗ ',
        '██████╗╚╝ ',
        ' ██╔████╗ ',
        '████╔╝ ██╗',
        '╚██████╔╝ ',
        ' ╚═════╝  ',
    ],
    'か': [
        '  ██╗     ',
        '██████╗██╗',
        ' ██╔██║ ╚╝',
        ' ██║ ██║  ',
        '██╔╝██╔╝  ',
        '╚═╝ ╚═╝   ',
    ],
    'き': [
        '  ██╗     ',
        '████████╗ ',
        '  ███████╗',
        '  ╚██╔═══╝',
        ' ██████╗  ',
        ' ╚═════╝  ',
    ],
    'く': [
        '    ██╗   ',
        '  ██╔╝    ',
        '██╔╝      ',
        '╚██╗      ',
        '  ╚██╗    ',
        '    ╚═╝   ',
    ],
    'け': [
        '██╗   ██╗ ',
        '██║██████╗',
        '██║ ╚██╔═╝',
        '██║  ██║  ',
        '╚═╝ ██╔╝  ',
        '    ╚═╝   ',
    ],
    'こ': [
        ' ██████╗  ',
        ' ╚═════╝  ',
        '          ',
        '██╗       ',
        '╚███████╗ ',
        ' ╚══════╝ ',
    ],
    'ん': [
        '   ██╗    ',
        '  ██╔╝    ',
        ' █████╗   ',
        '██╔╝██╗██╗',
        '██║ ╚████║',
        '╚═╝  ╚═══╝',
    ],
    'に': [
        '██╗ █████╗',
        '██║ ╚════╝',
        '██║       ',
        '██║ ██╗   ',
        '██║ ╚████╗',
        '╚═╝  ╚═══╝',
    ],
    'ち': [
        '  ██╗     ',
        '████████╗ ',
        ' ██╔═══╝  ',
        '██████╗   ',
        '╚════██║  ',
        ' █████╔╝  ',
    ],
    'は': [
        '██╗   ██╗ ',
        '██║██████╗',
        '██║ ╚██╔═╝',
        '██║ ████║ ',
        '██║╚████╗ ',
        '╚═╝ ╚═══╝ ',
    ],
}


def _build_catalog(font: Dict[str, List[str]]) -> Mapping[str, Glyph]:
    catalog = {}
    for char, rows in font.items():
        if char == ' ':
            catalog[char] = BLANK_GLYPH
        else:
            catalog[char] = Glyph(tuple(rows))
    return MappingProxyType(catalog)


CATALOG: Mapping[str, Glyph] = _build_catalog(_FONT)


def lookup(char: str) -> Optional[Glyph]:
    """Return the glyph stored for ``char`` or None when there is none.

    Keys are matched exactly; case folding is the caller's job.
    """
    return CATALOG.get(char)


def supported_characters() -> str:
    """All catalog keys in catalog order."""
    return ''.join(CATALOG)
