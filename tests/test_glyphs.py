import re
import string

import pytest

from blocktext_cli.glyphs import (
    BLANK_GLYPH,
    CATALOG,
    GLYPH_HEIGHT,
    Glyph,
    lookup,
    supported_characters,
)

HIRAGANA = "あいうえおかきくけこんにちは"
BLOCK_CHARS = re.compile(r"^[\s─-╿▀-▟■-◿]*$")


@pytest.mark.parametrize(
    "chars",
    [string.ascii_uppercase, string.digits, " !?.,-", HIRAGANA],
    ids=["letters", "digits", "punctuation", "hiragana"],
)
def test_catalog_covers_required_characters(chars):
    for char in chars:
        glyph = lookup(char)
        assert glyph is not None, char
        assert len(glyph.rows) == GLYPH_HEIGHT


def test_every_glyph_has_uniform_height_and_width():
    for char, glyph in CATALOG.items():
        assert len(glyph.rows) == GLYPH_HEIGHT, char
        assert len({len(row) for row in glyph.rows}) == 1, char
        assert glyph.width == len(glyph.rows[0])
        assert glyph.width > 0


def test_rows_use_only_whitespace_and_block_symbols():
    for char, glyph in CATALOG.items():
        for row in glyph.rows:
            assert BLOCK_CHARS.match(row), (char, row)


def test_space_is_the_blank_glyph():
    assert lookup(" ") is BLANK_GLYPH
    assert all(row.strip() == "" for row in BLANK_GLYPH.rows)
    assert len({len(row) for row in BLANK_GLYPH.rows}) == 1


def test_only_blank_glyph_is_whitespace():
    for char, glyph in CATALOG.items():
        if char != " ":
            assert any(row.strip() for row in glyph.rows), char


def test_lookup_is_exact_and_never_raises():
    assert lookup("a") is None
    assert lookup("@") is None
    assert lookup("") is None
    assert lookup("AB") is None
    assert lookup("\t") is None


def test_latin_keys_are_uppercase_only():
    latin = [c for c in CATALOG if c in string.ascii_letters]
    assert latin
    assert all(c.isupper() for c in latin)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATALOG["@"] = BLANK_GLYPH


def test_supported_characters_lists_catalog_keys():
    chars = supported_characters()
    assert set(chars) == set(CATALOG)
    assert "A" in chars and "あ" in chars


def test_known_glyph_shapes():
    assert lookup("H").rows[0] == "██╗  ██╗"
    assert lookup("T").rows[0] == "████████╗"
    assert lookup("W").rows[0] == "██╗    ██╗"
    assert lookup("I") == Glyph(("██╗", "██║", "██║", "██║", "██║", "╚═╝"))
