import pytest

from blocktext_cli import render
from blocktext_cli.glyphs import BLANK_GLYPH, GLYPH_HEIGHT, lookup
from blocktext_cli.render import render_block, resolve_glyph


def _rows(text):
    return render(text).split("\n")


def test_render_hi_concatenates_glyph_rows():
    lines = _rows("HI")
    assert len(lines) == GLYPH_HEIGHT
    for r in range(GLYPH_HEIGHT):
        assert lines[r] == lookup("H").rows[r] + lookup("I").rows[r]


def test_space_between_letters():
    lines = _rows("A B")
    for r in range(GLYPH_HEIGHT):
        assert lines[r] == lookup("A").rows[r] + lookup(" ").rows[r] + lookup("B").rows[r]


@pytest.mark.parametrize(
    "lower, upper",
    [
        ("hello", "HELLO"),
        ("abc", "ABC"),
        ("AbC", "ABC"),
        ("test123", "TEST123"),
        ("hello!\nworld?", "HELLO!\nWORLD?"),
        ("Hello\nWorld", "HELLO\nWORLD"),
    ],
)
def test_case_insensitive(lower, upper):
    assert render(lower) == render(upper)


@pytest.mark.parametrize(
    "unknown, spaces",
    [("A@B", "A B"), ("A#$%B", "A   B"), ("~", " "), ("é", " "), ("😀X", " X")],
)
def test_unknown_characters_render_as_spaces(unknown, spaces):
    assert render(unknown) == render(spaces)


def test_characters_whose_uppercase_is_not_one_key_fall_back_to_blank():
    # "ß".upper() is "SS"
    assert render("ß") == render(" ")


def test_empty_input():
    assert render("") == "\n\n\n\n\n"
    assert _rows("") == [""] * GLYPH_HEIGHT


def test_two_lines_are_separated_by_one_blank_row():
    lines = _rows("HELLO\nWORLD")
    assert len(lines) == 2 * GLYPH_HEIGHT + 1
    assert lines[:GLYPH_HEIGHT] == _rows("HELLO")
    assert lines[GLYPH_HEIGHT] == ""
    assert lines[GLYPH_HEIGHT + 1:] == _rows("WORLD")


def test_consecutive_line_breaks_keep_blank_blocks():
    lines = _rows("A\n\nB")
    assert len(lines) == 3 * GLYPH_HEIGHT + 2
    assert lines[:6] == _rows("A")
    assert lines[6:14] == [""] * 8
    assert lines[14:] == _rows("B")


def test_leading_line_break():
    lines = _rows("\nTEST")
    assert len(lines) == 13
    assert lines[:7] == [""] * 7
    assert lines[7:] == _rows("TEST")


def test_trailing_line_break():
    lines = _rows("TEST\n")
    assert len(lines) == 13
    assert lines[:6] == _rows("TEST")
    assert lines[6:] == [""] * 7


def test_hiragana_is_not_case_transformed():
    lines = _rows("あいう")
    for r in range(GLYPH_HEIGHT):
        assert lines[r] == lookup("あ").rows[r] + lookup("い").rows[r] + lookup("う").rows[r]


def test_mixed_scripts():
    lines = _rows("ABあ")
    for r in range(GLYPH_HEIGHT):
        assert lines[r] == lookup("A").rows[r] + lookup("B").rows[r] + lookup("あ").rows[r]


def test_konnichiwa_renders_every_character():
    lines = _rows("こんにちは")
    assert len(lines) == GLYPH_HEIGHT
    assert len(lines[0]) == sum(lookup(c).width for c in "こんにちは")


def test_long_text_keeps_structure():
    lines = _rows("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    assert len(lines) == GLYPH_HEIGHT
    assert len({len(line) for line in lines}) == 1
    assert all(line for line in lines)


def test_output_has_no_trailing_newline():
    assert not render("HI").endswith("\n")


def test_resolve_glyph():
    assert resolve_glyph("a") is lookup("A")
    assert resolve_glyph("あ") is lookup("あ")
    assert resolve_glyph("@") is BLANK_GLYPH


def test_render_block_of_empty_line():
    assert render_block("") == [""] * GLYPH_HEIGHT
