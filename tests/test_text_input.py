import io

from blocktext_cli.text_input import expand_line_breaks, join_text_args, read_stdin


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_join_text_args_uses_single_spaces():
    assert join_text_args(["HELLO", "WORLD"]) == "HELLO WORLD"
    assert join_text_args([]) == ""


def test_join_text_args_skips_empty_words():
    assert join_text_args(["A", "", "B"]) == "A B"


def test_join_text_args_rejoins_split_escape():
    assert join_text_args(["HELLO\\", "nWORLD"]) == "HELLO \\nWORLD"


def test_join_text_args_leaves_plain_n_words_alone():
    assert join_text_args(["RUN", "now"]) == "RUN now"


def test_expand_line_breaks():
    assert expand_line_breaks("A\\nB") == "A\nB"
    assert expand_line_breaks("A\\n\\nB") == "A\n\nB"
    assert expand_line_breaks("no escapes") == "no escapes"


def test_read_stdin_strips_piped_text():
    assert read_stdin(io.StringIO("  hi there \n")) == "hi there"


def test_read_stdin_ignores_terminal():
    assert read_stdin(FakeTTY("ignored")) is None
