"""Turn raw command-line or stdin input into the text handed to the renderer."""

import sys
from typing import List, Optional


def join_text_args(words: List[str]) -> str:
    """Join positional words with spaces.

    A shell can split a ``\\n`` escape across two words (``HELLO\\ nWORLD``):
    when a word starts with ``n`` and the previous one ends with a
    backslash, the backslash is moved so the pair forms ``\\n`` again.
    """
    parts: List[str] = []
    for i, word in enumerate(words):
        if not word:
            continue
        if i > 0 and word.startswith("n") and words[i - 1].endswith("\\"):
            if parts:
                parts[-1] = parts[-1][:-1]
            parts.append("\\n" + word[1:])
            continue
        parts.append(word)
    return " ".join(parts)


def expand_line_breaks(raw: str) -> str:
    """Replace literal backslash-n sequences with real line breaks."""
    return raw.replace("\\n", "\n")


def read_stdin(stream=None) -> Optional[str]:
    """Read piped input. Returns None when the stream is an interactive terminal."""
    if stream is None:
        stream = sys.stdin
    if stream is None or stream.isatty():
        return None
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream.read().strip()
    # Undecodable bytes become U+FFFD, which renders as a blank
    data = buffer.read().decode("utf-8", errors="replace")
    return data.replace("\r\n", "\n").strip()
