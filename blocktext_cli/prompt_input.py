"""Rich input handling with prompt_toolkit."""

import atexit
import sys
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, History
from prompt_toolkit.input import create_input
from prompt_toolkit.input.base import Input
from prompt_toolkit.output.base import Output

from .colors import COLOR_MAP

COMMANDS = ["/help", "/exit", "/quit", "/q"] + [f"/color {name}" for name in COLOR_MAP]

# Module-level tracking for cleanup
_tty_file = None
_tty_input: Optional[Input] = None


def _cleanup_tty() -> None:
    """Close the tty file handle on exit."""
    global _tty_file, _tty_input
    if _tty_file is not None:
        try:
            _tty_file.close()
        except OSError:
            pass
        _tty_file = None
        _tty_input = None


# Register cleanup at module load
atexit.register(_cleanup_tty)


def _get_tty_input() -> Optional[Input]:
    """Get or create the tty input, reusing if already open.

    Only needed when stdin is redirected; otherwise prompt_toolkit uses stdin.
    """
    global _tty_file, _tty_input

    if _tty_input is not None:
        return _tty_input
    if sys.stdin.isatty():
        return None

    try:
        _tty_file = open("/dev/tty", "r")
        _tty_input = create_input(stdin=_tty_file)
        return _tty_input
    except OSError:
        return None


def create_session(
    history_path: Optional[Path] = None,
    input: Optional[Input] = None,
    output: Optional[Output] = None,
    history: Optional[History] = None,
) -> PromptSession:
    """Create a prompt session with history and completions."""
    if history is None and history_path is not None:
        history_path.parent.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(history_path))

    completer = WordCompleter(COMMANDS, ignore_case=True, sentence=True)

    return PromptSession(
        completer=completer,
        auto_suggest=AutoSuggestFromHistory(),
        history=history,
        input=input if input is not None else _get_tty_input(),
        output=output,
    )


def close_session() -> None:
    """Explicitly close tty resources. Called automatically on exit."""
    _cleanup_tty()


def get_interactive_input(session: PromptSession, prompt: str = "❯ ") -> str:
    """Get input with completions and history."""
    try:
        return session.prompt(prompt).strip()
    except KeyboardInterrupt:
        raise EOFError()
