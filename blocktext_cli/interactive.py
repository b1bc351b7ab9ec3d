"""Interactive render loop."""

import sys

from prompt_toolkit import PromptSession

from .colors import colorize, is_known_color, parse_color
from .prompt_input import get_interactive_input
from .render import render
from .text_input import expand_line_breaks

EXIT_COMMANDS = ("/exit", "/quit", "/q")


def _print_help():
    print("  /color NAME       - switch color", file=sys.stderr)
    print("  /exit, /quit, /q  - quit", file=sys.stderr)
    print("  /help, ?          - show this help", file=sys.stderr)
    print("  \\n                - start a new banner line", file=sys.stderr)
    print("  Tab               - show completions", file=sys.stderr)
    print("  Arrow Right       - accept suggestion", file=sys.stderr)


def interactive_loop(session: PromptSession, color_code: str, out=None) -> None:
    """Render every submitted line until the user quits (or Ctrl+C / Ctrl+D)."""
    if out is None:
        out = sys.stdout
    while True:
        try:
            line = get_interactive_input(session)
        except EOFError:
            break

        if not line:
            continue
        if line in ("/help", "?"):
            _print_help()
            continue
        if line in EXIT_COMMANDS:
            break
        if line.split(maxsplit=1)[0] == "/color":
            name = line[len("/color"):].strip()
            if is_known_color(name):
                color_code = parse_color(name)
                print(f"✅ Color set to: {name.lower()}", file=sys.stderr)
            else:
                print(f"❌ Unknown color: {name or '(none)'}", file=sys.stderr)
            continue

        print(colorize(render(expand_line_breaks(line)), color_code), file=out)
