#!/usr/bin/env python3
"""
blocktext - render text as large block-character banners
Usage: blocktext [-c COLOR] [TEXT ...]
       echo "text" | blocktext [options]
"""

import signal
import sys
from typing import List, Optional, Tuple

from .cli_args import build_parser, handle_config_commands, print_color_list
from .colors import parse_color, colorize
from .config_store import BlockTextConfig
from .render import render
from .text_input import expand_line_breaks, join_text_args, read_stdin


def _exit_on_sigint(signum, frame):
    """Handle SIGINT (Ctrl+C) by exiting with a message and code 130."""
    print("\n❌ Cancelled by user (Ctrl+C)", file=sys.stderr)
    sys.exit(130)


class BlockTextCLI:
    def __init__(self, config: BlockTextConfig):
        self.config = config

    def resolve_color(self, color_arg: Optional[str]) -> str:
        """--color wins, then the saved default, then orange."""
        return parse_color(color_arg or self.config.default_color)

    def resolve_text(self, words: List[str]) -> Tuple[str, str]:
        """Return (raw text, source) from arguments, piped stdin or the saved default."""
        if words:
            return join_text_args(words), "arguments"
        piped = read_stdin()
        if piped is not None:
            return piped, "stdin"
        return self.config.default_text, "default"

    def run(self, args):
        color_code = self.resolve_color(args.color)

        if args.interactive:
            from .interactive import interactive_loop
            from .prompt_input import close_session, create_session

            session = create_session(history_path=self.config.history_path)
            try:
                interactive_loop(session, color_code)
            finally:
                close_session()
            return

        raw, source = self.resolve_text(args.text)
        text = expand_line_breaks(raw)
        art = render(text)

        if args.debug:
            rows = art.count("\n") + 1
            print(f"DEBUG - input source: {source}", file=sys.stderr)
            print(f"DEBUG - text: {text!r}", file=sys.stderr)
            print(f"DEBUG - color: {args.color or self.config.default_color!r} -> {color_code!r}", file=sys.stderr)
            print(f"DEBUG - rows: {rows}", file=sys.stderr)

        print(colorize(art, color_code))


def main(argv: Optional[List[str]] = None):
    # Ensure first Ctrl+C exits immediately with a message (exit code 130 = SIGINT)
    signal.signal(signal.SIGINT, _exit_on_sigint)

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.list_colors:
        print_color_list()
        return

    # Build config (with optional custom path)
    cfg = BlockTextConfig(path_arg=args.config_path)

    if handle_config_commands(cfg, args):
        return

    BlockTextCLI(cfg).run(args)


if __name__ == "__main__":
    main()
