"""Argparse builder and config command handling."""

import argparse
import json
import sys

from .colors import COLOR_MAP, colorize, is_known_color
from .glyphs import supported_characters


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="blocktext",
        description="Render text as large block-character banners",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  blocktext HELLO                        # Render in the default color (orange)
  blocktext -c red "BUILD FAILED"        # Pick a color
  blocktext "HELLO\\nWORLD"               # \\n starts a new banner line
  echo "Piped text" | blocktext -c cyan  # Read from stdin
  blocktext -i                           # Interactive mode

Colors:
  {', '.join(COLOR_MAP)}
  Unknown color names fall back to orange.

Characters:
  {supported_characters().replace(' ', '')} and space
  Letters are case-insensitive; anything else renders as a space.
        """,
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to render (if omitted, reads from stdin or uses the default text)",
    )
    parser.add_argument(
        "-c",
        "--color",
        nargs="?",
        const=None,
        default=None,
        metavar="COLOR",
        help="Foreground color name (case-insensitive)",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Render each line typed at an interactive prompt",
    )
    parser.add_argument(
        "--list-colors", action="store_true", help="Show available colors and exit"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug output"
    )
    parser.add_argument("--config-path", metavar="PATH", help="Custom config file path")

    # Config management
    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--set-default-color", metavar="COLOR", help="Set default color"
    )
    config_group.add_argument(
        "--set-default-text",
        metavar="TEXT",
        help="Set text rendered when no input is given",
    )
    config_group.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration (includes path)",
    )
    config_group.add_argument(
        "--reset-config",
        action="store_true",
        help="Reset configuration file at current path",
    )

    return parser


def print_color_list():
    for name, code in COLOR_MAP.items():
        print(colorize(name, code))


def handle_config_commands(cfg, args) -> bool:
    """Handle config-related commands. Returns True if a command was handled."""
    if args.show_config:
        print(f"Config file: {cfg.config_path}")
        print(json.dumps(cfg.data, indent=2, ensure_ascii=False))
        return True

    if args.reset_config:
        try:
            removed = cfg.reset()
        except OSError as e:
            print(f"❌ Could not reset configuration: {e}", file=sys.stderr)
            sys.exit(1)
        if removed:
            print(f"✅ Configuration reset: {cfg.config_path}")
        else:
            print("✅ No configuration file to reset")
        return True

    if args.set_default_color is not None or args.set_default_text is not None:
        if args.set_default_color is not None:
            if not is_known_color(args.set_default_color):
                print(f"❌ Unknown color: {args.set_default_color}", file=sys.stderr)
                print(f"   Available: {', '.join(COLOR_MAP)}", file=sys.stderr)
                sys.exit(1)
            cfg.set_default_color(args.set_default_color)
            print(f"✅ Default color set to: {args.set_default_color.lower()}")
        if args.set_default_text is not None:
            cfg.set_default_text(args.set_default_text)
            print(f"✅ Default text set to: {args.set_default_text}")
        return True

    return False
