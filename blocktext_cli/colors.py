"""Terminal color codes for banner output."""

from typing import Dict, Optional

# ANSI foreground color codes
COLOR_MAP: Dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "orange": "\033[38;5;208m",
    "purple": "\033[38;5;129m",
    "pink": "\033[38;5;205m",
    "gray": "\033[90m",
    "grey": "\033[90m",
}
RESET = "\033[0m"

DEFAULT_COLOR = "orange"


def is_known_color(name: Optional[str]) -> bool:
    return bool(name) and name.lower() in COLOR_MAP


def parse_color(name: Optional[str]) -> str:
    """Resolve a color name to its escape code, falling back to orange."""
    if not name:
        return COLOR_MAP[DEFAULT_COLOR]
    return COLOR_MAP.get(name.lower(), COLOR_MAP[DEFAULT_COLOR])


def colorize(text: str, color_code: str) -> str:
    return f"{color_code}{text}{RESET}"
