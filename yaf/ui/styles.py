#!/usr/bin/env python3
"""
ANSI style table used by '@' placeholders.
"""

from types import MappingProxyType
from typing import Optional

from ..errors import UnknownColor

COLOR_PREFIX = "color"
COLOR_FORMAT = "\x1b[38;5;{}m"
RESET = "\x1b[0m"

STYLES = MappingProxyType({
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "inverse": "\x1b[7m",
    "strikethrough": "\x1b[9m",
    "reset": RESET,
})


def color(suffix: str) -> str:
    """
    Build the 256-color foreground sequence for a color<N> suffix.

    Args:
        suffix: Text following 'color'; surrounding whitespace is ignored

    Returns:
        The escape sequence for color N

    Raises:
        UnknownColor: If the suffix is not a decimal integer in 0..255, optionally with a leading "+"
    """
    value = suffix.strip()
    digits = value[1:] if value.startswith("+") else value
    if not digits.isascii() or not digits.isdigit() or int(digits) > 255:
        raise UnknownColor(value)
    return COLOR_FORMAT.format(int(digits))


def lookup(name: str) -> Optional[str]:
    """Return the sequence for a style name, or None if it is not a style."""
    if name.startswith(COLOR_PREFIX):
        return color(name[len(COLOR_PREFIX):])
    return STYLES.get(name)
