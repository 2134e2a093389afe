"""Text codecs shared by the setting variants.

Each ``parse_*`` raises ParseError on malformed input and is the inverse of
the matching ``format_*``.
"""

import math
import re

from ..errors import ParseError
from ..subsystems.base import Resolution

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def format_bool(value: bool) -> str:
    return "True" if value else "False"


def parse_bool(text: str, setting: str = "value") -> bool:
    """Accept "true"/"false" in any case, surrounding whitespace ignored."""
    normalized = (text or "").strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ParseError(setting, text, "'True' or 'False'")


def format_int(value: int) -> str:
    return str(int(value))


def parse_int(text: str, setting: str = "value") -> int:
    stripped = (text or "").strip()
    if not _INT_PATTERN.match(stripped):
        raise ParseError(setting, text, "an integer")
    try:
        return int(stripped)
    except ValueError:
        raise ParseError(setting, text, "an integer") from None


def format_volume(value: float) -> str:
    return f"{value:.2f}"


def parse_float(text: str, setting: str = "value") -> float:
    """Parse a finite decimal number. ``nan`` and ``inf`` are rejected."""
    stripped = (text or "").strip()
    if not _FLOAT_PATTERN.match(stripped):
        raise ParseError(setting, text, "a decimal number")
    value = float(stripped)
    if not math.isfinite(value):
        raise ParseError(setting, text, "a finite decimal number")
    return value


def format_resolution(value: Resolution) -> str:
    return f"{value.width} X {value.height}"


def parse_resolution(text: str, setting: str = "resolution") -> Resolution:
    """Parse ``"<width> X <height>"``; the separator is case-insensitive."""
    expected = "'<width> X <height>'"
    if text is None or not text.strip():
        raise ParseError(setting, text, expected)

    tokens = text.upper().split("X")
    if len(tokens) != 2:
        raise ParseError(setting, text, expected)

    width, height = (token.strip() for token in tokens)
    if not (_INT_PATTERN.match(width) and _INT_PATTERN.match(height)):
        raise ParseError(setting, text, expected)
    try:
        return Resolution(int(width), int(height))
    except ValueError:
        raise ParseError(setting, text, expected) from None
