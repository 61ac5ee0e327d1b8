"""
Read a color out of a free-form string.

The model is inferred from the shape of the string, checked in order:

1. ``rgb(...)`` / ``rgba(...)``   -> Rgb
2. ``hsl(...)`` / ``hsla(...)``   -> Hsl
3. ``#...``                       -> Hex
4. four space-separated values    -> Cmyk
5. a single number                -> Grayscale

Values keep any unit suffix (``"100%"``); the color constructors read the
leading number and ignore the rest.
"""
from __future__ import annotations
from typing import Callable, List, NamedTuple, Optional

from .colors import Cmyk, ColorBase, Grayscale, Hex, Hsl, Rgb
from .errors import ColorParseError
from .utils.num_utils import is_numeric


def parse_color_values(color_string: str, comma: bool = True) -> List[str]:
    """
    Split the values of a color string into trimmed tokens.

    When the string holds a ``(...)`` group, only its content is split. Tokens
    are separated by ``,`` (``comma=True``) or by single spaces.
    """
    start = color_string.find("(")
    if start != -1:
        end = color_string.find(")", start + 1)
        if end != -1:
            color_string = color_string[start + 1:end]

    values = color_string.split(",") if comma else color_string.split(" ")
    return [v.strip() for v in values]


def _function_values(color_string: str, counts: tuple[int, ...]) -> List[str]:
    start = color_string.find("(")
    if start == -1 or color_string.find(")", start + 1) == -1:
        raise ColorParseError(f"Malformed color function: {color_string!r}")

    values = parse_color_values(color_string)
    if len(values) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise ColorParseError(f"Expected {expected} values, got {len(values)}: {color_string!r}")
    return values


def _parse_rgb(color_string: str) -> Rgb:
    return Rgb(*_function_values(color_string, (3, 4)))


def _parse_hsl(color_string: str) -> Hsl:
    return Hsl(*_function_values(color_string, (3, 4)))


def _parse_cmyk(color_string: str) -> Cmyk:
    return Cmyk(*parse_color_values(color_string, comma=False))


class ParseRule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    build: Callable[[str], ColorBase]


# First match wins.
PARSE_RULES: tuple[ParseRule, ...] = (
    ParseRule("rgb", lambda s: s.startswith("rgb"), _parse_rgb),
    ParseRule("hsl", lambda s: s.startswith("hsl"), _parse_hsl),
    ParseRule("hex", lambda s: s.startswith("#"), Hex),
    ParseRule("cmyk", lambda s: s.count(" ") == 3, _parse_cmyk),
    ParseRule("gray", is_numeric, Grayscale),
)


def detect_space(color_string: str) -> Optional[str]:
    """Name of the model ``color_string`` would be parsed as, or None."""
    lowered = color_string.lower()
    for rule in PARSE_RULES:
        if rule.matches(lowered):
            return rule.name
    return None


def parse(color_string: str) -> ColorBase:
    """
    Build the color encoded in ``color_string``.

    Raises:
        ColorParseError: if no rule matches, or a color function is malformed.
        ColorRangeError: if a parsed value is out of range for its model.
    """
    if not isinstance(color_string, str):
        raise ColorParseError(f"Expected a string, got {type(color_string).__name__}")

    lowered = color_string.lower()
    for rule in PARSE_RULES:
        if rule.matches(lowered):
            return rule.build(lowered)
    raise ColorParseError("The string was not in the correct color format.")
