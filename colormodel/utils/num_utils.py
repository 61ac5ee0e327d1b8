import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from ..errors import ColorParseError, ColorRangeError

Number = Union[int, float]

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC_FULL = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def is_numeric(text: str) -> bool:
    """True when the whole string is one decimal number (surrounding blanks allowed)."""
    return _NUMERIC_FULL.fullmatch(text) is not None


def parse_numeric_prefix(value: Union[Number, str]) -> Number:
    """
    Read a number from ``value``, ignoring any trailing non-numeric suffix.

    Numbers pass through unchanged. Strings are read up to the first character
    that cannot continue a decimal literal, so ``"100%"`` gives ``100`` and
    ``"0.5 "`` gives ``0.5``. Integral literals stay ``int``.

    Raises:
        ColorParseError: if the string does not start with a number.
    """
    if isinstance(value, bool):
        raise ColorParseError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        raise ColorParseError(f"Expected a number or numeric string, got {type(value).__name__}")

    match = _NUMERIC_PREFIX.match(value)
    if match is None:
        raise ColorParseError(f"Not a numeric value: {value!r}")
    literal = match.group(0).strip()
    if re.fullmatch(r"[+-]?\d+", literal):
        return int(literal)
    return float(literal)


def to_int(value: Union[Number, str]) -> int:
    """
    Coerce to int, truncating toward zero (``12.7`` -> ``12``).

    Raises:
        ColorRangeError: if the number is infinite or NaN.
    """
    number = parse_numeric_prefix(value)
    if isinstance(number, float) and not math.isfinite(number):
        raise ColorRangeError(f"Not a finite number: {value!r}")
    return int(number)


def to_float(value: Union[Number, str]) -> float:
    return float(parse_numeric_prefix(value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half away from zero.

    The shortest repr of ``value`` is rounded, so ``2.675`` rounds to ``2.68``
    as written rather than to its binary neighbour.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(round_half_up(value))


def format_number(value: Number) -> str:
    """
    Render a number for color strings.

    Whole floats lose their fractional part (``65.0`` -> ``"65"``); other floats
    keep at most 14 significant digits.
    """
    if isinstance(value, int):
        return str(value)
    if is_close_to_int(value, tol=0.0):
        return str(int(value))
    return format(value, ".14g")
