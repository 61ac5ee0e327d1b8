"""Short constructors for every color model, plus the string parser."""
from __future__ import annotations
from typing import Optional

from .colors import Cmyk, Grayscale, Hex, Hsl, Rgb
from .parser import parse
from .types.color_types import NumericInput


def rgb(r: NumericInput, g: NumericInput, b: NumericInput, a: Optional[NumericInput] = None) -> Rgb:
    return Rgb(r, g, b, a)


def hsl(h: NumericInput, s: NumericInput, l: NumericInput, a: Optional[NumericInput] = None) -> Hsl:
    return Hsl(h, s, l, a)


def hex(hex_string: str) -> Hex:
    return Hex(hex_string)


def cmyk(c: NumericInput, m: NumericInput, y: NumericInput, k: NumericInput) -> Cmyk:
    return Cmyk(c, m, y, k)


def grayscale(gray: NumericInput) -> Grayscale:
    return Grayscale(gray)


__all__ = ["rgb", "hsl", "hex", "cmyk", "grayscale", "parse"]
