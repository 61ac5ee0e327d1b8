"""colormodel: RGB, HSL, Hex, CMYK and grayscale colors with conversion and parsing."""

from .colors import (
    ColorBase,
    WithAlpha,
    Rgb,
    Hsl,
    Hex,
    Cmyk,
    Grayscale,
    color_convert,
    get_color_class,
)
from .conversions import convert, np_convert
from .errors import (
    ColorError,
    ColorRangeError,
    ColorDomainError,
    ColorFieldError,
    ColorParseError,
)
from .factory import rgb, hsl, hex, cmyk, grayscale
from .parser import parse, parse_color_values, detect_space
from .types import RenderFormat

__version__ = "0.1.0"

__all__ = [
    # color types
    "ColorBase",
    "WithAlpha",
    "Rgb",
    "Hsl",
    "Hex",
    "Cmyk",
    "Grayscale",
    "color_convert",
    "get_color_class",
    # factories
    "rgb",
    "hsl",
    "hex",
    "cmyk",
    "grayscale",
    "parse",
    "parse_color_values",
    "detect_space",
    # conversions
    "convert",
    "np_convert",
    # rendering
    "RenderFormat",
    # errors
    "ColorError",
    "ColorRangeError",
    "ColorDomainError",
    "ColorFieldError",
    "ColorParseError",
]
