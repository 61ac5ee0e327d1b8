"""
Color Model Conversions
=======================

Pure conversion functions between the RGB, HSL, Hex, CMYK and Grayscale
models, each with a scalar implementation and a vectorized numpy twin that
rounds the same way.

Units
-----
- RGB: integer channels 0-255
- HSL: hue 0-360, saturation and lightness 0-100
- CMYK: each ink 0-100
- Gray: 0-100
- Hex: 3 or 6 hex digits, no leading ``#``

Rounding is half away from zero throughout.

Conversion Functions
--------------------

RGB -> HSL:
    rgb_to_hsl(r, g, b) / np_rgb_to_hsl(r, g, b)

HSL -> RGB:
    hsl_to_rgb(h, s, l) / np_hsl_to_rgb(h, s, l)

RGB <-> CMYK:
    rgb_to_cmyk(r, g, b) / np_rgb_to_cmyk(r, g, b)
    cmyk_to_rgb(c, m, y, k) / np_cmyk_to_rgb(c, m, y, k)

Grayscale:
    rgb_to_gray(r, g, b) / np_rgb_to_gray(r, g, b)
    gray_to_rgb(gray) / np_gray_to_rgb(gray)
    gray_to_cmyk(gray), cmyk_to_gray(c, m, y, k)

Hex:
    rgb_to_hex(r, g, b), hex_to_rgb(r, g, b), split_hex(hex_string)

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from colormodel.conversions import rgb_to_hsl, hsl_to_rgb, convert
>>> rgb_to_hsl(240, 180, 60)
(40, 75, 94)
>>> hsl_to_rgb(40, 75, 94)
(240, 180, 60)
>>> convert((240, 180, 60), "rgb", "hex")
'f0b43c'
"""

# RGB -> HSL
from .to_hsl import rgb_to_hsl, rgb_hue_fraction, np_rgb_to_hsl

# -> RGB
from .to_rgb import (
    hsl_to_rgb,
    np_hsl_to_rgb,
    cmyk_to_rgb,
    np_cmyk_to_rgb,
    gray_to_rgb,
    np_gray_to_rgb,
    hex_to_rgb,
    expand_hex_digits,
    split_hex,
)

# -> CMYK, gray, hex
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk, gray_to_cmyk
from .to_gray import rgb_to_gray, np_rgb_to_gray, cmyk_to_gray
from .to_hex import rgb_to_hex

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    'rgb_to_hsl',
    'rgb_hue_fraction',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'cmyk_to_rgb',
    'np_cmyk_to_rgb',
    'gray_to_rgb',
    'np_gray_to_rgb',
    'hex_to_rgb',
    'expand_hex_digits',
    'split_hex',
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',
    'gray_to_cmyk',
    'rgb_to_gray',
    'np_rgb_to_gray',
    'cmyk_to_gray',
    'rgb_to_hex',
    'convert',
    'np_convert',
]
