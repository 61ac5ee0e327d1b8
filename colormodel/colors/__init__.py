"""
Color Model Classes
===================

One class per color model, all sharing :class:`ColorBase`:

- Rgb: integer channels 0-255, optional alpha 0-1
- Hsl: hue 0-360, saturation and lightness 0-100, optional alpha
- Hex: 3- or 6-digit hexadecimal string
- Cmyk: four inks, 0-100 each
- Grayscale: one gray level, 0-100

Instances are small mutable values. Fields are set through validated
properties, either as attributes or as items:

>>> from colormodel.colors import Rgb
>>> color = Rgb(240, 180, 60)
>>> color["g"] = 200
>>> color.g
200
>>> color.to_cmyk().render()
'0 17 75 6'

Every ``to_*`` conversion returns a fresh instance; nothing is cached.
``color.convert(space)`` picks the conversion by model name.
"""

from .color_base import ColorBase, WithAlpha
from .rgb import Rgb
from .hsl import Hsl
from .hex import Hex
from .cmyk import Cmyk
from .gray import Grayscale
from .color import color_convert, get_color_class, unified_space_to_class

__all__ = [
    'ColorBase',
    'WithAlpha',
    'Rgb',
    'Hsl',
    'Hex',
    'Cmyk',
    'Grayscale',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
]
