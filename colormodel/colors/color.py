from __future__ import annotations
from typing import Dict

from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .cmyk import Cmyk
from .gray import Grayscale
from .hex import Hex
from .hsl import Hsl
from .rgb import Rgb

unified_space_to_class: Dict[str, type[ColorBase]] = {
    cls.mode: cls for cls in (Rgb, Hsl, Hex, Cmyk, Grayscale)
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to another model.

    Args:
        to_space: Target model ("rgb", "hsl", "hex", "cmyk" or "gray")

    Returns:
        New color instance in the target model
    """
    space = get_color_class(to_space).mode
    return getattr(self, f"to_{space}")()


ColorBase.convert = color_convert
