from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
NumericInput = Union[int, float, str]
ColorSpace = Literal["rgb", "hsl", "hex", "cmyk", "gray"]
COLOR_SPACES: Tuple[str, ...] = ("rgb", "hsl", "hex", "cmyk", "gray")
HUE_SPACES = {"hsl"}

RGB_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100
ALPHA_MAX = 1.0


def is_hue_space(color_space: str) -> bool:
    """Check if the given color space carries a hue channel."""
    return color_space.lower() in HUE_SPACES
