from .format_type import RenderFormat, FormatLike, resolve_format
from .color_types import (
    ColorSpace,
    COLOR_SPACES,
    NumericInput,
    Scalar,
    is_hue_space,
    RGB_MAX,
    HUE_MAX,
    PERCENT_MAX,
    ALPHA_MAX,
)

__all__ = [
    "RenderFormat",
    "FormatLike",
    "resolve_format",
    "ColorSpace",
    "COLOR_SPACES",
    "NumericInput",
    "Scalar",
    "is_hue_space",
    "RGB_MAX",
    "HUE_MAX",
    "PERCENT_MAX",
    "ALPHA_MAX",
]
