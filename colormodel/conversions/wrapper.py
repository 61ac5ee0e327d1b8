import numpy as np
from typing import Any, Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, COLOR_SPACES

from .to_rgb import (
    hsl_to_rgb, np_hsl_to_rgb,
    cmyk_to_rgb, np_cmyk_to_rgb,
    gray_to_rgb, np_gray_to_rgb,
    hex_to_rgb, split_hex,
)
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk, gray_to_cmyk
from .to_gray import rgb_to_gray, np_rgb_to_gray, cmyk_to_gray
from .to_hex import rgb_to_hex

ScalarColor = Union[Tuple[float, ...], float, str]

# Direct edges of the conversion graph; everything else goes through rgb.
CONVERT_SCALAR: Dict[Tuple[str, str], Callable[..., Any]] = {
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
    ("rgb", "cmyk"): rgb_to_cmyk,
    ("cmyk", "rgb"): cmyk_to_rgb,
    ("rgb", "gray"): rgb_to_gray,
    ("gray", "rgb"): gray_to_rgb,
    ("cmyk", "gray"): cmyk_to_gray,
    ("gray", "cmyk"): gray_to_cmyk,
    ("rgb", "hex"): rgb_to_hex,
    ("hex", "rgb"): lambda hex_string: hex_to_rgb(*split_hex(hex_string.lstrip("#").lower())),
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): lambda c: np_rgb_to_hsl(c[..., 0], c[..., 1], c[..., 2]),
    ("hsl", "rgb"): lambda c: np_hsl_to_rgb(c[..., 0], c[..., 1], c[..., 2]),
    ("rgb", "cmyk"): lambda c: np_rgb_to_cmyk(c[..., 0], c[..., 1], c[..., 2]),
    ("cmyk", "rgb"): lambda c: np_cmyk_to_rgb(c[..., 0], c[..., 1], c[..., 2], c[..., 3]),
    ("rgb", "gray"): lambda c: np_rgb_to_gray(c[..., 0], c[..., 1], c[..., 2])[..., None],
    ("gray", "rgb"): lambda c: np_gray_to_rgb(c[..., 0]),
    ("cmyk", "gray"): lambda c: c[..., 3:4],
    ("gray", "cmyk"): lambda c: np.concatenate([np.zeros(c.shape[:-1] + (3,)), c[..., 0:1]], axis=-1),
}

NUMPY_SPACES = ("rgb", "hsl", "cmyk", "gray")


def _check_space(space: str, allowed: Tuple[str, ...]) -> str:
    space = space.lower()
    if space not in allowed:
        raise ValueError(f"Unknown space: {space}")
    return space


def _as_args(color: ScalarColor) -> Tuple[Any, ...]:
    if isinstance(color, (tuple, list)):
        return tuple(color)
    return (color,)


def convert(
    color: ScalarColor,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ScalarColor:
    """
    Convert one color between spaces using model-native units.

    rgb is (r, g, b) in 0-255, hsl is (h, s, l), cmyk is (c, m, y, k), gray is
    a single number and hex is a string with or without ``#``. Pairs without a
    direct edge are routed through rgb.
    """
    fs = _check_space(from_space, COLOR_SPACES)
    ts = _check_space(to_space, COLOR_SPACES)
    if fs == ts:
        return color  # No conversion needed

    key = (fs, ts)
    if key in CONVERT_SCALAR:
        return CONVERT_SCALAR[key](*_as_args(color))

    rgb = convert(color, fs, "rgb")
    return convert(rgb, "rgb", ts)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized :func:`convert` over channel-last arrays.

    Gray arrays carry a trailing axis of length 1. Hex strings are not
    supported here.
    """
    fs = _check_space(from_space, NUMPY_SPACES)
    ts = _check_space(to_space, NUMPY_SPACES)
    color = np.asarray(color, dtype=float)
    if fs == ts:
        return color  # No conversion needed

    key = (fs, ts)
    if key in CONVERT_NUMPY:
        return CONVERT_NUMPY[key](color)

    rgb = CONVERT_NUMPY[(fs, "rgb")](color)
    return CONVERT_NUMPY[("rgb", ts)](rgb)
