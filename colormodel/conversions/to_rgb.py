import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float

from ..utils.num_utils import round_int
from .numbers import np_round_half_up

## HSL to RGB conversions

def hsl_to_rgb(h: int, s: int, l: int) -> tuple[int, int, int]:
    """
    Convert HSL (h in 0-360, s and l in 0-100) to RGB (0-255).

    Lightness plays the role of the brightest channel: the sector table picks
    each channel from ``v = l``, ``v1``, ``v2`` and ``v3``.

    Note: sectors 2 and 3 share the mapping ``(v1, v, v3)``. Published fixtures
    such as hsl(180, 24%, 94%) -> rgb(182, 240, 182) depend on it, so it is
    kept rather than replaced with the usual ``(v1, v2, v)`` for sector 3.

    Returns:
        Tuple[int, int, int]: (r, g, b)
    """
    s_u = s / 100
    v = l / 100

    if s == 0:
        grey = round_int(v * 255)
        return grey, grey, grey

    h6 = cyclic_wrap_float(h / 360 * 6, 0.0, 6.0)
    i = math.floor(h6)
    f = h6 - i
    v1 = v * (1 - s_u)
    v2 = v * (1 - s_u * f)
    v3 = v * (1 - s_u * (1 - f))

    if i == 0:
        r, g, b = v, v3, v1
    elif i == 1:
        r, g, b = v2, v, v1
    elif i == 2:
        r, g, b = v1, v, v3
    elif i == 3:
        r, g, b = v1, v, v3
    elif i == 4:
        r, g, b = v3, v1, v
    else:
        r, g, b = v, v1, v2

    return round_int(r * 255), round_int(g * 255), round_int(b * 255)


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL (0-360, 0-100, 0-100) to RGB (0-255).

    Uses the same sector table as :func:`hsl_to_rgb`.

    Returns:
        rgb: int array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float) / 100
    v = np.asarray(l, dtype=float) / 100
    h, s, v = np.broadcast_arrays(h, s, v)

    h6 = (h / 360 * 6) % 6.0
    i = np.floor(h6).astype(int)
    f = h6 - i
    v1 = v * (1 - s)
    v2 = v * (1 - s * f)
    v3 = v * (1 - s * (1 - f))

    sectors = [i == 0, i == 1, i == 2, i == 3, i == 4]
    r = np.select(sectors, [v, v2, v1, v1, v3], default=v)
    g = np.select(sectors, [v3, v, v, v, v1], default=v1)
    b = np.select(sectors, [v1, v1, v3, v3, v], default=v2)

    achromatic = s == 0
    r = np.where(achromatic, v, r)
    g = np.where(achromatic, v, g)
    b = np.where(achromatic, v, b)

    return np.stack(
        [np_round_half_up(r * 255), np_round_half_up(g * 255), np_round_half_up(b * 255)],
        axis=-1,
    )

## CMYK to RGB conversions

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[int, int, int]:
    """
    Convert CMYK (each 0-100) to RGB (0-255).

    Each ink is first combined with black, ``ink' = ink * (1 - k) + k``, and the
    channel is what is left of full intensity.
    """
    k_u = k / 100
    cyan = (c / 100) * (1 - k_u) + k_u
    magenta = (m / 100) * (1 - k_u) + k_u
    yellow = (y / 100) * (1 - k_u) + k_u

    return round_int((1 - cyan) * 255), round_int((1 - magenta) * 255), round_int((1 - yellow) * 255)


def np_cmyk_to_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized: Convert CMYK (0-100) to RGB (0-255), shape (..., 3)."""
    k_u = np.asarray(k, dtype=float) / 100
    inks = [np.asarray(x, dtype=float) / 100 * (1 - k_u) + k_u for x in (c, m, y)]
    return np.stack([np_round_half_up((1 - ink) * 255) for ink in inks], axis=-1)

## Grayscale and hex to RGB conversions

def gray_to_rgb(gray: float) -> tuple[int, int, int]:
    """
    Reuse the gray percentage as every RGB channel.

    The 0-100 value is not rescaled to 0-255, so gray 50 maps to rgb(50, 50, 50).
    """
    value = int(gray)
    return value, value, value


def np_gray_to_rgb(gray: NDArray) -> NDArray:
    value = np.trunc(np.asarray(gray, dtype=float)).astype(int)
    return np.stack([value, value, value], axis=-1)


def expand_hex_digits(digits: str) -> str:
    """Duplicate a single hex digit (``"f"`` -> ``"ff"``); two digits pass through."""
    return digits * 2 if len(digits) == 1 else digits


def hex_to_rgb(r: str, g: str, b: str) -> tuple[int, int, int]:
    """Decode 1- or 2-digit hex components into RGB channels."""
    return (
        int(expand_hex_digits(r), 16),
        int(expand_hex_digits(g), 16),
        int(expand_hex_digits(b), 16),
    )


def split_hex(hex_string: str) -> tuple[str, str, str]:
    """Split a 3- or 6-digit hex string (no ``#``) into its r, g, b components."""
    width = len(hex_string) // 3
    return hex_string[:width], hex_string[width:2 * width], hex_string[2 * width:]
