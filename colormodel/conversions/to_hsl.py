import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float

from ..utils.num_utils import round_int
from .numbers import np_round_half_up


def rgb_hue_fraction(r: int, g: int, b: int) -> float:
    """
    Hue of an RGB triple as a fraction of a full turn, in [0, 1).

    The sector is picked by the first channel that holds the maximum, in the
    order r, g, b. Red-dominant colors with b > g produce a negative fraction,
    which is wrapped back onto the circle.
    """
    mx = max(r, g, b)
    delta = mx - min(r, g, b)
    if delta == 0:
        return 0.0

    if mx == r and mx != g:
        h = (g - b) / delta
    elif mx == g and mx != b:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta
    return cyclic_wrap_float(h / 6, 0.0, 1.0)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert RGB (0-255) to HSL (h in 0-360, s and l in 0-100).

    Lightness is the largest channel and saturation is ``delta / max``, both on
    the unit scale, then every component is rounded half up.

    Args:
        r: Red in [0, 255]
        g: Green in [0, 255]
        b: Blue in [0, 255]

    Returns:
        Tuple[int, int, int]: (h, s, l)
    """
    h = rgb_hue_fraction(r, g, b)

    r_u, g_u, b_u = r / 255, g / 255, b / 255
    mx = max(r_u, g_u, b_u)
    d = mx - min(r_u, g_u, b_u)
    s = 0 if d == 0 else d / mx

    return round_int(h * 360), round_int(s * 100), round_int(mx * 100)


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB (0-255) to HSL (0-360, 0-100, 0-100).

    Returns:
        hsl: int array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    safe_delta = np.where(delta == 0, 1.0, delta)

    from_r = (mx == r) & (mx != g)
    from_g = ~from_r & (mx == g) & (mx != b)

    h = np.where(
        from_r,
        (g - b) / safe_delta,
        np.where(from_g, 2 + (b - r) / safe_delta, 4 + (r - g) / safe_delta),
    )
    h = np.where(delta == 0, 0.0, h / 6) % 1.0

    mx_u = np.maximum(np.maximum(r / 255, g / 255), b / 255)
    d_u = mx_u - np.minimum(np.minimum(r / 255, g / 255), b / 255)
    s = np.where(d_u == 0, 0.0, d_u / np.where(mx_u == 0, 1.0, mx_u))

    return np.stack(
        [np_round_half_up(h * 360), np_round_half_up(s * 100), np_round_half_up(mx_u * 100)],
        axis=-1,
    )
