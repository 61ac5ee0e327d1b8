import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import round_int
from .numbers import np_round_half_up


def rgb_to_cmyk(r: int, g: int, b: int) -> tuple[int, int, int, int]:
    """
    Convert RGB (0-255) to CMYK (each 0-100).

    Black is the smallest of the complementary inks. Pure black zeroes the
    other three inks.
    """
    cyan = 1 - r / 255
    magenta = 1 - g / 255
    yellow = 1 - b / 255
    k = min(cyan, magenta, yellow, 1)

    if k == 1:
        c = m = y = 0
    else:
        c = round_int((cyan - k) / (1 - k) * 100)
        m = round_int((magenta - k) / (1 - k) * 100)
        y = round_int((yellow - k) / (1 - k) * 100)

    return c, m, y, round_int(k * 100)


def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB (0-255) to CMYK (0-100), shape (..., 4)."""
    cyan = 1 - np.asarray(r, dtype=float) / 255
    magenta = 1 - np.asarray(g, dtype=float) / 255
    yellow = 1 - np.asarray(b, dtype=float) / 255
    cyan, magenta, yellow = np.broadcast_arrays(cyan, magenta, yellow)

    k = np.minimum(np.minimum(cyan, magenta), yellow)
    black = k == 1
    rest = np.where(black, 1.0, 1 - k)

    inks = [np.where(black, 0, np_round_half_up((ink - k) / rest * 100)) for ink in (cyan, magenta, yellow)]
    return np.stack(inks + [np_round_half_up(k * 100)], axis=-1)


def gray_to_cmyk(gray: float) -> tuple[float, float, float, float]:
    return 0, 0, 0, gray
