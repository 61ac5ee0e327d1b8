import math
import numpy as np
from numpy import ndarray as NDArray


def rgb_to_gray(r: int, g: int, b: int) -> int:
    """
    Average the channels and express the result as a 0-100 percentage.

    Both steps floor: the integer channel average first, then the percentage.
    """
    return math.floor(math.floor((r + g + b) / 3) / 255 * 100)


def np_rgb_to_gray(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    total = np.asarray(r, dtype=float) + np.asarray(g, dtype=float) + np.asarray(b, dtype=float)
    return np.floor(np.floor(total / 3) / 255 * 100).astype(int)


def cmyk_to_gray(c: float, m: float, y: float, k: float) -> float:
    """The black ink is the gray level; the other inks are ignored."""
    return k
