import numpy as np
from numpy import ndarray as NDArray


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized half-away-from-zero rounding for non-negative values."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)
