import math
import numpy as np
from numpy import ndarray as NDArray


def mat3_apply(m: NDArray, v0: float, v1: float, v2: float) -> tuple[float, float, float]:
    """Apply a row-major 3x3 matrix to a single 3-vector."""
    return (
        float(m[0, 0] * v0 + m[0, 1] * v1 + m[0, 2] * v2),
        float(m[1, 0] * v0 + m[1, 1] * v1 + m[1, 2] * v2),
        float(m[2, 0] * v0 + m[2, 1] * v1 + m[2, 2] * v2),
    )


def np_mat3_apply(m: NDArray, values: NDArray) -> NDArray:
    """
    Vectorized: apply a row-major 3x3 matrix over the last axis.

    Args:
        m: (3, 3) matrix
        values: array of shape (..., 3)

    Returns:
        array of shape (..., 3)
    """
    return np.asarray(values, dtype=np.float64) @ m.T


def cbrt(x: float) -> float:
    """Real cube root, defined for negative input."""
    return math.copysign(abs(x) ** (1.0 / 3.0), x)
