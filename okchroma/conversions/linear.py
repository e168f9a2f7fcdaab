import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBA, LinearRGB
from ..utils.num_utils import clamp

## Transfer function (shared by sRGB and Display P3)

def srgb_to_linear(v: float) -> float:
    """
    Decode one gamma-encoded channel to linear light.

    Args:
        v: Encoded channel in [0, 1]

    Returns:
        float: Linear channel in [0, 1]
    """
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(v: float) -> float:
    """
    Encode one linear-light channel with the sRGB transfer function.

    Args:
        v: Linear channel in [0, 1]

    Returns:
        float: Encoded channel in [0, 1]
    """
    if v <= 0.0031308:
        return v * 12.92
    return 1.055 * v ** (1 / 2.4) - 0.055


def np_srgb_to_linear(v: NDArray) -> NDArray:
    """Vectorized :func:`srgb_to_linear`."""
    v = np.asarray(v, dtype=np.float64)
    # clip the power branch base so masked-out negatives never hit a fractional power
    curve = ((np.maximum(v, 0.04045) + 0.055) / 1.055) ** 2.4
    return np.where(v <= 0.04045, v / 12.92, curve)


def np_linear_to_srgb(v: NDArray) -> NDArray:
    """Vectorized :func:`linear_to_srgb`."""
    v = np.asarray(v, dtype=np.float64)
    curve = 1.055 * np.maximum(v, 0.0031308) ** (1 / 2.4) - 0.055
    return np.where(v <= 0.0031308, v * 12.92, curve)

## Whole-color helpers

def rgb_to_linear_rgb(rgba: RGBA) -> LinearRGB:
    """sRGB(0-255) -> linear RGB. Channels are clamped to [0, 255] first."""
    return LinearRGB(
        srgb_to_linear(clamp(rgba.r, 0, 255) / 255),
        srgb_to_linear(clamp(rgba.g, 0, 255) / 255),
        srgb_to_linear(clamp(rgba.b, 0, 255) / 255),
    )


def linear_rgb_to_unit_rgb(lrgb: LinearRGB) -> tuple[float, float, float]:
    """Linear RGB -> gamma-encoded floats, unclamped."""
    return linear_to_srgb(lrgb.r), linear_to_srgb(lrgb.g), linear_to_srgb(lrgb.b)


def linear_rgb_to_rgb(lrgb: LinearRGB, alpha: float = 1.0) -> RGBA:
    """
    Linear RGB -> sRGB(0-255).

    This is the only place in the pipeline where channels are rounded to
    integers; out-of-range values are clamped to [0, 255].
    """
    r, g, b = linear_rgb_to_unit_rgb(lrgb)
    return RGBA.clamped(r * 255, g * 255, b * 255, alpha)
