"""
Composed RGB ↔ OKLCH pipeline.

    RGB -> Linear RGB -> XYZ -> LMS -> LMS' -> Oklab -> OKLCH
    OKLCH -> Oklab -> LMS' -> LMS -> XYZ -> Linear RGB -> RGB

Intermediate values stay in floating point; rounding to integer channels only
happens in :func:`linear_rgb_to_rgb`.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import OKLCH, RGBA, LinearRGB
from ..utils.num_utils import clamp01
from .linear import (
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)
from .oklab import (
    xyz_to_oklab,
    oklab_to_xyz,
    oklab_to_oklch,
    oklch_to_oklab,
    np_xyz_to_oklab,
    np_oklab_to_xyz,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)
from .xyz import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
)


def linear_rgb_to_oklch(lrgb: LinearRGB, alpha: float = 1.0) -> OKLCH:
    return oklab_to_oklch(xyz_to_oklab(linear_rgb_to_xyz(lrgb)), alpha)


def oklch_to_linear_rgb(oklch: OKLCH) -> LinearRGB:
    """OKLCH -> linear sRGB, unclamped. Out-of-gamut colors leave [0, 1]."""
    return xyz_to_linear_rgb(oklab_to_xyz(oklch_to_oklab(oklch)))


def rgb_to_oklch(rgba: RGBA) -> OKLCH:
    """
    Convert an sRGB color to OKLCH.

    Args:
        rgba: RGBA with channels in [0, 255] and alpha in [0, 1]

    Returns:
        OKLCH: l in [0, 1], c >= 0, h in [0, 360); alpha passed through

    Example:
        >>> rgb_to_oklch(RGBA(255, 0, 0, 1.0))
        OKLCH(l=0.6279..., c=0.2576..., h=29.23..., a=1.0)
    """
    return linear_rgb_to_oklch(rgb_to_linear_rgb(rgba), clamp01(rgba.a))


def oklch_to_rgb(oklch: OKLCH) -> RGBA:
    """
    Convert OKLCH to sRGB. Colors outside the sRGB gamut are channel-clipped,
    use :func:`okchroma.gamut.clamp_to_gamut` first to preserve hue.
    """
    return linear_rgb_to_rgb(oklch_to_linear_rgb(oklch), oklch.a)

## Vectorized

def _split_alpha(values: NDArray) -> tuple[NDArray, NDArray | None]:
    values = np.asarray(values, dtype=np.float64)
    if values.shape[-1] == 4:
        return values[..., :3], values[..., 3]
    if values.shape[-1] != 3:
        raise ValueError(f"expected last dimension 3 or 4, got shape {values.shape}")
    return values, None


def np_rgb_to_oklch(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB(0-255) -> OKLCH.

    Args:
        rgb: array of shape (..., 3) or (..., 4); alpha, when present, is
             carried through clamped to [0, 1]

    Returns:
        array of the same shape: (l, c, h[, a])
    """
    base, alpha = _split_alpha(rgb)
    linear = np_srgb_to_linear(np.clip(base, 0, 255) / 255.0)
    lch = np_oklab_to_oklch(np_xyz_to_oklab(np_linear_rgb_to_xyz(linear)))
    if alpha is None:
        return lch
    return np.concatenate([lch, np.clip(alpha, 0, 1)[..., None]], axis=-1)


def np_oklch_to_rgb(lch: NDArray) -> NDArray:
    """
    Vectorized: OKLCH -> sRGB(0-255) integer channels.

    Args:
        lch: array of shape (..., 3) or (..., 4)

    Returns:
        array of the same shape; color channels are rounded ints in [0, 255],
        alpha (if present) stays float
    """
    base, alpha = _split_alpha(lch)
    linear = np_xyz_to_linear_rgb(np_oklab_to_xyz(np_oklch_to_oklab(base)))
    encoded = np.clip(np_linear_to_srgb(linear) * 255.0, 0, 255)
    rgb = np.floor(encoded + 0.5)
    if alpha is None:
        return rgb.astype(int)
    return np.concatenate([rgb, np.clip(alpha, 0, 1)[..., None]], axis=-1)
