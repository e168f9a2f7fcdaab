"""
XYZ ↔ Oklab and Oklab ↔ OKLCH.

Oklab is cartesian (L, a, b); OKLCH is its polar form (l, c, h). Chroma below
``ACHROMATIC_THRESHOLD`` is treated as hue-agnostic and reported as ``c=0, h=0``.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..config import ACHROMATIC_THRESHOLD
from ..types.color_types import OKLCH, Oklab, XYZ
from ..utils.num_utils import clamp01, normalize_hue
from .constants import OKLAB_M1, OKLAB_M1_INV, OKLAB_M2, OKLAB_M2_INV
from .matrix import cbrt, mat3_apply, np_mat3_apply


def xyz_to_oklab(xyz: XYZ) -> Oklab:
    l, m, s = mat3_apply(OKLAB_M1, xyz.x, xyz.y, xyz.z)
    return Oklab(*mat3_apply(OKLAB_M2, cbrt(l), cbrt(m), cbrt(s)))


def oklab_to_xyz(lab: Oklab) -> XYZ:
    l_, m_, s_ = mat3_apply(OKLAB_M2_INV, lab.L, lab.a, lab.b)
    return XYZ(*mat3_apply(OKLAB_M1_INV, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_))


def oklab_to_oklch(lab: Oklab, alpha: float = 1.0) -> OKLCH:
    """Polar form of ``lab``, with lightness clamped to [0, 1]."""
    l = clamp01(lab.L)
    c = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    if c < ACHROMATIC_THRESHOLD:
        return OKLCH(l, 0.0, 0.0, alpha)

    return OKLCH(l, c, normalize_hue(math.degrees(math.atan2(lab.b, lab.a))), alpha)


def oklch_to_oklab(lch: OKLCH) -> Oklab:
    if lch.c < ACHROMATIC_THRESHOLD:
        return Oklab(lch.l, 0.0, 0.0)

    h_rad = math.radians(lch.h)
    return Oklab(lch.l, lch.c * math.cos(h_rad), lch.c * math.sin(h_rad))

## Vectorized

def np_xyz_to_oklab(xyz: NDArray) -> NDArray:
    """
    Vectorized: XYZ -> Oklab.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    lms = np_mat3_apply(OKLAB_M1, xyz)
    return np_mat3_apply(OKLAB_M2, np.cbrt(lms))


def np_oklab_to_xyz(lab: NDArray) -> NDArray:
    lms_ = np_mat3_apply(OKLAB_M2_INV, lab)
    return np_mat3_apply(OKLAB_M1_INV, lms_ ** 3)


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    """
    Vectorized: Oklab -> OKLCH (no alpha). Lightness is clipped to [0, 1].

    Returns:
        array of shape (..., 3): (l, c, h), h in [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = np.clip(lab[..., 0], 0.0, 1.0), lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360.0
    h = np.where(h >= 360.0, 0.0, h)

    achromatic = c < ACHROMATIC_THRESHOLD
    c = np.where(achromatic, 0.0, c)
    h = np.where(achromatic, 0.0, h)
    return np.stack([L, c, h], axis=-1)


def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=np.float64)
    l, c, h = lch[..., 0], lch[..., 1], lch[..., 2]
    c = np.where(c < ACHROMATIC_THRESHOLD, 0.0, c)
    h_rad = np.radians(h)
    return np.stack([l, c * np.cos(h_rad), c * np.sin(h_rad)], axis=-1)
