import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LinearRGB, XYZ
from .constants import SRGB_TO_XYZ, XYZ_TO_SRGB
from .matrix import mat3_apply, np_mat3_apply


def linear_rgb_to_xyz(lrgb: LinearRGB) -> XYZ:
    """Linear sRGB -> CIE XYZ (D65)."""
    return XYZ(*mat3_apply(SRGB_TO_XYZ, lrgb.r, lrgb.g, lrgb.b))


def xyz_to_linear_rgb(xyz: XYZ) -> LinearRGB:
    """CIE XYZ (D65) -> linear sRGB, unclamped."""
    return LinearRGB(*mat3_apply(XYZ_TO_SRGB, xyz.x, xyz.y, xyz.z))


def np_linear_rgb_to_xyz(lrgb: NDArray) -> NDArray:
    return np_mat3_apply(SRGB_TO_XYZ, lrgb)


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return np_mat3_apply(XYZ_TO_SRGB, np.asarray(xyz, dtype=np.float64))
