"""
Display P3 conversions.

Display P3 shares the sRGB transfer function and the D65 white point; only the
primaries differ. Linear P3 is reached from linear sRGB through XYZ, and the
composed matrices in :mod:`.constants` skip the XYZ stop.
"""
from ..types.color_types import OKLCH, P3, RGBA, LinearP3, LinearRGB, XYZ
from ..utils.num_utils import clamp01
from .constants import (
    LINEAR_P3_TO_LINEAR_SRGB,
    LINEAR_SRGB_TO_LINEAR_P3,
    P3_TO_XYZ,
    XYZ_TO_P3,
)
from .linear import linear_rgb_to_rgb, linear_to_srgb, rgb_to_linear_rgb, srgb_to_linear
from .matrix import mat3_apply
from .rgb_oklch import linear_rgb_to_oklch, oklch_to_linear_rgb


def linear_p3_to_xyz(lp3: LinearP3) -> XYZ:
    return XYZ(*mat3_apply(P3_TO_XYZ, lp3.r, lp3.g, lp3.b))


def xyz_to_linear_p3(xyz: XYZ) -> LinearP3:
    return LinearP3(*mat3_apply(XYZ_TO_P3, xyz.x, xyz.y, xyz.z))


def linear_rgb_to_linear_p3(lrgb: LinearRGB) -> LinearP3:
    return LinearP3(*mat3_apply(LINEAR_SRGB_TO_LINEAR_P3, lrgb.r, lrgb.g, lrgb.b))


def linear_p3_to_linear_rgb(lp3: LinearP3) -> LinearRGB:
    """Linear P3 -> linear sRGB, unclamped. Most P3 colors land outside [0, 1]."""
    return LinearRGB(*mat3_apply(LINEAR_P3_TO_LINEAR_SRGB, lp3.r, lp3.g, lp3.b))


def p3_to_linear_p3(p3: P3) -> LinearP3:
    """Decode P3 channels (clamped to [0, 1]) to linear light."""
    return LinearP3(
        srgb_to_linear(clamp01(p3.r)),
        srgb_to_linear(clamp01(p3.g)),
        srgb_to_linear(clamp01(p3.b)),
    )


def linear_p3_to_p3(lp3: LinearP3, alpha: float = 1.0) -> P3:
    """Encode linear P3 and clamp each channel to [0, 1]."""
    return P3.clamped(linear_to_srgb(lp3.r), linear_to_srgb(lp3.g), linear_to_srgb(lp3.b), alpha)


def rgb_to_p3(rgba: RGBA) -> P3:
    """
    Convert sRGB(0-255) to Display P3.

    Every sRGB color is inside P3, so the result never needs clipping beyond
    float noise.

    Example:
        >>> rgb_to_p3(RGBA(255, 0, 0))
        P3(r=0.9175..., g=0.2003..., b=0.1386..., a=1.0)
    """
    lp3 = linear_rgb_to_linear_p3(rgb_to_linear_rgb(rgba))
    return linear_p3_to_p3(lp3, rgba.a)


def p3_to_rgb(p3: P3) -> RGBA:
    """Convert Display P3 to sRGB(0-255). Colors outside sRGB are channel-clipped."""
    return linear_rgb_to_rgb(linear_p3_to_linear_rgb(p3_to_linear_p3(p3)), p3.a)


def oklch_to_linear_p3(oklch: OKLCH) -> LinearP3:
    return linear_rgb_to_linear_p3(oklch_to_linear_rgb(oklch))


def oklch_to_p3(oklch: OKLCH) -> P3:
    return linear_p3_to_p3(oklch_to_linear_p3(oklch), oklch.a)


def p3_to_oklch(p3: P3) -> OKLCH:
    return linear_rgb_to_oklch(linear_p3_to_linear_rgb(p3_to_linear_p3(p3)), clamp01(p3.a))
