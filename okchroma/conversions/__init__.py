"""
okchroma Color Space Conversions
================================

Pure conversion functions between sRGB, linear RGB, CIE XYZ (D65), Oklab,
OKLCH, HSL and Display P3, with scalar and vectorized (numpy) forms.

Pipeline
--------
    sRGB(0-255) ↔ Linear RGB ↔ XYZ(D65) ↔ LMS ↔ LMS' ↔ Oklab ↔ OKLCH
    HSL ↔ sRGB
    Linear RGB ↔ XYZ ↔ Linear P3 ↔ P3

Every function is total: out-of-range input is clamped, never rejected.
Intermediate values stay in floating point; integer rounding only happens
when producing an ``RGBA``.

Transfer function:
    srgb_to_linear(v), linear_to_srgb(v)
    np_srgb_to_linear(v), np_linear_to_srgb(v)

RGB ↔ OKLCH:
    rgb_to_oklch(rgba), oklch_to_rgb(oklch)
    np_rgb_to_oklch(rgb), np_oklch_to_rgb(lch)

HSL ↔ RGB:
    rgb_to_hsl(rgba), hsl_to_rgb(hsla)
    unit_rgb_to_hsl(r, g, b), hsl_to_unit_rgb(h, s, l)
    np_rgb_to_hsl(r, g, b), np_hsl_to_rgb(h, s, l)

Display P3:
    rgb_to_p3(rgba), p3_to_rgb(p3), oklch_to_p3(oklch), p3_to_oklch(p3)

High-Level API
--------------
    convert(color, to_space)
        Universal converter between tagged values
    to_rgba(color), to_oklch(color)

Examples
--------
>>> from okchroma.conversions import rgb_to_oklch, convert
>>> from okchroma.types import RGBA
>>> rgb_to_oklch(RGBA(255, 0, 0))
OKLCH(l=0.6279..., c=0.2576..., h=29.23..., a=1.0)
>>> convert(RGBA(255, 0, 0), "hsl")
HSLA(h=0.0, s=1.0, l=0.5, a=1.0)
"""

# Transfer function
from .linear import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
)

# XYZ / Oklab
from .xyz import linear_rgb_to_xyz, xyz_to_linear_rgb
from .oklab import xyz_to_oklab, oklab_to_xyz, oklab_to_oklch, oklch_to_oklab

# RGB ↔ OKLCH
from .rgb_oklch import (
    rgb_to_oklch,
    oklch_to_rgb,
    linear_rgb_to_oklch,
    oklch_to_linear_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
)

# HSL ↔ RGB
from .hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)

# Display P3
from .p3 import (
    linear_p3_to_xyz,
    xyz_to_linear_p3,
    linear_rgb_to_linear_p3,
    linear_p3_to_linear_rgb,
    rgb_to_p3,
    p3_to_rgb,
    oklch_to_linear_p3,
    oklch_to_p3,
    p3_to_oklch,
)

# High-level API
from .wrapper import convert, to_rgba, to_oklch

__all__ = [
    # Transfer function
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'rgb_to_linear_rgb',
    'linear_rgb_to_rgb',

    # XYZ / Oklab
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'xyz_to_oklab',
    'oklab_to_xyz',
    'oklab_to_oklch',
    'oklch_to_oklab',

    # RGB ↔ OKLCH
    'rgb_to_oklch',
    'oklch_to_rgb',
    'linear_rgb_to_oklch',
    'oklch_to_linear_rgb',
    'np_rgb_to_oklch',
    'np_oklch_to_rgb',

    # HSL ↔ RGB
    'rgb_to_hsl',
    'hsl_to_rgb',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Display P3
    'linear_p3_to_xyz',
    'xyz_to_linear_p3',
    'linear_rgb_to_linear_p3',
    'linear_p3_to_linear_rgb',
    'rgb_to_p3',
    'p3_to_rgb',
    'oklch_to_linear_p3',
    'oklch_to_p3',
    'p3_to_oklch',

    # High-level API
    'convert',
    'to_rgba',
    'to_oklch',
]
