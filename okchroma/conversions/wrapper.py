from typing import Callable, Dict, cast

from ..types.color_types import (
    HSLA,
    OKLCH,
    RGBA,
    ColorInput,
    ColorSpace,
    ColorSpaceName,
    LinearRGB,
    space_of,
)
from ..utils.num_utils import clamp01
from .hsl import hsl_to_unit_rgb, unit_rgb_to_hsl
from .linear import linear_rgb_to_rgb, linear_rgb_to_unit_rgb, rgb_to_linear_rgb, srgb_to_linear
from .p3 import linear_p3_to_linear_rgb, linear_p3_to_p3, linear_rgb_to_linear_p3, p3_to_linear_p3
from .rgb_oklch import linear_rgb_to_oklch, oklch_to_linear_rgb

# Every space is routed through unclamped linear sRGB so that only an ``rgb``
# target ever rounds.


def _hsl_to_linear(hsla: HSLA) -> LinearRGB:
    return LinearRGB(*(srgb_to_linear(v) for v in hsl_to_unit_rgb(hsla.h, hsla.s, hsla.l)))


def _linear_to_hsl(lrgb: LinearRGB, alpha: float) -> HSLA:
    h, s, l = unit_rgb_to_hsl(*linear_rgb_to_unit_rgb(lrgb))
    return HSLA(h, s, l, alpha)


TO_LINEAR: Dict[ColorSpace, Callable[[ColorInput], LinearRGB]] = {
    ColorSpace.RGB: rgb_to_linear_rgb,
    ColorSpace.HSL: _hsl_to_linear,
    ColorSpace.OKLCH: oklch_to_linear_rgb,
    ColorSpace.P3: lambda p3: linear_p3_to_linear_rgb(p3_to_linear_p3(p3)),
}

FROM_LINEAR: Dict[ColorSpace, Callable[[LinearRGB, float], ColorInput]] = {
    ColorSpace.RGB: linear_rgb_to_rgb,
    ColorSpace.HSL: _linear_to_hsl,
    ColorSpace.OKLCH: linear_rgb_to_oklch,
    ColorSpace.P3: lambda lrgb, alpha: linear_p3_to_p3(linear_rgb_to_linear_p3(lrgb), alpha),
}


def convert(color: ColorInput, to_space: ColorSpace | ColorSpaceName) -> ColorInput:
    """
    Convert a tagged color value to another color space.

    Args:
        color: RGBA, HSLA, OKLCH or P3 value
        to_space: Target space ("rgb", "hsl", "oklch", "p3")

    Returns:
        The color as the target space's tuple type. Alpha is clamped to [0, 1]
        and carried through; a same-space conversion returns ``color`` itself.
    """
    from_space = space_of(color)
    target = ColorSpace(to_space)
    if from_space == target:
        return color

    lrgb = TO_LINEAR[from_space](color)
    return FROM_LINEAR[target](lrgb, clamp01(color.a))


def to_rgba(color: ColorInput) -> RGBA:
    """Project any tagged value to sRGB(0-255)."""
    return cast(RGBA, convert(color, ColorSpace.RGB))


def to_oklch(color: ColorInput) -> OKLCH:
    return cast(OKLCH, convert(color, ColorSpace.OKLCH))
