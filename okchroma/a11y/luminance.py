"""
WCAG 2.1 relative luminance.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B

where R, G, B are the linearized (gamma-decoded) sRGB channels.
See https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""
from ..config import LUMINANCE_WEIGHTS
from ..conversions.linear import rgb_to_linear_rgb
from ..conversions.wrapper import to_rgba
from ..types.color_types import ColorInput
from ..utils.num_utils import clamp01


def luminance(color: ColorInput) -> float:
    """
    Relative luminance of a color.

    Args:
        color: RGBA, or any tagged value (projected to sRGB first)

    Returns:
        float in [0, 1]; 0 for black, 1 for white

    Example:
        >>> luminance(RGBA(255, 0, 0))
        0.2126
    """
    r, g, b = rgb_to_linear_rgb(to_rgba(color))
    wr, wg, wb = LUMINANCE_WEIGHTS
    return clamp01(wr * r + wg * g + wb * b)
