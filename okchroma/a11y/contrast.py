from ..config import WCAG_MAX_RATIO, WCAG_MIN_RATIO
from ..types.color_types import ColorInput
from ..utils.num_utils import clamp
from .luminance import luminance


def contrast_ratio(l1: float, l2: float) -> float:
    """WCAG contrast ratio of two relative luminances, in [1, 21]."""
    hi, lo = max(l1, l2), min(l1, l2)
    return clamp((hi + 0.05) / (lo + 0.05), WCAG_MIN_RATIO, WCAG_MAX_RATIO)


def contrast(a: ColorInput, b: ColorInput) -> float:
    """
    WCAG 2.1 contrast ratio between two colors.

    Symmetric: ``contrast(a, b) == contrast(b, a)``. Alpha is ignored.

    Returns:
        float in [1, 21]; 21 for black on white, 1 for identical colors
    """
    return contrast_ratio(luminance(a), luminance(b))
