from typing import Literal

from ..config import WCAG_THRESHOLDS
from ..types.color_types import ColorInput
from .contrast import contrast

ReadabilityLevel = Literal["AAA", "AA", "fail"]


def _threshold(level: str, large_text: bool) -> float:
    key = level.upper() + ("_LARGE" if large_text else "")
    try:
        return WCAG_THRESHOLDS[key]
    except KeyError:
        raise ValueError(f"Unknown WCAG level: {level!r}") from None


def is_readable(
    fg: ColorInput,
    bg: ColorInput,
    level: Literal["AA", "AAA"] = "AA",
    large_text: bool = False,
) -> bool:
    """
    Check WCAG 2.1 conformance of a text/background pair.

    Args:
        fg: Text color
        bg: Background color
        level: "AA" (default) or "AAA"
        large_text: Use the relaxed large-text thresholds (18pt, or 14pt bold)

    Returns:
        True if the contrast ratio meets the level's threshold
    """
    return contrast(fg, bg) >= _threshold(level, large_text)


def get_readability_level(fg: ColorInput, bg: ColorInput, large_text: bool = False) -> ReadabilityLevel:
    """Highest WCAG level the pair satisfies: "AAA", "AA" or "fail"."""
    ratio = contrast(fg, bg)
    if ratio >= _threshold("AAA", large_text):
        return "AAA"
    if ratio >= _threshold("AA", large_text):
        return "AA"
    return "fail"
