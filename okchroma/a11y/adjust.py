"""
Foreground adjustment to reach a WCAG contrast target.

The search runs on OKLCH lightness with chroma and hue held (then gamut
clamped), so an adjusted color keeps its hue as far as the gamut allows.
Contrast is always measured on the rounded sRGB color that will actually be
returned.
"""
import logging
from typing import NamedTuple, Optional

from ..config import CONTRAST_MAX_ITERATIONS, CONTRAST_TOLERANCE
from ..conversions.rgb_oklch import oklch_to_rgb
from ..conversions.wrapper import convert, to_oklch, to_rgba
from ..gamut import clamp_to_gamut
from ..types.color_types import OKLCH, RGBA, ColorInput, ColorSpace, space_of
from ..utils.default import value_or_default
from .contrast import contrast
from .luminance import luminance

logger = logging.getLogger(__name__)

WHITE = RGBA(255, 255, 255, 1.0)
BLACK = RGBA(0, 0, 0, 1.0)


class _Candidate(NamedTuple):
    oklch: OKLCH
    rgba: RGBA
    ratio: float


def _candidate(fg: OKLCH, l: float, background: RGBA) -> _Candidate:
    lch = clamp_to_gamut(OKLCH(l, fg.c, fg.h, fg.a))
    rgba = oklch_to_rgb(lch)
    return _Candidate(lch, rgba, contrast(rgba, background))


def _search(
    fg: OKLCH,
    background: RGBA,
    target: float,
    lighten: bool,
    max_iterations: int,
    tolerance: float,
) -> tuple[_Candidate, bool]:
    """
    Bisect lightness between ``fg.l`` and the extreme of one direction.

    Returns the best candidate and whether it meets ``target``. When even the
    extreme (white or black) misses the target, the extreme is returned.
    """
    extreme = _candidate(fg, 1.0 if lighten else 0.0, background)
    if extreme.ratio < target:
        return extreme, False

    passing, failing = extreme.oklch.l, fg.l
    best = extreme
    for _ in range(max_iterations):
        if abs(passing - failing) < tolerance:
            break
        mid = (passing + failing) / 2
        cand = _candidate(fg, mid, background)
        if cand.ratio >= target:
            passing, best = mid, cand
        else:
            failing = mid

    return best, True


def _natural_direction(fg: RGBA, background: RGBA) -> bool:
    """True to lighten ``fg``, False to darken it."""
    l_fg, l_bg = luminance(fg), luminance(background)
    if l_bg > l_fg:
        return False
    if l_bg < l_fg:
        return True
    return contrast(WHITE, background) > contrast(BLACK, background)


def ensure_contrast(
    fg: ColorInput,
    bg: ColorInput,
    target: float,
    prefer_lighten: Optional[bool] = None,
    max_iterations: Optional[int] = None,
    tolerance: Optional[float] = None,
) -> ColorInput:
    """
    Adjust ``fg`` until its WCAG contrast against ``bg`` reaches ``target``.

    If ``fg`` already meets the target it is returned unchanged. Otherwise the
    foreground is darkened when the background is the lighter color and
    lightened when it is the darker one; ``prefer_lighten`` overrides that
    choice. If the chosen direction cannot reach the target the opposite one is
    tried, and if neither can, the more contrasting of the two extremes is
    returned (the requested direction wins ties). The target is therefore not
    guaranteed when it is unreachable.

    Args:
        fg: Foreground color (any tagged value)
        bg: Background color (any tagged value)
        target: Contrast ratio to reach, e.g. 4.5 for WCAG AA
        prefer_lighten: Force the first search direction
        max_iterations: Bisection steps per direction
        tolerance: Stop once the lightness bracket is narrower than this

    Returns:
        The adjusted color, in the same space and with the same alpha as ``fg``
    """
    fg_rgba = to_rgba(fg)
    bg_rgba = to_rgba(bg)
    if contrast(fg_rgba, bg_rgba) >= target:
        return fg

    max_iterations = value_or_default(max_iterations, CONTRAST_MAX_ITERATIONS)
    tolerance = value_or_default(tolerance, CONTRAST_TOLERANCE)

    fg_lch = to_oklch(fg)
    lighten = _natural_direction(fg_rgba, bg_rgba) if prefer_lighten is None else prefer_lighten

    primary, reached = _search(fg_lch, bg_rgba, target, lighten, max_iterations, tolerance)
    result = primary
    if not reached:
        secondary, reached = _search(fg_lch, bg_rgba, target, not lighten, max_iterations, tolerance)
        if secondary.ratio > primary.ratio:
            result = secondary
        logger.debug(
            "[Contrast] %s direction cannot reach %.2f; %s (%.2f vs %.2f)",
            "lighten" if lighten else "darken",
            target,
            "using opposite direction" if result is secondary else "keeping requested direction",
            secondary.ratio,
            primary.ratio,
        )

    logger.debug(
        "[Contrast] %s -> %s against %s: ratio %.3f (target %.2f)",
        fg_rgba, result.rgba, bg_rgba, result.ratio, target,
    )

    space = space_of(fg)
    if space == ColorSpace.OKLCH:
        return result.oklch
    if space == ColorSpace.RGB:
        return result.rgba
    return convert(result.rgba, space)
