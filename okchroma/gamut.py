"""
Gamut resolution in OKLCH.

A color is mapped into a target RGB gamut by holding lightness and hue fixed
and bisecting chroma between 0 (always displayable) and the original chroma,
following the CSS Color 4 gamut mapping approach with a just-noticeable
difference (JND) as the stopping width.
"""
import logging
import math
from typing import Callable, Optional

from .config import DEFAULT_JND, GAMUT_EPSILON, MIN_JND
from .conversions.p3 import oklch_to_linear_p3
from .conversions.rgb_oklch import oklch_to_linear_rgb
from .types.color_types import OKLCH, Gamut, GamutName
from .utils.default import value_or_default

logger = logging.getLogger(__name__)

_LINEAR_PROJECTION: dict[Gamut, Callable[[OKLCH], tuple[float, float, float]]] = {
    Gamut.SRGB: oklch_to_linear_rgb,
    Gamut.P3: oklch_to_linear_p3,
}


def _resolve_jnd(jnd: Optional[float]) -> float:
    jnd = value_or_default(jnd, DEFAULT_JND)
    if not math.isfinite(jnd) or jnd < MIN_JND:
        return MIN_JND
    return float(jnd)


def is_in_gamut(oklch: OKLCH, gamut: Gamut | GamutName = Gamut.SRGB) -> bool:
    """
    Check whether an OKLCH color is displayable in an RGB gamut.

    Args:
        oklch: Color to test
        gamut: "srgb" (default) or "p3"

    Returns:
        True if lightness is in [0, 1] and every linear channel is within
        ``[-GAMUT_EPSILON, 1 + GAMUT_EPSILON]``
    """
    if not 0.0 <= oklch.l <= 1.0:
        return False

    channels = _LINEAR_PROJECTION[Gamut(gamut)](oklch)
    lo, hi = -GAMUT_EPSILON, 1.0 + GAMUT_EPSILON
    return all(lo <= v <= hi for v in channels)


def clamp_to_gamut(
    oklch: OKLCH,
    jnd: Optional[float] = None,
    gamut: Gamut | GamutName = Gamut.SRGB,
) -> OKLCH:
    """
    Reduce chroma until the color fits the gamut, keeping lightness and hue.

    Lightness outside [0, 1] collapses to black or white with the original hue,
    and negative chroma is floored at 0.
    Otherwise chroma is bisected on ``[0, c]``; the lower bound is always in
    gamut and is what gets returned once the bracket is narrower than ``jnd``.

    Args:
        oklch: Color to resolve
        jnd: Bisection width, defaults to ``DEFAULT_JND``. Non-positive or
             non-finite values fall back to ``MIN_JND``.
        gamut: "srgb" (default) or "p3"

    Returns:
        OKLCH: In-gamut color. Never raises.
    """
    gamut = Gamut(gamut)
    if oklch.l < 0.0:
        return OKLCH(0.0, 0.0, oklch.h, oklch.a)
    if oklch.l > 1.0:
        return OKLCH(1.0, 0.0, oklch.h, oklch.a)
    if oklch.c < 0.0:
        oklch = oklch._replace(c=0.0)

    if is_in_gamut(oklch, gamut):
        return oklch

    step = _resolve_jnd(jnd)
    lo, hi = 0.0, oklch.c
    iterations = 0
    while hi - lo >= step:
        mid = (lo + hi) / 2
        if is_in_gamut(OKLCH(oklch.l, mid, oklch.h, oklch.a), gamut):
            lo = mid
        else:
            hi = mid
        iterations += 1

    logger.debug(
        "[Gamut] %s: l=%.4f h=%.2f chroma %.4f -> %.4f in %d steps",
        gamut.value, oklch.l, oklch.h, oklch.c, lo, iterations,
    )
    return OKLCH(oklch.l, lo, oklch.h, oklch.a)


def map_to_gamut(
    oklch: OKLCH,
    jnd: Optional[float] = None,
    gamut: Gamut | GamutName = Gamut.SRGB,
) -> OKLCH:
    """Map a color into ``gamut``. Currently chroma reduction via :func:`clamp_to_gamut`."""
    return clamp_to_gamut(oklch, jnd=jnd, gamut=gamut)


def is_in_p3_gamut(oklch: OKLCH) -> bool:
    return is_in_gamut(oklch, Gamut.P3)


def clamp_to_p3_gamut(oklch: OKLCH, jnd: Optional[float] = None) -> OKLCH:
    return clamp_to_gamut(oklch, jnd=jnd, gamut=Gamut.P3)
