"""
Pure color manipulation on OKLCH values.

Every function takes and returns :class:`~okchroma.types.OKLCH` tuples and never
mutates its input. :class:`~okchroma.colors.color.Color` delegates here.
"""
import math
from typing import Optional, Sequence

from ..config import ACHROMATIC_THRESHOLD
from ..conversions.rgb_oklch import oklch_to_rgb, rgb_to_oklch
from ..errors import ColorError, ColorErrorCode
from ..gamut import clamp_to_gamut
from ..types.color_types import OKLCH, RGBA, MixSpace
from ..utils.num_utils import clamp01, normalize_hue


def _to_rgba(oklch: OKLCH) -> RGBA:
    """The sRGB color a user sees for ``oklch``: gamut-mapped, then rounded."""
    return oklch_to_rgb(clamp_to_gamut(oklch))

## Lightness / chroma / hue

def lighten(oklch: OKLCH, amount: float) -> OKLCH:
    """Add ``amount`` to OKLCH lightness, clamped to [0, 1]."""
    return oklch._replace(l=clamp01(oklch.l + amount))


def darken(oklch: OKLCH, amount: float) -> OKLCH:
    return lighten(oklch, -amount)


def saturate(oklch: OKLCH, amount: float) -> OKLCH:
    """
    Add ``amount`` to chroma (floored at 0), then map the result into sRGB.

    Raising chroma easily leaves the gamut, so the result always goes through
    :func:`okchroma.gamut.clamp_to_gamut`.
    """
    return clamp_to_gamut(oklch._replace(c=max(0.0, oklch.c + amount)))


def desaturate(oklch: OKLCH, amount: float) -> OKLCH:
    return saturate(oklch, -amount)


def rotate(oklch: OKLCH, degrees: float) -> OKLCH:
    return oklch._replace(h=normalize_hue(oklch.h + degrees))


def complement(oklch: OKLCH) -> OKLCH:
    return rotate(oklch, 180)


def grayscale(oklch: OKLCH) -> OKLCH:
    return oklch._replace(c=0.0)


def invert(oklch: OKLCH) -> OKLCH:
    """Invert the displayed sRGB color (``255 - channel``) and convert back to OKLCH."""
    r, g, b, a = _to_rgba(oklch)
    return rgb_to_oklch(RGBA(255 - r, 255 - g, 255 - b, a))


def invert_lightness(oklch: OKLCH) -> OKLCH:
    """Mirror OKLCH lightness (``l -> 1 - l``), keeping chroma and hue."""
    return oklch._replace(l=clamp01(1.0 - oklch.l))

## Alpha

def with_alpha(oklch: OKLCH, value: float) -> OKLCH:
    return oklch._replace(a=clamp01(value))


def opacify(oklch: OKLCH, amount: float) -> OKLCH:
    return with_alpha(oklch, oklch.a + amount)


def transparentize(oklch: OKLCH, amount: float) -> OKLCH:
    return with_alpha(oklch, oklch.a - amount)

## Mixing

def interpolate_hue(h1: float, h2: float, ratio: float) -> float:
    """Interpolate along the shorter arc of the hue circle."""
    diff = h2 - h1
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return normalize_hue(h1 + diff * ratio)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _mix_oklch(a: OKLCH, b: OKLCH, t: float) -> OKLCH:
    h1, h2 = a.h, b.h
    # an achromatic endpoint has no meaningful hue; borrow the other one
    if a.c < ACHROMATIC_THRESHOLD:
        h1 = h2
    elif b.c < ACHROMATIC_THRESHOLD:
        h2 = h1

    mixed = OKLCH(
        _lerp(a.l, b.l, t),
        _lerp(a.c, b.c, t),
        interpolate_hue(h1, h2, t),
        _lerp(a.a, b.a, t),
    )
    return clamp_to_gamut(mixed)


def _mix_rgb(a: OKLCH, b: OKLCH, t: float) -> OKLCH:
    ra, rb = _to_rgba(a), _to_rgba(b)
    mixed = RGBA.clamped(
        _lerp(ra.r, rb.r, t),
        _lerp(ra.g, rb.g, t),
        _lerp(ra.b, rb.b, t),
        _lerp(ra.a, rb.a, t),
    )
    return rgb_to_oklch(mixed)


def mix(a: OKLCH, b: OKLCH, ratio: float = 0.5, space: MixSpace = "oklch") -> OKLCH:
    """
    Blend two colors.

    Args:
        a: Start color, returned as-is for ``ratio <= 0``
        b: End color, returned as-is for ``ratio >= 1``
        ratio: Position between ``a`` and ``b``, clamped to [0, 1]
        space: "oklch" interpolates L, C and alpha linearly and hue along the
               shorter arc; "rgb" interpolates sRGB channels

    Returns:
        OKLCH: The blended color. In-between results are mapped into sRGB
        with :func:`okchroma.gamut.clamp_to_gamut`.
    """
    t = clamp01(ratio)
    if t == 0.0 or a == b:
        return a
    if t == 1.0:
        return b

    if space == "oklch":
        return _mix_oklch(a, b, t)
    if space == "rgb":
        return _mix_rgb(a, b, t)
    raise ValueError(f"Unknown mix space: {space!r}")


def mix_colors(
    colors: Sequence[OKLCH],
    weights: Optional[Sequence[float]] = None,
    space: MixSpace = "oklch",
) -> OKLCH:
    """
    Weighted average of several colors.

    In OKLCH the hue is averaged as a unit vector so that 350° and 10° average
    to 0°; achromatic colors contribute lightness but no hue.

    Args:
        colors: One or more OKLCH colors
        weights: Relative weights, equal by default
        space: "oklch" or "rgb"

    Raises:
        ColorError: If ``colors`` is empty or the weights are unusable
    """
    if not colors:
        raise ColorError(ColorErrorCode.INVALID_FORMAT, "mix_colors requires at least one color")
    if len(colors) == 1:
        return colors[0]

    if weights is None:
        weights = [1.0] * len(colors)
    if len(weights) != len(colors):
        raise ColorError(
            ColorErrorCode.INVALID_FORMAT,
            f"Got {len(weights)} weights for {len(colors)} colors",
        )
    total = float(sum(weights))
    if not math.isfinite(total) or total <= 0:
        raise ColorError(ColorErrorCode.INVALID_FORMAT, "Weights must sum to a positive number")
    norm = [w / total for w in weights]

    if space == "rgb":
        rgbs = [_to_rgba(c) for c in colors]
        mixed = RGBA.clamped(*(sum(rgba[i] * w for rgba, w in zip(rgbs, norm)) for i in range(4)))
        return rgb_to_oklch(mixed)
    if space != "oklch":
        raise ValueError(f"Unknown mix space: {space!r}")

    l = c = a = sin_h = cos_h = 0.0
    for color, w in zip(colors, norm):
        l += color.l * w
        c += color.c * w
        a += color.a * w
        if color.c >= ACHROMATIC_THRESHOLD:
            h_rad = math.radians(color.h)
            sin_h += math.sin(h_rad) * w
            cos_h += math.cos(h_rad) * w

    h = normalize_hue(math.degrees(math.atan2(sin_h, cos_h)))
    return clamp_to_gamut(OKLCH(l, c, h, clamp01(a)))
