"""
APCA (Accessible Perceptual Contrast Algorithm), the WCAG 3 draft contrast
metric, version 0.0.98G-4g.

Lc is signed: positive for dark text on a light background, negative for light
text on a dark background. Pass/fail checks compare ``abs(Lc)`` against
:data:`okchroma.config.APCA_THRESHOLDS`.

See https://github.com/Myndex/apca-w3
"""
from ..config import APCA_THRESHOLDS
from ..conversions.wrapper import to_rgba
from ..types.color_types import RGBA, ColorInput

# Screen luminance estimate: simple 2.4 power curve, not the piecewise sRGB one.
_EXPONENT = 2.4
_COEFFICIENTS = (0.2126729, 0.7151522, 0.0721750)

_NORM_BG = 0.56
_NORM_TXT = 0.57
_REV_TXT = 0.62
_REV_BG = 0.65

_BLACK_THRESHOLD = 0.022
_BLACK_CLAMP = 1.414
_SCALE = 1.14
_OFFSET = 0.027
_LOW_CLIP = 0.1
_DELTA_Y_MIN = 0.0005


def screen_luminance(rgba: RGBA) -> float:
    """Estimated screen luminance Y used by APCA."""
    r, g, b = (min(max(c, 0), 255) / 255.0 for c in rgba[:3])
    cr, cg, cb = _COEFFICIENTS
    return cr * r ** _EXPONENT + cg * g ** _EXPONENT + cb * b ** _EXPONENT


def _soft_clamp_black(y: float) -> float:
    if y < _BLACK_THRESHOLD:
        return y + (_BLACK_THRESHOLD - y) ** _BLACK_CLAMP
    return y


def apca_contrast(text: ColorInput, background: ColorInput) -> float:
    """
    APCA lightness contrast Lc of ``text`` on ``background``.

    Args:
        text: Foreground color (any tagged value)
        background: Background color (any tagged value)

    Returns:
        float: Lc, roughly in [-108, 106]. 0 when the colors are too close to
        produce meaningful contrast.
    """
    y_txt = _soft_clamp_black(screen_luminance(to_rgba(text)))
    y_bg = _soft_clamp_black(screen_luminance(to_rgba(background)))

    if abs(y_bg - y_txt) < _DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        # dark text on light background
        sapc = (y_bg ** _NORM_BG - y_txt ** _NORM_TXT) * _SCALE
        if sapc < _LOW_CLIP:
            return 0.0
        return (sapc - _OFFSET) * 100.0

    # light text on dark background
    sapc = (y_bg ** _REV_BG - y_txt ** _REV_TXT) * _SCALE
    if sapc > -_LOW_CLIP:
        return 0.0
    return (sapc + _OFFSET) * 100.0


def apca_passes(text: ColorInput, background: ColorInput, threshold: float | str = "BODY_TEXT") -> bool:
    """
    Check ``abs(Lc)`` against a threshold.

    Args:
        threshold: Lc value, or a key of ``APCA_THRESHOLDS`` such as "BODY_TEXT"
    """
    if isinstance(threshold, str):
        try:
            threshold = APCA_THRESHOLDS[threshold.upper()]
        except KeyError:
            raise ValueError(f"Unknown APCA threshold: {threshold!r}") from None
    return abs(apca_contrast(text, background)) >= threshold
