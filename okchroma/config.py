"""
Process-wide tunables for the conversion, gamut and contrast engines.

All values are read-only constants. Functions that expose one of these as a
keyword argument default it to ``None`` and resolve it here, so callers can
override per call without touching module state.
"""

# Chroma below this is hue-agnostic; hue is reported as 0.
ACHROMATIC_THRESHOLD = 1e-4

# Linear channel tolerance at the gamut boundary.
GAMUT_EPSILON = 1e-4

# Just-noticeable difference for chroma bisection (CSS Color 4).
DEFAULT_JND = 0.02
MIN_JND = 1e-6

# ensure_contrast lightness search
CONTRAST_MAX_ITERATIONS = 20
CONTRAST_TOLERANCE = 1e-4

# WCAG 2.1 relative luminance weights (ITU-R BT.709)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
WCAG_MIN_RATIO = 1.0
WCAG_MAX_RATIO = 21.0

WCAG_THRESHOLDS = {
    "AAA": 7.0,
    "AAA_LARGE": 4.5,
    "AA": 4.5,
    "AA_LARGE": 3.0,
}

# APCA |Lc| guidance; the full model is font-size dependent.
APCA_THRESHOLDS = {
    "PREFERRED_BODY": 90.0,
    "BODY_TEXT": 75.0,
    "LARGE_TEXT": 60.0,
    "HEADLINE": 45.0,
    "NON_TEXT": 30.0,
    "MINIMUM": 15.0,
}
