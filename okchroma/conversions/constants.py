"""
Color science constants for the conversion pipeline.

sRGB/P3 ↔ XYZ matrices follow CSS Color Level 4, written as the exact rational
values derived from the chromaticities and the D65 white point. M1 is the
CSS Color 4 recalculation of Björn Ottosson's XYZ -> LMS matrix, which maps D65
white exactly onto LMS (1, 1, 1), so grays come out achromatic. Inverses are
computed once at import rather than copied, keeping each pair consistent to
float precision.

Every matrix is row-major and applied as ``M @ [c0, c1, c2]``. All arrays are
marked read-only at import.

See https://www.w3.org/TR/css-color-4/#color-conversion-code and
https://bottosson.github.io/posts/oklab/
"""
import numpy as np


def _frozen(rows) -> np.ndarray:
    m = np.array(rows, dtype=np.float64)
    m.flags.writeable = False
    return m


def _inverse(m: np.ndarray) -> np.ndarray:
    return _frozen(np.linalg.inv(m))


# D65 reference white (x=0.3127, y=0.3290), Y normalized to 1.
D65_WHITE = (0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290)

SRGB_TO_XYZ = _frozen([
    [506752 / 1228815, 87881 / 245763, 12673 / 70218],
    [87098 / 409605, 175762 / 245763, 12673 / 175545],
    [7918 / 409605, 87881 / 737289, 1001167 / 1053270],
])
XYZ_TO_SRGB = _inverse(SRGB_TO_XYZ)

# XYZ -> LMS
OKLAB_M1 = _frozen([
    [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
])
OKLAB_M1_INV = _inverse(OKLAB_M1)

# LMS' (cube-rooted) -> Lab
OKLAB_M2 = _frozen([
    [0.2104542683093140, 0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799, 0.4505937096174110],
    [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
])
OKLAB_M2_INV = _inverse(OKLAB_M2)

P3_TO_XYZ = _frozen([
    [608311 / 1250200, 189793 / 714400, 198249 / 1000160],
    [35783 / 156275, 247089 / 357200, 198249 / 2500400],
    [0.0, 32229 / 714400, 5220557 / 5000800],
])
XYZ_TO_P3 = _inverse(P3_TO_XYZ)

# Composite sRGB -> XYZ -> P3 and back, on linear channels.
LINEAR_SRGB_TO_LINEAR_P3 = _frozen(XYZ_TO_P3 @ SRGB_TO_XYZ)
LINEAR_P3_TO_LINEAR_SRGB = _frozen(XYZ_TO_SRGB @ P3_TO_XYZ)
