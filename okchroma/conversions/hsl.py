import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLA, RGBA
from ..utils.num_utils import clamp, clamp01, normalize_hue

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to gamma-encoded RGB floats.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue in degrees, any value (normalized mod 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = clamp01(s)
    l = clamp01(l)

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsl_to_rgb(hsla: HSLA) -> RGBA:
    """HSLA -> sRGB(0-255). Alpha is clamped to [0, 1] and passed through."""
    r, g, b = hsl_to_unit_rgb(hsla.h, hsla.s, hsla.l)
    return RGBA.clamped(r * 255, g * 255, b * 255, hsla.a)


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to gamma-encoded RGB floats.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.clip(np.asarray(s, dtype=float), 0, 1)
    l = np.clip(np.asarray(l, dtype=float), 0, 1)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    x = chroma * (1 - np.abs((h / 60) % 2 - 1))
    m = l - chroma / 2
    zero = np.zeros(out_shape)

    hue_section = np.clip(np.floor(h / 60).astype(int), 0, 5)

    # (r, g, b) before the lightness offset, one row per hue section
    r = np.choose(hue_section, [chroma, x, zero, zero, x, chroma])
    g = np.choose(hue_section, [x, chroma, chroma, x, zero, zero])
    b = np.choose(hue_section, [zero, zero, x, chroma, chroma, x])

    return np.stack([r + m, g + m, b + m], axis=-1)

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert gamma-encoded RGB floats to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = clamp(delta / (1 - abs(2 * lightness - 1)), 0.0, 1.0)

    if max_c == r:
        hue = 60 * ((g - b) / delta) + 360
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240

    return normalize_hue(hue), saturation, lightness


def rgb_to_hsl(rgba: RGBA) -> HSLA:
    """sRGB(0-255) -> HSLA. Channels are clamped to [0, 255] first."""
    h, s, l = unit_rgb_to_hsl(rgba.r / 255, rgba.g / 255, rgba.b / 255)
    return HSLA(h, s, l, clamp01(rgba.a))


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert gamma-encoded RGB floats to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.clip(np.asarray(r, dtype=float), 0, 1)
    g = np.clip(np.asarray(g, dtype=float), 0, 1)
    b = np.clip(np.asarray(b, dtype=float), 0, 1)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    saturation = np.zeros(out_shape)
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))
    saturation = np.clip(saturation, 0, 1)

    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360

    return np.stack([hue, saturation, lightness], axis=-1)
