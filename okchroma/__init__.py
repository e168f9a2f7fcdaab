"""okchroma: OKLCH-based color conversion, gamut mapping and contrast."""
import logging

from .types import (
    RGBA,
    LinearRGB,
    HSLA,
    OKLCH,
    Oklab,
    XYZ,
    P3,
    LinearP3,
    ColorInput,
    ColorSpace,
    Gamut,
)
from .errors import ColorError, ColorErrorCode, ColorOutOfGamutError
from .colors import Color, color, try_color, mix_colors
from .gamut import (
    is_in_gamut,
    clamp_to_gamut,
    map_to_gamut,
    is_in_p3_gamut,
    clamp_to_p3_gamut,
)
from .a11y import (
    luminance,
    contrast,
    apca_contrast,
    apca_passes,
    ensure_contrast,
    is_readable,
    get_readability_level,
    WCAG_THRESHOLDS,
    APCA_THRESHOLDS,
)
from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_oklch,
    oklch_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_p3,
    p3_to_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
    convert,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # value types
    "RGBA",
    "LinearRGB",
    "HSLA",
    "OKLCH",
    "Oklab",
    "XYZ",
    "P3",
    "LinearP3",
    "ColorInput",
    "ColorSpace",
    "Gamut",
    # errors
    "ColorError",
    "ColorErrorCode",
    "ColorOutOfGamutError",
    # facade
    "Color",
    "color",
    "try_color",
    "mix_colors",
    # gamut
    "is_in_gamut",
    "clamp_to_gamut",
    "map_to_gamut",
    "is_in_p3_gamut",
    "clamp_to_p3_gamut",
    # contrast
    "luminance",
    "contrast",
    "apca_contrast",
    "apca_passes",
    "ensure_contrast",
    "is_readable",
    "get_readability_level",
    "WCAG_THRESHOLDS",
    "APCA_THRESHOLDS",
    # conversions
    "srgb_to_linear",
    "linear_to_srgb",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_p3",
    "p3_to_rgb",
    "np_rgb_to_oklch",
    "np_oklch_to_rgb",
    "convert",
]
