from .color_types import (
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
    ColorSpaceName,
    Gamut,
    GamutName,
    MixSpace,
    space_of,
)

__all__ = [
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
    "ColorSpaceName",
    "Gamut",
    "GamutName",
    "MixSpace",
    "space_of",
]
