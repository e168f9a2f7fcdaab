from __future__ import annotations
from enum import Enum
from typing import Literal, NamedTuple, Tuple, Union

from ..utils.num_utils import clamp, clamp01, normalize_hue, to_byte

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    P3 = "p3"


class Gamut(str, Enum):
    SRGB = "srgb"
    P3 = "p3"


ColorSpaceName = Literal["rgb", "hsl", "oklch", "p3"]
GamutName = Literal["srgb", "p3"]
MixSpace = Literal["oklch", "rgb"]


class RGBA(NamedTuple):
    """sRGB color: integer channels in [0, 255], alpha in [0, 1]."""
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 1.0) -> RGBA:
        """Build an RGBA from arbitrary arithmetic, clamping and rounding each channel."""
        return cls(to_byte(r), to_byte(g), to_byte(b), clamp01(a))


class LinearRGB(NamedTuple):
    r: float
    g: float
    b: float


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float = 1.0

    @classmethod
    def normalized(cls, h: float, s: float, l: float, a: float = 1.0) -> HSLA:
        return cls(normalize_hue(h), clamp01(s), clamp01(l), clamp01(a))


class OKLCH(NamedTuple):
    """Cylindrical Oklab color; the canonical representation of :class:`Color`."""
    l: float
    c: float
    h: float
    a: float = 1.0

    @classmethod
    def normalized(cls, l: float, c: float, h: float, a: float = 1.0) -> OKLCH:
        return cls(clamp01(l), max(0.0, float(c)), normalize_hue(h), clamp01(a))


class Oklab(NamedTuple):
    L: float
    a: float
    b: float


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class P3(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 1.0) -> P3:
        return cls(clamp(r, 0.0, 1.0), clamp(g, 0.0, 1.0), clamp(b, 0.0, 1.0), clamp01(a))


class LinearP3(NamedTuple):
    r: float
    g: float
    b: float


# Tagged values: the tuple class is the space discriminant.
ColorInput = Union[RGBA, HSLA, OKLCH, P3]

SPACE_OF_TYPE: dict[type, ColorSpace] = {
    RGBA: ColorSpace.RGB,
    HSLA: ColorSpace.HSL,
    OKLCH: ColorSpace.OKLCH,
    P3: ColorSpace.P3,
}


def space_of(color: ColorInput) -> ColorSpace:
    """
    Return the color space a tagged value belongs to.

    Args:
        color: One of the tagged tuples (RGBA, HSLA, OKLCH, P3)
    Returns:
        The matching ColorSpace
    """
    try:
        return SPACE_OF_TYPE[type(color)]
    except KeyError:
        raise TypeError(f"Unsupported color value: {color!r}") from None
