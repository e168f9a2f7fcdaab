from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

from ..a11y.adjust import ensure_contrast as _ensure_contrast
from ..a11y.apca import apca_contrast as _apca_contrast
from ..a11y.contrast import contrast as _contrast
from ..a11y.luminance import luminance as _luminance
from ..a11y.readable import is_readable as _is_readable
from ..conversions.hsl import rgb_to_hsl
from ..conversions.oklab import oklab_to_xyz, oklch_to_oklab
from ..conversions.p3 import oklch_to_p3
from ..conversions.rgb_oklch import oklch_to_linear_rgb, oklch_to_rgb
from ..conversions.wrapper import to_oklch
from ..errors import ColorError, ColorErrorCode, ColorOutOfGamutError
from ..gamut import clamp_to_gamut, is_in_gamut
from ..types.color_types import (
    HSLA,
    OKLCH,
    P3,
    RGBA,
    XYZ,
    ColorInput,
    ColorSpace,
    ColorSpaceName,
    Gamut,
    GamutName,
    LinearRGB,
    MixSpace,
    Oklab,
    SPACE_OF_TYPE,
)
from ..utils.num_utils import is_finite_number
from . import ops

logger = logging.getLogger(__name__)

ColorLike = Union["Color", ColorInput, Mapping[str, Any]]

_INVALID_CODE = {
    ColorSpace.RGB: ColorErrorCode.INVALID_RGB,
    ColorSpace.HSL: ColorErrorCode.INVALID_HSL,
    ColorSpace.OKLCH: ColorErrorCode.INVALID_OKLCH,
    ColorSpace.P3: ColorErrorCode.INVALID_P3,
}

# (tuple type, channel keys) per tagged-mapping space
_MAPPING_FIELDS = {
    ColorSpace.RGB: (RGBA, ("r", "g", "b")),
    ColorSpace.HSL: (HSLA, ("h", "s", "l")),
    ColorSpace.OKLCH: (OKLCH, ("l", "c", "h")),
    ColorSpace.P3: (P3, ("r", "g", "b")),
}


def _from_mapping(value: Mapping[str, Any]) -> ColorInput:
    try:
        space = ColorSpace(value["space"])
    except (KeyError, ValueError):
        raise ColorError(
            ColorErrorCode.INVALID_FORMAT,
            f"Expected a 'space' key of {[s.value for s in ColorSpace]}, got {value.get('space')!r}",
        ) from None

    cls, keys = _MAPPING_FIELDS[space]
    missing = [k for k in keys if k not in value]
    if missing:
        raise ColorError(_INVALID_CODE[space], f"{space.value} color is missing {', '.join(missing)}")
    return cls(*(value[k] for k in keys), value.get("a", 1.0))


def _validate(value: ColorInput) -> None:
    space = SPACE_OF_TYPE[type(value)]
    bad = [name for name, v in zip(value._fields, value) if not is_finite_number(v)]
    if bad:
        raise ColorError(
            _INVALID_CODE[space],
            f"{type(value).__name__} channels must be finite numbers: {', '.join(bad)} in {value!r}",
        )
    if space == ColorSpace.P3 and not all(0.0 <= v <= 1.0 for v in value[:3]):
        raise ColorOutOfGamutError(value, Gamut.P3.value, f"P3 channels must be in [0, 1], got {value!r}")


class Color:
    """
    Immutable color stored as a canonical OKLCH tuple.

    Build one from any tagged value, a mapping with a ``space`` key, or
    another Color:

        >>> Color(RGBA(255, 0, 0))
        Color(l=0.6280, c=0.2577, h=29.23, a=1)
        >>> Color({"space": "hsl", "h": 120, "s": 1, "l": 0.5})
        Color(l=0.8664, c=0.2948, h=142.50, a=1)

    Every manipulation returns a new instance. Out-of-range channel values are
    clamped; non-finite values raise :class:`~okchroma.errors.ColorError`.
    """
    __slots__ = ('_oklch', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, Color):
            oklch = value._oklch
        else:
            if isinstance(value, Mapping):
                value = _from_mapping(value)
            if type(value) not in SPACE_OF_TYPE:
                raise ColorError(ColorErrorCode.INVALID_FORMAT, f"Cannot build a color from {value!r}")
            _validate(value)
            oklch = OKLCH.normalized(*to_oklch(value))

        self._oklch = oklch

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_input(cls, value: ColorLike) -> Color:
        """Validating factory. An existing Color is returned as-is."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def try_from(cls, value: Any) -> Optional[Color]:
        """Like :meth:`from_input`, but returns ``None`` instead of raising."""
        try:
            return cls.from_input(value)
        except ColorError as e:
            logger.debug("[Color] rejected %r: %s", value, e)
            return None

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(RGBA(r, g, b, a))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        return cls(HSLA(h, s, l, a))

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float, a: float = 1.0) -> Color:
        return cls(OKLCH(l, c, h, a))

    @classmethod
    def from_p3(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(P3(r, g, b, a))

    @classmethod
    def _wrap(cls, oklch: OKLCH) -> Color:
        return cls(OKLCH.normalized(*oklch))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def oklch(self) -> OKLCH:
        return self._oklch

    @property
    def l(self) -> float:
        return self._oklch.l

    @property
    def c(self) -> float:
        return self._oklch.c

    @property
    def h(self) -> float:
        return self._oklch.h

    @property
    def alpha(self) -> float:
        return self._oklch.a

    # ------------------ CONVERSIONS ------------------
    def to_rgba(self) -> RGBA:
        """sRGB(0-255), gamut-mapped in OKLCH before rounding."""
        return oklch_to_rgb(clamp_to_gamut(self._oklch))

    def to_hsla(self) -> HSLA:
        return rgb_to_hsl(self.to_rgba())

    def to_p3(self) -> P3:
        """Display P3, gamut-mapped to P3 (wider than sRGB) first."""
        return oklch_to_p3(clamp_to_gamut(self._oklch, gamut=Gamut.P3))

    def to_oklab(self) -> Oklab:
        return oklch_to_oklab(self._oklch)

    def to_xyz(self) -> XYZ:
        return oklab_to_xyz(self.to_oklab())

    def to_linear_rgb(self) -> LinearRGB:
        """Unclamped linear sRGB; out-of-gamut colors leave [0, 1]."""
        return oklch_to_linear_rgb(self._oklch)

    def convert(self, space: ColorSpace | ColorSpaceName) -> ColorInput:
        space = ColorSpace(space)
        if space == ColorSpace.OKLCH:
            return self._oklch
        if space == ColorSpace.RGB:
            return self.to_rgba()
        if space == ColorSpace.HSL:
            return self.to_hsla()
        return self.to_p3()

    # ------------------ GAMUT ------------------
    def is_in_gamut(self, gamut: Gamut | GamutName = Gamut.SRGB) -> bool:
        return is_in_gamut(self._oklch, gamut)

    def to_gamut(self, gamut: Gamut | GamutName = Gamut.SRGB, jnd: Optional[float] = None) -> Color:
        return self._wrap(clamp_to_gamut(self._oklch, jnd=jnd, gamut=gamut))

    # ------------------ MANIPULATION ------------------
    def lighten(self, amount: float) -> Color:
        return self._wrap(ops.lighten(self._oklch, amount))

    def darken(self, amount: float) -> Color:
        return self._wrap(ops.darken(self._oklch, amount))

    def saturate(self, amount: float) -> Color:
        return self._wrap(ops.saturate(self._oklch, amount))

    def desaturate(self, amount: float) -> Color:
        return self._wrap(ops.desaturate(self._oklch, amount))

    def rotate(self, degrees: float) -> Color:
        return self._wrap(ops.rotate(self._oklch, degrees))

    def complement(self) -> Color:
        return self._wrap(ops.complement(self._oklch))

    def grayscale(self) -> Color:
        return self._wrap(ops.grayscale(self._oklch))

    def invert(self) -> Color:
        return self._wrap(ops.invert(self._oklch))

    def invert_lightness(self) -> Color:
        return self._wrap(ops.invert_lightness(self._oklch))

    def mix(self, other: ColorLike, ratio: float = 0.5, space: MixSpace = "oklch") -> Color:
        """
        Blend toward ``other``.

        Args:
            other: Any color input
            ratio: 0 returns ``self``, 1 returns ``other``; clamped to [0, 1]
            space: "oklch" (shorter-arc hue) or "rgb"
        """
        other = Color.from_input(other)
        if ratio <= 0:
            return self
        if ratio >= 1:
            return other
        return self._wrap(ops.mix(self._oklch, other._oklch, ratio, space))

    def with_alpha(self, value: float) -> Color:
        return self._wrap(ops.with_alpha(self._oklch, value))

    def opacify(self, amount: float) -> Color:
        return self._wrap(ops.opacify(self._oklch, amount))

    def transparentize(self, amount: float) -> Color:
        return self._wrap(ops.transparentize(self._oklch, amount))

    # ------------------ ACCESSIBILITY ------------------
    def luminance(self) -> float:
        return _luminance(self.to_rgba())

    def contrast(self, other: ColorLike) -> float:
        return _contrast(self.to_rgba(), Color.from_input(other).to_rgba())

    def apca_contrast(self, background: ColorLike) -> float:
        """APCA Lc of this color as text on ``background``."""
        return _apca_contrast(self.to_rgba(), Color.from_input(background).to_rgba())

    def is_readable(self, background: ColorLike, level: str = "AA", large_text: bool = False) -> bool:
        return _is_readable(self.to_rgba(), Color.from_input(background).to_rgba(), level, large_text)

    def ensure_contrast(
        self,
        background: ColorLike,
        target: float,
        prefer_lighten: Optional[bool] = None,
    ) -> Color:
        """Return a color with at least ``target`` WCAG contrast, see :func:`okchroma.a11y.ensure_contrast`."""
        fg = self.to_rgba()
        adjusted = _ensure_contrast(fg, Color.from_input(background).to_rgba(), target, prefer_lighten)
        if adjusted is fg:
            return self
        return Color(adjusted)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._oklch == other._oklch

    def __hash__(self) -> int:
        return hash(self._oklch)

    def __repr__(self) -> str:
        l, c, h, a = self._oklch
        return f"{self.__class__.__name__}(l={l:.4f}, c={c:.4f}, h={h:.2f}, a={a:g})"


def color(value: ColorLike) -> Color:
    """Shorthand for :meth:`Color.from_input`."""
    return Color.from_input(value)


def try_color(value: Any) -> Optional[Color]:
    return Color.try_from(value)


def mix_colors(
    colors: Sequence[ColorLike],
    weights: Optional[Sequence[float]] = None,
    space: MixSpace = "oklch",
) -> Color:
    """Weighted blend of several colors, see :func:`okchroma.colors.ops.mix_colors`."""
    return Color._wrap(ops.mix_colors([Color.from_input(c).oklch for c in colors], weights, space))
