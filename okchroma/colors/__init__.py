"""
okchroma Color Facade
=====================

:class:`Color` is an immutable value holding one canonical OKLCH tuple.
Manipulations (lighten, saturate, rotate, mix, invert, alpha) return new
instances; conversions fan out to any supported space on demand.

Usage
-----
>>> from okchroma.colors import Color
>>> from okchroma.types import RGBA
>>>
>>> red = Color(RGBA(255, 0, 0))
>>> red.lighten(0.1).to_rgba()
>>> red.mix(Color.from_rgb(0, 0, 255), 0.5)
>>> red.with_alpha(0.5).alpha
0.5
>>>
>>> # Immutable
>>> red._oklch = None
Traceback (most recent call last):
AttributeError: Color is immutable; cannot assign to _oklch

The pure OKLCH functions behind the methods live in :mod:`okchroma.colors.ops`.
"""
from . import ops
from .color import Color, ColorLike, color, mix_colors, try_color

__all__ = [
    'Color',
    'ColorLike',
    'color',
    'try_color',
    'mix_colors',
    'ops',
]
