"""
Accessibility: WCAG 2.1 luminance and contrast, APCA, readability checks and
contrast adjustment.

>>> from okchroma.a11y import contrast, ensure_contrast
>>> from okchroma.types import RGBA
>>> contrast(RGBA(0, 0, 0), RGBA(255, 255, 255))
21.0
>>> ensure_contrast(RGBA(150, 150, 150), RGBA(255, 255, 255), 4.5)
RGBA(r=118, g=118, b=118, a=1.0)
"""
from ..config import APCA_THRESHOLDS, WCAG_THRESHOLDS
from .adjust import ensure_contrast
from .apca import apca_contrast, apca_passes
from .contrast import contrast, contrast_ratio
from .luminance import luminance
from .readable import ReadabilityLevel, get_readability_level, is_readable

__all__ = [
    'luminance',
    'contrast',
    'contrast_ratio',
    'apca_contrast',
    'apca_passes',
    'ensure_contrast',
    'is_readable',
    'get_readability_level',
    'ReadabilityLevel',
    'WCAG_THRESHOLDS',
    'APCA_THRESHOLDS',
]
