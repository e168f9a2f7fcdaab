from .num_utils import clamp, clamp01, normalize_hue, to_byte, is_finite_number
from .default import value_or_default

__all__ = [
    "clamp",
    "clamp01",
    "normalize_hue",
    "to_byte",
    "is_finite_number",
    "value_or_default",
]
