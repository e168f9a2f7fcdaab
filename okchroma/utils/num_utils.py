import math
from numbers import Real


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(float(value), 0.0, 1.0)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(h) % 360.0
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if h >= 360.0 else h


def to_byte(value: float) -> int:
    """Clamp to [0, 255] and round half up to the nearest integer channel."""
    return int(math.floor(clamp(float(value), 0.0, 255.0) + 0.5))


def is_finite_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
