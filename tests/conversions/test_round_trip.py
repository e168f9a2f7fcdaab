import numpy as np

from okchroma.conversions import (
    rgb_to_oklch,
    oklch_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_p3,
    p3_to_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
)
from okchroma.types import OKLCH, RGBA
from ..samples import round_trip_rgb


def test_round_trip_rgb_oklch_samples():
    for r, g, b in round_trip_rgb:
        out = oklch_to_rgb(rgb_to_oklch(RGBA(r, g, b)))
        assert out == RGBA(r, g, b, 1.0)


def test_round_trip_hsl_and_p3_samples():
    for r, g, b in round_trip_rgb:
        assert hsl_to_rgb(rgb_to_hsl(RGBA(r, g, b))) == RGBA(r, g, b, 1.0)
        assert p3_to_rgb(rgb_to_p3(RGBA(r, g, b, 0.5))) == RGBA(r, g, b, 0.5)


def test_achromatic_ignores_hue_samples():
    for l in (0.0, 0.25, 0.5, 0.75, 1.0):
        assert oklch_to_rgb(OKLCH(l, 0, 0)) == oklch_to_rgb(OKLCH(l, 0, 217.5))


def test_round_trip_numpy_grid():
    grid = np.stack(np.meshgrid(*[np.arange(0, 256, 17)] * 3, indexing="ij"), axis=-1).reshape(-1, 3)
    back = np_oklch_to_rgb(np_rgb_to_oklch(grid))
    assert np.array_equal(back, grid)
