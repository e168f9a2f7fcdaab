import pytest

from okchroma.a11y import luminance, contrast, contrast_ratio
from okchroma.types import HSLA, OKLCH, P3, RGBA
from ..samples import samples_luminance

BLACK = RGBA(0, 0, 0, 1)
WHITE = RGBA(255, 255, 255, 1)


def test_luminance_samples():
    for rgb, expected in samples_luminance.items():
        assert luminance(RGBA(*rgb)) == pytest.approx(expected, abs=1e-4)


def test_luminance_accepts_any_space():
    assert luminance(HSLA(0, 1, 0.5)) == pytest.approx(0.2126, abs=1e-4)
    assert luminance(OKLCH(1, 0, 0)) == pytest.approx(1.0, abs=1e-4)
    assert luminance(P3(0, 0, 0)) == 0.0


def test_luminance_ignores_alpha():
    assert luminance(RGBA(10, 100, 200, 0.1)) == luminance(RGBA(10, 100, 200, 1))


def test_luminance_monotonic_in_gray():
    values = [luminance(RGBA(v, v, v)) for v in range(256)]
    assert all(b > a for a, b in zip(values, values[1:]))


def test_black_white():
    assert contrast(BLACK, WHITE) == pytest.approx(21)
    assert contrast(WHITE, BLACK) == pytest.approx(21)


def test_identical_colors():
    assert contrast(WHITE, WHITE) == 1
    assert contrast(RGBA(120, 30, 200), RGBA(120, 30, 200)) == 1


def test_gray_on_white():
    assert contrast(RGBA(128, 128, 128), WHITE) == pytest.approx(3.949, abs=1e-3)


def test_contrast_ratio_bounds():
    assert contrast_ratio(0, 1) == pytest.approx(21)
    assert contrast_ratio(0, 5) == 21
    assert contrast_ratio(0.3, 0.3) == 1

