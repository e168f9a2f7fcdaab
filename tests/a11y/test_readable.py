import pytest

from okchroma.a11y import is_readable, get_readability_level, WCAG_THRESHOLDS
from okchroma.types import RGBA

BLACK = RGBA(0, 0, 0)
WHITE = RGBA(255, 255, 255)
GRAY_128 = RGBA(128, 128, 128)  # 3.95:1 on white
GRAY_118 = RGBA(118, 118, 118)  # 4.54:1 on white


def test_thresholds():
    assert WCAG_THRESHOLDS == {"AAA": 7.0, "AAA_LARGE": 4.5, "AA": 4.5, "AA_LARGE": 3.0}


def test_is_readable_levels():
    assert is_readable(BLACK, WHITE)
    assert is_readable(BLACK, WHITE, "AAA")
    assert is_readable(GRAY_118, WHITE)
    assert not is_readable(GRAY_118, WHITE, "AAA")
    assert is_readable(GRAY_118, WHITE, "AAA", large_text=True)


def test_large_text_is_relaxed():
    assert not is_readable(GRAY_128, WHITE)
    assert is_readable(GRAY_128, WHITE, large_text=True)


def test_level_is_case_insensitive():
    assert is_readable(BLACK, WHITE, "aaa")


def test_unknown_level():
    with pytest.raises(ValueError):
        is_readable(BLACK, WHITE, "A")


def test_get_readability_level():
    assert get_readability_level(BLACK, WHITE) == "AAA"
    assert get_readability_level(GRAY_118, WHITE) == "AA"
    assert get_readability_level(GRAY_128, WHITE) == "fail"
    assert get_readability_level(GRAY_128, WHITE, large_text=True) == "AA"
    assert get_readability_level(GRAY_118, WHITE, large_text=True) == "AAA"
    assert get_readability_level(WHITE, WHITE) == "fail"
