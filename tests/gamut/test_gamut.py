import logging

import pytest

from okchroma.config import DEFAULT_JND
from okchroma.conversions import rgb_to_oklch
from okchroma.gamut import (
    is_in_gamut,
    clamp_to_gamut,
    map_to_gamut,
    is_in_p3_gamut,
    clamp_to_p3_gamut,
)
from okchroma.types import OKLCH, RGBA, Gamut
from ..samples import round_trip_rgb


def test_srgb_colors_are_in_gamut():
    for rgb in round_trip_rgb:
        lch = rgb_to_oklch(RGBA(*rgb))
        assert is_in_gamut(lch)
        assert is_in_p3_gamut(lch)


def test_lightness_out_of_range_is_out_of_gamut():
    assert not is_in_gamut(OKLCH(-0.01, 0, 0))
    assert not is_in_gamut(OKLCH(1.01, 0, 0))


def test_high_chroma_is_out_of_gamut():
    assert not is_in_gamut(OKLCH(0.5, 0.5, 180))
    assert not is_in_gamut(OKLCH(0.9, 0.3, 180))


def test_p3_is_wider_than_srgb():
    vivid_green = OKLCH(0.8, 0.3, 145)
    assert not is_in_gamut(vivid_green)
    assert is_in_gamut(vivid_green, Gamut.P3)
    assert is_in_p3_gamut(vivid_green)


def test_gamut_accepts_string_names():
    assert is_in_gamut(OKLCH(0.5, 0.05, 10), "srgb")
    assert is_in_gamut(OKLCH(0.5, 0.05, 10), "p3")


def test_clamp_reduces_chroma_only():
    source = OKLCH(0.9, 0.3, 180, 1)
    result = clamp_to_gamut(source)

    assert result.c < 0.3
    assert is_in_gamut(result)
    assert result.l == source.l
    assert result.h == source.h
    assert result.a == source.a


def test_clamp_negative_lightness():
    assert clamp_to_gamut(OKLCH(-0.5, 0.3, 180, 1)) == OKLCH(0, 0, 180, 1)


def test_clamp_lightness_above_one():
    assert clamp_to_gamut(OKLCH(1.5, 0.3, 42, 0.5)) == OKLCH(1, 0, 42, 0.5)


def test_clamp_floors_negative_chroma():
    result = clamp_to_gamut(OKLCH(0.5, -0.1, 30, 0.8))
    assert result == OKLCH(0.5, 0.0, 30, 0.8)
    assert clamp_to_p3_gamut(OKLCH(0.5, -0.1, 30)).c == 0.0


def test_clamp_in_gamut_is_identity():
    lch = OKLCH(0.6, 0.1, 250, 0.7)
    assert clamp_to_gamut(lch) is lch


def test_clamp_lands_near_boundary():
    result = clamp_to_gamut(OKLCH(0.5, 0.5, 180))
    assert is_in_gamut(result)
    assert not is_in_gamut(result._replace(c=result.c + DEFAULT_JND))


def test_smaller_jnd_gets_closer():
    source = OKLCH(0.7, 0.35, 30)
    coarse = clamp_to_gamut(source, jnd=0.05)
    fine = clamp_to_gamut(source, jnd=0.001)
    assert fine.c >= coarse.c
    assert is_in_gamut(fine)


@pytest.mark.parametrize("jnd", [0, -1, float("nan"), float("inf")])
def test_bad_jnd_still_terminates(jnd):
    result = clamp_to_gamut(OKLCH(0.7, 0.35, 30), jnd=jnd)
    assert is_in_gamut(result)


def test_map_to_gamut_delegates():
    source = OKLCH(0.6, 0.4, 300)
    assert map_to_gamut(source) == clamp_to_gamut(source)
    assert map_to_gamut(source, jnd=0.001, gamut="p3") == clamp_to_p3_gamut(source, jnd=0.001)


def test_p3_clamp_keeps_more_chroma():
    source = OKLCH(0.8, 0.4, 145)
    srgb = clamp_to_gamut(source)
    p3 = clamp_to_p3_gamut(source)
    assert is_in_p3_gamut(p3)
    assert p3.c > srgb.c


def test_clamp_logs_search(caplog):
    with caplog.at_level(logging.DEBUG, logger="okchroma.gamut"):
        clamp_to_gamut(OKLCH(0.5, 0.5, 180))
    assert any(r.getMessage().startswith("[Gamut]") for r in caplog.records)

