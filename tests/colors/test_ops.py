import pytest

from okchroma.colors import ops
from okchroma.conversions import oklch_to_rgb, rgb_to_oklch
from okchroma.errors import ColorError, ColorErrorCode
from okchroma.gamut import clamp_to_gamut, is_in_gamut
from okchroma.types import OKLCH, RGBA

RED = rgb_to_oklch(RGBA(255, 0, 0))
BLUE = rgb_to_oklch(RGBA(0, 0, 255))
GRAY = rgb_to_oklch(RGBA(128, 128, 128))


def test_lighten_darken_clamp():
    assert ops.lighten(OKLCH(0.5, 0.1, 20), 0.2).l == pytest.approx(0.7)
    assert ops.lighten(OKLCH(0.9, 0.1, 20), 0.5).l == 1.0
    assert ops.darken(OKLCH(0.5, 0.1, 20), 0.2).l == pytest.approx(0.3)
    assert ops.darken(OKLCH(0.1, 0.1, 20), 0.5).l == 0.0


def test_lighten_keeps_other_channels():
    out = ops.lighten(OKLCH(0.5, 0.1, 20, 0.4), 0.1)
    assert (out.c, out.h, out.a) == (0.1, 20, 0.4)


def test_saturate_is_gamut_clamped():
    out = ops.saturate(RED, 0.3)
    assert is_in_gamut(out)
    assert out.l == RED.l
    assert out.h == RED.h


def test_desaturate_floors_at_zero():
    assert ops.desaturate(OKLCH(0.5, 0.05, 20), 0.2).c == 0.0
    assert ops.desaturate(OKLCH(0.5, 0.1, 20), 0.04).c == pytest.approx(0.06)


def test_rotate_and_complement():
    assert ops.rotate(OKLCH(0.5, 0.1, 350), 20).h == pytest.approx(10)
    assert ops.rotate(OKLCH(0.5, 0.1, 10), -20).h == pytest.approx(350)
    assert ops.complement(OKLCH(0.5, 0.1, 90)).h == pytest.approx(270)


def test_grayscale():
    assert ops.grayscale(OKLCH(0.5, 0.2, 120, 0.5)) == OKLCH(0.5, 0.0, 120, 0.5)


def test_invert_in_rgb():
    out = oklch_to_rgb(ops.invert(rgb_to_oklch(RGBA(255, 0, 100, 0.5))))
    assert out == RGBA(0, 255, 155, 0.5)


def test_invert_lightness():
    out = ops.invert_lightness(OKLCH(0.2, 0.1, 40))
    assert out.l == pytest.approx(0.8)
    assert (out.c, out.h) == (0.1, 40)


def test_alpha_ops():
    base = OKLCH(0.5, 0.1, 20, 0.5)
    assert ops.with_alpha(base, 2).a == 1.0
    assert ops.with_alpha(base, -1).a == 0.0
    assert ops.opacify(base, 0.2).a == pytest.approx(0.7)
    assert ops.transparentize(base, 0.7).a == 0.0


def test_interpolate_hue_takes_short_arc():
    assert ops.interpolate_hue(350, 10, 0.5) == pytest.approx(0, abs=1e-9)
    assert ops.interpolate_hue(10, 350, 0.5) == pytest.approx(0, abs=1e-9)
    assert ops.interpolate_hue(10, 90, 0.5) == pytest.approx(50)


def test_mix_short_arc():
    out = ops.mix(OKLCH(0.7, 0.1, 350), OKLCH(0.7, 0.1, 10), 0.5)
    assert min(out.h, 360 - out.h) < 1e-6


def test_mix_boundaries():
    assert ops.mix(RED, BLUE, 0) is RED
    assert ops.mix(RED, BLUE, 1) is BLUE
    assert ops.mix(RED, BLUE, -3) is RED
    assert ops.mix(RED, BLUE, 7) is BLUE


def test_mix_achromatic_borrows_hue():
    out = ops.mix(GRAY, RED, 0.5)
    assert out.h == pytest.approx(RED.h)


def test_mix_rgb_space():
    out = oklch_to_rgb(ops.mix(rgb_to_oklch(RGBA(0, 0, 0)), rgb_to_oklch(RGBA(255, 255, 255)), 0.5, "rgb"))
    assert out == RGBA(128, 128, 128, 1.0)


def test_mix_unknown_space():
    with pytest.raises(ValueError):
        ops.mix(RED, BLUE, 0.5, "lab")


def test_mix_colors_empty():
    with pytest.raises(ColorError) as exc:
        ops.mix_colors([])
    assert exc.value.code == ColorErrorCode.INVALID_FORMAT


def test_mix_colors_single():
    assert ops.mix_colors([RED]) is RED


def test_mix_colors_weights():
    assert ops.mix_colors([RED, BLUE], [1, 0]).l == pytest.approx(RED.l)
    with pytest.raises(ColorError):
        ops.mix_colors([RED, BLUE], [1])
    with pytest.raises(ColorError):
        ops.mix_colors([RED, BLUE], [0, 0])


def test_mix_colors_hue_average():
    out = ops.mix_colors([OKLCH(0.6, 0.1, 350), OKLCH(0.6, 0.1, 10), OKLCH(0.6, 0, 180)])
    assert min(out.h, 360 - out.h) < 1e-6
    assert out.l == pytest.approx(0.6)


def test_mix_colors_rgb():
    out = ops.mix_colors([rgb_to_oklch(RGBA(0, 0, 0)), rgb_to_oklch(RGBA(255, 255, 255))], space="rgb")
    assert oklch_to_rgb(out) == RGBA(128, 128, 128, 1.0)


def test_invert_uses_displayed_color():
    wide = OKLCH(0.9, 0.3, 180)
    r, g, b, a = oklch_to_rgb(clamp_to_gamut(wide))
    assert oklch_to_rgb(ops.invert(wide)) == RGBA(255 - r, 255 - g, 255 - b, a)


def test_mix_rgb_uses_displayed_endpoints():
    wide = OKLCH(0.9, 0.3, 180)
    shown = oklch_to_rgb(clamp_to_gamut(wide))
    black = rgb_to_oklch(RGBA(0, 0, 0))

    expected = RGBA.clamped(shown.r / 2, shown.g / 2, shown.b / 2, 1.0)
    assert oklch_to_rgb(ops.mix(wide, black, 0.5, "rgb")) == expected
    assert oklch_to_rgb(ops.mix_colors([wide, black], space="rgb")) == expected


def test_mix_of_out_of_gamut_colors_is_clamped():
    out = ops.mix(OKLCH(0.9, 0.3, 180), OKLCH(0.8, 0.3, 145), 0.5)
    assert is_in_gamut(out)
    assert out.l == pytest.approx(0.85)


def test_mix_with_white_is_clamped():
    white = rgb_to_oklch(RGBA(255, 255, 255))
    assert is_in_gamut(white)
    assert is_in_gamut(ops.mix(white, rgb_to_oklch(RGBA(0, 255, 0)), 0.3))
