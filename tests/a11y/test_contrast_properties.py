import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import assume, given, settings, strategies as st  # type: ignore

from okchroma.a11y import contrast, ensure_contrast
from okchroma.types import RGBA

BLACK = RGBA(0, 0, 0, 1)
WHITE = RGBA(255, 255, 255, 1)

channel = st.integers(0, 255)
rgba = st.builds(RGBA, channel, channel, channel, st.floats(0, 1))


@given(a=rgba, b=rgba)
def test_contrast_symmetric_and_bounded(a, b):
    ratio = contrast(a, b)
    assert ratio == contrast(b, a)
    assert 1 <= ratio <= 21


@given(a=rgba)
def test_contrast_with_self_is_one(a):
    assert contrast(a, a) == 1


@settings(max_examples=150, deadline=None)
@given(
    fg=st.tuples(channel, channel, channel),
    bg=st.tuples(channel, channel, channel),
    target=st.floats(1, 21),
)
def test_reachable_targets_are_met(fg, bg, target):
    fg, bg = RGBA(*fg), RGBA(*bg)
    assume(max(contrast(WHITE, bg), contrast(BLACK, bg)) >= target)

    result = ensure_contrast(fg, bg, target)
    assert contrast(result, bg) >= target
