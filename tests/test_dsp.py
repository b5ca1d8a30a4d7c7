import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from daisykit import dsp


def test_fmax_fmin():
    assert dsp.fmax(1.0, 2.0) == 2.0
    assert dsp.fmin(1.0, 2.0) == 1.0
    assert dsp.fmax(-3.0, -4.0) == -3.0


def test_fclamp():
    assert dsp.fclamp(5.0, 0.0, 1.0) == 1.0
    assert dsp.fclamp(-5.0, 0.0, 1.0) == 0.0
    assert dsp.fclamp(0.25, 0.0, 1.0) == 0.25


@pytest.mark.parametrize("value", [0.5, 1.0, 2.0, 8.0, 64.0])
def test_fastpower_fastroot_round_trip(value):
    assert dsp.fastroot(dsp.fastpower(value, 2), 2) == value


def test_fastpower_identity_for_first_power():
    assert dsp.fastpower(3.5, 1) == 3.5


@given(st.floats(min_value=-5.0, max_value=5.0))
def test_pow10f_matches_power(x):
    assert dsp.pow10f(x) == pytest.approx(10.0 ** x, rel=1e-9)


@given(st.floats(min_value=1e-6, max_value=1e6))
def test_fastlog2f_accuracy(x):
    assert dsp.fastlog2f(x) == pytest.approx(math.log2(x), abs=0.01)
    assert dsp.fastlog10f(x) == pytest.approx(math.log10(x), abs=0.01)


def test_mtof_reference_pitch():
    assert dsp.mtof(69) == pytest.approx(440.0)


@given(st.floats(min_value=0, max_value=115))
def test_mtof_octave(m):
    assert dsp.mtof(m + 12) == pytest.approx(2 * dsp.mtof(m))


def test_fonepole():
    assert dsp.fonepole(0.0, 1.0, 1.0) == 1.0
    assert dsp.fonepole(0.3, 0.3, 0.5) == 0.3
    assert 0.0 < dsp.fonepole(0.0, 1.0, 0.1) < 1.0


@given(st.integers(), st.integers(), st.integers())
def test_median_is_middle(a, b, c):
    assert dsp.median(a, b, c) == sorted([a, b, c])[1]


def test_blep_constants():
    assert dsp.next_integrated_blep_sample(0.0) == 0.1875
    assert dsp.this_integrated_blep_sample(1.0) == 0.1875
    assert dsp.this_blep_sample(1.0) == 0.5
    assert dsp.next_blep_sample(1.0) == 0.0


def test_soft_clip_limits():
    assert dsp.soft_clip(-4.0) == -1.0
    assert dsp.soft_clip(4.0) == 1.0
    assert dsp.soft_clip(3.0) == pytest.approx(1.0)


@given(st.floats(min_value=-3.0, max_value=3.0))
def test_soft_limit_odd(x):
    assert dsp.soft_limit(-x) == -dsp.soft_limit(x)
    assert dsp.soft_clip(x) == dsp.soft_limit(x)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, 1e-40])
def test_test_float_replaces_invalid(bad):
    assert dsp.test_float(bad, 0.5) == 0.5


@pytest.mark.parametrize("good", [0.0, 1.5, -2.25])
def test_test_float_keeps_valid(good):
    assert dsp.test_float(good, 0.5) == good


def test_soft_saturate():
    assert dsp.soft_saturate(0.2, 0.5) == 0.2
    assert dsp.soft_saturate(2.0, 0.5) == pytest.approx(0.75)
    assert dsp.soft_saturate(-2.0, 0.5) == pytest.approx(-0.75)
    assert dsp.soft_saturate(0.5, 0.5) == 0.0
    mid = dsp.soft_saturate(0.8, 0.5)
    assert 0.5 < mid < 0.8
    assert dsp.soft_saturate(-0.8, 0.5) == -mid


@pytest.mark.parametrize("x,expected", [(0, True), (1, True), (2, True), (64, True), (3, False), (6, False)])
def test_is_power2(x, expected):
    assert dsp.is_power2(x) is expected


@given(st.integers(min_value=1, max_value=2**31))
def test_get_next_power2(x):
    p = dsp.get_next_power2(x)
    assert dsp.is_power2(p)
    assert x <= p < 2 * x


def test_get_next_power2_exact():
    assert dsp.get_next_power2(8) == 8
    assert dsp.get_next_power2(1) == 1