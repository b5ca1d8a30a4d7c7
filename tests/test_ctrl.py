import pytest

from daisykit.ctrl import AnalogControl

RATE = 1000.0
INSTANT = 2.0 / RATE  # slew time that makes the filter pass the input straight through


def test_full_scale_reaches_one():
    ctrl = AnalogControl(lambda: 1023, RATE, slew_seconds=INSTANT)
    assert ctrl.process() == pytest.approx(1.0)
    assert ctrl.value == pytest.approx(1.0)


def test_zero_reading_is_zero():
    ctrl = AnalogControl(lambda: 0, RATE, slew_seconds=INSTANT)
    assert ctrl.process() == pytest.approx(0.0)


def test_flip_reverses_range():
    ctrl = AnalogControl(lambda: 1023, RATE, flip=True, slew_seconds=INSTANT)
    assert ctrl.process() == pytest.approx(0.0)


def test_invert_negates():
    ctrl = AnalogControl(lambda: 1023, RATE, invert=True, slew_seconds=INSTANT)
    assert ctrl.process() == pytest.approx(-1.0)


def test_bipolar_cv_spans_minus_one_to_one():
    low = AnalogControl.bipolar_cv(lambda: 0, RATE)
    high = AnalogControl.bipolar_cv(lambda: 1023, RATE)
    assert low.process() == pytest.approx(1.0)
    assert high.process() == pytest.approx(-1.0)


def test_slew_approaches_target_monotonically():
    ctrl = AnalogControl(lambda: 1023, 48000.0, slew_seconds=0.01)
    values = [ctrl.process() for _ in range(200)]
    assert all(0.0 < v < 1.0 for v in values)
    assert all(b > a for a, b in zip(values, values[1:]))
    assert ctrl.value == values[-1]