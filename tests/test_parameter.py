import math

import pytest

from daisykit.ctrl import AnalogControl
from daisykit.parameter import Curve, Parameter


class Fixed:
    def __init__(self, value):
        self.value = value

    def process(self):
        return self.value


@pytest.mark.parametrize("curve", list(Curve))
def test_endpoints_map_to_range(curve):
    low = Parameter(Fixed(0.0), 20.0, 2000.0, curve)
    high = Parameter(Fixed(1.0), 20.0, 2000.0, curve)
    assert low.process() == pytest.approx(20.0)
    assert high.process() == pytest.approx(2000.0)


def test_curve_ordering_at_midpoint():
    mid = {c: Parameter(Fixed(0.5), 0.0, 10.0, c).process() for c in
           (Curve.LINEAR, Curve.EXPONENTIAL, Curve.CUBE)}
    assert mid[Curve.CUBE] < mid[Curve.EXPONENTIAL] < mid[Curve.LINEAR]
    assert mid[Curve.LINEAR] == pytest.approx(5.0)


def test_logarithmic_midpoint_is_geometric_mean():
    p = Parameter(Fixed(0.5), 10.0, 1000.0, Curve.LOGARITHMIC)
    assert p.process() == pytest.approx(math.sqrt(10.0 * 1000.0))


def test_logarithmic_zero_minimum_uses_floor():
    p = Parameter(Fixed(0.0), 0.0, 1.0, Curve.LOGARITHMIC)
    assert p.process() == pytest.approx(0.0000001)


def test_logarithmic_rejects_non_positive_maximum():
    with pytest.raises(ValueError):
        Parameter(Fixed(0.5), 0.0, 0.0, Curve.LOGARITHMIC)


def test_value_tracks_last_process_with_analog_control():
    ctrl = AnalogControl(lambda: 1023, 1000.0, slew_seconds=0.002)
    p = Parameter(ctrl, -1.0, 1.0, Curve.LINEAR)
    result = p.process()
    assert p.value == result
    assert result == pytest.approx(1.0)