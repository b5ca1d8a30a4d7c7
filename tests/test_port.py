import pytest

from daisykit.port import Port


def test_half_time_reaches_half():
    port = Port(1000, 0.1)
    out = 0.0
    for _ in range(100):
        out = port.process(1.0)
    assert out == pytest.approx(0.5)


def test_output_rises_monotonically_below_target():
    port = Port(1000, 0.01)
    outs = [port.process(2.0) for _ in range(200)]
    assert all(a < b for a, b in zip(outs, outs[1:]))
    assert outs[-1] < 2.0
    assert outs[-1] == pytest.approx(2.0, rel=1e-3)


def test_changing_htime_takes_effect():
    slow = Port(1000, 0.1)
    fast = Port(1000, 0.1)
    fast.htime = 0.01
    assert fast.htime == 0.01
    assert fast.process(1.0) > slow.process(1.0)