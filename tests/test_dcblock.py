import pytest

from daisykit.dcblock import DcBlock


def test_first_sample_passes_through():
    block = DcBlock(48000)
    assert block.process(0.7) == 0.7


def test_constant_input_decays_to_zero():
    block = DcBlock(48000)
    out = 1.0
    for _ in range(2000):
        out = block.process(1.0)
    assert abs(out) < 1e-6


def test_zero_input_stays_zero():
    block = DcBlock(48000)
    assert all(block.process(0.0) == 0.0 for _ in range(10))


def test_outputs_decrease_monotonically_for_step():
    block = DcBlock(48000)
    outs = [block.process(1.0) for _ in range(50)]
    assert all(b < a for a, b in zip(outs, outs[1:]))
    assert outs[-1] == pytest.approx(0.99 ** 49)