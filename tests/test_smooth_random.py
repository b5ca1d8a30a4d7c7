import random

from daisykit.smooth_random import SmoothRandomGenerator


def test_starts_at_zero_before_first_wrap():
    gen = SmoothRandomGenerator(100.0, random.Random(1))
    assert all(gen.process() == 0.0 for _ in range(99))


def test_outputs_within_unit_range():
    gen = SmoothRandomGenerator(100.0, random.Random(2))
    gen.set_freq(10.0)
    outs = [gen.process() for _ in range(5000)]
    assert all(-1.0 <= v <= 1.0 for v in outs)
    assert len(set(outs)) > 100


def test_frequency_clamped():
    gen = SmoothRandomGenerator(100.0, random.Random(3))
    gen.set_freq(1000.0)
    assert gen.frequency == 1.0
    gen.set_freq(-5.0)
    assert gen.frequency == 0.0


def test_zero_frequency_holds_value():
    gen = SmoothRandomGenerator(100.0, random.Random(4))
    gen.set_freq(0.0)
    assert all(gen.process() == 0.0 for _ in range(500))


def test_deterministic_with_seed():
    a = SmoothRandomGenerator(100.0, random.Random(8))
    b = SmoothRandomGenerator(100.0, random.Random(8))
    a.set_freq(5.0)
    b.set_freq(5.0)
    assert [a.process() for _ in range(300)] == [b.process() for _ in range(300)]