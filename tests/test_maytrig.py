import random

from daisykit.maytrig import Maytrig


def test_probability_one_always_triggers():
    trig = Maytrig(random.Random(1))
    assert all(trig.process(1.0) for _ in range(1000))


def test_negative_probability_never_triggers():
    trig = Maytrig(random.Random(1))
    assert not any(trig.process(-0.1) for _ in range(1000))


def test_rate_matches_probability():
    trig = Maytrig(random.Random(42))
    hits = sum(trig.process(0.3) for _ in range(20000))
    assert 0.27 < hits / 20000 < 0.33


def test_deterministic_with_seed():
    a = Maytrig(random.Random(9))
    b = Maytrig(random.Random(9))
    assert [a.process(0.5) for _ in range(100)] == [b.process(0.5) for _ in range(100)]