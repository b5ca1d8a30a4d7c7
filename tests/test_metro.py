from daisykit.metro import Metro


def test_ticks_every_fourth_sample():
    metro = Metro(250.0, 1000.0)
    ticks = [metro.process() for _ in range(12)]
    assert ticks == [False, False, False, True] * 3


def test_reset_restarts_phase():
    metro = Metro(250.0, 1000.0)
    for _ in range(3):
        metro.process()
    metro.reset()
    assert [metro.process() for _ in range(4)] == [False, False, False, True]


def test_freq_setter():
    metro = Metro(250.0, 1000.0)
    metro.freq = 500.0
    assert metro.freq == 500.0
    assert [metro.process() for _ in range(4)] == [False, True, False, True]


def test_tick_count_over_long_run():
    metro = Metro(10.0, 1000.0)
    count = sum(metro.process() for _ in range(10000))
    assert count in (99, 100)