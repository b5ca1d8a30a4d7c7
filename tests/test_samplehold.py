from daisykit.samplehold import Mode, SampleHold


def test_initial_output_is_zero():
    assert SampleHold().process(False, 3.0) == 0.0
    assert SampleHold().process(False, 3.0, Mode.TRACK_HOLD) == 0.0


def test_sample_and_track_sequence():
    sh = SampleHold()
    assert sh.process(True, 1.0) == 1.0
    assert sh.process(True, 2.0, Mode.TRACK_HOLD) == 2.0
    assert sh.process(False, 3.0, Mode.TRACK_HOLD) == 2.0
    assert sh.process(False, 4.0) == 1.0
    assert sh.process(True, 5.0) == 5.0


def test_sample_only_on_rising_edge():
    sh = SampleHold()
    sh.process(True, 1.0)
    for value in (2.0, 3.0, 4.0):
        assert sh.process(True, value) == 1.0