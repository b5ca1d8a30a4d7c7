"""Smoothly interpolated random modulation source."""

from __future__ import annotations

import random

from daisykit.dsp import fclamp


class SmoothRandomGenerator:
    """Glides between random targets in ``[-1, 1]`` with an S-curve."""

    def __init__(self, sample_rate: float, rng: random.Random | None = None) -> None:
        self.sample_rate = sample_rate
        self._rng = rng if rng is not None else random.Random()
        self.frequency = 0.0
        self.set_freq(1.0)
        self._phase = 0.0
        self._from = 0.0
        self._interval = 0.0

    def process(self) -> float:
        """Return the next value."""
        self._phase += self.frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            self._from += self._interval
            self._interval = self._rng.random() * 2.0 - 1.0 - self._from
        t = self._phase * self._phase * (3.0 - 2.0 * self._phase)
        return self._from + self._interval * t

    def set_freq(self, freq: float) -> None:
        """Set how often (Hz) a new random target is chosen."""
        self.frequency = fclamp(freq / self.sample_rate, 0.0, 1.0)