"""Portamento (half-time exponential glide)."""

from __future__ import annotations

import math


class Port:
    """Slews towards the input, covering half the distance every ``htime`` seconds."""

    def __init__(self, sample_rate: float, htime: float) -> None:
        self.sample_rate = sample_rate
        self.htime = htime
        self._yt1 = 0.0
        self._prvhtim = -100.0
        self._onedsr = 1.0 / sample_rate
        self._c1 = 0.0
        self._c2 = 0.0

    def process(self, sample: float) -> float:
        """Return the slewed output for one input sample."""
        if self._prvhtim != self.htime:
            self._c2 = math.pow(0.5, self._onedsr / self.htime)
            self._c1 = 1.0 - self._c2
            self._prvhtim = self.htime
        self._yt1 = self._c1 * sample + self._c2 * self._yt1
        return self._yt1