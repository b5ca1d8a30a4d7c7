"""Clock generator producing ticks at a fixed frequency."""

from __future__ import annotations

from daisykit.dsp import TWOPI_F


class Metro:
    """Emits a tick each time its phase wraps."""

    def __init__(self, freq: float, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phs = 0.0
        self._freq = freq
        self._phs_inc = TWOPI_F * freq / sample_rate

    @property
    def freq(self) -> float:
        """Tick frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._phs_inc = TWOPI_F * value / self.sample_rate

    def process(self) -> bool:
        """Advance one sample; True when a tick occurs."""
        self._phs += self._phs_inc
        if self._phs >= TWOPI_F:
            self._phs -= TWOPI_F
            return True
        return False

    def reset(self) -> None:
        """Reset the phase to zero."""
        self._phs = 0.0