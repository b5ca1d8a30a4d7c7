"""Smoothed analog control input (potentiometer or CV)."""

from __future__ import annotations

from typing import Callable

_ADC_FRAC = 1.0 / 1023.0


class AnalogControl:
    """Filters and scales raw 10-bit ADC readings.

    ``read`` returns the raw ADC value (0..1023). :meth:`process` must be
    called at ``sample_rate``. By default the output spans 0..1.
    """

    def __init__(
        self,
        read: Callable[[], float],
        sample_rate: float,
        flip: bool = False,
        invert: bool = False,
        slew_seconds: float = 0.002,
    ) -> None:
        self._read = read
        self.sample_rate = sample_rate
        self._val = 0.0
        self._coeff = 1.0 / (slew_seconds * sample_rate * 0.5)
        self._scale = 1.0
        self._offset = 0.0
        self._flip = flip
        self._invert = invert

    @classmethod
    def bipolar_cv(cls, read: Callable[[], float], sample_rate: float) -> AnalogControl:
        """Control for an inverted -5V..5V input; output spans -1..1."""
        control = cls(read, sample_rate, flip=False, invert=True, slew_seconds=0.002)
        control._scale = 2.0
        control._offset = 0.5
        return control

    @property
    def value(self) -> float:
        """The last processed value."""
        return self._val

    def process(self) -> float:
        """Read, transform and smooth one sample."""
        t = self._read() * _ADC_FRAC
        if self._flip:
            t = 1.0 - t
        t = (t - self._offset) * self._scale * (-1.0 if self._invert else 1.0)
        self._val += self._coeff * (t - self._val)
        return self._val