"""Maps a 0..1 control onto a range through a response curve."""

from __future__ import annotations

import enum
import math
from typing import Protocol

_LOG_FLOOR = 0.0000001


class Curve(enum.Enum):
    """Response curve applied to the control value."""

    LINEAR = 0
    EXPONENTIAL = 1
    LOGARITHMIC = 2
    CUBE = 3


class _Control(Protocol):
    def process(self) -> float: ...


class Parameter:
    """Scales a control's 0..1 output into ``[minimum, maximum]``."""

    def __init__(
        self,
        control: _Control,
        minimum: float,
        maximum: float,
        curve: Curve = Curve.LINEAR,
    ) -> None:
        self.control = control
        self.minimum = minimum
        self.maximum = maximum
        self.curve = curve
        self._val = 0.0
        self._lmin = 0.0
        self._lmax = 0.0
        if curve is Curve.LOGARITHMIC:
            if maximum <= 0.0:
                raise ValueError("a logarithmic range needs a positive maximum")
            self._lmin = math.log(minimum if minimum >= _LOG_FLOOR else _LOG_FLOOR)
            self._lmax = math.log(maximum)

    @property
    def value(self) -> float:
        """The last processed value."""
        return self._val

    def process(self) -> float:
        """Process the control once and return the mapped value."""
        span = self.maximum - self.minimum
        x = self.control.process()
        if self.curve is Curve.LINEAR:
            self._val = x * span + self.minimum
        elif self.curve is Curve.EXPONENTIAL:
            self._val = x * x * span + self.minimum
        elif self.curve is Curve.LOGARITHMIC:
            self._val = math.exp(x * (self._lmax - self._lmin) + self._lmin)
        elif self.curve is Curve.CUBE:
            self._val = x * x * x * span + self.minimum
        return self._val