"""General purpose I/O pins."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GpioPort(enum.Enum):
    """GPIO port letters."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10


@dataclass(frozen=True)
class GpioPin:
    """A port and pin number (0..15)."""

    port: GpioPort
    pin: int

    def __post_init__(self) -> None:
        if not isinstance(self.port, GpioPort):
            raise TypeError("port must be a GpioPort")
        if not 0 <= self.pin <= 15:
            raise ValueError(f"pin number {self.pin} out of range 0..15")


class GpioMode(enum.Enum):
    """Pin direction and driver type."""

    INPUT = 0
    OUTPUT_PP = 1
    OUTPUT_OD = 2
    ANALOG = 3


class GpioPull(enum.Enum):
    """Internal pull resistor."""

    NOPULL = 0
    PULLUP = 1
    PULLDOWN = 2


def pin_mask(pin: GpioPin) -> int:
    """Bit mask selecting ``pin`` within its port register."""
    return 1 << pin.pin


class Gpio:
    """A configured pin with an output latch and pull-dependent input level."""

    def __init__(
        self,
        pin: GpioPin,
        mode: GpioMode = GpioMode.INPUT,
        pull: GpioPull = GpioPull.NOPULL,
    ) -> None:
        self.pin = pin
        self.mode = mode
        self.pull = pull
        self._latch = 0

    @property
    def mask(self) -> int:
        """Bit mask of this pin within its port."""
        return pin_mask(self.pin)

    def read(self) -> int:
        """1 if the pin is high, 0 if it is low."""
        if self.mode in (GpioMode.OUTPUT_PP, GpioMode.OUTPUT_OD):
            return self._latch
        if self.mode is GpioMode.INPUT:
            return 1 if self.pull is GpioPull.PULLUP else 0
        return 0

    def write(self, state: int) -> None:
        """Drive the pin high for any positive ``state``, low otherwise."""
        self._latch = 1 if state > 0 else 0

    def toggle(self) -> None:
        """Invert the output level."""
        self._latch ^= 1

    def deinit(self) -> None:
        """Return the pin to its reset configuration."""
        self.mode = GpioMode.ANALOG
        self.pull = GpioPull.NOPULL
        self._latch = 0