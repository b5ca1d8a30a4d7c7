"""Quadrature rotary encoder with a push switch."""

from __future__ import annotations

from typing import Callable

from daisykit.switch import Switch


class Encoder:
    """Decodes steps from two quadrature inputs and debounces the click switch.

    Each ``read_*`` callable returns the raw pin level. The click switch is
    active low.
    """

    def __init__(
        self,
        update_rate: float,
        read_a: Callable[[], int],
        read_b: Callable[[], int],
        read_click: Callable[[], int],
    ) -> None:
        self._read_a = read_a
        self._read_b = read_b
        self._a = 0xFF
        self._b = 0xFF
        self._inc = 0
        self._switch = Switch(update_rate, True, read_click)

    @property
    def increment(self) -> int:
        """+1, -1 or 0: the step detected at the last update."""
        return self._inc

    def debounce(self) -> None:
        """Sample both channels and the switch once."""
        a_in = 1 if self._read_a() else 0
        b_in = 1 if self._read_b() else 0
        self._switch.debounce()
        self._a = ((self._a << 1) | a_in) & 0xFF
        self._b = ((self._b << 1) | b_in) & 0xFF
        self._inc = 0
        if (self._a & 0x0F) == 0x0E and (self._b & 0x07) == 0x00:
            self._inc = 1
        elif (self._b & 0x0F) == 0x0E and (self._a & 0x07) == 0x00:
            self._inc = -1

    def rising_edge(self) -> bool:
        """True on the update where the click switch becomes pressed."""
        return self._switch.rising_edge()

    def falling_edge(self) -> bool:
        """True on the update where the click switch is released."""
        return self._switch.falling_edge()

    def pressed(self) -> bool:
        """True while the click switch is held."""
        return self._switch.pressed()

    def time_held_ms(self) -> float:
        """Milliseconds the click switch has been held."""
        return self._switch.time_held_ms()