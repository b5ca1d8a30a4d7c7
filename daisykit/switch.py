"""Debounced push-button or toggle switch."""

from __future__ import annotations

from typing import Callable

_RISING = 0x7F
_FALLING = 0x80
_HELD = 0xFF


class Switch:
    """Debounces a digital input sampled at a fixed update rate.

    ``read`` is called once per :meth:`debounce` and returns the raw pin
    level. With ``invert`` set, a low level counts as pressed.
    """

    def __init__(self, update_rate: float, invert: bool, read: Callable[[], int]) -> None:
        self._flip = invert
        self._time_per_update = 1.0 / update_rate
        self._state = 0
        self._time_held = 0.0
        self._read = read

    def debounce(self) -> None:
        """Sample the input once and update the edge and hold state."""
        level = 1 if self._read() else 0
        if self._flip:
            level ^= 1
        self._state = ((self._state << 1) | level) & 0xFF
        if self._state in (_RISING, _FALLING):
            self._time_held = 0.0
        if self._state == _HELD:
            self._time_held += self._time_per_update

    def rising_edge(self) -> bool:
        """True on the update where the switch becomes pressed."""
        return self._state == _RISING

    def falling_edge(self) -> bool:
        """True on the update where the switch becomes released."""
        return self._state == _FALLING

    def pressed(self) -> bool:
        """True while the switch is held down."""
        return self._state == _HELD

    def time_held_ms(self) -> float:
        """Milliseconds the switch has been held, or 0 when not pressed."""
        return self._time_held * 1000.0 if self.pressed() else 0.0