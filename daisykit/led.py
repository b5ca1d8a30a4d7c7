"""Simple on/off LEDs, single and RGB."""

from __future__ import annotations

from typing import Callable

Writer = Callable[[bool], None]


class Led:
    """Single LED driven through ``write``; inverted (active low) by default."""

    def __init__(self, write: Writer, invert: bool = True) -> None:
        self._write = write
        self.invert = invert

    def set(self, on: bool) -> None:
        """Turn the LED on or off."""
        self._write(self.invert != bool(on))


class RgbLed:
    """Three-channel LED; inverted (active low) by default."""

    def __init__(
        self, write_r: Writer, write_g: Writer, write_b: Writer, invert: bool = True
    ) -> None:
        self._writers = (write_r, write_g, write_b)
        self.invert = invert

    def set(self, r: bool, g: bool, b: bool) -> None:
        """Turn each colour channel on or off."""
        for write, on in zip(self._writers, (r, g, b)):
            write(self.invert != bool(on))