"""Reset sequence for the AK4556 audio codec."""

from __future__ import annotations

import time
from typing import Callable

from daisykit.gpio import Gpio, GpioMode, GpioPin, GpioPull


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


def init_ak4556(reset_pin: GpioPin, delay: Callable[[float], None] = _sleep_ms) -> Gpio:
    """Pulse the codec's reset line high, low, high with 1 ms gaps.

    ``delay`` waits the given number of milliseconds. Returns the reset pin.
    """
    reset = Gpio(reset_pin, GpioMode.OUTPUT_PP, GpioPull.NOPULL)
    reset.write(1)
    delay(1)
    reset.write(0)
    delay(1)
    reset.write(1)
    return reset