"""General-purpose hardware timer model (TIM2..TIM5)."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable

_U32 = 0xFFFFFFFF
_NS_PER_S = 1_000_000_000


class TimerPeripheral(enum.Enum):
    """Timer to use: TIM2 and TIM5 are 32-bit, TIM3 and TIM4 16-bit."""

    TIM_2 = 0
    TIM_3 = 1
    TIM_4 = 2
    TIM_5 = 3


class CounterDir(enum.Enum):
    """Counting direction of the auto-reload counter."""

    UP = 0
    DOWN = 1


@dataclass(frozen=True)
class TimerConfig:
    """Timer selection and counting direction."""

    periph: TimerPeripheral = TimerPeripheral.TIM_2
    dir: CounterDir = CounterDir.UP


class TimerError(Exception):
    """Raised when the timer is misconfigured or misused."""


_WIDE_TIMERS = {TimerPeripheral.TIM_2, TimerPeripheral.TIM_5}


class Timer:
    """Counter ticking at twice the APB1 clock divided by the prescaler.

    ``counter`` returns monotonic time in nanoseconds and drives the count.
    The period defaults to the counter's full width and the prescaler to 0.
    """

    def __init__(
        self,
        config: TimerConfig | None = None,
        pclk1_freq: int = 100_000_000,
        counter: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        config = config if config is not None else TimerConfig()
        if not isinstance(config.periph, TimerPeripheral):
            raise TimerError(f"unknown timer peripheral {config.periph!r}")
        if not isinstance(config.dir, CounterDir):
            raise TimerError(f"unknown counter direction {config.dir!r}")
        self.config = config
        self.pclk1_freq = pclk1_freq
        self._counter = counter
        self._width_mask = _U32 if config.periph in _WIDE_TIMERS else 0xFFFF
        self.period = self._width_mask
        self.prescaler = 0
        self._running = False
        self._base_ticks = 0
        self._started_ns = 0

    @property
    def running(self) -> bool:
        """True between :meth:`start` and :meth:`stop`."""
        return self._running

    def start(self) -> None:
        """Start counting."""
        if self._running:
            raise TimerError("timer is already running")
        self._started_ns = self._counter()
        self._running = True

    def stop(self) -> None:
        """Stop counting; the count is kept."""
        if self._running:
            self._fold(self._counter())
            self._running = False

    def set_period(self, ticks: int) -> None:
        """Set the number of ticks after which the counter wraps."""
        self.period = ticks & self._width_mask

    def set_prescaler(self, value: int) -> None:
        """Set the prescaler (0..0xffff); ticks run at base / (value + 1)."""
        if self._running:
            self._fold(self._counter())
        self.prescaler = value & 0xFFFF

    def freq(self) -> int:
        """Tick frequency in Hz."""
        return ((self.pclk1_freq * 2) & _U32) // (self.prescaler + 1)

    def _fold(self, now_ns: int) -> None:
        self._base_ticks += (now_ns - self._started_ns) * self.freq() // _NS_PER_S
        self._started_ns = now_ns

    def _elapsed_ticks(self) -> int:
        if not self._running:
            return self._base_ticks
        now = self._counter()
        return self._base_ticks + (now - self._started_ns) * self.freq() // _NS_PER_S

    def tick(self) -> int:
        """Current counter value, wrapping at the period."""
        modulus = self.period + 1
        elapsed = self._elapsed_ticks()
        if self.config.dir is CounterDir.UP:
            return elapsed % modulus
        return (-elapsed) % modulus

    def _ticks_per(self, divisor: int, unit: str) -> int:
        per = self.freq() // divisor
        if per == 0:
            raise TimerError(f"timer frequency too low to count in {unit}")
        return per

    def ms(self) -> int:
        """Counter value scaled to milliseconds."""
        return self.tick() // self._ticks_per(1000, "milliseconds")

    def us(self) -> int:
        """Counter value scaled to microseconds."""
        return self.tick() // self._ticks_per(1_000_000, "microseconds")

    def delay_tick(self, ticks: int) -> None:
        """Busy-wait for ``ticks`` counter ticks."""
        start = self.tick()
        while ((self.tick() - start) & _U32) < ticks:
            pass

    def delay_ms(self, ms: int) -> None:
        """Busy-wait for ``ms`` milliseconds."""
        self.delay_tick((ms * self._ticks_per(1000, "milliseconds")) & _U32)

    def delay_us(self, us: int) -> None:
        """Busy-wait for ``us`` microseconds."""
        self.delay_tick((us * self._ticks_per(1_000_000, "microseconds")) & _U32)