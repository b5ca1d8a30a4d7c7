"""Core system model: clock tree, memory protection regions, caches and timing."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Optional

from daisykit.tim import CounterDir, Timer, TimerConfig, TimerPeripheral

_U32 = 0xFFFFFFFF
_NS_PER_MS = 1_000_000
HSE_FREQ_HZ = 16_000_000


class SysClkFreq(enum.Enum):
    """System clock frequency feeding the AHB/APB buses."""

    FREQ_400MHZ = 0
    FREQ_480MHZ = 1


@dataclass(frozen=True)
class SystemConfig:
    """CPU frequency and cache settings."""

    cpu_freq: SysClkFreq = SysClkFreq.FREQ_400MHZ
    use_dcache: bool = True
    use_icache: bool = True

    @classmethod
    def defaults(cls) -> SystemConfig:
        """400 MHz with both caches enabled."""
        return cls(SysClkFreq.FREQ_400MHZ, True, True)

    @classmethod
    def boost(cls) -> SystemConfig:
        """480 MHz with both caches enabled."""
        return cls(SysClkFreq.FREQ_480MHZ, True, True)


@dataclass(frozen=True)
class ClockSettings:
    """PLL, regulator and bus divider settings of the clock tree.

    PLL entries are ``(m, n, p, q, r)``; the main PLL runs from the external
    oscillator.
    """

    plln: int
    flash_latency: int
    voltage_scale: int
    hse_hz: int = HSE_FREQ_HZ
    pllm: int = 4
    pllp: int = 2
    pllq: int = 5
    pllr: int = 2
    ahb_divider: int = 2
    apb1_divider: int = 2
    apb2_divider: int = 2
    apb3_divider: int = 2
    apb4_divider: int = 2
    pll2: tuple[int, int, int, int, int] = (4, 100, 8, 10, 2)
    pll3: tuple[int, int, int, int, int] = (6, 295, 16, 4, 32)

    @property
    def sysclk_hz(self) -> int:
        """System clock: HSE / M * N / P."""
        return self.hse_hz // self.pllm * self.plln // self.pllp

    @property
    def hclk_hz(self) -> int:
        """AHB clock derived from the system clock."""
        return self.sysclk_hz // self.ahb_divider

    @property
    def pclk1_hz(self) -> int:
        """APB1 peripheral clock."""
        return self.hclk_hz // self.apb1_divider

    @property
    def pclk2_hz(self) -> int:
        """APB2 peripheral clock."""
        return self.hclk_hz // self.apb2_divider


_CLOCKS = {
    SysClkFreq.FREQ_400MHZ: ClockSettings(plln=200, flash_latency=2, voltage_scale=1),
    SysClkFreq.FREQ_480MHZ: ClockSettings(plln=240, flash_latency=4, voltage_scale=0),
}


@dataclass(frozen=True)
class MpuRegion:
    """One memory protection unit region."""

    number: int
    base_address: int
    size: int
    cacheable: bool
    bufferable: bool
    shareable: bool
    tex_level: int
    full_access: bool = True
    executable: bool = True
    subregion_disable: int = 0x00


def mpu_regions() -> tuple[MpuRegion, ...]:
    """Regions configured at start-up.

    Region 0 keeps the first 32 kB of SRAM1 (the DMA buffers) out of the
    cache; region 1 makes the 64 MB SDRAM cacheable.
    """
    return (
        MpuRegion(
            number=0,
            base_address=0x30000000,
            size=32 * 1024,
            cacheable=False,
            bufferable=False,
            shareable=True,
            tex_level=1,
        ),
        MpuRegion(
            number=1,
            base_address=0xC0000000,
            size=64 * 1024 * 1024,
            cacheable=True,
            bufferable=True,
            shareable=False,
            tex_level=0,
        ),
    )


class System:
    """Initialised core system with a free-running TIM2 for fine timing.

    ``clock`` returns monotonic time in nanoseconds and drives both the
    millisecond tick and the high-speed timer.
    """

    def __init__(
        self,
        config: Optional[SystemConfig] = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self.config = config if config is not None else SystemConfig.defaults()
        self._clock_settings = _CLOCKS.get(
            self.config.cpu_freq, _CLOCKS[SysClkFreq.FREQ_400MHZ]
        )
        self.mpu_regions = mpu_regions()
        self.dcache_enabled = bool(self.config.use_dcache)
        self.icache_enabled = bool(self.config.use_icache)
        self._clock = clock
        self._start_ns = clock()
        self.timer = Timer(
            TimerConfig(TimerPeripheral.TIM_2, CounterDir.UP),
            pclk1_freq=self.pclk1_freq(),
            counter=clock,
        )
        self.timer.start()

    def clock_settings(self) -> ClockSettings:
        """The clock tree settings chosen for the configured frequency."""
        return self._clock_settings

    def sysclk_freq(self) -> int:
        """System clock frequency in Hz."""
        return self._clock_settings.sysclk_hz

    def hclk_freq(self) -> int:
        """AHB clock frequency in Hz."""
        return self._clock_settings.hclk_hz

    def pclk1_freq(self) -> int:
        """APB1 clock frequency in Hz."""
        return self._clock_settings.pclk1_hz

    def pclk2_freq(self) -> int:
        """APB2 clock frequency in Hz."""
        return self._clock_settings.pclk2_hz

    def now(self) -> int:
        """Milliseconds since initialisation, wrapping at 32 bits."""
        return ((self._clock() - self._start_ns) // _NS_PER_MS) & _U32

    def us(self) -> int:
        """Microseconds counted by the high-speed timer."""
        return self.timer.us()

    def tick(self) -> int:
        """Raw ticks of the high-speed timer (twice the APB1 clock)."""
        return self.timer.tick()

    def delay(self, ms: int) -> None:
        """Busy-wait for at least ``ms`` milliseconds."""
        start = self.now()
        while ((self.now() - start) & _U32) < ms:
            pass

    def delay_us(self, us: int) -> None:
        """Busy-wait for ``us`` microseconds on the high-speed timer."""
        self.timer.delay_us(us)

    def delay_ticks(self, ticks: int) -> None:
        """Busy-wait for ``ticks`` high-speed timer ticks."""
        self.timer.delay_tick(ticks)