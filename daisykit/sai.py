"""Serial audio interface (I2S) peripheral with circular DMA buffers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from daisykit.gpio import GpioPin, GpioPort

SaiCallback = Callable[[memoryview, memoryview, int], None]


class SaiPeripheral(enum.Enum):
    """Internal SAI peripheral to use."""

    SAI_1 = 0
    SAI_2 = 1


class SampleRate(enum.Enum):
    """Rate at which samples stream to or from the device."""

    SAI_8KHZ = 0
    SAI_16KHZ = 1
    SAI_32KHZ = 2
    SAI_48KHZ = 3
    SAI_96KHZ = 4


class BitDepth(enum.Enum):
    """Sample width the hardware expects."""

    SAI_16BIT = 0
    SAI_24BIT = 1
    SAI_32BIT = 2


class Sync(enum.Enum):
    """Whether a block is the clock master or a slave."""

    MASTER = 0
    SLAVE = 1


class Direction(enum.Enum):
    """Transfer direction of a block."""

    TRANSMIT = 0
    RECEIVE = 1


_SAMPLE_RATES_HZ = {
    SampleRate.SAI_8KHZ: 8000.0,
    SampleRate.SAI_16KHZ: 16000.0,
    SampleRate.SAI_32KHZ: 32000.0,
    SampleRate.SAI_48KHZ: 48000.0,
    SampleRate.SAI_96KHZ: 96000.0,
}


@dataclass(frozen=True)
class SaiPinConfig:
    """Pins carrying the master clock, frame sync, bit clock and both data lines."""

    mclk: GpioPin = GpioPin(GpioPort.E, 2)
    fs: GpioPin = GpioPin(GpioPort.E, 4)
    sck: GpioPin = GpioPin(GpioPort.E, 5)
    sa: GpioPin = GpioPin(GpioPort.E, 6)
    sb: GpioPin = GpioPin(GpioPort.E, 3)


@dataclass(frozen=True)
class SaiConfig:
    """Settings for one SAI peripheral and its two blocks."""

    periph: SaiPeripheral = SaiPeripheral.SAI_1
    pin_config: SaiPinConfig = field(default_factory=SaiPinConfig)
    sr: SampleRate = SampleRate.SAI_48KHZ
    bit_depth: BitDepth = BitDepth.SAI_24BIT
    a_sync: Sync = Sync.MASTER
    b_sync: Sync = Sync.SLAVE
    a_dir: Direction = Direction.RECEIVE
    b_dir: Direction = Direction.TRANSMIT


class SaiError(Exception):
    """Raised for invalid configuration or misuse of the DMA stream."""


_FIELD_TYPES = (
    ("periph", SaiPeripheral),
    ("sr", SampleRate),
    ("bit_depth", BitDepth),
    ("a_sync", Sync),
    ("b_sync", Sync),
    ("a_dir", Direction),
    ("b_dir", Direction),
)


def _int32_view(buffer: object, size: int, name: str, writable: bool) -> memoryview:
    try:
        view = memoryview(buffer)  # type: ignore[arg-type]
    except TypeError as exc:
        raise SaiError(f"{name} does not support the buffer protocol") from exc
    if writable and view.readonly:
        raise SaiError(f"{name} must be writable")
    if view.nbytes % 4:
        raise SaiError(f"{name} is not a whole number of 32-bit samples")
    samples = view.cast("B").cast("i")
    if len(samples) < size:
        raise SaiError(f"{name} holds {len(samples)} samples, {size} needed")
    return samples


class Sai:
    """An SAI peripheral streaming interleaved 32-bit samples in circular mode.

    The callback is dispatched once per buffer half: :meth:`half_complete`
    hands over the first half, :meth:`complete` the second. It receives
    views of the receive and transmit halves and the number of samples in
    each.
    """

    def __init__(self, config: Optional[SaiConfig] = None) -> None:
        config = config if config is not None else SaiConfig()
        for name, kind in _FIELD_TYPES:
            if not isinstance(getattr(config, name), kind):
                raise SaiError(f"invalid {name}: {getattr(config, name)!r}")
        self.config = config
        self._rx: Optional[memoryview] = None
        self._tx: Optional[memoryview] = None
        self._size = 0
        self._callback: Optional[SaiCallback] = None
        self._offset = 0
        self._running = False

    @property
    def running(self) -> bool:
        """True while a DMA transfer is active."""
        return self._running

    @property
    def is_master(self) -> bool:
        """True if either block generates the clocks (and MCLK is used)."""
        return Sync.MASTER in (self.config.a_sync, self.config.b_sync)

    def sample_rate(self) -> float:
        """Sample rate in Hz for the configured rate."""
        return _SAMPLE_RATES_HZ.get(self.config.sr, 48000.0)

    def start_dma(
        self,
        buffer_rx: object,
        buffer_tx: object,
        size: int,
        callback: Optional[SaiCallback],
    ) -> None:
        """Start circular transfers over ``size`` samples of each buffer."""
        if size < 0:
            raise SaiError("size must not be negative")
        self._rx = _int32_view(buffer_rx, size, "buffer_rx", writable=False)
        self._tx = _int32_view(buffer_tx, size, "buffer_tx", writable=True)
        self._size = size
        self._callback = callback
        self._running = True

    def stop_dma(self) -> None:
        """Stop the DMA stream of both blocks."""
        self._running = False

    def block_size(self) -> int:
        """Frames per callback: the buffer is handled in halves of stereo frames."""
        return self._size // 2 // 2

    def block_rate(self) -> float:
        """Callbacks per second for the current buffer size and sample rate."""
        frames = self.block_size()
        if frames == 0:
            raise SaiError("no DMA transfer with a non-empty buffer has been started")
        return self.sample_rate() / frames

    def offset(self) -> int:
        """Start of the buffer half last handed over: 0 or size / 2."""
        return self._offset

    def _dispatch(self, offset: int) -> None:
        if not self._running or self._rx is None or self._tx is None:
            raise SaiError("DMA transfer is not running")
        self._offset = offset
        if self._callback is not None:
            half = self._size // 2
            self._callback(
                self._rx[offset : offset + half],
                self._tx[offset : offset + half],
                half,
            )

    def half_complete(self) -> None:
        """Signal that the first half of the buffer is ready."""
        self._dispatch(0)

    def complete(self) -> None:
        """Signal that the second half of the buffer is ready."""
        self._dispatch(self._size // 2)