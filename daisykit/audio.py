"""Audio engine: converts SAI sample streams to floats and runs a user callback."""

from __future__ import annotations

import enum
from array import array
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

from daisykit.sai import BitDepth, Sai, SampleRate

MAX_BLOCK_SIZE = 1024

AudioCallback = Callable[[list[list[float]], list[list[float]], int], None]
InterleavingAudioCallback = Callable[[list[float], list[float], int], None]


@dataclass(frozen=True)
class AudioConfig:
    """Block size in frames, sample rate and post gain of the audio engine."""

    blocksize: int = 48
    samplerate: SampleRate = SampleRate.SAI_48KHZ
    postgain: float = 1.0


class AudioError(Exception):
    """Raised for invalid audio settings or callbacks."""


class _Layout(enum.Enum):
    SPLIT = 0
    INTERLEAVED = 1


# bits, scale into float, scale out of float
_FORMATS = {
    BitDepth.SAI_16BIT: (16, 1.0 / 32768.0, 32767.0),
    BitDepth.SAI_24BIT: (24, 1.0 / 8388608.0, 8388607.0),
    BitDepth.SAI_32BIT: (32, 1.0 / 2147483648.0, 2147483647.0),
}


def _format(bit_depth: BitDepth) -> tuple[int, float, float]:
    try:
        return _FORMATS[bit_depth]
    except KeyError:
        raise AudioError(f"unsupported bit depth {bit_depth!r}") from None


def to_float(sample: int, bit_depth: BitDepth) -> float:
    """Convert a raw signed sample of ``bit_depth`` bits to a float in [-1, 1)."""
    bits, scale, _ = _format(bit_depth)
    sign = 1 << (bits - 1)
    value = ((sample & ((1 << bits) - 1)) ^ sign) - sign
    return value * scale


def from_float(value: float, bit_depth: BitDepth) -> int:
    """Convert a float to a raw sample, clipping to [-1, 1]."""
    _, _, scale = _format(bit_depth)
    clipped = -1.0 if value <= -1.0 else 1.0 if value >= 1.0 else value
    return int(clipped * scale)


class AudioHandle:
    """Runs audio over one SAI (2 channels) or two SAIs (4 channels).

    A split callback receives ``in`` and ``out`` as one list of floats per
    channel and the number of frames. An interleaved callback receives flat
    ``[L0, R0, L1, R1, ...]`` lists of the first SAI and the sample count.
    """

    def __init__(
        self,
        config: AudioConfig,
        sai1: Optional[Sai],
        sai2: Optional[Sai] = None,
    ) -> None:
        if config.postgain <= 0.0:
            raise AudioError("post gain must be positive")
        if sai1 is None:
            raise AudioError("the first SAI must be initialised")
        if not 0 <= config.blocksize <= MAX_BLOCK_SIZE:
            raise AudioError(f"block size must be within 0..{MAX_BLOCK_SIZE}")
        self._sai1 = sai1
        self._sai2 = sai2
        self._config = replace(config, samplerate=sai1.config.sr)
        self._postgain_recip = 1.0 / config.postgain
        self._callback: Optional[Callable[..., None]] = None
        self._layout = _Layout.SPLIT
        self._rx: list[array] = []
        self._tx: list[array] = []

    @property
    def config(self) -> AudioConfig:
        """The current configuration."""
        return self._config

    @property
    def rx_buffers(self) -> tuple[array, ...]:
        """Receive DMA buffers, one per SAI, allocated by :meth:`start`."""
        return tuple(self._rx)

    @property
    def tx_buffers(self) -> tuple[array, ...]:
        """Transmit DMA buffers, one per SAI, allocated by :meth:`start`."""
        return tuple(self._tx)

    def _sais(self) -> list[Sai]:
        return [sai for sai in (self._sai1, self._sai2) if sai is not None]

    def channels(self) -> int:
        """4 with two SAIs, 2 with one."""
        return 2 * len(self._sais())

    def sample_rate(self) -> float:
        """Sample rate in Hz of the first SAI."""
        return self._sai1.sample_rate()

    def set_sample_rate(self, sample_rate: SampleRate) -> None:
        """Change the sample rate and reconfigure every SAI in use."""
        if not isinstance(sample_rate, SampleRate):
            raise AudioError(f"invalid sample rate {sample_rate!r}")
        self._config = replace(self._config, samplerate=sample_rate)
        for sai in self._sais():
            sai.config = replace(sai.config, sr=sample_rate)

    def set_block_size(self, size: int) -> None:
        """Set frames per block; larger sizes are clamped and reported."""
        self._config = replace(self._config, blocksize=min(size, MAX_BLOCK_SIZE))
        if size > MAX_BLOCK_SIZE:
            raise AudioError(f"block size {size} exceeds {MAX_BLOCK_SIZE}")

    def set_post_gain(self, value: float) -> None:
        """Set the gain removed before and restored after the callback."""
        if value <= 0.0:
            raise AudioError("post gain must be positive")
        self._config = replace(self._config, postgain=value)
        self._postgain_recip = 1.0 / value

    def start(self, callback: Optional[Callable[..., None]], interleaved: bool = False) -> None:
        """Allocate buffers and start streaming with ``callback``."""
        size = self._config.blocksize * 2 * 2
        self._rx = [array("i", bytes(4 * size)) for _ in self._sais()]
        self._tx = [array("i", bytes(4 * size)) for _ in self._sais()]
        if self._sai2 is not None and not interleaved:
            self._sai2.start_dma(self._rx[1], self._tx[1], size, None)
        self._sai1.start_dma(self._rx[0], self._tx[0], size, self._process)
        self._callback = callback
        self._layout = _Layout.INTERLEAVED if interleaved else _Layout.SPLIT

    def stop(self) -> None:
        """Stop every SAI stream."""
        for sai in self._sais():
            sai.stop_dma()

    def change_callback(self, callback: Optional[Callable[..., None]], interleaved: bool = False) -> None:
        """Replace the running callback immediately."""
        if callback is None:
            raise AudioError("callback must not be None")
        self._callback = callback
        self._layout = _Layout.INTERLEAVED if interleaved else _Layout.SPLIT

    def _in(self, samples: Sequence[int], bit_depth: BitDepth) -> list[float]:
        return [to_float(s, bit_depth) * self._postgain_recip for s in samples]

    def _out(self, values: Sequence[float], bit_depth: BitDepth) -> array:
        gain = self._config.postgain
        return array("i", (from_float(v * gain, bit_depth) for v in values))

    def _process(self, inp: memoryview, out: memoryview, size: int) -> None:
        chns = self.channels()
        if chns == 0 or self._callback is None:
            return
        bd = self._sai1.config.bit_depth
        raw = list(inp)
        if self._layout is _Layout.INTERLEAVED:
            fin = self._in(raw, bd)
            fout = [0.0] * size
            self._callback(fin, fout, size)
            out[:] = self._out(fout, bd)
            return

        frames = size // 2
        fin = [self._in(raw[0::2], bd), self._in(raw[1::2], bd)]
        offset = 0
        if chns > 2 and self._sai2 is not None:
            offset = self._sai2.offset()
            second = list(self._rx[1][offset : offset + size])
            fin += [self._in(second[0::2], bd), self._in(second[1::2], bd)]
        fout = [[0.0] * frames for _ in range(chns)]
        self._callback(fin, fout, frames)

        first: list[float] = [0.0] * size
        first[0::2] = fout[0]
        first[1::2] = fout[1]
        out[:] = self._out(first, bd)
        if chns > 2:
            second_out: list[float] = [0.0] * size
            second_out[0::2] = fout[2]
            second_out[1::2] = fout[3]
            self._tx[1][offset : offset + size] = self._out(second_out, bd)