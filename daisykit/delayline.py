"""Fixed-size circular delay line with interpolated reads."""

from __future__ import annotations


class DelayLine:
    """Circular buffer of ``max_size`` samples with a settable delay."""

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._frac = 0.0
        self._line: list[float] = []
        self._write_ptr = 0
        self._delay = 1
        self.reset()

    def reset(self) -> None:
        """Clear the buffer, rewind the write position and set delay to 1."""
        self._line = [0.0] * self.max_size
        self._write_ptr = 0
        self._delay = 1

    def set_delay(self, delay: float) -> None:
        """Set the delay in samples; a float gives an interpolated delay."""
        if isinstance(delay, int):
            self._frac = 0.0
            whole = delay
        else:
            whole = int(delay)
            self._frac = delay - whole
        self._delay = whole if 0 <= whole < self.max_size else self.max_size - 1

    def write(self, sample: float) -> None:
        """Store a sample and advance the write position."""
        self._line[self._write_ptr] = sample
        self._write_ptr = (self._write_ptr - 1 + self.max_size) % self.max_size

    def _at(self, index: int) -> float:
        return self._line[index % self.max_size]

    def read(self, delay: float | None = None) -> float:
        """Linearly interpolated read at ``delay`` or at the stored delay."""
        if delay is None:
            whole, frac = self._delay, self._frac
        else:
            whole = int(delay)
            frac = delay - whole
        a = self._at(self._write_ptr + whole)
        b = self._at(self._write_ptr + whole + 1)
        return a + (b - a) * frac

    def read_hermite(self, delay: float) -> float:
        """Four-point Hermite-interpolated read at ``delay``."""
        whole = int(delay)
        f = delay - whole
        t = self._write_ptr + whole + self.max_size
        xm1 = self._at(t - 1)
        x0 = self._at(t)
        x1 = self._at(t + 1)
        x2 = self._at(t + 2)
        c = (x1 - xm1) * 0.5
        v = x0 - x1
        w = c + v
        a = w + v + (x2 - x0) * 0.5
        b_neg = w + a
        return (((a * f) - b_neg) * f + c) * f + x0

    def allpass(self, sample: float, delay: int, coefficient: float) -> float:
        """Run one allpass step through the line at a fixed delay."""
        read = self._at(self._write_ptr + delay)
        written = sample + coefficient * read
        self.write(written)
        return -written * coefficient + read