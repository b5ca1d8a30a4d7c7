"""Small numeric helpers shared by the signal-processing modules."""

from __future__ import annotations

import math
import struct
from typing import TypeVar

PI_F = 3.1415927410125732421875
TWOPI_F = 2.0 * PI_F
HALFPI_F = PI_F * 0.5

_ONE_BITS = 0x3F800000
_FLT_MIN = 1.1754943508222875e-38
_U32 = 0xFFFFFFFF

T = TypeVar("T")


def _float_bits(value: float) -> int:
    """Return the IEEE-754 single-precision bit pattern as a signed int."""
    return struct.unpack("<i", struct.pack("<f", value))[0]


def _bits_float(bits: int) -> float:
    """Reinterpret a (wrapped) 32-bit integer as a single-precision float."""
    bits = (bits + 0x80000000) % 0x100000000 - 0x80000000
    return struct.unpack("<f", struct.pack("<i", bits))[0]


def fmax(a: float, b: float) -> float:
    """Return the larger of two floats."""
    return a if a > b else b


def fmin(a: float, b: float) -> float:
    """Return the smaller of two floats."""
    return a if a < b else b


def fclamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return fmin(fmax(value, minimum), maximum)


def fastpower(f: float, n: int) -> float:
    """Approximate ``f ** n`` by manipulating the float's exponent bits."""
    bits = _float_bits(f) - _ONE_BITS
    bits <<= n - 1
    bits = ((bits + 0x80000000) & _U32) - 0x80000000
    return _bits_float(bits + _ONE_BITS)


def fastroot(f: float, n: int) -> float:
    """Approximate a square root of ``f``; ``n`` does not change the result."""
    bits = _float_bits(f) - _ONE_BITS
    bits >>= 1
    return _bits_float(bits + _ONE_BITS)


def pow10f(f: float) -> float:
    """Return ``10 ** f`` computed through the exponential."""
    return math.exp(2.302585092994046 * f)


def fastlog2f(f: float) -> float:
    """Polynomial approximation of ``log2(|f|)``."""
    frac, exp = math.frexp(abs(f))
    result = 1.23149591368684
    result *= frac
    result += -4.11852516267426
    result *= frac
    result += 6.02197014179219
    result *= frac
    result += -3.13396450166353
    return result + exp


def fastlog10f(f: float) -> float:
    """Approximation of ``log10(|f|)``."""
    return fastlog2f(f) * 0.3010299956639812


def mtof(m: float) -> float:
    """Convert a MIDI note number to a frequency in Hz."""
    return math.pow(2.0, (m - 69.0) / 12.0) * 440.0


def fonepole(out: float, value: float, coeff: float) -> float:
    """One-pole low-pass step: return the new filter state."""
    return out + coeff * (value - out)


def median(a: T, b: T, c: T) -> T:
    """Return the median of three values."""
    if b < a:
        if b < c:
            return c if c < a else a
        return b
    if a < c:
        return c if c < b else b
    return a


def this_blep_sample(t: float) -> float:
    """BLEP correction for the sample containing the discontinuity."""
    return 0.5 * t * t


def next_blep_sample(t: float) -> float:
    """BLEP correction for the sample after the discontinuity."""
    t = 1.0 - t
    return -0.5 * t * t


def next_integrated_blep_sample(t: float) -> float:
    """Integrated BLEP correction for the following sample."""
    t1 = 0.5 * t
    t2 = t1 * t1
    t4 = t2 * t2
    return 0.1875 - t1 + 1.5 * t2 - t4


def this_integrated_blep_sample(t: float) -> float:
    """Integrated BLEP correction for the current sample."""
    return next_integrated_blep_sample(1.0 - t)


def soft_limit(x: float) -> float:
    """Rational soft-limiting curve."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def soft_clip(x: float) -> float:
    """Soft clipper that saturates to +-1 outside +-3."""
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return soft_limit(x)


def test_float(x: float, y: float = 0.0) -> float:
    """Return ``x`` if it is zero or a normal float, otherwise ``y``."""
    if x != 0 and not (math.isfinite(x) and abs(x) >= _FLT_MIN):
        return y
    return x


def soft_saturate(value: float, thresh: float) -> float:
    """Soft saturation curve with knee at ``thresh``."""
    flip = value < 0.0
    magnitude = -value if flip else value
    out = 0.0
    if magnitude < thresh:
        out = value
    elif magnitude > 1.0:
        out = (thresh + 1.0) / 2.0
        if flip:
            out = -out
    elif magnitude > thresh:
        temp = (magnitude - thresh) / (1.0 - thresh)
        out = thresh + (magnitude - thresh) / (1.0 + temp * temp)
        if flip:
            out = -out
    return out


def is_power2(x: int) -> bool:
    """True if the unsigned 32-bit value ``x`` has at most one bit set."""
    x &= _U32
    return ((x - 1) & _U32 & x) == 0


def get_next_power2(x: int) -> int:
    """Smallest power of two not below ``x`` (unsigned 32-bit arithmetic)."""
    x = (x - 1) & _U32
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return (x + 1) & _U32