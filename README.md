# daisykit

Building blocks for audio-rate signal processing and for handling the
controls and peripherals of a compact audio board, in plain Python with no
third-party dependencies.

## What is inside

### DSP helpers — `daisykit.dsp`

Constants `PI_F`, `TWOPI_F`, `HALFPI_F` and the functions `fmin`, `fmax`,
`fclamp`, `fastpower`, `fastroot`, `pow10f`, `fastlog2f`, `fastlog10f`,
`mtof`, `fonepole` (returns the new filter state), `median`, the BLEP
helpers (`this_blep_sample`, `next_blep_sample`,
`this_integrated_blep_sample`, `next_integrated_blep_sample`),
`soft_limit`, `soft_clip`, `soft_saturate`, `test_float` (returns the
fallback for NaN, infinite or subnormal input), `is_power2` and
`get_next_power2`.

### Signal modules

Each is a small class with a `process` method:

- `daisykit.delayline.DelayLine(max_size)`: circular delay line with
  `set_delay` (an int gives a whole delay, a float an interpolated one),
  `write`, `read` (at the stored delay or a given one), `read_hermite`,
  `allpass` and `reset`.
- `daisykit.dcblock.DcBlock(sample_rate)`: removes the DC component.
- `daisykit.port.Port(sample_rate, htime)`: portamento; the output covers
  half the distance to the input every `htime` seconds.
- `daisykit.metro.Metro(freq, sample_rate)`: `process()` returns `True` on
  each tick; `freq` is a settable property; `reset()` rewinds the phase.
- `daisykit.maytrig.Maytrig(rng=None)`: `process(prob)` is `True` with
  probability `prob`.
- `daisykit.samplehold.SampleHold`: sample-and-hold and track-and-hold run
  in parallel; choose the output with `Mode.SAMPLE_HOLD` or
  `Mode.TRACK_HOLD`.
- `daisykit.smooth_random.SmoothRandomGenerator(sample_rate, rng=None)`:
  S-curve glides between random targets in `[-1, 1]`; `set_freq` sets how
  often a new target is picked.

The random modules accept a `random.Random` for reproducible output.

### Control inputs

These take plain callables that return the raw pin level or ADC value, so
they can be fed real readings or test data.

- `daisykit.switch.Switch(update_rate, invert, read)`: shift-register
  debouncing with `debounce`, `rising_edge`, `falling_edge`, `pressed` and
  `time_held_ms`.
- `daisykit.encoder.Encoder(update_rate, read_a, read_b, read_click)`:
  quadrature decoding; `increment` is +1, -1 or 0 after each `debounce`.
  The click switch is active low and exposes the same edge and hold methods.
- `daisykit.ctrl.AnalogControl(read, sample_rate, flip=False, invert=False,
  slew_seconds=0.002)`: scales a 10-bit reading to 0..1 and smooths it;
  `AnalogControl.bipolar_cv(read, sample_rate)` gives -1..1 for an inverted
  bipolar CV input. `value` holds the last result.
- `daisykit.parameter.Parameter(control, minimum, maximum, curve)`: maps a
  control's output onto a range through a `Curve` (`LINEAR`, `EXPONENTIAL`,
  `LOGARITHMIC`, `CUBE`).

### Peripheral models

Software models that follow the arithmetic of the board's drivers, useful
for simulation and tests:

- `daisykit.led`: `Led(write, invert=True)` and `RgbLed(write_r, write_g,
  write_b, invert=True)`.
- `daisykit.gpio`: `GpioPort`, `GpioPin`, `GpioMode`, `GpioPull`, `pin_mask`
  and `Gpio` with `read`, `write`, `toggle` and `deinit`.
- `daisykit.codec_ak4556.init_ak4556(reset_pin, delay)`: pulses a codec
  reset pin high, low, high with 1 ms waits and returns the `Gpio`.
- `daisykit.tim`: `Timer(config, pclk1_freq, counter)` driven by a
  nanosecond clock, with `start`, `stop`, `set_period`, `set_prescaler`,
  `freq`, `tick`, `ms`, `us` and busy-wait delays; misuse raises
  `TimerError`.
- `daisykit.sai`: `SaiConfig` (with `SaiPeripheral`, `SampleRate`,
  `BitDepth`, `Sync`, `Direction`, `SaiPinConfig`) and `Sai`, which streams
  32-bit buffers in halves: `start_dma`, then `half_complete()` and
  `complete()` hand each half to the callback. Errors raise `SaiError`.
- `daisykit.audio`: `AudioHandle(config, sai1, sai2=None)` converts SAI
  samples to floats (`to_float`, `from_float`), applies the post gain and
  runs a split (per-channel) or interleaved callback; 2 channels with one
  SAI, 4 with two. Errors raise `AudioError`.
- `daisykit.system`: `SystemConfig.defaults()` / `SystemConfig.boost()`,
  `ClockSettings`, `mpu_regions()` and `System(config, clock)` with clock
  frequencies, `now`, `us`, `tick` and delays on an internal `Timer`.

## Examples

A feedback delay followed by a DC blocker:

```python
from daisykit.delayline import DelayLine
from daisykit.dcblock import DcBlock

delay = DelayLine(48000)
delay.set_delay(12000)
dc = DcBlock(48000)

def render(samples):
    out = []
    for x in samples:
        y = delay.read()
        delay.write(x + 0.5 * y)
        out.append(dc.process(x + y))
    return out
```

Debouncing a button from a pin-reading function:

```python
from daisykit.switch import Switch

button = Switch(1000.0, True, read=read_pin)
button.debounce()
if button.rising_edge():
    ...
```

Running an audio callback over a simulated SAI:

```python
from daisykit.audio import AudioConfig, AudioHandle
from daisykit.sai import Sai

def passthrough(inp, out, frames):
    for channel_in, channel_out in zip(inp, out):
        channel_out[:] = channel_in

sai = Sai()
audio = AudioHandle(AudioConfig(blocksize=4), sai)
audio.start(passthrough)
sai.half_complete()   # first half of the buffer
sai.complete()        # second half
```

## What it does not do

The package talks to no real hardware: pins, timers, the SAI and the system
clock are in-memory models driven by the callables and clocks you pass in.
It has no driver for an I2C PWM expander and no random line ("jitter")
generator, and it provides no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```