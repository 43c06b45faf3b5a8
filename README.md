# sdtcore

Building blocks for physically informed, interactive sound synthesis, in
pure Python with no third-party dependencies.

## Modules

### `sdtcore.common`

Shared constants and numeric helpers.

- Constants: `PI`, `TWOPI`, `EULER`, `SQRT2`, `MACH1` (speed of sound, m/s),
  `EARTH` (gravity, N/kg), `MICRO`, `QUIET`, `VERSION`.
- Global sample rate: `set_sample_rate(rate)` (raises `ValueError` for 0),
  `get_sample_rate()`, `get_time_step()`. Until a rate is set both getters
  return `0.0`.
- Windows, each returning a new list: `hanning(sig)`, `blackman(sig)`,
  `sinc(sig, w)`, `normalize_window(sig)`, `remove_dc(sig)`, and
  `gaussian_1d(sigma, n)` which builds a kernel summing to one.
- Haar wavelet transforms: `haar(sig)` and its inverse `ihaar(sig)`.
- Peak picking: `is_peak`, `is_hole`, `roi(sig, d)` (returns
  `(peaks, bounds)`), `true_peak_pos`, `true_peak_value`. Out-of-range
  indexes raise `IndexError`.
- Statistics: `average`, `weighted_average`, `rank(values, k)` (k-th
  smallest, zero based), `arg_max` and `arg_min` (each returns
  `(index, value)`; empty input raises `ValueError`).
- Utilities: `clip` (integer), `fclip` (float), `normalize`, `scale`,
  `signum`, `wrap` (phase into `[-pi, pi)`), `next_pow2`, `bit_reverse`,
  `gravity`, `kinetic`, `samples_in_air`, and random helpers `frand(rng)`
  and `exp_rand(lam, rng)`, which accept an optional `random.Random`.

### `sdtcore.complexnum`

Helpers on top of the built-in `complex`: `phasor(phase)`,
`magnitude(z)`, `angle(z)` and `real_div(a, z)` (raises
`ZeroDivisionError` when `z` is zero).

### `sdtcore.control`

Control layers that produce the inputs for impact and friction models:

- `Bouncing` — `reset()` then call `step()` once per sample; it returns
  the impact velocity of a bounce, or `0.0` between bounces.
  `has_finished()` reports whether any energy is left.
- `Breaking` — `reset()` then `step()` returns `(energy, size)` for each
  iteration until `has_finished()` is true.
- `Crumpling` — `step()` returns `(energy, size)` indefinitely.
- `Rolling` and `Scraping` — `process(surface)` takes one sample of a
  surface profile and returns a force.
- `ground_decay(grain, velocity)`.

Parameters are properties that clip the values they are given (for
example `restitution`, `granularity` and `grain` to `[0, 1]`). The random
processes accept an optional `rng` (`random.Random`) for reproducible
output.

### `sdtcore.analysis`

`ZeroCrossing(size, overlap=0.0)` — a sliding-window zero-crossing-rate
detector. `process(sample)` returns the rate when a hop completes and
`None` otherwise; `hop` gives the number of samples between outputs.

## Example

```python
from sdtcore.common import set_sample_rate
from sdtcore.control import Bouncing

set_sample_rate(44100.0)

ball = Bouncing(restitution=0.8, height=1.0)
ball.reset()

impacts = []
for _ in range(2 * 44100):
    velocity = ball.step()
    if velocity:
        impacts.append(velocity)
```

Zero-crossing rate of a stream of samples:

```python
from sdtcore.analysis import ZeroCrossing

zc = ZeroCrossing(1024, overlap=0.5)
for sample in samples:
    rate = zc.process(sample)
    if rate is not None:
        print(rate)
```

## What this package does not do

It produces control values and analysis results only. It has no
resonators, interaction or liquid models that turn these values into
sound, no FFT-based spectral or pitch analysis, no audio input or output,
and no command-line program or user interface.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```