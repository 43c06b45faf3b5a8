"""Shared constants, sample-rate state and numeric helpers for the synthesis models."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

VERSION = "078"
PI = 3.141592653589793
TWOPI = 6.283185307179586
EULER = 2.718281828459045
SQRT2 = 1.4142135623730951
MACH1 = 340.29
"""Speed of sound in air under normal atmospheric conditions (m/s)."""
EARTH = 9.81
"""Earth gravity (N/kg)."""
MICRO = 0.000001
"""Small value used instead of zero to avoid division errors."""
QUIET = 0.00003
"""Gain factor roughly corresponding to a -90 dB attenuation."""


@dataclass
class _Clock:
    sample_rate: float = 0.0
    time_step: float = 0.0


_clock = _Clock()


def set_sample_rate(sample_rate: float) -> None:
    """Set the global sample rate (Hz) and derive the sampling period."""
    if sample_rate == 0:
        raise ValueError("sample rate must be non-zero")
    _clock.sample_rate = float(sample_rate)
    _clock.time_step = 1.0 / sample_rate


def get_sample_rate() -> float:
    """Return the global sample rate in Hz."""
    return _clock.sample_rate


def get_time_step() -> float:
    """Return the global sampling period in seconds."""
    return _clock.time_step


def _require_values(values: Sequence[float]) -> None:
    if len(values) == 0:
        raise ValueError("sequence must not be empty")


def arg_max(values: Sequence[float]) -> tuple[int, float]:
    """Return the index and value of the first maximum."""
    _require_values(values)
    best_index, best = 0, values[0]
    for index, value in enumerate(values):
        if value > best:
            best_index, best = index, value
    return best_index, best


def arg_min(values: Sequence[float]) -> tuple[int, float]:
    """Return the index and value of the first minimum."""
    _require_values(values)
    best_index, best = 0, values[0]
    for index, value in enumerate(values):
        if value < best:
            best_index, best = index, value
    return best_index, best


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    _require_values(values)
    return sum(values) / len(values)


def bit_reverse(u: int, bits: int) -> int:
    """Reverse the lowest ``bits`` bits of a 32-bit unsigned integer."""
    if not 1 <= bits <= 32:
        raise ValueError("bits must be between 1 and 32")
    reversed_word = int(format(u & 0xFFFFFFFF, "032b")[::-1], 2)
    return reversed_word >> (32 - bits)


def _symmetric_window(sig: Sequence[float], weight) -> list[float]:
    out = list(sig)
    n = len(out)
    for i in range(n // 2):
        j = n - i - 1
        factor = weight(i, n)
        out[i] *= factor
        out[j] *= factor
    return out


def blackman(sig: Sequence[float]) -> list[float]:
    """Return the samples multiplied by a Blackman window."""

    def weight(i: int, n: int) -> float:
        w = TWOPI * i / (n - 1)
        return 0.42 - 0.5 * math.cos(w) + 0.08 * math.cos(2 * w)

    return _symmetric_window(sig, weight)


def hanning(sig: Sequence[float]) -> list[float]:
    """Return the samples multiplied by a Hanning window."""
    return _symmetric_window(
        sig, lambda i, n: 0.5 - 0.5 * math.cos(TWOPI * i / (n - 1))
    )


def sinc(sig: Sequence[float], w: float) -> list[float]:
    """Return the samples multiplied by a sin(x)/x window with parameter ``w``."""

    def weight(i: int, n: int) -> float:
        x = TWOPI * w * (n // 2 - i)
        return math.sin(x) / x

    return _symmetric_window(sig, weight)


def clip(x: float, low: int, high: int) -> int:
    """Truncate to an integer and limit it to ``[low, high]``."""
    value = int(x)
    if value < low:
        return low
    if value > high:
        return high
    return value


def fclip(x: float, low: float, high: float) -> float:
    """Limit a floating point value to ``[low, high]``; NaN becomes ``low``."""
    value = low if math.isnan(x) else max(low, x)
    return min(value, high)


def frand(rng: random.Random | None = None) -> float:
    """Uniform random number in ``[0, 1)``."""
    return (rng or random).random()


def exp_rand(lam: float, rng: random.Random | None = None) -> float:
    """Exponentially distributed random number with rate ``lam``."""
    return -math.log(1.0 - frand(rng)) / lam


def gaussian_1d(sigma: float, n: int) -> list[float]:
    """Gaussian kernel of ``n`` samples, normalised to sum to one."""
    mid = 0.5 * n
    det = 2.0 * sigma * sigma * n
    kernel = [math.exp(-((i - mid + 0.5) ** 2) / det) for i in range(n)]
    total = sum(kernel)
    return [value / total for value in kernel]


def gravity(mass: float) -> float:
    """Earth gravity force (N) on an object of the given mass (kg)."""
    return EARTH * mass


def kinetic(mass: float, velocity: float) -> float:
    """Kinetic energy (J) of a mass (kg) moving at a velocity (m/s)."""
    return 0.5 * mass * velocity * velocity


def haar(sig: Sequence[float]) -> list[float]:
    """Direct Haar wavelet transform: averages first, then differences."""
    out = list(sig)
    half = len(sig) // 2
    for x in range(half):
        a, b = sig[2 * x], sig[2 * x + 1]
        out[x] = (a + b) / SQRT2
        out[x + half] = (a - b) / SQRT2
    return out


def ihaar(sig: Sequence[float]) -> list[float]:
    """Inverse Haar wavelet transform of :func:`haar` output."""
    out = list(sig)
    half = len(sig) // 2
    for x in range(half):
        a, b = sig[x], sig[x + half]
        out[2 * x] = (a + b) / SQRT2
        out[2 * x + 1] = (a - b) / SQRT2
    return out


def _check_neighbourhood(values: Sequence[float], index: int, radius: int) -> None:
    if index - radius < 0 or index + radius >= len(values):
        raise IndexError("neighbourhood extends beyond the sequence")


def is_hole(values: Sequence[float], index: int, radius: int) -> bool:
    """True if the value is below its left and not above its right neighbours."""
    _check_neighbourhood(values, index, radius)
    centre = values[index]
    return all(
        values[index - i] > centre and values[index + i] >= centre
        for i in range(1, radius + 1)
    )


def is_peak(values: Sequence[float], index: int, radius: int) -> bool:
    """True if the value is above its left and not below its right neighbours."""
    _check_neighbourhood(values, index, radius)
    centre = values[index]
    return all(
        values[index - i] < centre and values[index + i] <= centre
        for i in range(1, radius + 1)
    )


def next_pow2(u: int) -> int:
    """Smallest power of two greater than or equal to ``u``."""
    if u < 1:
        raise ValueError("u must be positive")
    return 1 << (u - 1).bit_length()


def normalize(x: float, low: float, high: float) -> float:
    """Rescale ``x`` from ``[low, high]`` to ``[0, 1]``."""
    return (x - low) / (high - low)


def normalize_window(sig: Sequence[float]) -> list[float]:
    """Scale samples so that they sum to one."""
    total = sum(sig)
    return [value / total for value in sig]


def rank(values: Sequence[float], k: int) -> float:
    """The ``k``-th smallest value (zero based)."""
    if not 0 <= k < len(values):
        raise IndexError("rank out of range")
    return sorted(values)[k]


def remove_dc(sig: Sequence[float]) -> list[float]:
    """Subtract the mean from every sample."""
    mean = average(sig)
    return [value - mean for value in sig]


def roi(sig: Sequence[float], d: int) -> tuple[list[int], list[int]]:
    """Find regions of influence.

    Returns the indexes of the local maxima (strictly greater than ``d``
    neighbours on each side) and the region bounds: the index of the minimum
    between consecutive peaks, preceded by 0 and followed by ``len(sig)``.
    """
    n = len(sig)
    peaks = [
        i
        for i in range(n)
        if not any(
            (i - j >= 0 and sig[i - j] >= sig[i]) or (i + j < n and sig[i + j] >= sig[i])
            for j in range(1, d + 1)
        )
    ]
    bounds = [0] if peaks else []
    for left, right in zip(peaks, peaks[1:]):
        lowest, bound = sig[left], left
        for j in range(left + 1, right):
            if sig[j] < lowest:
                lowest, bound = sig[j], j
        bounds.append(bound)
    bounds.append(n)
    return peaks, bounds


def samples_in_air(length: float) -> float:
    """Samples a sound wave needs to travel ``length`` metres at Mach 1."""
    return max(0.0, length) / MACH1 * _clock.sample_rate


def scale(
    x: float,
    src_min: float,
    src_max: float,
    dst_min: float,
    dst_max: float,
    gamma: float,
) -> float:
    """Rescale ``x`` from a source to a target range with a gamma curve."""
    ratio = (x - src_min) / (src_max - src_min)
    return math.pow(ratio, gamma) * (dst_max - dst_min) + dst_min


def signum(x: float) -> int:
    """Sign of ``x`` as -1, 0 or 1."""
    if x < 0:
        return -1
    if x == 0:
        return 0
    return 1


def _peak_triplet(sig: Sequence[float], peak: int) -> tuple[float, float, float]:
    if peak < 1 or peak + 1 >= len(sig):
        raise IndexError("peak needs a neighbour on each side")
    return sig[peak - 1], sig[peak], sig[peak + 1]


def true_peak_pos(sig: Sequence[float], peak: int) -> float:
    """Quadratic interpolation of the position of a local maximum."""
    a, b, c = _peak_triplet(sig, peak)
    return peak + 0.5 * (a - c) / (a - 2.0 * b + c)


def true_peak_value(sig: Sequence[float], peak: int) -> float:
    """Quadratic interpolation of the amplitude of a local maximum."""
    a, b, c = _peak_triplet(sig, peak)
    return b + 0.5 * (0.5 * ((c - a) * (c - a))) / (2 * b - a - c)


def weighted_average(values: Sequence[float], weights: Sequence[float]) -> float:
    """Mean of ``values`` weighted by ``weights``."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    return sum(v * w for v, w in zip(values, weights)) / sum(weights)


def wrap(x: float) -> float:
    """Wrap a phase into ``[-pi, pi)``."""
    x = math.fmod(x, TWOPI)
    if x < 0.0:
        x += TWOPI
    return x - PI