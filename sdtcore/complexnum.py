"""Helpers for complex numbers used by the spectral models.

Python's built-in :class:`complex` already supplies construction, conjugation
and arithmetic with other complex and real numbers. This module adds the few
operations the models need on top of it, under the names they use.
"""

from __future__ import annotations

import math


def phasor(phase: float) -> complex:
    """Complex exponential ``e**(1j * phase)``."""
    return complex(math.cos(phase), math.sin(phase))


def magnitude(z: complex) -> float:
    """Absolute value of ``z``."""
    z = complex(z)
    return math.sqrt(z.real * z.real + z.imag * z.imag)


def angle(z: complex) -> float:
    """Phase of ``z`` in ``[-pi, pi]``."""
    z = complex(z)
    return math.atan2(z.imag, z.real)


def real_div(a: float, z: complex) -> complex:
    """Divide the real number ``a`` by the complex number ``z``.

    Raises :class:`ZeroDivisionError` when ``z`` is zero.
    """
    z = complex(z)
    d = z.real * z.real + z.imag * z.imag
    if d == 0.0:
        raise ZeroDivisionError("complex division by zero")
    return complex(a * z.real / d, -a * z.imag / d)