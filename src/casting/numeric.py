"""Numeric policies behind the built-in casts.

Three operations cover the whole built-in matrix:

- ``wrap_int`` keeps the low bits of an integer, reinterpreting the sign for
  signed kinds (zero/sign extension falls out for free on widening).
- ``round_to_format`` rounds an exact real number to the nearest value of an
  IEEE 754 binary format, ties to even, with gradual underflow and overflow
  to infinity.
- ``saturate_to_int`` truncates a float toward zero and clamps it into an
  integer kind, mapping NaN to zero.
"""

from __future__ import annotations

import math
from fractions import Fraction
from functools import lru_cache

from casting.kinds import FloatFormat, PrimitiveKind, type_range

# Values accepted as exact reals by round_to_format
Real = int | float | Fraction


def wrap_int(value: int, kind: PrimitiveKind) -> int:
    """Reduce ``value`` modulo 2**bits into the range of an integer kind."""
    min_val, max_val = type_range(kind)
    range_size = max_val - min_val + 1
    return ((value - min_val) % range_size) + min_val


def _pow2(exponent: int) -> Fraction:
    if exponent >= 0:
        return Fraction(1 << exponent)
    return Fraction(1, 1 << -exponent)


def _floor_log2(value: Fraction) -> int:
    """Exponent e with 2**e <= value < 2**(e+1), for positive value."""
    exponent = value.numerator.bit_length() - value.denominator.bit_length()
    if value < _pow2(exponent):
        exponent -= 1
    return exponent


@lru_cache(maxsize=None)
def max_finite(fmt: FloatFormat) -> Fraction:
    """Largest finite value of ``fmt``."""
    return ((1 << fmt.precision) - 1) * _pow2(fmt.emax - fmt.precision + 1)


@lru_cache(maxsize=None)
def min_subnormal(fmt: FloatFormat) -> Fraction:
    """Smallest positive value of ``fmt``."""
    return _pow2(fmt.emin - fmt.precision + 1)


def round_to_format(value: Real, fmt: FloatFormat) -> float | Fraction:
    """Round ``value`` to the nearest number representable in ``fmt``.

    The result is a float when every value of ``fmt`` fits in a Python float,
    otherwise a Fraction. NaN, infinities and signed zeros are always
    returned as floats.
    """
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value) or value == 0.0):
        return value

    exact = Fraction(value)
    if exact == 0:
        return 0.0
    negative = exact < 0
    magnitude = -exact if negative else exact

    # Below the normal range the quantum stops shrinking (subnormals)
    quantum = max(_floor_log2(magnitude), fmt.emin) - fmt.precision + 1
    significand = round(magnitude / _pow2(quantum))
    if significand == 0:
        return -0.0 if negative else 0.0

    rounded = significand * _pow2(quantum)
    if rounded > max_finite(fmt):
        return -math.inf if negative else math.inf
    if negative:
        rounded = -rounded
    if fmt.fits_in_double:
        return float(rounded)
    return rounded


def saturate_to_int(value: float | Fraction, kind: PrimitiveKind) -> int:
    """Truncate toward zero and clamp into ``kind``; NaN becomes 0."""
    min_val, max_val = type_range(kind)
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return max_val if value > 0 else min_val
    truncated = math.trunc(value)
    return max(min_val, min(truncated, max_val))
