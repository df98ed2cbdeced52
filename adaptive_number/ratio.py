"""Correctly rounded conversion of a bounded ratio to a single-precision float.

normalize(current, maximum) maps current / maximum into [0, 1] using exact
integer arithmetic. The quotient is computed as a fixed-point integer with
24 mantissa bits plus 3 guard bits, rounded half to even, then converted
through double precision and narrowed to single precision. Computing the
guard bits first keeps the final float rounding from being a second,
independent rounding of an already truncated value.
"""

from __future__ import annotations

import struct

from adaptive_number.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from adaptive_number.errors import DivisionByZero
from adaptive_number.number import AdaptiveNumber, _as_number

__all__ = ["normalize", "to_ratio_of", "to_float32"]


def to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value.

    Returns:
        A Python float holding exactly the single-precision result
    """
    return struct.unpack(">f", struct.pack(">f", value))[0]


def normalize(
    current: AdaptiveNumber | int,
    maximum: AdaptiveNumber | int,
    config: NumberConfig | None = None,
) -> float:
    """Precise ratio current / maximum as a single-precision float in [0, 1].

    Args:
        current: Numerator, e.g. progress so far
        maximum: Denominator, e.g. the goal; may be negative
        config: Uses DEFAULT_NUMBER_CONFIG if not provided

    Returns:
        The ratio rounded to single precision, clamped to [0, 1]

    Raises:
        DivisionByZero: If maximum is zero

    Examples:
        normalize(0, 10) == 0.0
        normalize(10, 10) == 1.0
        normalize(-1, 10) == 0.0
        normalize(4500, 10000) == to_float32(0.45)
    """
    cfg = config or DEFAULT_NUMBER_CONFIG
    divisor = int(_as_number(maximum))
    if divisor == 0:
        raise DivisionByZero("Cannot normalize by zero")
    dividend = int(_as_number(current))

    # Make the divisor positive; flipping both keeps the ratio's sign
    if divisor < 0:
        divisor = -divisor
        dividend = -dividend

    if dividend <= 0:
        return 0.0
    if dividend >= divisor:
        return 1.0

    fixed_point_bits = cfg.fixed_point_bits
    fixed_point_value, remainder = divmod(dividend << fixed_point_bits, divisor)

    # Round to nearest, ties to even, on the fixed-point integer
    twice_remainder = remainder << 1
    if twice_remainder > divisor or (twice_remainder == divisor and fixed_point_value & 1):
        fixed_point_value += 1

    result = to_float32(fixed_point_value / (1 << fixed_point_bits))

    # Absorb residual drift from the float conversion
    if result < 0.0:
        return 0.0
    if result > 1.0:
        return 1.0
    return result


def to_ratio_of(current: AdaptiveNumber | int, maximum: AdaptiveNumber | int) -> float:
    """Alias for normalize(current, maximum)."""
    return normalize(current, maximum)
