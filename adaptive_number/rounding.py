"""Rounding policies and rounded integer division kernels.

Two kernels implement the same algorithm:
- divide_rounded_native: operands and quotient are signed 64-bit values, and
  the tie test compares the remainder against half the divisor instead of
  doubling the remainder, so no intermediate leaves the 64-bit range.
- divide_rounded_wide: exact arbitrary-precision arithmetic.

Both return identical quotients for every input the native kernel accepts.
"""

from __future__ import annotations

from enum import Enum

from adaptive_number.errors import DivisionByZero, UnsupportedRounding
from adaptive_number.native import INT64_MIN, divrem_trunc

__all__ = [
    "Rounding",
    "divide_rounded_native",
    "divide_rounded_wide",
    "native_division_fits",
]


class Rounding(Enum):
    """Rounding policies for integer division and percentage math."""

    # Toward zero, native integer division behavior
    TRUNCATE = "truncate"
    # Nearest; exact halves move away from zero
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    # Nearest; exact halves go to the even quotient (banker's rounding)
    HALF_TO_EVEN = "half_to_even"


def _check_rounding(rounding: Rounding) -> None:
    if not isinstance(rounding, Rounding):
        raise UnsupportedRounding(f"Rounding mode {rounding!r} not supported")


def native_division_fits(dividend: int, divisor: int) -> bool:
    """Check if the native kernel can divide these 64-bit operands.

    INT64_MIN / -1 overflows the quotient and |INT64_MIN| overflows the
    absolute divisor; both go to the wide kernel instead.
    """
    if divisor == INT64_MIN:
        return False
    return not (dividend == INT64_MIN and divisor == -1)


def divide_rounded_native(dividend: int, divisor: int, rounding: Rounding) -> int:
    """Rounded division of two signed 64-bit values.

    Callers must check native_division_fits() first.

    Raises:
        DivisionByZero: If divisor is zero
        UnsupportedRounding: If rounding is not a Rounding member
    """
    if divisor == 0:
        raise DivisionByZero(f"Division by zero: {dividend} / 0")
    _check_rounding(rounding)

    quotient, remainder = divrem_trunc(dividend, divisor)
    if rounding is Rounding.TRUNCATE or remainder == 0:
        return quotient

    abs_remainder = -remainder if remainder < 0 else remainder
    abs_divisor = -divisor if divisor < 0 else divisor
    step = 1 if (dividend >= 0) == (divisor >= 0) else -1

    if rounding is Rounding.HALF_AWAY_FROM_ZERO:
        # 2*|r| >= |d|  <=>  |r| >= ceil(|d| / 2)
        half_ceil = abs_divisor // 2 + (abs_divisor & 1)
        if abs_remainder >= half_ceil:
            quotient += step
    else:
        half_down = abs_divisor // 2
        if abs_remainder > half_down:
            quotient += step
        elif abs_remainder == half_down and abs_divisor & 1 == 0 and quotient & 1:
            # Exact half: go to even
            quotient += step

    return quotient


def divide_rounded_wide(dividend: int, divisor: int, rounding: Rounding) -> int:
    """Rounded division of two arbitrary-precision integers.

    Raises:
        DivisionByZero: If divisor is zero
        UnsupportedRounding: If rounding is not a Rounding member
    """
    if divisor == 0:
        raise DivisionByZero(f"Division by zero: {dividend} / 0")
    _check_rounding(rounding)

    quotient, remainder = divrem_trunc(dividend, divisor)
    if rounding is Rounding.TRUNCATE or remainder == 0:
        return quotient

    twice_remainder = abs(remainder) * 2
    abs_divisor = abs(divisor)
    step = 1 if (dividend >= 0) == (divisor >= 0) else -1

    if twice_remainder > abs_divisor:
        quotient += step
    elif twice_remainder == abs_divisor:
        if rounding is Rounding.HALF_AWAY_FROM_ZERO or quotient & 1:
            quotient += step

    return quotient
