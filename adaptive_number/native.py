"""Signed 64-bit integer helpers for the narrow fast path.

Python integers never overflow, so this module emulates the two's complement
wraparound of a native 64-bit word. The overflow checks are the algebraic
sign tests used on real hardware and report failure through a boolean flag
rather than an exception, keeping the common small-value path cheap.
"""

from __future__ import annotations

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_UINT64_MASK = 2**64 - 1
_SIGN_OFFSET = 2**63


def fits_int64(value: int) -> bool:
    """Check if value fits in a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def wrap_int64(value: int) -> int:
    """Reduce value modulo 2^64 into the signed 64-bit range.

    Examples:
        wrap_int64(INT64_MAX + 1) == INT64_MIN
        wrap_int64(-1) == -1
    """
    return ((value + _SIGN_OFFSET) & _UINT64_MASK) - _SIGN_OFFSET


def checked_add(x: int, y: int) -> tuple[bool, int]:
    """Add two 64-bit values.

    Returns:
        (True, sum) on success, (False, 0) on overflow
    """
    total = wrap_int64(x + y)
    # Overflow iff x and y share a sign and the sum has the other one
    if ((x ^ total) & (y ^ total)) < 0:
        return False, 0
    return True, total


def checked_sub(x: int, y: int) -> tuple[bool, int]:
    """Subtract y from x as 64-bit values.

    Returns:
        (True, difference) on success, (False, 0) on overflow
    """
    diff = wrap_int64(x - y)
    # Overflow iff x and y differ in sign and the difference has the sign of y
    if ((x ^ y) & (x ^ diff)) < 0:
        return False, 0
    return True, diff


def checked_mul(x: int, y: int) -> tuple[bool, int]:
    """Multiply two 64-bit values.

    Returns:
        (True, product) on success, (False, 0) on overflow
    """
    if x == 0 or y == 0:
        return True, 0

    # The division check below cannot see -1 * INT64_MIN
    if (x == -1 and y == INT64_MIN) or (y == -1 and x == INT64_MIN):
        return False, 0

    product = wrap_int64(x * y)
    if div_trunc(product, x) != y:
        return False, 0
    return True, product


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // floors toward -inf; native integer division truncates.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def divrem_trunc(a: int, b: int) -> tuple[int, int]:
    """Truncating quotient and the remainder that carries the dividend's sign."""
    quotient = div_trunc(a, b)
    return quotient, a - quotient * b
