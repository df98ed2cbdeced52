"""Adaptive-width integer for counters, stats and ledger amounts.

AdaptiveNumber stores its value as a signed 64-bit integer while it fits and
widens to arbitrary precision only when an operation would overflow:
- Operations on two narrow values run on the 64-bit fast path with
  algebraic overflow checks (no exceptions)
- On overflow, or when either operand is already wide, the operation is
  repeated exactly and the result is narrowed again if it fits
- Values are immutable and always stored in canonical form

Usage pattern:
    from adaptive_number import AdaptiveNumber, Rounding, divide

    gold = AdaptiveNumber(9_223_372_036_854_775_807)
    gold = gold + 1                   # widens, no wraparound
    share = divide(gold, 3, Rounding.HALF_TO_EVEN)
"""

from __future__ import annotations

from typing import Any, ClassVar

import structlog

from adaptive_number.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from adaptive_number.digits import int_to_decimal
from adaptive_number.errors import DivisionByZero
from adaptive_number.native import (
    checked_add,
    checked_mul,
    checked_sub,
    fits_int64,
)
from adaptive_number.rounding import (
    Rounding,
    divide_rounded_native,
    divide_rounded_wide,
    native_division_fits,
)

logger = structlog.get_logger()


class AdaptiveNumber:
    """Integer with a narrow (64-bit) and a wide (arbitrary-precision) mode.

    Exactly one payload is meaningful at a time: ``_big is None`` selects the
    narrow payload ``_small``, otherwise ``_big`` holds a value outside the
    64-bit range. Equality, ordering and hashing depend only on the integer
    denoted, never on the active payload.

    Plain ``int`` operands are accepted on either side of every operator.
    The ``/`` operator is integer division truncating toward zero; use
    divide() for the other rounding policies.
    """

    __slots__ = ("_small", "_big")

    _small: int
    _big: int | None

    ZERO: ClassVar[AdaptiveNumber]
    ONE: ClassVar[AdaptiveNumber]

    def __new__(cls, value: int | AdaptiveNumber = 0) -> AdaptiveNumber:
        """Create an AdaptiveNumber from an integer or another AdaptiveNumber.

        Integers inside the 64-bit range are stored narrow, all others wide.
        The payload is fixed here; there is no __init__ to re-run on an
        existing instance.

        Raises:
            TypeError: If value is not an int or AdaptiveNumber
        """
        if isinstance(value, AdaptiveNumber):
            small, big = value._small, value._big
        elif _is_int(value):
            if fits_int64(value):
                small, big = value, None
            else:
                small, big = 0, value
        else:
            raise TypeError(f"AdaptiveNumber requires int, got {type(value).__name__}")
        number = object.__new__(cls)
        object.__setattr__(number, "_small", small)
        object.__setattr__(number, "_big", big)
        return number

    @classmethod
    def _narrow(cls, value: int) -> AdaptiveNumber:
        """Wrap a value already known to fit 64 bits."""
        number = object.__new__(cls)
        object.__setattr__(number, "_small", value)
        object.__setattr__(number, "_big", None)
        return number

    @classmethod
    def from_int64(cls, value: int) -> AdaptiveNumber:
        """Create a narrow value from a native 64-bit integer.

        Raises:
            TypeError: If value is not an int
            ValueError: If value is outside the signed 64-bit range
        """
        if not _is_int(value):
            raise TypeError(f"from_int64 requires int, got {type(value).__name__}")
        if not fits_int64(value):
            raise ValueError(f"Value does not fit in int64: {value}")
        return cls._narrow(value)

    @classmethod
    def zero(cls) -> AdaptiveNumber:
        """The additive identity."""
        return ZERO

    @classmethod
    def one(cls) -> AdaptiveNumber:
        """The multiplicative identity."""
        return ONE

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[AdaptiveNumber], tuple[int]]:
        return (type(self), (self._exact,))

    # --- Representation ---

    @property
    def _exact(self) -> int:
        """The denoted integer, whichever payload holds it."""
        return self._small if self._big is None else self._big

    @property
    def is_wide(self) -> bool:
        """True if the value lies outside the 64-bit range."""
        return self._big is not None

    @property
    def is_zero(self) -> bool:
        """True if the value equals zero."""
        return self._small == 0 if self._big is None else self._big == 0

    def try_as_long(self) -> tuple[bool, int]:
        """Materialize the value as a 64-bit integer without raising.

        Returns:
            (True, value) if it fits in 64 bits, otherwise (False, 0)
        """
        if self._big is None:
            return True, self._small
        if fits_int64(self._big):
            return True, self._big
        return False, 0

    def __repr__(self) -> str:
        return f"AdaptiveNumber({int_to_decimal(self._exact)})"

    def __str__(self) -> str:
        return int_to_decimal(self._exact)

    def __hash__(self) -> int:
        return hash(self._exact)

    # --- Arithmetic operations ---

    def __add__(self, other: AdaptiveNumber | int) -> AdaptiveNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, rhs)

    def __radd__(self, other: int) -> AdaptiveNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, self)

    def __sub__(self, other: AdaptiveNumber | int) -> AdaptiveNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _sub(self, rhs)

    def __rsub__(self, other: int) -> AdaptiveNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _sub(lhs, self)

    def __mul__(self, other: AdaptiveNumber | int) -> AdaptiveNumber:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _mul(self, rhs)

    def __rmul__(self, other: int) -> AdaptiveNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _mul(lhs, self)

    def __truediv__(self, other: AdaptiveNumber | int) -> AdaptiveNumber:
        """Integer division truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return divide(self, rhs, Rounding.TRUNCATE)

    def __rtruediv__(self, other: int) -> AdaptiveNumber:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divide(lhs, self, Rounding.TRUNCATE)

    def __neg__(self) -> AdaptiveNumber:
        """Negate as ZERO - self, reusing subtraction's overflow handling."""
        return _sub(ZERO, self)

    def __pos__(self) -> AdaptiveNumber:
        return self

    def __abs__(self) -> AdaptiveNumber:
        return -self if self._exact < 0 else self

    def increment(self) -> AdaptiveNumber:
        """Return self + 1."""
        return _add(self, ONE)

    def decrement(self) -> AdaptiveNumber:
        """Return self - 1."""
        return _sub(self, ONE)

    def divide(self, divisor: AdaptiveNumber | int, rounding: Rounding) -> AdaptiveNumber:
        """Rounded division, see the module-level divide()."""
        return divide(self, divisor, rounding)

    # --- Comparison operations ---

    def compare_to(self, other: AdaptiveNumber | int) -> int:
        """Compare exact values.

        Returns:
            -1, 0 or 1 as self is less than, equal to or greater than other
        """
        a = self._exact
        b = _as_number(other)._exact
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) == 0

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) != 0

    def __lt__(self, other: AdaptiveNumber | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) < 0

    def __le__(self, other: AdaptiveNumber | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) <= 0

    def __gt__(self, other: AdaptiveNumber | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) > 0

    def __ge__(self, other: AdaptiveNumber | int) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) >= 0

    # --- Conversion ---

    def __int__(self) -> int:
        return self._exact

    def __index__(self) -> int:
        return self._exact

    def __float__(self) -> float:
        return float(self._exact)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero


ZERO = AdaptiveNumber._narrow(0)
ONE = AdaptiveNumber._narrow(1)
AdaptiveNumber.ZERO = ZERO
AdaptiveNumber.ONE = ONE


def _is_int(x: object) -> bool:
    """True for int but not bool."""
    return isinstance(x, int) and not isinstance(x, bool)


def _coerce(x: object) -> AdaptiveNumber | None:
    """Convert an operand to AdaptiveNumber, or None if unsupported."""
    if isinstance(x, AdaptiveNumber):
        return x
    if _is_int(x):
        return AdaptiveNumber(x)
    return None


def _as_number(x: AdaptiveNumber | int) -> AdaptiveNumber:
    """Convert an argument to AdaptiveNumber.

    Raises:
        TypeError: If x is not an int or AdaptiveNumber
    """
    number = _coerce(x)
    if number is None:
        raise TypeError(f"AdaptiveNumber requires int, got {type(x).__name__}")
    return number


def _log_promotion(operation: str, lhs: int, rhs: int) -> None:
    logger.debug("adaptive_number_promoted", operation=operation, lhs=lhs, rhs=rhs)


def _add(a: AdaptiveNumber, b: AdaptiveNumber) -> AdaptiveNumber:
    if a._big is None and b._big is None:
        ok, total = checked_add(a._small, b._small)
        if ok:
            return AdaptiveNumber._narrow(total)
        _log_promotion("add", a._small, b._small)
    return AdaptiveNumber(a._exact + b._exact)


def _sub(a: AdaptiveNumber, b: AdaptiveNumber) -> AdaptiveNumber:
    if a._big is None and b._big is None:
        ok, diff = checked_sub(a._small, b._small)
        if ok:
            return AdaptiveNumber._narrow(diff)
        _log_promotion("sub", a._small, b._small)
    return AdaptiveNumber(a._exact - b._exact)


def _mul(a: AdaptiveNumber, b: AdaptiveNumber) -> AdaptiveNumber:
    if a._big is None and b._big is None:
        ok, product = checked_mul(a._small, b._small)
        if ok:
            return AdaptiveNumber._narrow(product)
        _log_promotion("mul", a._small, b._small)
    return AdaptiveNumber(a._exact * b._exact)


def divide(
    dividend: AdaptiveNumber | int,
    divisor: AdaptiveNumber | int,
    rounding: Rounding,
) -> AdaptiveNumber:
    """Integer division with an explicit rounding policy.

    Args:
        dividend: Value to divide
        divisor: Value to divide by
        rounding: TRUNCATE, HALF_AWAY_FROM_ZERO or HALF_TO_EVEN

    Returns:
        The rounded quotient in canonical form

    Raises:
        DivisionByZero: If divisor is zero
        UnsupportedRounding: If rounding is not a Rounding member

    Examples:
        divide(5, 2, Rounding.TRUNCATE) == 2
        divide(5, 2, Rounding.HALF_AWAY_FROM_ZERO) == 3
        divide(5, 2, Rounding.HALF_TO_EVEN) == 2
        divide(-5, 2, Rounding.HALF_AWAY_FROM_ZERO) == -3
    """
    a = _as_number(dividend)
    b = _as_number(divisor)
    if b.is_zero:
        raise DivisionByZero(f"Division by zero: {a} / 0")

    if a._big is None and b._big is None and native_division_fits(a._small, b._small):
        return AdaptiveNumber._narrow(divide_rounded_native(a._small, b._small, rounding))
    return AdaptiveNumber(divide_rounded_wide(a._exact, b._exact, rounding))


def percentage_of(
    value: AdaptiveNumber | int,
    percent: AdaptiveNumber | int,
    rounding: Rounding,
    config: NumberConfig | None = None,
) -> AdaptiveNumber:
    """Compute (value * percent) / 100 with integer math and the given rounding.

    The product is formed on the 64-bit fast path when it fits and exactly
    otherwise, so it never wraps.

    Args:
        value: Base amount
        percent: Percentage to take, e.g. 12 for 12%
        rounding: Rounding policy applied to the final division
        config: Uses DEFAULT_NUMBER_CONFIG if not provided

    Raises:
        DivisionByZero: If the configured percent scale is zero
        UnsupportedRounding: If rounding is not a Rounding member

    Examples:
        percentage_of(150, 12, Rounding.HALF_TO_EVEN) == 18
    """
    scale = (config or DEFAULT_NUMBER_CONFIG).percent_scale
    v = _as_number(value)
    p = _as_number(percent)

    if v._big is None and p._big is None and fits_int64(scale):
        ok, product = checked_mul(v._small, p._small)
        if not ok:
            _log_promotion("percentage_of", v._small, p._small)
        elif scale != 0 and native_division_fits(product, scale):
            return AdaptiveNumber._narrow(divide_rounded_native(product, scale, rounding))

    return AdaptiveNumber(divide_rounded_wide(v._exact * p._exact, scale, rounding))
