"""Tests for the 64-bit overflow-checked helpers."""

import pytest

from adaptive_number.native import (
    INT64_MAX,
    INT64_MIN,
    checked_add,
    checked_mul,
    checked_sub,
    div_trunc,
    divrem_trunc,
    fits_int64,
    wrap_int64,
)


class TestWrapInt64:
    """Tests for two's complement wraparound."""

    def test_in_range_unchanged(self):
        """Values inside the range are returned as-is."""
        assert wrap_int64(0) == 0
        assert wrap_int64(-1) == -1
        assert wrap_int64(INT64_MAX) == INT64_MAX
        assert wrap_int64(INT64_MIN) == INT64_MIN

    def test_wraps_past_max(self):
        """MAX + 1 wraps to MIN."""
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN

    def test_wraps_past_min(self):
        """MIN - 1 wraps to MAX."""
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX

    def test_fits_int64(self):
        """fits_int64 matches the signed 64-bit range."""
        assert fits_int64(INT64_MAX)
        assert fits_int64(INT64_MIN)
        assert not fits_int64(INT64_MAX + 1)
        assert not fits_int64(INT64_MIN - 1)


class TestCheckedAdd:
    """Tests for overflow-checked addition."""

    def test_simple(self):
        """Small sums succeed."""
        assert checked_add(2, 3) == (True, 5)
        assert checked_add(-2, -3) == (True, -5)

    def test_mixed_signs_never_overflow(self):
        """Operands of different sign cannot overflow."""
        assert checked_add(INT64_MAX, INT64_MIN) == (True, -1)

    def test_positive_overflow(self):
        """MAX + 1 overflows."""
        assert checked_add(INT64_MAX, 1) == (False, 0)

    def test_negative_overflow(self):
        """MIN + -1 overflows."""
        assert checked_add(INT64_MIN, -1) == (False, 0)

    def test_reaches_boundary(self):
        """Sums landing exactly on the boundary succeed."""
        assert checked_add(INT64_MAX - 1, 1) == (True, INT64_MAX)
        assert checked_add(INT64_MIN + 1, -1) == (True, INT64_MIN)


class TestCheckedSub:
    """Tests for overflow-checked subtraction."""

    def test_simple(self):
        """Small differences succeed."""
        assert checked_sub(10, 3) == (True, 7)
        assert checked_sub(3, 10) == (True, -7)

    def test_same_signs_never_overflow(self):
        """Operands of the same sign cannot overflow."""
        assert checked_sub(INT64_MIN, -1) == (True, INT64_MIN + 1)

    def test_underflow(self):
        """MIN - 1 overflows."""
        assert checked_sub(INT64_MIN, 1) == (False, 0)

    def test_overflow(self):
        """MAX - -1 and 0 - MIN overflow."""
        assert checked_sub(INT64_MAX, -1) == (False, 0)
        assert checked_sub(0, INT64_MIN) == (False, 0)

    def test_negate_max(self):
        """0 - MAX is representable."""
        assert checked_sub(0, INT64_MAX) == (True, -INT64_MAX)


class TestCheckedMul:
    """Tests for overflow-checked multiplication."""

    def test_zero(self):
        """Anything times zero is zero."""
        assert checked_mul(0, INT64_MIN) == (True, 0)
        assert checked_mul(INT64_MAX, 0) == (True, 0)

    def test_simple(self):
        """Small products succeed."""
        assert checked_mul(6, 7) == (True, 42)
        assert checked_mul(-6, 7) == (True, -42)

    def test_overflow(self):
        """MAX * 2 overflows."""
        assert checked_mul(INT64_MAX, 2) == (False, 0)

    def test_minus_one_times_min(self):
        """-1 * MIN overflows in both operand orders."""
        assert checked_mul(-1, INT64_MIN) == (False, 0)
        assert checked_mul(INT64_MIN, -1) == (False, 0)

    def test_minus_one_times_max(self):
        """-1 * MAX is representable."""
        assert checked_mul(-1, INT64_MAX) == (True, -INT64_MAX)

    def test_min_exact_product(self):
        """-2^62 * 2 lands exactly on MIN."""
        assert checked_mul(-(2**62), 2) == (True, INT64_MIN)

    def test_large_square_overflows(self):
        """2^32 * 2^32 overflows."""
        assert checked_mul(2**32, 2**32) == (False, 0)


class TestTruncatingDivision:
    """Tests for truncation toward zero."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (0, 5, 0),
        ],
    )
    def test_div_trunc(self, a, b, expected):
        """Quotient truncates toward zero, unlike //."""
        assert div_trunc(a, b) == expected

    def test_remainder_takes_dividend_sign(self):
        """Remainder has the sign of the dividend."""
        assert divrem_trunc(-7, 2) == (-3, -1)
        assert divrem_trunc(7, -2) == (-3, 1)

    def test_by_zero_raises(self):
        """Division by zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            div_trunc(1, 0)
