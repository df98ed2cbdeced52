"""Decimal text conversion for integers of any length.

int(str) and str(int) refuse inputs above the interpreter's digit cap
(sys.set_int_max_str_digits, 4300 by default). These helpers split the work
into blocks below the cap: formatting halves the value with divmod by a power
of ten, parsing combines digit blocks, so the cap never applies.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = ["int_to_decimal", "decimal_to_int"]

# Digits handed to int()/str() at once; well under the default cap
CHUNK_DIGITS = 1000

_SMALL_LIMIT = 10**CHUNK_DIGITS

# log10(2) scaled by 10^5, for digit-count estimates
_LOG10_2_SCALED = 30103


@lru_cache(maxsize=256)
def _pow10(exponent: int) -> int:
    return 10**exponent


def int_to_decimal(value: int) -> str:
    """Render value as decimal digits with a leading '-' if negative.

    Examples:
        int_to_decimal(-42) == "-42"
        len(int_to_decimal(10**5000)) == 5001
    """
    if value < 0:
        return "-" + _format_non_negative(-value, 0)
    return _format_non_negative(value, 0)


def _format_non_negative(value: int, width: int) -> str:
    """Format value, left-padded with zeros to at least width digits."""
    if value < _SMALL_LIMIT:
        return str(value).zfill(width)

    # Split near the middle digit
    split = max((value.bit_length() * _LOG10_2_SCALED // 100_000) // 2, 1)
    high, low = divmod(value, _pow10(split))
    return _format_non_negative(high, max(width - split, 0)) + _format_non_negative(low, split)


def decimal_to_int(digits: str) -> int:
    """Convert an optionally signed string of ASCII decimal digits to int.

    Callers validate the text first; this only does the conversion.
    """
    if digits[:1] in ("-", "+"):
        magnitude = _parse_digits(digits[1:])
        return -magnitude if digits[0] == "-" else magnitude
    return _parse_digits(digits)


def _parse_digits(digits: str) -> int:
    if len(digits) <= CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    high = _parse_digits(digits[:-split])
    low = _parse_digits(digits[-split:])
    return high * _pow10(split) + low
