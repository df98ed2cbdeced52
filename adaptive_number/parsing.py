"""Decimal text form of AdaptiveNumber.

The text form is an optionally signed string of ASCII decimal digits with no
grouping separators. Leading and trailing ASCII whitespace is tolerated on
input. Unlike int(), underscores and non-ASCII digits are rejected, and
there is no length cap.
"""

from __future__ import annotations

import re

import structlog

from adaptive_number.digits import decimal_to_int
from adaptive_number.errors import NumberFormatError
from adaptive_number.number import ZERO, AdaptiveNumber

__all__ = ["parse", "try_parse", "format_number"]

logger = structlog.get_logger()

_INTEGER_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)[\t\n\v\f\r ]*")


def parse(text: str) -> AdaptiveNumber:
    """Parse a decimal integer string.

    Args:
        text: e.g. "42", "-9223372036854775809", " +7 "

    Returns:
        The value in canonical form

    Raises:
        NumberFormatError: If text is not an optionally signed decimal integer
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"parse requires str, got {type(text).__name__}")
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        raise NumberFormatError(f"Not a decimal integer: {text[:40]!r}")
    return AdaptiveNumber(decimal_to_int(match.group(1)))


def try_parse(text: str) -> tuple[bool, AdaptiveNumber]:
    """Parse a decimal integer string without raising.

    Returns:
        (True, value) on success, (False, ZERO) otherwise
    """
    try:
        return True, parse(text)
    except (NumberFormatError, TypeError):
        logger.debug("adaptive_number_parse_rejected", text=repr(text)[:40])
        return False, ZERO


def format_number(number: AdaptiveNumber) -> str:
    """Render the decimal text form: digits only, leading '-' if negative."""
    return str(number)
