"""AdaptiveNumber error classes.

Overflow is deliberately absent: it triggers promotion to the wide
representation and is never raised.
"""


class AdaptiveNumberError(ArithmeticError):
    """Base class for AdaptiveNumber errors."""

    pass


class DivisionByZero(AdaptiveNumberError, ZeroDivisionError):
    """Division, percentage, scaling or normalization by zero."""

    pass


class UnsupportedRounding(AdaptiveNumberError, TypeError):
    """Rounding policy is not a member of Rounding."""

    pass


class NumberFormatError(AdaptiveNumberError, ValueError):
    """Text is not an optionally signed decimal integer."""

    pass
