"""Multi-value helpers built on AdaptiveNumber comparison and division."""

from __future__ import annotations

from collections.abc import Iterable

from adaptive_number.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from adaptive_number.number import AdaptiveNumber, _as_number, divide
from adaptive_number.rounding import Rounding

__all__ = ["minimum", "maximum", "clamp", "scale", "scale_by_percent"]


NumberLike = AdaptiveNumber | int


def _collect(items: tuple[NumberLike | Iterable[NumberLike], ...]) -> list[AdaptiveNumber]:
    """Accept either varargs or a single iterable."""
    if len(items) == 1 and not isinstance(items[0], (AdaptiveNumber, int)):
        items = tuple(items[0])
    if not items:
        raise ValueError("Cannot aggregate an empty sequence")
    return [_as_number(item) for item in items]


def minimum(*items: AdaptiveNumber | int | Iterable[AdaptiveNumber | int]) -> AdaptiveNumber:
    """Smallest value; the first one wins among equals.

    Accepts minimum(a, b, ...) or minimum(iterable).

    Raises:
        ValueError: If there are no values
    """
    values = _collect(items)
    best = values[0]
    for value in values[1:]:
        if value < best:
            best = value
    return best


def maximum(*items: AdaptiveNumber | int | Iterable[AdaptiveNumber | int]) -> AdaptiveNumber:
    """Largest value; the first one wins among equals.

    Accepts maximum(a, b, ...) or maximum(iterable).

    Raises:
        ValueError: If there are no values
    """
    values = _collect(items)
    best = values[0]
    for value in values[1:]:
        if value > best:
            best = value
    return best


def clamp(
    number: AdaptiveNumber | int,
    lower: AdaptiveNumber | int,
    upper: AdaptiveNumber | int,
) -> AdaptiveNumber:
    """Clamp number to the inclusive range [lower, upper]."""
    return maximum(lower, minimum(number, upper))


def scale(
    number: AdaptiveNumber | int,
    dividend: AdaptiveNumber | int,
    divisor: AdaptiveNumber | int,
    rounding: Rounding,
) -> AdaptiveNumber:
    """Scale number by the ratio dividend / divisor with rounding.

    Raises:
        DivisionByZero: If divisor is zero
    """
    return divide(_as_number(number) * dividend, divisor, rounding)


def scale_by_percent(
    number: AdaptiveNumber | int,
    percent: AdaptiveNumber | int,
    rounding: Rounding,
    config: NumberConfig | None = None,
) -> AdaptiveNumber:
    """Scale number by percent / percent_scale (100 by default) with rounding."""
    percent_scale = (config or DEFAULT_NUMBER_CONFIG).percent_scale
    return scale(number, percent, percent_scale, rounding)
