"""Adaptive-width integers: 64-bit fast path, arbitrary precision on overflow."""

from adaptive_number.aggregate import clamp, maximum, minimum, scale, scale_by_percent
from adaptive_number.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from adaptive_number.errors import (
    AdaptiveNumberError,
    DivisionByZero,
    NumberFormatError,
    UnsupportedRounding,
)
from adaptive_number.number import ONE, ZERO, AdaptiveNumber, divide, percentage_of
from adaptive_number.parsing import format_number, parse, try_parse
from adaptive_number.ratio import normalize, to_ratio_of
from adaptive_number.rounding import Rounding

__version__ = "0.1.0"
__all__ = [
    "AdaptiveNumber",
    "ZERO",
    "ONE",
    "Rounding",
    "divide",
    "percentage_of",
    "normalize",
    "to_ratio_of",
    "parse",
    "try_parse",
    "format_number",
    "minimum",
    "maximum",
    "clamp",
    "scale",
    "scale_by_percent",
    "NumberConfig",
    "DEFAULT_NUMBER_CONFIG",
    "AdaptiveNumberError",
    "DivisionByZero",
    "NumberFormatError",
    "UnsupportedRounding",
    "__version__",
]
