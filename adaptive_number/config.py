"""Configuration for AdaptiveNumber helpers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NumberConfig:
    """Centralized constants for percentage and ratio calculations.

    Attributes:
        percent_scale: Denominator used by percentage_of (default: 100)
        float_mantissa_bits: Mantissa bits of the target float, including the
            implicit leading bit (default: 24, single precision)
        guard_bits: Extra fixed-point bits computed before the final float
            rounding (default: 3)
    """

    percent_scale: int = 100
    float_mantissa_bits: int = 24
    guard_bits: int = 3

    @property
    def fixed_point_bits(self) -> int:
        """Total fixed-point precision used by normalize()."""
        return self.float_mantissa_bits + self.guard_bits


# Default configuration instance
DEFAULT_NUMBER_CONFIG = NumberConfig()
