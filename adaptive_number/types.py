"""Pydantic field type for AdaptiveNumber.

Models carry AdaptiveNumber values in their decimal text form, the same
string produced by format_number() and accepted by parse().
"""

from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator, WithJsonSchema

from adaptive_number.errors import NumberFormatError
from adaptive_number.number import AdaptiveNumber
from adaptive_number.parsing import format_number, parse


def validate_adaptive_number(value: Any) -> AdaptiveNumber:
    """Validate a decimal string, int or AdaptiveNumber into an AdaptiveNumber.

    Raises:
        ValueError: If value is not an integer or decimal integer string
    """
    if isinstance(value, AdaptiveNumber):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return AdaptiveNumber(value)

    if not isinstance(value, str):
        raise ValueError(f"AdaptiveNumber must be string or int, got {type(value).__name__}")

    try:
        return parse(value)
    except NumberFormatError as err:
        raise ValueError(f"AdaptiveNumber must be a decimal integer string: '{value}'") from err


# Arbitrary-size signed integer, serialized as a decimal string
AdaptiveNumberField = Annotated[
    AdaptiveNumber,
    PlainValidator(validate_adaptive_number),
    PlainSerializer(format_number, return_type=str),
    WithJsonSchema({"type": "string", "pattern": r"^[+-]?[0-9]+$"}),
    Field(description="Signed integer of any size as decimal string"),
]
