"""Input validation utilities."""

import re
from numbers import Real
from typing import Pattern

SIZE_TEXT_PATTERN: Pattern[str] = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([KMGT]?B?)\s*$",
    re.IGNORECASE,
)


def validate_non_negative_int(value: object, name: str) -> int:
    """Validate that a value is an integer greater than or equal to zero.

    Args:
        value: Value to check.
        name: Field name used in the error message.

    Returns:
        The validated integer.

    Raises:
        ValueError: If value is not an int or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")

    return value


def validate_positive_int(value: object, name: str) -> int:
    """Validate that a value is an integer strictly greater than zero.

    Raises:
        ValueError: If value is not an int or is lower than 1.
    """
    value = validate_non_negative_int(value, name)
    if value == 0:
        raise ValueError(f"{name} must be greater than zero")

    return value


def split_size_text(text: str) -> tuple[float, str]:
    """Split size text such as '5GB' or '1.5 m' into number and unit.

    Args:
        text: Size text. A bare number means bytes.

    Returns:
        Tuple of the numeric part and the upper-cased unit abbreviation,
        normalized to end with 'B'.

    Raises:
        ValueError: If text does not look like a size.
    """
    match = SIZE_TEXT_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid size format: '{text}'")

    unit = match.group(2).upper() or "B"
    if not unit.endswith("B"):
        unit += "B"

    return float(match.group(1)), unit


def validate_real_number(value: object, name: str) -> Real:
    """Validate that a value is a real number (int or float, not bool).

    Raises:
        ValueError: If value is a string, a bool or any non-real object.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    return value
