"""Byte size value type with binary unit conversion and display."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from slowrm.errors import SizeOverflowError
from slowrm.utils.logging import get_logger
from slowrm.utils.validators import (
    split_size_text,
    validate_non_negative_int,
    validate_real_number,
)

logger = get_logger(__name__)

U64_MAX = (1 << 64) - 1


class Unit(Enum):
    """Supported size units, valued by their power-of-two exponent.

    The names look decimal but every multiplier is binary (1024**n).
    """

    BYTE = 0
    KILOBYTE = 10
    MEGABYTE = 20
    GIGABYTE = 30
    TERABYTE = 40

    @property
    def exponent(self) -> int:
        return self.value

    @property
    def multiplier(self) -> int:
        return 1 << self.value

    @property
    def abbreviation(self) -> str:
        return _ABBREVIATIONS[self]

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "Unit":
        """Look up a unit by its abbreviation (B, KB, MB, GB, TB).

        Raises:
            ValueError: If the abbreviation is unknown.
        """
        wanted = abbreviation.strip().upper()
        for unit, abbr in _ABBREVIATIONS.items():
            if abbr == wanted:
                return unit
        raise ValueError(f"Unknown size unit '{abbreviation}'")


_ABBREVIATIONS = {
    Unit.BYTE: "B",
    Unit.KILOBYTE: "KB",
    Unit.MEGABYTE: "MB",
    Unit.GIGABYTE: "GB",
    Unit.TERABYTE: "TB",
}

# Largest first, used to pick the display unit
_DISPLAY_ORDER = sorted(Unit, key=lambda unit: unit.exponent, reverse=True)

NEGATIVE_VALUE = "negative_value"
NOT_A_NUMBER = "not_a_number"
VALUE_TOO_HIGH = "value_too_high"

_CORRECTION_EVENTS = {
    NEGATIVE_VALUE: "size_negative_value_clamped",
    NOT_A_NUMBER: "size_nan_value_clamped",
    VALUE_TOO_HIGH: "size_value_too_high_clamped",
}


def format_quantity(value: float) -> str:
    """Format with three decimals, dropping trailing zeros and a bare point."""
    return f"{value:.3f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class SizeCorrection:
    """Record of a unit-based input that had to be clamped."""

    unit: Unit
    value: float
    clamped_to: int
    reason: str

    @property
    def event(self) -> str:
        return _CORRECTION_EVENTS[self.reason]


def clamp_to_bytes(unit: Unit, value: float) -> tuple[int, Optional[SizeCorrection]]:
    """Convert a quantity in ``unit`` to a byte count in [0, U64_MAX].

    Args:
        unit: Unit the value is expressed in.
        value: Quantity, possibly fractional, negative or out of range.

    Returns:
        The byte count, truncated toward zero, and a SizeCorrection when
        the input had to be clamped (None otherwise).
    """
    value = validate_real_number(value, "value")

    if isinstance(value, float) and math.isnan(value):
        return 0, SizeCorrection(unit, value, 0, NOT_A_NUMBER)

    if value < 0:
        return 0, SizeCorrection(unit, value, 0, NEGATIVE_VALUE)

    value_in_bytes = value * unit.multiplier
    if value_in_bytes > U64_MAX:
        return U64_MAX, SizeCorrection(unit, value, U64_MAX, VALUE_TOO_HIGH)

    return int(value_in_bytes), None


@dataclass(frozen=True, order=True)
class Size:
    """Size in bytes.

    Immutable and ordered by byte count. Build it from raw bytes or from a
    quantity in one of the ``Unit`` members instead of dealing with raw
    multipliers.
    """

    byte_count: int = 0

    def __post_init__(self) -> None:
        validate_non_negative_int(self.byte_count, "byte_count")
        if self.byte_count > U64_MAX:
            raise ValueError(
                f"byte_count cannot exceed {U64_MAX}, got {self.byte_count}"
            )

    @classmethod
    def from_bytes(cls, byte_count: int) -> "Size":
        """Build Size from an exact byte count."""
        return cls(byte_count)

    @classmethod
    def from_unit(cls, unit: Unit, value: float) -> "Size":
        """Build Size from a quantity expressed in ``unit``.

        Never fails for real numbers: negative (or NaN) values become 0 and
        values above the 64-bit range become U64_MAX. Each correction is
        logged as a warning. Strings and bools raise ValueError.
        """
        byte_count, correction = clamp_to_bytes(unit, value)
        if correction is not None:
            logger.warning(
                correction.event,
                unit=unit.name.lower(),
                value=value,
                clamped_to=correction.clamped_to,
            )
        return cls(byte_count)

    @classmethod
    def parse(cls, text: str) -> "Size":
        """Build Size from text such as '5GB', '1.5 mb' or '4096'.

        Raises:
            ValueError: If text is not a number followed by a known unit.
        """
        value, abbreviation = split_size_text(text)
        return cls.from_unit(Unit.from_abbreviation(abbreviation), value)

    def as_bytes(self) -> int:
        return self.byte_count

    def as_unit(self, unit: Unit) -> float:
        """Convert size to ``unit``."""
        return self.byte_count / unit.multiplier

    def checked_add(self, other: "Size") -> "Size":
        """Add two sizes.

        Raises:
            SizeOverflowError: If the sum does not fit in 64 bits.
        """
        total = self.byte_count + other.byte_count
        if total > U64_MAX:
            raise SizeOverflowError(
                f"Adding {self.byte_count} and {other.byte_count} bytes "
                f"exceeds {U64_MAX} bytes"
            )
        return Size(total)

    def saturating_add(self, other: "Size") -> "Size":
        """Add two sizes, clamping the sum to U64_MAX."""
        total = self.byte_count + other.byte_count
        if total > U64_MAX:
            logger.warning(
                "size_addition_saturated",
                left=self.byte_count,
                right=other.byte_count,
                clamped_to=U64_MAX,
            )
            return Size(U64_MAX)
        return Size(total)

    def __add__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return self.checked_add(other)

    def __radd__(self, other: object) -> "Size":
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __str__(self) -> str:
        unit = next(
            (u for u in _DISPLAY_ORDER if self.byte_count >= u.multiplier),
            Unit.BYTE,
        )
        return f"{format_quantity(self.as_unit(unit))}{unit.abbreviation}"
