"""Unit tests for validation utilities."""

import pytest

from slowrm.utils.validators import (
    split_size_text,
    validate_non_negative_int,
    validate_positive_int,
    validate_real_number,
)


def test_validate_non_negative_int_valid() -> None:
    """Test validating non-negative integers."""
    assert validate_non_negative_int(0, "rate") == 0
    assert validate_non_negative_int(2**70, "rate") == 2**70


def test_validate_non_negative_int_negative() -> None:
    """Test validating a negative integer."""
    with pytest.raises(ValueError, match="rate cannot be negative"):
        validate_non_negative_int(-5, "rate")


@pytest.mark.parametrize("value", [1.0, "1", None, False])
def test_validate_non_negative_int_wrong_type(value: object) -> None:
    """Test validating values that are not integers."""
    with pytest.raises(ValueError, match="must be an integer"):
        validate_non_negative_int(value, "rate")


def test_validate_positive_int_valid() -> None:
    """Test validating positive integers."""
    assert validate_positive_int(1, "rounds") == 1


def test_validate_positive_int_zero() -> None:
    """Test validating zero."""
    with pytest.raises(ValueError, match="rounds must be greater than zero"):
        validate_positive_int(0, "rounds")


def test_split_size_text_basic() -> None:
    """Test splitting size text."""
    assert split_size_text("5GB") == (5.0, "GB")
    assert split_size_text("1.5kb") == (1.5, "KB")
    assert split_size_text("42") == (42.0, "B")


def test_split_size_text_single_letter_units() -> None:
    """Test that single letter units are normalized."""
    assert split_size_text("2K") == (2.0, "KB")
    assert split_size_text("3 t") == (3.0, "TB")
    assert split_size_text("7b") == (7.0, "B")


def test_split_size_text_exponent() -> None:
    """Test numbers in scientific notation."""
    assert split_size_text("1e3MB") == (1000.0, "MB")


@pytest.mark.parametrize("text", ["", "  ", "MB", "ten", "5PB", "5 M B"])
def test_split_size_text_invalid(text: str) -> None:
    """Test splitting malformed size text."""
    with pytest.raises(ValueError, match="Invalid size format"):
        split_size_text(text)


def test_validate_real_number_valid() -> None:
    """Test validating ints and floats."""
    assert validate_real_number(3, "value") == 3
    assert validate_real_number(-1.5, "value") == -1.5


@pytest.mark.parametrize("value", ["1.5", b"1", False, None])
def test_validate_real_number_invalid(value: object) -> None:
    """Test validating values that are not real numbers."""
    with pytest.raises(ValueError, match="value must be a real number"):
        validate_real_number(value, "value")
