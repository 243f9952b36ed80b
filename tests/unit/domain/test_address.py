"""Tests for address validation and normalization."""

import pytest

from kebabish_geo.domain.value_objects.address import normalize_address, validate_address


def test_empty_address_is_required():
    result = validate_address("")
    assert result.valid is False
    assert "required" in result.error


def test_whitespace_only_address_is_required():
    result = validate_address("   \t ")
    assert result.valid is False
    assert "required" in result.error


def test_four_characters_is_too_short():
    result = validate_address("abcd")
    assert result.valid is False
    assert "too short" in result.error


def test_five_characters_is_valid():
    result = validate_address("abcde")
    assert result.valid is True
    assert result.error is None


def test_length_is_measured_after_trimming():
    assert validate_address("  abcd  ").valid is False
    assert validate_address("  abcde  ").valid is True


@pytest.mark.parametrize(
    "raw",
    ["123 Main Street, Lahore", "  123 main street, lahore ", "123 MAIN STREET, LAHORE\n"],
)
def test_normalize_address(raw):
    assert normalize_address(raw) == "123 main street, lahore"
