"""Tests for address input normalisation."""

import pytest

from app.core.address import (
    AddressValidationError,
    extract_address,
    normalize_address,
    validate_address,
)
from app.models.address import ErrorKind


class TestExtractAddress:
    """Pulling an address out of raw query values."""

    def test_trims_plain_string(self):
        assert extract_address("  346 panorama avenue  ") == "346 panorama avenue"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n", 42, {"a": "b"}, b"abc"])
    def test_returns_none_for_unusable_values(self, raw):
        assert extract_address(raw) is None

    def test_takes_first_non_blank_string_from_list(self):
        assert extract_address(["", "  ", 7, " 1 MACQUARIE ST ", "later"]) == (
            "1 MACQUARIE ST"
        )

    def test_list_without_strings_is_absent(self):
        assert extract_address([None, 3, "   "]) is None
        assert extract_address([]) is None

    @pytest.mark.parametrize(
        "raw",
        [
            ("", " 1 MACQUARIE ST "),
            {" 1 MACQUARIE ST "},
            (s for s in ["  ", " 1 MACQUARIE ST "]),
            {"k": " 1 MACQUARIE ST "}.values(),
        ],
    )
    def test_accepts_any_iterable_of_strings(self, raw):
        assert extract_address(raw) == "1 MACQUARIE ST"


class TestValidateAddress:
    """Length and presence rules."""

    @pytest.mark.parametrize("address", [None, ""])
    def test_missing(self, address):
        with pytest.raises(AddressValidationError) as exc_info:
            validate_address(address)

        assert exc_info.value.kind == ErrorKind.MISSING_ADDRESS
        assert exc_info.value.message == "Address query parameter is required."

    @pytest.mark.parametrize("address", ["a", "ab"])
    def test_too_short(self, address):
        with pytest.raises(AddressValidationError) as exc_info:
            validate_address(address)

        assert exc_info.value.kind == ErrorKind.INVALID_ADDRESS_FORMAT
        assert "at least 3" in exc_info.value.message

    def test_too_long(self):
        with pytest.raises(AddressValidationError) as exc_info:
            validate_address("x" * 201)

        assert exc_info.value.kind == ErrorKind.INVALID_ADDRESS_FORMAT
        assert "cannot exceed 200" in exc_info.value.message

    @pytest.mark.parametrize("length", [3, 200])
    def test_boundaries_are_inclusive(self, length):
        address = "y" * length
        assert validate_address(address) == address


class TestNormalizeAddress:
    """Full normalisation."""

    def test_upper_cases_and_trims(self):
        assert normalize_address("  346 panorama avenue bathurst ") == (
            "346 PANORAMA AVENUE BATHURST"
        )

    def test_length_is_checked_after_trimming(self):
        with pytest.raises(AddressValidationError) as exc_info:
            normalize_address("   ab   ")
        assert exc_info.value.kind == ErrorKind.INVALID_ADDRESS_FORMAT

    def test_whitespace_only_is_missing(self):
        with pytest.raises(AddressValidationError) as exc_info:
            normalize_address("     ")
        assert exc_info.value.kind == ErrorKind.MISSING_ADDRESS

    def test_uses_first_usable_list_entry(self):
        assert normalize_address(["", "george st sydney"]) == "GEORGE ST SYDNEY"
