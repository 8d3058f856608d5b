"""Input normalisation for address lookups.

Everything here is pure: no I/O, no logging side effects that matter.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from app.core.address.exceptions import AddressValidationError
from app.models.address import ADDRESS_MAX_LENGTH, ADDRESS_MIN_LENGTH, ErrorKind


def extract_address(raw: Any) -> str | None:
    """Pull a usable address string out of a query parameter value.

    Args:
        raw: ``None``, a string, or an iterable of strings from a repeated
            query parameter

    Returns:
        The trimmed address, or None if nothing usable was supplied
    """
    if isinstance(raw, str):
        trimmed = raw.strip()
        return trimmed or None

    # Repeated parameter: first non-blank string wins
    if isinstance(raw, Iterable) and not isinstance(
        raw, (bytes, bytearray, Mapping)
    ):
        for item in raw:
            if isinstance(item, str) and item.strip():
                return item.strip()

    return None


def validate_address(address: str | None) -> str:
    """Check an extracted address against the length limits.

    Args:
        address: Output of ``extract_address``

    Returns:
        The address unchanged

    Raises:
        AddressValidationError: If the address is missing, too short or too long
    """
    if not address:
        raise AddressValidationError(
            "Address query parameter is required.", ErrorKind.MISSING_ADDRESS
        )

    if len(address) < ADDRESS_MIN_LENGTH:
        raise AddressValidationError(
            f"Address must be at least {ADDRESS_MIN_LENGTH} characters long."
        )

    if len(address) > ADDRESS_MAX_LENGTH:
        raise AddressValidationError(
            f"Address cannot exceed {ADDRESS_MAX_LENGTH} characters."
        )

    return address


def normalize_address(raw: Any) -> str:
    """Extract, validate and upper-case a raw address.

    Raises:
        AddressValidationError: See ``validate_address``
    """
    return validate_address(extract_address(raw)).upper()
