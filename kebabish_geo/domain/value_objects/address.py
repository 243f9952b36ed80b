"""Address value objects — validation and normalization of free-text addresses."""

from dataclasses import dataclass

MIN_ADDRESS_LENGTH = 5


@dataclass(frozen=True)
class AddressValidation:
    valid: bool
    error: str | None = None


def validate_address(address: str) -> AddressValidation:
    """Check that an address is worth sending to the geocoder.

    The geocoder does not call this itself; callers gate on it first.
    """
    trimmed = address.strip()

    if not trimmed:
        return AddressValidation(valid=False, error="Address is required")

    if len(trimmed) < MIN_ADDRESS_LENGTH:
        return AddressValidation(
            valid=False,
            error=f"Address too short (minimum {MIN_ADDRESS_LENGTH} characters)",
        )

    return AddressValidation(valid=True)


def normalize_address(address: str) -> str:
    """Cache / rate-limit key: trimmed and lower-cased."""
    return address.strip().lower()
