"""Exceptions raised by the address lookup stages."""

from app.models.address import ErrorKind


class AddressLookupError(Exception):
    """Base class for lookup failures that map onto an ``ErrorKind``."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class AddressValidationError(AddressLookupError):
    """Raised when the raw address is absent, too short or too long."""

    kind = ErrorKind.INVALID_ADDRESS_FORMAT


class UpstreamAPIError(AddressLookupError):
    """Upstream answered, but not with something usable."""


class GeocodingAPIError(UpstreamAPIError):
    """Raised when the geocoding service returns an unusable response."""

    kind = ErrorKind.GEOCODING_API_ERROR


class BoundariesAPIError(UpstreamAPIError):
    """Raised when the boundaries service returns an unusable response."""

    kind = ErrorKind.BOUNDARIES_API_ERROR


class UpstreamNetworkError(AddressLookupError):
    """Raised when an upstream service could not be reached in time."""

    kind = ErrorKind.NETWORK_ERROR

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.stage = stage
