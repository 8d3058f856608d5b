"""Address lookup package.

Resolves a street address to coordinates and an administrative district:
- Input normalisation and validation
- Geocoding against the NSW addressing feature service
- Point-in-polygon lookup against the NSW boundaries feature service
- A resolver tying the stages together behind a single result type
"""

from app.core.address.boundary_client import BoundaryClient
from app.core.address.exceptions import (
    AddressLookupError,
    AddressValidationError,
    BoundariesAPIError,
    GeocodingAPIError,
    UpstreamAPIError,
    UpstreamNetworkError,
)
from app.core.address.geocoding_client import GeocodingClient
from app.core.address.normalizer import (
    extract_address,
    normalize_address,
    validate_address,
)
from app.core.address.resolver import AddressResolver, get_address_resolver

__all__ = [
    "AddressLookupError",
    "AddressResolver",
    "AddressValidationError",
    "BoundariesAPIError",
    "BoundaryClient",
    "GeocodingAPIError",
    "GeocodingClient",
    "UpstreamAPIError",
    "UpstreamNetworkError",
    "extract_address",
    "get_address_resolver",
    "normalize_address",
    "validate_address",
]
