"""Address lookup models package."""

from .address import (
    ADDRESS_MAX_LENGTH,
    ADDRESS_MIN_LENGTH,
    DistrictInfo,
    ErrorKind,
    GeocodeMatch,
    GeoPoint,
    LookupData,
    LookupErrorDetail,
    LookupFailure,
    LookupResult,
    LookupSuccess,
)

__all__ = [
    "ADDRESS_MAX_LENGTH",
    "ADDRESS_MIN_LENGTH",
    "DistrictInfo",
    "ErrorKind",
    "GeocodeMatch",
    "GeoPoint",
    "LookupData",
    "LookupErrorDetail",
    "LookupFailure",
    "LookupResult",
    "LookupSuccess",
]
