"""Address lookup models.

Internal values passed between the lookup stages (``GeoPoint``,
``GeocodeMatch``, ``DistrictInfo``) and the result envelope returned to
every caller (``LookupSuccess`` / ``LookupFailure``).
"""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ADDRESS_MIN_LENGTH = 3
ADDRESS_MAX_LENGTH = 200


class ErrorKind(str, Enum):
    """Machine-readable failure codes of an address lookup."""

    MISSING_ADDRESS = "MISSING_ADDRESS"
    INVALID_ADDRESS_FORMAT = "INVALID_ADDRESS_FORMAT"
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"
    GEOCODING_API_ERROR = "GEOCODING_API_ERROR"
    BOUNDARIES_API_ERROR = "BOUNDARIES_API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GeoPoint(BaseModel):
    """A WGS84 coordinate pair."""

    latitude: float = Field(
        ..., ge=-90, le=90, description="Latitude in decimal degrees"
    )
    longitude: float = Field(
        ..., ge=-180, le=180, description="Longitude in decimal degrees"
    )

    model_config = ConfigDict(frozen=True)


class GeocodeMatch(BaseModel):
    """First feature matched by the geocoder."""

    point: GeoPoint
    matched_address: str = Field(..., description="Canonical address upstream")
    property_id: int | None = Field(
        default=None, description="Upstream property identifier, informational"
    )

    model_config = ConfigDict(frozen=True)


class DistrictInfo(BaseModel):
    """Administrative district containing a point."""

    district_name: str

    model_config = ConfigDict(frozen=True)


class LookupData(BaseModel):
    """Payload of a successful lookup."""

    address: str
    location: GeoPoint
    suburb: str
    state_electoral_district: str = Field(..., alias="stateElectoralDistrict")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LookupErrorDetail(BaseModel):
    """Payload of a failed lookup."""

    message: str
    code: ErrorKind

    model_config = ConfigDict(frozen=True)


class LookupSuccess(BaseModel):
    """Successful resolution."""

    success: Literal[True] = True
    data: LookupData

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class LookupFailure(BaseModel):
    """Failed resolution."""

    success: Literal[False] = False
    error: LookupErrorDetail

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls, message: str, code: ErrorKind) -> "LookupFailure":
        """Shortcut for building a failure from a message and a code."""
        return cls(error=LookupErrorDetail(message=message, code=code))

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


LookupResult = Union[LookupSuccess, LookupFailure]
