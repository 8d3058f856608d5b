"""Address resolution pipeline.

Runs the two upstream lookups in order and turns every failure into a
``LookupFailure``:

    raw query -> normalise -> geocode -> district -> LookupSuccess

The geocoding and boundary stages are separate methods so each can be
exercised on its own. No state is kept between calls, so one resolver can
serve any number of concurrent requests.
"""

from typing import Any

import requests
from prometheus_client import Counter

from app.core.address.boundary_client import BoundaryClient
from app.core.address.exceptions import (
    AddressLookupError,
    BoundariesAPIError,
    UpstreamNetworkError,
)
from app.core.address.geocoding_client import GeocodingClient
from app.core.address.normalizer import normalize_address
from app.core.config import AddressServiceConfig, settings
from app.core.logging import get_logger
from app.models.address import (
    DistrictInfo,
    ErrorKind,
    GeocodeMatch,
    GeoPoint,
    LookupData,
    LookupFailure,
    LookupResult,
    LookupSuccess,
)

logger = get_logger(__name__)

LOOKUP_OUTCOMES = Counter(
    "app_address_lookups_total",
    "Address lookups by outcome code",
    labelnames=["outcome"],
)


class AddressNotFound(AddressLookupError):
    """The geocoder has no feature for the address."""

    kind = ErrorKind.ADDRESS_NOT_FOUND


class DistrictNotFound(BoundariesAPIError):
    """No boundary polygon contains the geocoded point."""


class AddressResolver:
    """Resolve free-text addresses to a location and district."""

    def __init__(
        self,
        geocoding_client: GeocodingClient,
        boundary_client: BoundaryClient,
    ) -> None:
        self.geocoding_client = geocoding_client
        self.boundary_client = boundary_client

    @classmethod
    def from_config(
        cls,
        config: AddressServiceConfig,
        session: requests.Session | None = None,
    ) -> "AddressResolver":
        """Build a resolver with both clients sharing ``config``."""
        return cls(
            GeocodingClient(config, session=session),
            BoundaryClient(config, session=session),
        )

    def geocode_stage(self, address: str) -> GeocodeMatch:
        """Geocode a normalised address.

        Raises:
            AddressNotFound: If the geocoder returned no features
        """
        match = self.geocoding_client.geocode(address)
        if match is None:
            raise AddressNotFound("Address not found")
        return match

    def boundary_stage(self, point: GeoPoint) -> DistrictInfo:
        """Find the district for a geocoded point.

        Raises:
            DistrictNotFound: If no boundary contains the point
        """
        district = self.boundary_client.lookup_district(point)
        if district is None:
            raise DistrictNotFound("Unable to retrieve suburb information")
        return district

    def resolve(self, raw_address: Any) -> LookupResult:
        """Resolve a raw address query.

        Args:
            raw_address: ``None``, a string, or a list of strings

        Returns:
            LookupSuccess or LookupFailure; never raises
        """
        try:
            result: LookupResult = self._run(raw_address)
        except Exception as e:
            result = self._classify(e)

        LOOKUP_OUTCOMES.labels(
            outcome="SUCCESS" if result.success else result.error.code.value
        ).inc()
        return result

    def _run(self, raw_address: Any) -> LookupSuccess:
        address = normalize_address(raw_address)
        logger.info("address_lookup_started", address=address)

        match = self.geocode_stage(address)
        logger.info(
            "address_geocoded",
            address=address,
            matched_address=match.matched_address,
            latitude=match.point.latitude,
            longitude=match.point.longitude,
            property_id=match.property_id,
        )

        district = self.boundary_stage(match.point)

        # The boundaries layer only carries one district name; it doubles as
        # the electoral district.
        data = LookupData(
            address=address,
            location=match.point,
            suburb=district.district_name,
            state_electoral_district=district.district_name,
        )
        logger.info("address_lookup_succeeded", **data.model_dump(mode="json"))
        return LookupSuccess(data=data)

    def _classify(self, exc: Exception) -> LookupFailure:
        """Map any exception raised by the pipeline onto a failure."""
        if isinstance(exc, AddressLookupError):
            failure = LookupFailure.create(exc.message, exc.kind)
        elif isinstance(exc, requests.Timeout):
            failure = LookupFailure.create("Request timeout", ErrorKind.NETWORK_ERROR)
        elif isinstance(exc, requests.ConnectionError):
            failure = LookupFailure.create(
                "Network connection error", ErrorKind.NETWORK_ERROR
            )
        else:
            logger.exception("address_lookup_internal_error", error=str(exc))
            return LookupFailure.create(
                "An unexpected error occurred", ErrorKind.INTERNAL_ERROR
            )

        logger.warning(
            "address_lookup_failed",
            code=failure.error.code.value,
            message=failure.error.message,
            stage=exc.stage if isinstance(exc, UpstreamNetworkError) else None,
        )
        return failure


def get_address_resolver() -> AddressResolver:
    """Build a resolver from the application settings."""
    return AddressResolver.from_config(settings.address_service_config())
