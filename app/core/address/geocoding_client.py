"""Client for the NSW geocoded addressing feature service."""

from typing import Any

from pydantic import ValidationError

from app.core.address.client import FeatureServiceClient
from app.core.address.exceptions import GeocodingAPIError
from app.core.logging import get_logger
from app.models.address import GeocodeMatch, GeoPoint

logger = get_logger(__name__)


class GeocodingClient(FeatureServiceClient):
    """Resolve an exact address string to a point."""

    stage = "geocoding"
    api_error = GeocodingAPIError
    api_name = "Geocoding API"

    def geocode(self, address: str) -> GeocodeMatch | None:
        """Geocode a normalised address.

        Args:
            address: Upper-cased address to match exactly

        Returns:
            The first matching feature, or None if the address is unknown

        Raises:
            UpstreamNetworkError: If the service could not be reached
            GeocodingAPIError: If the service response is unusable
        """
        # Single quotes inside the address would terminate the SQL literal
        escaped = address.replace("'", "''")
        features = self._query(
            self.config.geocoding_url,
            params={
                "where": f"address='{escaped}'",
                "outFields": "*",
                "f": "geojson",
            },
            headers={"Accept": "application/json"},
        )

        if not features:
            logger.info("geocoding_no_features", address=address)
            return None

        return self._parse_feature(features[0])

    def _parse_feature(self, feature: Any) -> GeocodeMatch:
        if not isinstance(feature, dict):
            raise self._fail("Feature is not an object")

        geometry = feature.get("geometry") or {}
        properties = feature.get("properties") or {}
        coordinates = (
            geometry.get("coordinates") if isinstance(geometry, dict) else None
        )

        if not isinstance(coordinates, list) or len(coordinates) < 2:
            raise self._fail("Feature has no point coordinates")
        if not isinstance(properties, dict) or not properties.get("address"):
            raise self._fail("Feature has no address")

        # GeoJSON order is [longitude, latitude, elevation?]
        longitude, latitude = coordinates[0], coordinates[1]
        try:
            point = GeoPoint(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            raise self._fail(f"Invalid coordinates {coordinates!r}") from e

        property_id = _as_int(
            properties.get("principaladdresssiteoid") or properties.get("rid")
        )

        return GeocodeMatch(
            point=point,
            matched_address=str(properties["address"]),
            property_id=property_id,
        )


def _as_int(value: Any) -> int | None:
    """Coerce an ArcGIS id field, which may arrive as a number or a string."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("geocoding_unparseable_property_id", value=repr(value))
        return None
