"""Client for the NSW administrative boundaries feature service."""

from app.core.address.client import FeatureServiceClient
from app.core.address.exceptions import BoundariesAPIError
from app.core.logging import get_logger
from app.models.address import DistrictInfo, GeoPoint

logger = get_logger(__name__)


class BoundaryClient(FeatureServiceClient):
    """Find the district polygon that contains a point."""

    stage = "boundaries"
    api_error = BoundariesAPIError
    api_name = "Boundaries API"

    def lookup_district(self, point: GeoPoint) -> DistrictInfo | None:
        """Run a point-in-polygon query for ``point``.

        Returns:
            The containing district, or None if no polygon intersects

        Raises:
            UpstreamNetworkError: If the service could not be reached
            BoundariesAPIError: If the service response is unusable
        """
        features = self._query(
            self.config.boundaries_url,
            params={
                "geometry": f"{point.longitude},{point.latitude}",
                "geometryType": "esriGeometryPoint",
                "inSR": "4326",
                "spatialRel": "esriSpatialRelIntersects",
                "outFields": "*",
                "returnGeometry": "false",
                "f": "geoJSON",
            },
            headers={
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
        )

        if not features:
            logger.info(
                "boundaries_no_features",
                latitude=point.latitude,
                longitude=point.longitude,
            )
            return None

        feature = features[0]
        properties = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(properties, dict):
            raise self._fail("Feature has no properties")

        district_name = properties.get("districtname")
        if not district_name:
            raise self._fail("Feature has no districtname")

        return DistrictInfo(district_name=str(district_name))
