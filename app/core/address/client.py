"""Shared plumbing for the ArcGIS feature-service query clients."""

from typing import Any, Protocol

import requests

from app.core.address.exceptions import UpstreamAPIError, UpstreamNetworkError
from app.core.config import AddressServiceConfig
from app.core.logging import get_logger

logger = get_logger(__name__)


class HttpGetter(Protocol):
    """Anything with a ``requests``-style ``get``: the module or a Session."""

    def get(self, url: str, **kwargs: Any) -> requests.Response: ...


class FeatureServiceClient:
    """Issue one GET against a feature service and return its features.

    Subclasses set ``stage`` and ``api_error`` and build the query params.
    """

    stage: str = "upstream"
    api_error: type[UpstreamAPIError] = UpstreamAPIError
    api_name: str = "Upstream API"

    def __init__(
        self,
        config: AddressServiceConfig,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self._http: HttpGetter = session if session is not None else requests

    def _fail(self, reason: str) -> UpstreamAPIError:
        return self.api_error(f"{self.api_name} failed: {reason}")

    def _query(
        self, url: str, params: dict[str, str], headers: dict[str, str]
    ) -> list[dict[str, Any]]:
        """Run the query and return the ``features`` list.

        Raises:
            UpstreamNetworkError: On timeouts, refused connections and DNS errors
            UpstreamAPIError: On bad statuses and unparseable bodies
        """
        try:
            response = self._http.get(
                url,
                params=params,
                headers=headers,
                timeout=self.config.request_timeout,
            )
        except requests.Timeout as e:
            logger.warning(f"{self.stage}_timeout", url=url, error=str(e))
            raise UpstreamNetworkError("Request timeout", self.stage) from e
        except requests.ConnectionError as e:
            logger.warning(f"{self.stage}_connection_error", url=url, error=str(e))
            raise UpstreamNetworkError("Network connection error", self.stage) from e
        except requests.RequestException as e:
            raise self._fail(str(e)) from e

        logger.info(f"{self.stage}_response", status_code=response.status_code)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(
                f"{self.stage}_http_error",
                status_code=response.status_code,
                reason=response.reason,
                body=response.text[:500],
            )
            raise self._fail(
                f"Request failed with status code {response.status_code}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise self._fail("Response body is not valid JSON") from e

        logger.debug(f"{self.stage}_response_body", data=data)

        if not isinstance(data, dict):
            raise self._fail("Response body is not a feature collection")

        # ArcGIS reports query errors with a 200 and an "error" object
        if "error" in data:
            error = data["error"] or {}
            message = error.get("message") if isinstance(error, dict) else error
            raise self._fail(f"Service error: {message}")

        features = data.get("features") or []
        if not isinstance(features, list):
            raise self._fail("'features' is not a list")
        return features
