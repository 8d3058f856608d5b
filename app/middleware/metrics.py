"""Request metrics middleware for Prometheus monitoring."""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.core.events import REQUESTS_TOTAL, RESPONSES_TOTAL
from app.core.logging import get_logger

logger = get_logger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect request/response metrics.

    Records:
    - Total requests by method and path
    - Total responses by status code
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Record request metrics around the downstream handler.

        Args:
        ----
            request: The incoming request
            call_next: The next handler in the middleware chain

        Returns:
        -------
            The response from downstream handlers
        """
        path = str(request.url.path).rstrip("/") or "/"
        REQUESTS_TOTAL.labels(method=request.method, path=path).inc()

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=path,
                error=str(e),
            )
            raise

        RESPONSES_TOTAL.labels(status_code=str(response.status_code)).inc()
        logger.info(
            "request_processed",
            method=request.method,
            path=path,
            status_code=response.status_code,
            duration=round(time.perf_counter() - start_time, 4),
        )
        return response
