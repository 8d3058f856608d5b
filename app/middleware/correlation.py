"""Correlation ID middleware for request tracking."""

import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from structlog.contextvars import bind_contextvars, clear_contextvars

REQUEST_ID_HEADER = "X-Request-ID"


def _is_valid_request_id(value: str | None) -> bool:
    """Accept UUIDs and ``test-`` prefixed IDs."""
    if not value:
        return False
    if value.startswith("test-"):
        return True
    try:
        uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return False
    return True


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Give every request a correlation ID.

    The ID is taken from ``X-Request-ID`` when the caller supplies a valid
    one and generated otherwise. It is stored on ``request.state``, bound
    into the structlog context for the lifetime of the request, and echoed
    back in the response headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process the request/response cycle.

        Args:
        ----
            request: The incoming request
            call_next: The next handler in the middleware chain

        Returns:
        -------
            The response from downstream handlers
        """
        header_value = request.headers.get(REQUEST_ID_HEADER)
        correlation_id = (
            header_value if _is_valid_request_id(header_value) else str(uuid.uuid4())
        )

        clear_contextvars()
        bind_contextvars(correlation_id=correlation_id)
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
