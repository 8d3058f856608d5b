"""Error handling middleware.

Every error leaving the HTTP layer uses the lookup envelope:
``{"success": false, "error": {"message": ..., "code": ...}}``.
"""

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.core.logging import get_logger
from app.models.address import ErrorKind

logger = get_logger(__name__)

# Presentation-layer only; not part of the lookup ErrorKind set
ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"


def error_envelope(message: str, code: str, status_code: int) -> JSONResponse:
    """Build a JSON failure response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"message": message, "code": code}},
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Turn unknown routes into ``ROUTE_NOT_FOUND``; defer everything else."""
    if exc.status_code == HTTP_404_NOT_FOUND:
        logger.info("route_not_found", path=request.url.path, method=request.method)
        return error_envelope("Route not found", ROUTE_NOT_FOUND, HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the envelope exception handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Catch anything the routes let escape and answer with a 500 envelope."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process the request/response cycle and handle errors.

        Args:
        ----
            request: The incoming request
            call_next: The next handler in the middleware chain

        Returns:
        -------
            The response from downstream handlers or error response
        """
        try:
            return await call_next(request)
        except Exception as exc:
            correlation_id = getattr(request.state, "correlation_id", None)
            logger.exception(
                "request_error",
                error_type=exc.__class__.__name__,
                error_message=str(exc),
                path=request.url.path,
                method=request.method,
                correlation_id=correlation_id,
            )
            response = error_envelope(
                "Internal server error",
                ErrorKind.INTERNAL_ERROR.value,
                HTTP_500_INTERNAL_SERVER_ERROR,
            )
            if correlation_id:
                response.headers["X-Request-ID"] = correlation_id
            return response
