"""Application startup and shutdown events."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import Counter

from app.core.address import AddressResolver
from app.core.config import Settings, settings
from app.core.logging import configure_logging, get_logger

# Prometheus metrics
REQUESTS_TOTAL = Counter(
    "app_http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "path"],
)

RESPONSES_TOTAL = Counter(
    "app_http_responses_total",
    "Total number of HTTP responses",
    labelnames=["status_code"],
)

logger = get_logger("app.core.events")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and build the shared resolver.

    The resolver holds nothing but configuration, so a single instance
    serves every request.

    Args:
        app: FastAPI application instance
    """
    app_settings: Settings = getattr(app.state, "settings", None) or settings
    configure_logging(
        level=app_settings.LOG_LEVEL, json_logs=app_settings.JSON_LOGS
    )

    config = app_settings.address_service_config()
    app.state.resolver = AddressResolver.from_config(config)

    logger.info(
        "application_startup_complete",
        geocoding_url=config.geocoding_url,
        boundaries_url=config.boundaries_url,
        request_timeout=config.request_timeout,
    )
    try:
        yield
    finally:
        app.state.resolver = None
        logger.info("application_shutdown_complete")
