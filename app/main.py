"""Main FastAPI application module."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import router as v1_router
from app.core.config import Settings
from app.core.events import lifespan
from app.middleware.correlation import CorrelationMiddleware
from app.middleware.errors import ErrorHandlingMiddleware, register_error_handlers
from app.middleware.metrics import MetricsMiddleware


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment by default

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app = FastAPI(
        title=settings.app_name,
        description="Resolve NSW street addresses to location, suburb and district",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        default_response_class=JSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Added last runs first: errors wrap correlation wraps metrics
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


app = create_app()
