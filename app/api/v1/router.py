"""API v1 router module."""

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from app.api.v1.lookup import router as lookup_router
from app.core.config import settings

router = APIRouter(default_response_class=JSONResponse)

router.include_router(lookup_router)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "healthy", "version": settings.version}


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Expose Prometheus metrics."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
