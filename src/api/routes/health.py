"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.routes.books import get_catalog_service
from src.config import get_settings
from src.core.books.service import CatalogService

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> dict:
    """Readiness check - verifies the catalog is available."""
    settings = get_settings()
    return {
        "status": "ready",
        "service": settings.app_name,
        "book_count": len(service.store),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
