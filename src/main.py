"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.routes import books_router, health_router
from src.config import Settings, get_settings
from src.core.books.service import (
    BookNotFoundError,
    BookValidationError,
    create_catalog_service,
)
from src.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings: Settings = app.state.settings
    setup_logging(debug=settings.debug)
    logger.info(
        "Catalog service started",
        app_name=settings.app_name,
        books=len(app.state.catalog.store),
    )
    yield
    logger.info("Catalog service stopped")


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def book_validation_handler(request: Request, exc: BookValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around its own catalog instance."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book catalog with create, read, update and delete",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.catalog = create_catalog_service(seed=settings.seed_books)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics
    if settings.metrics_enabled:
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(
            app, endpoint="/metrics"
        )

    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(BookValidationError, book_validation_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(books_router)

    @app.get("/")
    @app.get("/api")
    async def api_info():
        """API information endpoint."""
        return {
            "service": settings.app_name,
            "version": VERSION,
            "docs": "/docs",
            "openapi": "/openapi.json",
            "health": "/health",
            "books": "/api/books",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
