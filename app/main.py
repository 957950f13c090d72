# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Startup Directory API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    DirectoryException,
    directory_exception_handler,
    validation_exception_handler,
)
from app.routers import admin, custom_fields, health, startups
from core.services.context import DirectoryContext

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: build the directory context (unless one was supplied) and,
    if PRELOAD_ON_STARTUP is set, load the CSV before serving requests.
    A failed preload is logged and retried on the first request.
    """
    logger.info(f"Starting Startup Directory API in {settings.ENVIRONMENT} mode")

    if getattr(app.state, "context", None) is None:
        app.state.context = DirectoryContext.from_settings(settings)

    if settings.PRELOAD_ON_STARTUP:
        await app.state.context.cache.ensure_loaded()

    yield

    logger.info("Shutting down Startup Directory API")


def create_app(context: DirectoryContext | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Optional pre-built directory context (tests pass one with
            a fake loader). When omitted, the lifespan hook builds it from
            settings.
    """
    app = FastAPI(
        title="Startup Directory API",
        description="""
## Startup Directory

List, search and register startups, and run a simple admin dashboard.

Startups are loaded once from a remote CSV into memory. Registrations,
approvals, imports and custom fields live in memory only and are lost on
restart.

| Area | Endpoints |
|------|-----------|
| **Directory** | list with filters + pagination, filter options, detail |
| **Registration** | duplicate check, register |
| **Admin** | stats, pending queue, approve/reject/delete, CSV import, cache reload |
| **Custom Fields** | list, create, delete |
""",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Startups", "description": "Browse and register startups"},
            {"name": "Admin", "description": "Moderation and data management"},
            {"name": "Custom Fields", "description": "Admin-defined registration fields"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.context = context

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(DirectoryException, directory_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(startups.router, prefix="/api/v1/startups", tags=["Startups"])
    app.include_router(admin.router, prefix="/api/v1/admin", tags=["Admin"])
    app.include_router(custom_fields.router, prefix="/api/v1/custom-fields", tags=["Custom Fields"])

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint - returns API info."""
        return {
            "name": "Startup Directory API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
