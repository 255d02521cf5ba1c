"""
FastAPI Main Application - REST access to the LubaUI lookup tools.

Run with: uvicorn lubaui_mcp.interfaces.api:create_app --factory --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lubaui_mcp import __version__
from lubaui_mcp.config import Settings, get_settings

from .deps import init_services
from .middleware import ErrorHandlerMiddleware, RateLimitMiddleware, RequestContextMiddleware
from .routes import health, lookup, resources, suggest, validate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting LubaUI API...")
    logger.info("  Data dir: %s", settings.data_dir or "bundled")

    init_services(app)
    logger.info("  Services initialized")

    yield

    logger.info("Shutting down LubaUI API...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="LubaUI Lookup API",
        description="Design token, component and primitive lookup for the LubaUI design system",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # Add middleware (order matters - last added = outermost)
    # 1. Rate limiting (innermost - sees the request ID)
    app.add_middleware(RateLimitMiddleware, requests_per_minute=settings.rate_limit_rpm)

    # 2. Error handling (catch exceptions from inner layers)
    app.add_middleware(ErrorHandlerMiddleware)

    # 3. Request ID and latency (outermost custom - runs first)
    app.add_middleware(RequestContextMiddleware)

    # 4. CORS (framework middleware)
    allowed_origins = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        # Any local dev server port in debug mode
        allow_origin_regex=r"http://localhost:\d+" if settings.api_debug else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(lookup.router, prefix="/api", tags=["Lookup"])
    app.include_router(validate.router, prefix="/api/validate", tags=["Validation"])
    app.include_router(suggest.router, prefix="/api/suggest", tags=["Suggest"])
    app.include_router(resources.router, prefix="/api/resources", tags=["Resources"])

    return app
