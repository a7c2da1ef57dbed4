"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes (links CRUD, then the catch-all redirect)
- Middleware (logging, CORS)
- Exception handlers and rate limiting
- Application metadata

Route order matters: the redirect route GET /{name} matches any single path
segment, so it is registered after everything else. Interactive docs live
under /api so they can't collide with short names such as "docs".
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortlinks.api import links, redirect
from shortlinks.api.error_handlers import add_exception_handlers
from shortlinks.core.rate_limit import limiter
from shortlinks.core.setting import settings
from shortlinks.db.session import create_tables, engine
from shortlinks.middleware.logging import add_logging_middleware, configure_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app() -> FastAPI:
    """
    Build a fully wired application instance.

    Returns:
        FastAPI application
    """
    app = FastAPI(
        title="Short Links Service",
        description="Named short links with CRUD management and permanent redirects",
        version=VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.state.limiter = limiter
    add_exception_handlers(app)
    add_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoints defined before routers so the catch-all can't capture them
    @app.get("/", tags=["Health"])
    async def root():
        """Service information, usable as a liveness probe."""
        return {
            "message": "Short Links Service",
            "version": VERSION,
            "docs": app.docs_url,
        }

    @app.get("/api/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for monitoring."""
        return {"status": "healthy"}

    app.include_router(links.router)
    # Must stay last: GET /{name} would otherwise shadow /links
    app.include_router(redirect.router)

    @app.on_event("startup")
    async def startup_event():
        configure_logging(settings.LOG_LEVEL)
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_tables()
        logger.info(f"Short links service started ({settings.ENV_SETTING.value})")

    @app.on_event("shutdown")
    async def shutdown_event():
        await engine.dispose()
        logger.info("Database engine disposed")

    return app


app = create_app()
