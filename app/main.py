"""
FastAPI application factory.

Creates and configures the FastAPI application instance.  Process-wide
collaborators (database engine, rate limiter) are built here and live on
``app.state``; the lifespan disposes of them at shutdown.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.ratelimit import RateLimiter
from app.db.init_db import init_db
from app.db.session import create_db_engine
from app.sicksquares.exceptions import InvalidIntensityError, InvalidWindowError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.engine = create_db_engine(settings)
    if settings.AUTO_CREATE_TABLES:
        init_db(app.state.engine)
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    try:
        yield
    finally:
        app.state.engine.dispose()
        app.state.rate_limiter.reset()
        logger.info("%s stopped", settings.PROJECT_NAME)


async def invalid_window_handler(request: Request, exc: InvalidWindowError):
    logger.info("Rejected window on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={ "detail": str(exc) })


async def invalid_intensity_handler(request: Request, exc: InvalidIntensityError):
    logger.error("Stats computation failed on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={ "detail": "Stats computation failed" })


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.state.rate_limiter = RateLimiter(max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
                                         window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS)

    app.add_exception_handler(InvalidWindowError, invalid_window_handler)
    app.add_exception_handler(InvalidIntensityError, invalid_intensity_handler)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "SickSquares API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "sicksquares-api",
            "version": settings.VERSION
        }

    @app.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "authors": settings.AUTHORS,
            "project url": settings.PROJECT_URL
        }

    return app


app = create_app()
