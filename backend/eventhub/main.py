"""
Main FastAPI application entry point for Eventhub.

This is the core application file that:
- Initializes FastAPI with lifespan management (one shared MongoDB client)
- Configures CORS
- Sets up logging and Logfire observability
- Translates domain errors into JSON error bodies
- Provides hello and health check endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from eventhub import __version__
from eventhub.api.routes import events_router
from eventhub.config import settings
from eventhub.database import (
    check_db_connection,
    close_db,
    ensure_indexes,
    get_database,
    get_db_info,
    init_db,
)
from eventhub.utils.errors import EventhubError, format_api_error, format_log_error
from eventhub.utils.logging import configure_logging, instrument_app

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v3"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logfire.info(
        "Starting Eventhub API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    # One client per process; every request borrows from its pool
    await init_db()

    db_connected = await check_db_connection()
    db_info = get_db_info()
    if db_connected:
        logfire.info(
            "MongoDB connection successful",
            url=db_info["url"],
            database=db_info["database"],
        )
        try:
            await ensure_indexes(get_database())
        except PyMongoError as e:
            logfire.error("MongoDB index creation failed", error=str(e))
    else:
        logfire.error(
            "MongoDB connection failed",
            url=db_info["url"],
            database=db_info["database"],
        )

    logfire.info("Eventhub API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Eventhub API Server")
    await close_db()


configure_logging(settings)

# Initialize FastAPI app
app = FastAPI(
    title="Eventhub API",
    description="Events and nudges over a MongoDB document store",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

instrument_app(app)


@app.exception_handler(EventhubError)
async def eventhub_error_handler(request: Request, exc: EventhubError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed",
            extra=format_log_error(exc),
        )
    return JSONResponse(status_code=exc.status_code, content=format_api_error(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"{request.method} {request.url.path} failed unexpectedly",
        extra=format_log_error(exc),
    )
    return JSONResponse(status_code=500, content=format_api_error(EventhubError()))


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get(f"{API_PREFIX}/hello/", tags=["Health"])
async def hello() -> Dict[str, str]:
    """Liveness greeting. Never touches the database."""
    return {"message": "Hello, World!"}


@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application and database
    """
    db_connected = await check_db_connection()

    return {
        "status": "healthy" if db_connected else "degraded",
        "service": "eventhub-api",
        "version": __version__,
        "database": "connected" if db_connected else "disconnected",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Eventhub API",
        "version": __version__,
        "description": "Events and nudges over a MongoDB document store",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

app.include_router(events_router, prefix=f"{API_PREFIX}/app")
