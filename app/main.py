# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Stub User API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run stub-user-api
# =============================================================================

import logging
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.exceptions import http_exception_handler, unhandled_exception_handler
from app.logging_config import configure_logging
from app.middleware import log_requests
from app.routers import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup and shutdown are only logged; the service holds no connections
    or files that need closing.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Server running in {settings.NODE_ENV} mode on port {settings.PORT}")

    yield

    # Shutdown
    logger.info("Shutdown signal received, shutting down gracefully")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the ASGI application.

    Args:
        settings: Settings to run with (defaults to the environment settings)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Stub User API",
        description="Minimal HTTP service exposing a health check and a stub user lookup.",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Health",
                "description": "API health checks",
            },
            {
                "name": "Users",
                "description": "User lookup",
            },
        ],
    )
    app.state.settings = settings

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.middleware("http")(log_requests)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    app.include_router(
        users.router,
        prefix="/api",
        tags=["Users"]
    )

    return app


app = create_app()


def _exit_on_signal(signum, frame) -> None:
    """Log the termination signal and exit cleanly."""
    logger.info(f"{signal.Signals(signum).name} received, exiting")
    sys.exit(0)


def main() -> None:
    """
    Console entry point: serve the app with uvicorn.

    uvicorn runs the lifespan shutdown on SIGTERM/SIGINT, then hands the
    signal back to the handler that was installed before it started. That
    handler is _exit_on_signal, so the process ends with status 0.
    """
    settings: Settings = app.state.settings
    signal.signal(signal.SIGTERM, _exit_on_signal)
    signal.signal(signal.SIGINT, _exit_on_signal)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=logging.getLevelName(settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
