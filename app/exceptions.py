# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the service as an ErrorResponse envelope:
#   {"success": false, "message": "...", "error": "..." | null}
# The "error" detail is only exposed outside production.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.models.error import ErrorResponse

logger = logging.getLogger(__name__)


# =============================================================================
# Response Helpers
# =============================================================================

def _is_production(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings is not None and settings.is_production)


def error_response(
    request: Request,
    message: str,
    exc: Exception | None = None,
    status_code: int = 500,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Build an ErrorResponse JSON reply.

    The exception message is included as "error" unless the app runs in
    production, where it is always null.
    """
    detail = None
    if exc is not None and not _is_production(request):
        detail = str(exc)

    body = ErrorResponse(message=message, error=detail)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        headers=headers,
    )


# =============================================================================
# Exception Handlers
# =============================================================================

async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle framework HTTP errors (unknown routes, wrong methods).

    These are client errors, so the detail is the reason phrase and
    no underlying error is reported.
    """
    return error_response(
        request,
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Terminal handler for anything the routes did not catch."""
    logger.error(f"Unhandled error: {exc}", exc_info=exc)
    return error_response(request, "Internal server error", exc)
