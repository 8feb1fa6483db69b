# =============================================================================
# app/middleware.py - Request Logging Middleware
# =============================================================================
# Times each request and writes one log entry once the status is known:
#   {"method", "path", "statusCode", "duration": "<n>ms", "timestamp"}
# =============================================================================

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from lib.utils import local_timestamp

logger = logging.getLogger(__name__)


def build_request_entry(
    request: Request,
    status_code: int,
    started: float,
) -> dict[str, object]:
    """Assemble the structured payload for one request log entry."""
    duration_ms = max(0, round((time.perf_counter() - started) * 1000))
    return {
        "method": request.method,
        "path": request.url.path,
        "statusCode": status_code,
        "duration": f"{duration_ms}ms",
        "timestamp": local_timestamp(),
    }


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    HTTP middleware that logs every request exactly once.

    If the downstream pipeline raises, the entry is written with status 500
    and the exception continues to the terminal exception handler.
    """
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        entry = build_request_entry(request, 500, started)
        logger.info(
            f"{entry['method']} {entry['path']} {entry['statusCode']} {entry['duration']}",
            extra={"request": entry},
        )
        raise

    entry = build_request_entry(request, response.status_code, started)
    logger.info(
        f"{entry['method']} {entry['path']} {entry['statusCode']} {entry['duration']}",
        extra={"request": entry},
    )
    return response
