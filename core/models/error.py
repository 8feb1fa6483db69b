# =============================================================================
# core/models/error.py - Error Envelope
# =============================================================================
# Every failed request is answered with this shape, whichever layer
# produced the error (route handler, exception handler, framework 404).
# =============================================================================

from typing import Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Schema for error responses.

    Example:
        {
            "success": false,
            "message": "Internal server error",
            "error": null
        }
    """

    success: Literal[False] = False

    message: str = Field(
        ...,
        description="Human-readable summary of what failed"
    )

    # Underlying exception message; always null in production
    error: str | None = Field(
        default=None,
        description="Error detail (suppressed in production)"
    )
