# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record and its success envelope
# - error.py: Error envelope shared by every failure path
#
# These models define the "contract" between API and clients.
# =============================================================================

from .error import ErrorResponse
from .user import User, UserResponse

__all__ = [
    "ErrorResponse",
    "User",
    "UserResponse",
]
