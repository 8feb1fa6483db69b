# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: The user record returned to clients
# - UserResponse: Success envelope wrapping a User
#
# Users are not persisted. A record is fabricated for every request by
# UserService and discarded once the response is sent.
# =============================================================================

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from lib.utils import isoformat_utc


class User(BaseModel):
    """
    A user record.

    Example:
        {
            "id": "42",
            "name": "Example User",
            "email": "user@example.com",
            "createdAt": "2024-01-15T10:30:00.000Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Identifier exactly as requested by the client (not necessarily numeric)
    id: str = Field(
        ...,
        description="User identifier"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    email: str = Field(
        ...,
        description="Email address"
    )

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Timestamp when the user was created"
    )

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return isoformat_utc(value)


class UserResponse(BaseModel):
    """
    Schema for a successful user lookup.

    Returned by GET /api/users/{id}.
    """

    success: Literal[True] = True
    data: User
