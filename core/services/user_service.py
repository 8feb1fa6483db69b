# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user lookups. There is no datastore behind it yet: every lookup
# fabricates a fresh record for the requested id.
# =============================================================================

import logging

from core.models.user import User
from lib.utils import utc_now

logger = logging.getLogger(__name__)

STUB_USER_NAME = "Example User"
STUB_USER_EMAIL = "user@example.com"


class UserService:
    """
    Service for user operations.

    Provides a clean interface between API routes and the (future) database.
    """

    @staticmethod
    async def get_user_by_id(user_id: str) -> User:
        """
        Get a user by ID.

        Args:
            user_id: The user identifier, as given in the request path

        Returns:
            User record with the requested id
        """
        # Placeholder for a database query
        logger.debug(f"Fetching user: {user_id}")
        return User(
            id=user_id,
            name=STUB_USER_NAME,
            email=STUB_USER_EMAIL,
            created_at=utc_now(),
        )
