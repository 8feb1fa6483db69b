# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Read-only user lookup backed by UserService.
# =============================================================================

import logging

from fastapi import APIRouter, Path, Request

from app.dependencies import UserServiceDep
from app.exceptions import error_response
from core.models.error import ErrorResponse
from core.models.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={500: {"model": ErrorResponse, "description": "User lookup failed"}},
)
async def get_user(
    request: Request,
    service: UserServiceDep,
    user_id: str = Path(..., description="User identifier"),
):
    """
    Get a user by ID.

    Any identifier is accepted; the returned record echoes it back.
    Lookup failures are answered here with a 500 ErrorResponse rather than
    reaching the global exception handler.
    """
    try:
        user = await service.get_user_by_id(user_id)
    except Exception as e:
        logger.error(f"Error fetching user: {e}", exc_info=e)
        return error_response(request, "Failed to fetch user", e)

    return UserResponse(data=user)
