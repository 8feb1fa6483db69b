# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.services.user_service import UserService


def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the running app was built with.

    Falls back to the cached environment settings when the app did not
    store its own.
    """
    return getattr(request.app.state, "settings", None) or get_settings()


def get_user_service() -> type[UserService]:
    """
    Get the user service.

    Returns the class itself; its methods are static.
    """
    return UserService


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
UserServiceDep = Annotated[type[UserService], Depends(get_user_service)]
