# =============================================================================
# app/routers/ - API Route Handlers
# =============================================================================
# - health.py: GET /api/health
# - users.py: GET /api/users/{user_id}
# =============================================================================

from app.routers import health, users

__all__ = ["health", "users"]
