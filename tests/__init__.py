# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Stub User API:
# - test_config.py, test_logging_config.py: Settings and log sinks
# - test_models.py, test_user_service.py: Core models and the stub accessor
# - test_health.py, test_users.py: Endpoint behaviour
# - test_errors.py, test_request_logging.py: Exception handlers and middleware
# - test_main.py: App factory, lifespan and entry point
# - test_shutdown.py: SIGTERM against a real server subprocess
#
# Run tests with: poetry run pytest
# =============================================================================
