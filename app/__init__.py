# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, entry point, lifespan
# - config.py: Environment variable loading and settings
# - logging_config.py: Console and file log sinks
# - middleware.py: Request timing/logging
# - exceptions.py: Error envelope and exception handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
