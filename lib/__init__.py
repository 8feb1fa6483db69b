# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Timestamp formatting shared by models, routes and logging
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import isoformat_utc, local_timestamp, utc_now

__all__ = [
    "isoformat_utc",
    "local_timestamp",
    "utc_now",
]
