# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health, readiness (cache state) and liveness checks
# - startups.py: Directory listing, filters, detail and registration
# - admin.py: Dashboard stats, moderation actions, CSV import, cache reload
# - custom_fields.py: Custom field management
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import startups
from . import admin
from . import custom_fields

__all__ = [
    "health",
    "startups",
    "admin",
    "custom_fields",
]
