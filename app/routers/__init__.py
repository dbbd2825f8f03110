# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains the REST routers:
# - health.py: Health check endpoints
# - feed.py: Post image upload endpoint
#
# Each router is mounted in main.py with a URL prefix. The GraphQL mount
# lives in app/graphql/.
# =============================================================================

from . import feed
from . import health

__all__ = [
    "feed",
    "health",
]
