"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api"
DEFAULT_TOKEN_TTL_MINUTES = 60 * 8
TOKEN_ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "
