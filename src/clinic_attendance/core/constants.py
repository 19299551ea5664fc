"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6_371_000.0
DUPLICATE_WINDOW_MINUTES = 5
DEFAULT_HISTORY_LIMIT = 10
DEFAULT_PAGE_LIMIT = 50
STAFF_TOKEN_HOURS = 24
PORTAL_TOKEN_HOURS = 1
STAFF_TOKEN_AUDIENCE = "staff"
PORTAL_TOKEN_AUDIENCE = "portal"
