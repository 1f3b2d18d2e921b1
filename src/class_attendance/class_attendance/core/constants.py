"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000
DISTANCE_DECIMALS = 2

DEFAULT_TOLERANCE_MINUTES = 0
DEFAULT_HISTORY_PER_PAGE = 15

MIN_LOCATION_RADIUS_METERS = 1
MAX_NAME_LENGTH = 255

MYSQL_DUPLICATE_ENTRY = 1062
