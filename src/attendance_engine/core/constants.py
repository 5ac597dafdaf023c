"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TREND_DAYS = 7
DEFAULT_SITE_RATE_MONTHS = 1
MIN_LEAVE_REASON_LENGTH = 10
HALF_DAY_WEIGHT = 0.5
SUNDAY = 6
