"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Index matches day_of_week: 0 = Sunday ... 6 = Saturday.
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

MINUTES_PER_DAY = 24 * 60
MIN_PASSWORD_LENGTH = 6

# Bulk delete of attendance filters on date >= this, which matches every row.
EARLIEST_DATE = date(1900, 1, 1)
