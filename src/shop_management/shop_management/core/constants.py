"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MORNING_SHIFT_START = time(8, 0)
MORNING_SHIFT_END = time(12, 30)
AFTERNOON_SHIFT_START = time(13, 30)
# Afternoon clock-ins from here on count in full; the shift itself starts at 13:30.
AFTERNOON_CREDIT_FROM = time(13, 0)
AFTERNOON_SHIFT_END = time(17, 0)

HOURS_PER_DAY = 8
DEFAULT_MONTHLY_WORKING_DAYS = 26
DEFAULT_OVERTIME_MULTIPLIER = 1.0

# Python weekday numbering: Monday=0 ... Sunday=6
DEFAULT_WEEK_STARTS_ON = 6

CURRENCY = "ETB"
DEFAULT_PERIOD_OPTIONS = 12
