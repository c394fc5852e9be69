"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WINDOW_START_DAY = 26
WINDOW_END_DAY = 25

DEFAULT_TIME_IN = "9:30 AM"
DEFAULT_TIME_OUT = "6:30 PM"

EXPECTED_TIME_IN_MINUTES = 9 * 60 + 30
EXPECTED_TIME_OUT_MINUTES = 18 * 60 + 30

DEFAULT_ATTENDANCE_BONUS = 2500
DEFAULT_NO_LEAVE_BONUS = 2500
DEFAULT_LATE_THRESHOLD_MINUTES = 180
DEFAULT_FREE_LEAVE_DAYS = 1
DEFAULT_DEDUCTION_DIVISOR = 30

DEFAULT_CURRENCY_SYMBOL = "Rs"

DEFAULT_MAX_SESSIONS = 500
