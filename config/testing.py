SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CURRENCY_SYMBOL = "Rs"
ATTENDANCE_BONUS = 2500
NO_LEAVE_BONUS = 2500
LATE_THRESHOLD_MINUTES = 180
MAX_SESSIONS = 20
