import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "Rs")
ATTENDANCE_BONUS = float(os.getenv("ATTENDANCE_BONUS", "2500"))
NO_LEAVE_BONUS = float(os.getenv("NO_LEAVE_BONUS", "2500"))
LATE_THRESHOLD_MINUTES = int(os.getenv("LATE_THRESHOLD_MINUTES", "180"))
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "500"))
