import os

from . import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON fixture with users, organizations, events, leave requests and holidays
DATA_FILE = os.getenv("DATA_FILE", "data/sample_data.json")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# 0 means one worker per CPU core
REPORT_WORKERS = int(os.getenv("REPORT_WORKERS", "0"))

FINAL_CONFIRMATION_ROLE = os.getenv("FINAL_CONFIRMATION_ROLE", "hr")

MIN_HOURS_FULL_DAY = float(os.getenv("MIN_HOURS_FULL_DAY", "8"))
MIN_HOURS_HALF_DAY = float(os.getenv("MIN_HOURS_HALF_DAY", "4"))
ANNUAL_EARNED_LEAVES = int(os.getenv("ANNUAL_EARNED_LEAVES", "5"))
ANNUAL_SICK_LEAVES = int(os.getenv("ANNUAL_SICK_LEAVES", "12"))
MONTHLY_FLOATING_LEAVES = int(os.getenv("MONTHLY_FLOATING_LEAVES", "1"))
ENABLE_ATTENDANCE_NOTIFICATIONS = env_flag("ENABLE_ATTENDANCE_NOTIFICATIONS", "1")
