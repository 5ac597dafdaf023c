import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

REPORT_WORKERS = 2

FINAL_CONFIRMATION_ROLE = "hr"

MIN_HOURS_FULL_DAY = 8
MIN_HOURS_HALF_DAY = 4
ANNUAL_EARNED_LEAVES = 5
ANNUAL_SICK_LEAVES = 12
MONTHLY_FLOATING_LEAVES = 1
ENABLE_ATTENDANCE_NOTIFICATIONS = False
