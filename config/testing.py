import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_attendance_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

ATTENDANCE_TOLERANCE_MINUTES = 0
ATTENDANCE_DUPLICATE_POLICY = "retryable"
ATTENDANCE_REQUIRE_ENROLLMENT = False

HISTORY_PER_PAGE = 15
