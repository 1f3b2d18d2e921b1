import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_attendance"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

ATTENDANCE_TOLERANCE_MINUTES = int(os.getenv("ATTENDANCE_TOLERANCE_MINUTES", "0"))
ATTENDANCE_DUPLICATE_POLICY = os.getenv("ATTENDANCE_DUPLICATE_POLICY", "retryable")
ATTENDANCE_REQUIRE_ENROLLMENT = bool(int(os.getenv("ATTENDANCE_REQUIRE_ENROLLMENT", "0")))

HISTORY_PER_PAGE = int(os.getenv("HISTORY_PER_PAGE", "15"))
