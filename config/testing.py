import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_FILE = None

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "wagewise_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

STATUS_MESSAGE_SECONDS = 2
NAME_HISTORY_LIMIT = 20
