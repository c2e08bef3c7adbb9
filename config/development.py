import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", str(Path(__file__).resolve().parents[1] / "instance" / "wagewise.json"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "wagewise_db"),
}

DEBUG = True

# If enabled with the mysql backend, app will apply schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Toast lifetime and autocomplete size
STATUS_MESSAGE_SECONDS = int(os.getenv("STATUS_MESSAGE_SECONDS", "2"))
NAME_HISTORY_LIMIT = int(os.getenv("NAME_HISTORY_LIMIT", "20"))
