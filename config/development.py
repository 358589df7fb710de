import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "comedor_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the demo company and cafeteria on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

INACTIVITY_THRESHOLD_DAYS = int(os.getenv("INACTIVITY_THRESHOLD_DAYS", "21"))
EVENT_QUEUE_SIZE = int(os.getenv("EVENT_QUEUE_SIZE", "100"))
EVENT_HEARTBEAT_SECONDS = float(os.getenv("EVENT_HEARTBEAT_SECONDS", "15"))
