import os

SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "url": os.getenv("STORE_URL", "http://store.invalid/exec"),
    "timeout": 5.0,
}

DEBUG = False
TESTING = True

REFRESH_INTERVAL_SECONDS = 60.0
AUTO_REFRESH = False

LOCAL_UTC_OFFSET_HOURS = 8.0

LOG_LEVEL = "WARNING"
