import os

from . import optional_float

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_CONFIG = {
    "url": os.getenv("STORE_URL", ""),
    "timeout": float(os.getenv("STORE_TIMEOUT", "30")),
}

DEBUG = True

# Silent background refresh, like leaving the dashboard open
REFRESH_INTERVAL_SECONDS = float(os.getenv("REFRESH_INTERVAL_SECONDS", "60"))
AUTO_REFRESH = bool(int(os.getenv("AUTO_REFRESH", "1")))

LOCAL_UTC_OFFSET_HOURS = optional_float("LOCAL_UTC_OFFSET_HOURS")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
