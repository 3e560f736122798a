import os

from . import optional_float

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "url": os.getenv("STORE_URL", ""),
    "timeout": float(os.getenv("STORE_TIMEOUT", "30")),
}

DEBUG = False

REFRESH_INTERVAL_SECONDS = float(os.getenv("REFRESH_INTERVAL_SECONDS", "60"))
AUTO_REFRESH = bool(int(os.getenv("AUTO_REFRESH", "1")))

# Sheet owners are on UTC+8; server clocks usually are not.
LOCAL_UTC_OFFSET_HOURS = optional_float("LOCAL_UTC_OFFSET_HOURS", 8.0)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
