"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RANK = 99999
DEFAULT_REFRESH_SECONDS = 60
DEFAULT_STORE_TIMEOUT = 30
DEFAULT_STATE = "Kuala Lumpur"

ALL_STAFF = "all"
UNKNOWN_STAFF_NAME = "Staf Tidak Dikenali"
EMPTY_CELL = "-"

MONTH_NAMES = (
    "Januari", "Februari", "Mac", "April", "Mei", "Jun",
    "Julai", "Ogos", "September", "Oktober", "November", "Disember",
)

MALAYSIA_STATES = (
    "Johor", "Kedah", "Kelantan", "Melaka", "Negeri Sembilan",
    "Pahang", "Perak", "Perlis", "Pulau Pinang", "Sabah",
    "Sarawak", "Selangor", "Terengganu", "Kuala Lumpur",
    "Labuan", "Putrajaya",
)
