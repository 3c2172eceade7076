import os
from pathlib import Path

# =========================================================
# DATA LOCATION
# =========================================================
DATA_DIR = Path(os.environ.get("FATALITY_EXPLORER_DATA", "data"))
ENCODING = os.environ.get("FATALITY_EXPLORER_ENCODING", "utf-8")

FILE_NAMES = {
    "person": "person.csv",
    "drimpair": "drimpair.csv",
    "distract": "distract.csv",
    "vehicle": "vehicle.csv",
    "drugs": "drugs.csv",
    "weather": "weather.csv",
}

# =========================================================
# JOIN KEYS & CODES
# =========================================================
CASE_KEY = ["ST_CASE"]
VEHICLE_KEY = ["ST_CASE", "VEH_NO"]
PERSON_KEY = ["ST_CASE", "VEH_NO", "PER_NO"]

FATAL_CODE = 4          # INJ_SEV value for "Fatal Injury (K)"
MIN_CASES = 100         # categories with fewer cases are never shown
DEFAULT_TOP_N = 10

PEDESTRIAN = "Pedestrian"

# =========================================================
# STYLING
# =========================================================
COLORS = {
    "bg": "#f9f4e8",
    "card": "#ffffff",
    "primary": "#d35400",
    "accent": "#f1c40f",
    "danger": "#c0392b",
    "text": "#333333",
    "muted": "#777777",
}

CAPTION = "*Percent of Fatal Accidents by category"

# =========================================================
# SERVER
# =========================================================
HOST = os.environ.get("FATALITY_EXPLORER_HOST", "127.0.0.1")
PORT = int(os.environ.get("FATALITY_EXPLORER_PORT", "8050"))
DEBUG = os.environ.get("FATALITY_EXPLORER_DEBUG", "0").lower() in ("1", "true", "yes")
