"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Data paths
DATA_DIR = Path(os.getenv("FORECAST_SIGNAL_DATA_DIR", BASE_DIR / "data"))
OUTPUT_FILE = DATA_DIR / "weatherData.json"
EXPORT_DIR = DATA_DIR / "exports"

# Location used when the caller supplies none (the clock page falls back to 0,0
# when geolocation is unavailable)
DEFAULT_LOCATION = {
    "latitude": float(os.getenv("FORECAST_SIGNAL_LAT", "0")),
    "longitude": float(os.getenv("FORECAST_SIGNAL_LON", "0")),
}

# IANA timezone for displayed hours; empty means system local time
DISPLAY_TIMEZONE = os.getenv("FORECAST_SIGNAL_TZ", "")

# met.no Locationforecast settings
MET_NO_SETTINGS = {
    "url": os.getenv(
        "MET_NO_URL",
        "https://api.met.no/weatherapi/locationforecast/2.0/complete",
    ),
    "user_agent": os.getenv(
        "MET_NO_USER_AGENT",
        "forecast-signal/1.0 (https://github.com/yourusername/forecast-signal)",
    ),
    "timeout": float(os.getenv("MET_NO_TIMEOUT", "10")),
}

# API settings
API_SETTINGS = {
    "title": "Forecast Signal API",
    "description": "Next notable weather change for a wall clock display",
    "version": "1.0.0",
}

LOG_LEVEL = os.getenv("FORECAST_SIGNAL_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
