"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
CSV_DATA_FILE = Path(os.getenv("CLIMATE_CSV_FILE", DATA_DIR / "TempFuktData.csv"))
STORE_FILE = Path(os.getenv("CLIMATE_STORE_FILE", DATA_DIR / "observations.csv"))

# Input format
CSV_DELIMITER = os.getenv("CLIMATE_CSV_DELIMITER", ",")
CSV_ENCODING = "utf-8"

# Ingestion settings
INGESTION_SETTINGS = {
    "batch_size": 1000,
    "max_reported_errors": 5,
    "progress_interval": 10000,
}

# Physical validation bounds (inclusive)
TEMPERATURE_RANGE = (-50.0, 50.0)  # Celsius
HUMIDITY_RANGE = (0.0, 100.0)  # percentage

# Report sizes
TOP_N = 10
RAW_LIMIT = 50

# Meteorological season definitions: first day of a run of
# `consecutive_days` days whose daily mean stays strictly below `threshold`
SEASON_CRITERIA = {
    "autumn": {
        "threshold": float(os.getenv("AUTUMN_THRESHOLD", "10.0")),
        "consecutive_days": int(os.getenv("AUTUMN_CONSECUTIVE_DAYS", "5")),
    },
    "winter": {
        "threshold": float(os.getenv("WINTER_THRESHOLD", "0.0")),
        "consecutive_days": int(os.getenv("WINTER_CONSECUTIVE_DAYS", "5")),
    },
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
