"""
Configuration file for the Symptom Advisor
Centralizes all paths and settings for easy maintenance.
"""

import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).resolve().parent

# Data paths
DATA_DIR = Path(os.environ.get("ADVISOR_DATA_DIR", PROJECT_ROOT / "data"))

DATASET_FILE = "dataset.csv"
DESCRIPTION_FILE = "symptom_Description.csv"
PRECAUTION_FILE = "symptom_precaution.csv"
SEVERITY_FILE = "Symptom-severity.csv"

# Each source is a local path or an http(s) URL
SOURCE_LOCATIONS = {
    "severity": os.environ.get("ADVISOR_SEVERITY_SOURCE", str(DATA_DIR / SEVERITY_FILE)),
    "description": os.environ.get("ADVISOR_DESCRIPTION_SOURCE", str(DATA_DIR / DESCRIPTION_FILE)),
    "precaution": os.environ.get("ADVISOR_PRECAUTION_SOURCE", str(DATA_DIR / PRECAUTION_FILE)),
    "dataset": os.environ.get("ADVISOR_DATASET_SOURCE", str(DATA_DIR / DATASET_FILE)),
}

FETCH_TIMEOUT = 10  # seconds, for URL sources

# Matching configuration
MAX_RESULTS = 2
RELATED_SYMPTOMS_LIMIT = 3

# API configuration
API_HOST = os.environ.get("ADVISOR_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("ADVISOR_API_PORT", "8000"))
CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:3000"]

LOG_LEVEL = os.environ.get("ADVISOR_LOG_LEVEL", "INFO")


def is_url(location):
    return location.startswith(("http://", "https://"))


# Path validation
def validate_paths():
    """Validate that local data sources exist."""
    for name, location in SOURCE_LOCATIONS.items():
        if is_url(location):
            continue
        if not Path(location).exists():
            raise FileNotFoundError(
                f"{name} source not found: {location}\n"
                f"Please place the CSV files in {DATA_DIR} or set ADVISOR_{name.upper()}_SOURCE"
            )
    return True
