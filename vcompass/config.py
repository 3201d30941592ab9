"""Environment-driven service configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

from vcompass.confidence import CONFIDENCE_THRESHOLD as DEFAULT_CONFIDENCE_THRESHOLD

load_dotenv()

SERVICE_NAME = "V-Compass"

PROJECT_ROOT = Path(__file__).resolve().parent.parent

CAMPUS_DATA_PATH = Path(os.getenv("CAMPUS_DATA_PATH", str(PROJECT_ROOT / "data" / "campus_data.json")))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "15.0"))
GEMINI_CIRCUIT_COOLDOWN = float(os.getenv("GEMINI_CIRCUIT_COOLDOWN", "60.0"))

CONFIDENCE_THRESHOLD = float(os.getenv("CONFIDENCE_THRESHOLD", str(DEFAULT_CONFIDENCE_THRESHOLD)))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
