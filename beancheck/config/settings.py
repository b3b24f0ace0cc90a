"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Paths ---
# Separator a field validator uses to glue its own path to nested paths.
DEFAULT_PATH_SEPARATOR: str = os.getenv("BEANCHECK_PATH_SEPARATOR", ".")

# --- Metrics ---
METRICS_ENABLED: bool = os.getenv("BEANCHECK_METRICS_ENABLED", "true").lower() == "true"

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
