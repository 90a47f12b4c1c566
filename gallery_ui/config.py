"""
Frontend configuration.

The UI only talks to the Gallery Search API; it never sees the upstream
API key. Docker containers carry a /.dockerenv file, which selects the
compose service name as the backend host.
"""

import os
from dotenv import load_dotenv

load_dotenv()

IS_DOCKER = os.path.exists("/.dockerenv")
_DEFAULT_HOST = "fastapi-backend" if IS_DOCKER else "localhost"

BACKEND_URL = os.getenv("BACKEND_URL", f"http://{_DEFAULT_HOST}:8000/api").rstrip("/")

REQUEST_TIMEOUT = float(os.getenv("FRONTEND_REQUEST_TIMEOUT", "30"))

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "12"))
PAGE_SIZE_OPTIONS = [12, 24, 48, 96]

# Sidebar order of the multi-select filters
FILTER_CATEGORIES = [
    "classification",
    "culture",
    "period",
    "medium",
    "century",
    "technique",
    "worktype",
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
