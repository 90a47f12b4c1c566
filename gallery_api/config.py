"""
Configuration Module for the Gallery Search API

This module loads the settings the backend needs to relay artwork searches
to the Harvard Art Museums collection API. Environment variables are read
from a .env file when present, with defaults suited to local development.

Key Configuration Areas:
- Upstream API location and key
- Pagination link masking
- Upstream request timeout
- CORS origins and log level
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Upstream collection API
BASE_URL = os.getenv("HAM_BASE_URL", "https://api.harvardartmuseums.org").rstrip("/")
API_KEY = os.getenv("HAM_API_KEY", "")

# Literal token that stands in for the API key in links handed to clients
API_KEY_PLACEHOLDER = "API_KEY"

# Seconds to wait on a single upstream call
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "30"))

# Facets the upstream API exposes as their own endpoints
FILTER_CATEGORIES = (
    "classification",
    "culture",
    "period",
    "medium",
    "century",
    "technique",
    "worktype",
)

# Comma-separated list of origins allowed to call the API from a browser
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
