"""Application configuration."""

import os

from reading_proxy.errors import ConfigurationError

# Upstream NLT reading API
NLT_API_KEY = os.getenv("NLT_API_KEY")
NLT_API_URL = os.getenv("NLT_API_URL", "https://api.nlt.to/api/reading")
READING_PLAN = "oycb"
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "15"))  # seconds

# Cache settings (in-memory, one entry per date)
CACHE_TTL = 60 * 60  # seconds
CACHE_TTL_MS = CACHE_TTL * 1000

# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))


def require_api_key() -> str:
    """Return the upstream API key, or raise if it is not configured."""
    if not NLT_API_KEY:
        raise ConfigurationError("NLT_API_KEY environment variable is required")
    return NLT_API_KEY
