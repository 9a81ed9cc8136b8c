"""
Centralized configuration for the Gusto MCP adapter.

All API URLs, header names, limits and server constants in one place.
Supports environment variable overrides for deployment flexibility.

Nothing here is tenant-specific: access tokens arrive per request in
headers and are never read from the environment.
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# -----------------------------------------------------------------------------
# Upstream API
# -----------------------------------------------------------------------------

GUSTO_API_BASE_URL = os.environ.get(
    "GUSTO_API_BASE_URL",
    "https://api.gusto.com/v1",
)

# Sent as X-Gusto-API-Version when a request does not override it.
GUSTO_DEFAULT_API_VERSION: str | None = os.environ.get("GUSTO_API_VERSION") or None

# -----------------------------------------------------------------------------
# Tenant Credential Headers
# -----------------------------------------------------------------------------

ACCESS_TOKEN_HEADER = "X-Gusto-Access-Token"
API_VERSION_HEADER = "X-Gusto-API-Version"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

# None disables the client timeout; timeout policy belongs to the deployment.
HTTP_TIMEOUT_SECONDS: float | None = _env_float("GUSTO_HTTP_TIMEOUT_SECONDS")

DEFAULT_RATE_LIMIT_RETRY_SECONDS = 60

# -----------------------------------------------------------------------------
# Pagination & Output Limits
# -----------------------------------------------------------------------------

DEFAULT_PAGE_SIZE = _env_int("GUSTO_DEFAULT_PAGE_SIZE", 25)
MAX_PAGE_SIZE = _env_int("GUSTO_MAX_PAGE_SIZE", 100)
MAX_RESPONSE_CHARS = _env_int("GUSTO_MAX_RESPONSE_CHARS", 50000)

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "gusto-mcp-server"
SERVER_VERSION = "1.0.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

LOG_LEVEL = os.environ.get("GUSTO_MCP_LOG_LEVEL", "INFO").upper()
