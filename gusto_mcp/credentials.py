"""
Tenant credential extraction.

A single server process serves many Gusto customers. Each inbound request
names its tenant by carrying an OAuth access token in a header; nothing
tenant-specific is configured process-wide.

Required header:
    X-Gusto-Access-Token   OAuth 2.0 access token for the Gusto API
Optional header:
    X-Gusto-API-Version    Override of the API version sent upstream
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .config import ACCESS_TOKEN_HEADER, API_VERSION_HEADER, GUSTO_DEFAULT_API_VERSION
from .errors import MissingCredentialsError


class TenantCredentials(BaseModel):
    """Per-request tenant credentials. Lives for one request, never persisted."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    api_version: str | None = None

    def __repr__(self) -> str:
        return f"TenantCredentials(access_token='***', api_version={self.api_version!r})"

    __str__ = __repr__


def _header(headers: Mapping[str, str], name: str) -> str | None:
    # Starlette headers are already case-insensitive; plain dicts are not.
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_tenant_credentials(headers: Mapping[str, str]) -> TenantCredentials:
    """
    Build TenantCredentials from inbound request headers.

    Raises:
        MissingCredentialsError: If the access token header is absent or blank.
    """
    access_token = _header(headers, ACCESS_TOKEN_HEADER)
    if access_token is None:
        raise MissingCredentialsError(
            f"No credentials provided. Include {ACCESS_TOKEN_HEADER} header.",
            required_headers=[ACCESS_TOKEN_HEADER],
        )

    api_version = _header(headers, API_VERSION_HEADER) or GUSTO_DEFAULT_API_VERSION
    return TenantCredentials(access_token=access_token, api_version=api_version)
