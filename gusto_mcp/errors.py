"""
Gateway Failure Types

Failure taxonomy for the Gusto adapter. Every failure raised while serving a
tool call is one of these types, or is classified as Unknown at the tool
boundary.

Kinds:
    Authentication  401/403 from upstream. Not retryable.
    RateLimit       429 from upstream. Retryable, carries Retry-After seconds.
    ApiError        Any other non-2xx. Carries status code and upstream message.
    Unknown         Network errors, undecodable bodies, anything else.

MissingCredentialsError sits outside the taxonomy: it is raised before a
tenant context exists and is answered by the HTTP transport, never by the
tool error formatter.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    AUTHENTICATION = "Authentication"
    RATE_LIMIT = "RateLimit"
    API_ERROR = "ApiError"
    UNKNOWN = "Unknown"


class ClassifiedError(BaseModel):
    """
    Immutable classification of a failed upstream interaction.

    Created once when a response (or exception) is classified and consumed
    once by the error formatter.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ErrorKind
    message: str
    retryable: bool
    status_code: int | None = Field(default=None, alias="statusCode")
    retry_after_seconds: int | None = Field(default=None, alias="retryAfterSeconds")

    def details(self) -> dict[str, Any]:
        """Machine-readable details block (kind, status, retryability)."""
        details: dict[str, Any] = {
            "kind": self.kind.value,
            "statusCode": self.status_code,
            "retryable": self.retryable,
        }
        if self.retry_after_seconds is not None:
            details["retryAfterSeconds"] = self.retry_after_seconds
        return details


# -----------------------------------------------------------------------------
# Gateway Failures
# -----------------------------------------------------------------------------


class GatewayFailure(Exception):
    """Base class for all failures raised by the request gateway."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @property
    def classified(self) -> ClassifiedError:
        return ClassifiedError(
            kind=self.kind,
            message=self.message,
            retryable=self.retryable,
            status_code=self.status_code,
        )


class AuthenticationError(GatewayFailure):
    """Upstream rejected the tenant's token (401/403), or no token was usable."""

    kind = ErrorKind.AUTHENTICATION


class RateLimitError(GatewayFailure):
    """Upstream throttled the tenant (429)."""

    kind = ErrorKind.RATE_LIMIT
    retryable = True

    def __init__(self, message: str, *, retry_after_seconds: int) -> None:
        super().__init__(message, status_code=429)
        self.retry_after_seconds = retry_after_seconds

    @property
    def classified(self) -> ClassifiedError:
        return ClassifiedError(
            kind=self.kind,
            message=self.message,
            retryable=self.retryable,
            status_code=self.status_code,
            retry_after_seconds=self.retry_after_seconds,
        )


class ApiError(GatewayFailure):
    """Upstream returned a non-2xx status other than 401, 403 or 429."""

    kind = ErrorKind.API_ERROR

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message, status_code=status_code)


class UnknownFailure(GatewayFailure):
    """Transport or decoding failure with no HTTP classification."""

    kind = ErrorKind.UNKNOWN


# -----------------------------------------------------------------------------
# Failures outside the tool boundary
# -----------------------------------------------------------------------------


class MissingCredentialsError(Exception):
    """The inbound request carries no usable tenant access token."""

    def __init__(self, message: str, *, required_headers: list[str]) -> None:
        super().__init__(message)
        self.required_headers = required_headers


class ToolValidationError(Exception):
    """Tool arguments failed validation before any request was built."""

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        super().__init__(f"Invalid arguments for tool '{tool_name}': " + "; ".join(errors))
        self.tool_name = tool_name
        self.errors = errors


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def classify_error(error: BaseException) -> ClassifiedError:
    """Classify any exception into the failure taxonomy."""
    if isinstance(error, GatewayFailure):
        return error.classified
    if isinstance(error, httpx.HTTPError):
        return ClassifiedError(
            kind=ErrorKind.UNKNOWN,
            message=f"HTTP error: {error!s}",
            retryable=False,
        )
    return ClassifiedError(
        kind=ErrorKind.UNKNOWN,
        message=str(error) or type(error).__name__,
        retryable=False,
    )


def extract_error_message(body: str, status_code: int) -> str:
    """
    Best-effort human-readable message from an upstream error body.

    Priority: ``message``, then ``error``, then ``errors[0].message``,
    falling back to ``API error: <status>``.
    """
    fallback = f"API error: {status_code}"
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return fallback
    if not isinstance(payload, dict):
        return fallback

    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value

    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        value = errors[0].get("message")
        if isinstance(value, str) and value:
            return value

    return fallback
