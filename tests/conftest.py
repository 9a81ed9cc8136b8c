"""
Shared test fixtures for the Gusto MCP adapter tests.

Provides a recording mock transport, tenant credentials and adapters wired
to the mock so no test touches the real Gusto API.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from gusto_mcp.adapter import GustoMcpAdapter
from gusto_mcp.client import GustoClient
from gusto_mcp.config import GUSTO_API_BASE_URL
from gusto_mcp.credentials import TenantCredentials

API_PATH_PREFIX = httpx.URL(GUSTO_API_BASE_URL).path.rstrip("/")


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockResponse:
    """Canned upstream response: status, JSON (or raw) body and headers."""

    def __init__(
        self,
        status: int = 200,
        data: Any = None,
        *,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.status = status
        self.data = data
        self.text = text
        self.headers = headers or {}

    def build(self) -> httpx.Response:
        if self.text is not None:
            return httpx.Response(self.status, text=self.text, headers=self.headers)
        if self.data is None:
            return httpx.Response(self.status, headers=self.headers)
        return httpx.Response(self.status, json=self.data, headers=self.headers)


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses and records requests.

    Routes are keyed by API path relative to the Gusto base URL, either as
    ``"/path"`` (any method) or ``"METHOD /path"``. Values are a MockResponse
    or a ``(status, data)`` tuple. Unrouted requests get a 404.
    """

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = responses or {}
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.path
        if path.startswith(API_PATH_PREFIX):
            path = path[len(API_PATH_PREFIX):]

        route = self.responses.get(f"{request.method} {path}", self.responses.get(path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(route, MockResponse):
            return route.build()
        status, data = route
        return MockResponse(status, data).build()


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport whose every request fails at the network layer."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise httpx.ConnectError("connection refused", request=request)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


MOCK_EMPLOYEE_WIRE = {
    "uuid": "emp-1",
    "company_uuid": "co-1",
    "first_name": "Alexander",
    "last_name": "Hamilton",
    "email": "alex@example.com",
    "onboarded": True,
    "terminated": False,
    "current_employment_status": "full_time",
    "home_address": {"street_1": "1 Main St", "city": "New York", "state": "NY", "zip": "10001"},
    "jobs": [
        {
            "uuid": "job-1",
            "title": "Treasurer",
            "compensations": [{"uuid": "comp-1", "rate": "60000.00", "payment_unit": "Year"}],
        }
    ],
    "unsupported_field": "dropped",
}

MOCK_TOKEN_INFO_WIRE = {
    "scope": "employees:read",
    "resource_owner": {"uuid": "user-1", "type": "CompanyAdmin", "email": "admin@example.com"},
}

MOCK_PAYROLL_WIRE = {
    "payroll_uuid": "pay-1",
    "company_uuid": "co-1",
    "processed": True,
    "check_date": "2024-01-15",
    "pay_period_start_date": "2024-01-01",
    "pay_period_end_date": "2024-01-14",
    "totals": {"gross_pay": "5000.00", "net_pay": "3800.00"},
}


def employee_wire(index: int) -> dict[str, Any]:
    return {"uuid": f"emp-{index}", "first_name": f"First{index}", "last_name": f"Last{index}"}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def credentials() -> TenantCredentials:
    return TenantCredentials(access_token="token-a", api_version="2024-04-01")


@pytest.fixture
def mock_transport() -> MockTransport:
    """Mock transport with common Gusto responses."""
    return MockTransport({
        "/token_info": (200, MOCK_TOKEN_INFO_WIRE),
        "/employees/emp-1": (200, MOCK_EMPLOYEE_WIRE),
        "/companies/co-1/employees": (200, [MOCK_EMPLOYEE_WIRE]),
        "/companies/co-1/payrolls": (200, [MOCK_PAYROLL_WIRE]),
        "/companies/co-1/holiday_pay_policy": (404, {"message": "Not found"}),
    })


@pytest.fixture
def client(credentials: TenantCredentials, mock_transport: MockTransport) -> GustoClient:
    return GustoClient(credentials, transport=mock_transport)


@pytest.fixture
def mock_adapter(mock_transport: MockTransport) -> tuple[GustoMcpAdapter, MockTransport]:
    """Adapter with the full tool catalog, wired to the mock transport."""
    return GustoMcpAdapter(transport=mock_transport), mock_transport
