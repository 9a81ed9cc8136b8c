"""
Tests for the HTTP transport.

The FastAPI app is driven in-process through httpx.ASGITransport. The
process-wide adapter is swapped for one wired to a MockTransport so the
number of upstream calls can be asserted.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator

import httpx
import pytest

from gusto_mcp import server
from gusto_mcp.adapter import GustoMcpAdapter
from gusto_mcp.config import ACCESS_TOKEN_HEADER, SERVER_NAME
from gusto_mcp.models import ErrorCode

from conftest import MockTransport

AUTH_HEADERS = {ACCESS_TOKEN_HEADER: "token-a"}


@pytest.fixture
async def http(
    mock_transport: MockTransport, monkeypatch: pytest.MonkeyPatch
) -> AsyncIterator[httpx.AsyncClient]:
    monkeypatch.setattr(server, "adapter", GustoMcpAdapter(transport=mock_transport))
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=server.app), base_url="http://testserver"
    ) as client:
        yield client


def tools_call(name: str, arguments: dict, request_id: int = 1) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "method": "tools/call",
        "params": {"name": name, "arguments": arguments},
    }


# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------


class TestCredentialGate:
    @pytest.mark.asyncio
    async def test_missing_token_rejected_before_dispatch(self, http, mock_transport):
        response = await http.post("/mcp", json=tools_call("gusto_get_employee", {"employeeId": "emp-1"}))

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "Unauthorized"
        assert body["required_headers"] == [ACCESS_TOKEN_HEADER]
        assert ACCESS_TOKEN_HEADER in body["message"]
        assert mock_transport.call_count == 0

    @pytest.mark.asyncio
    async def test_blank_token_rejected(self, http, mock_transport):
        response = await http.post(
            "/mcp",
            json=tools_call("gusto_get_employee", {"employeeId": "emp-1"}),
            headers={ACCESS_TOKEN_HEADER: "  "},
        )
        assert response.status_code == 401
        assert mock_transport.call_count == 0

    @pytest.mark.asyncio
    async def test_missing_token_checked_before_body(self, http):
        response = await http.post("/mcp", content=b"{not json")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_forwarded(self, http, mock_transport):
        response = await http.post(
            "/mcp",
            json=tools_call("gusto_get_employee", {"employeeId": "emp-1"}),
            headers={ACCESS_TOKEN_HEADER: "tenant-token", "X-Gusto-API-Version": "2024-04-01"},
        )
        assert response.status_code == 200
        request = mock_transport.requests[0]
        assert request.headers["Authorization"] == "Bearer tenant-token"
        assert request.headers["X-Gusto-API-Version"] == "2024-04-01"


# -----------------------------------------------------------------------------
# JSON-RPC over HTTP
# -----------------------------------------------------------------------------


class TestMcpEndpoint:
    @pytest.mark.asyncio
    async def test_invalid_json(self, http):
        response = await http.post("/mcp", content=b"{not json", headers=AUTH_HEADERS)
        assert response.status_code == 200
        assert response.json()["error"]["code"] == ErrorCode.PARSE_ERROR.value

    @pytest.mark.asyncio
    async def test_invalid_request(self, http):
        response = await http.post("/mcp", json={"jsonrpc": "2.0", "id": 7}, headers=AUTH_HEADERS)
        body = response.json()
        assert body["id"] == 7
        assert body["error"]["code"] == ErrorCode.INVALID_REQUEST.value

    @pytest.mark.asyncio
    async def test_non_object_body(self, http):
        response = await http.post("/mcp", json=[1, 2, 3], headers=AUTH_HEADERS)
        body = response.json()
        assert body["id"] is None
        assert body["error"]["code"] == ErrorCode.INVALID_REQUEST.value

    @pytest.mark.asyncio
    async def test_notification_gets_no_reply(self, http, mock_transport):
        response = await http.post(
            "/mcp",
            json={"jsonrpc": "2.0", "method": "notifications/initialized"},
            headers=AUTH_HEADERS,
        )
        assert response.status_code == 202
        assert response.content == b""
        assert mock_transport.call_count == 0

    @pytest.mark.asyncio
    async def test_tool_call_with_meta(self, http):
        request = tools_call("gusto_get_employee", {"employeeId": "emp-1"})
        request["params"]["_meta"] = {"progressToken": "abc"}
        response = await http.post("/mcp", json=request, headers=AUTH_HEADERS)
        assert response.json()["result"]["isError"] is False

    @pytest.mark.asyncio
    async def test_initialize(self, http):
        response = await http.post(
            "/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"}, headers=AUTH_HEADERS
        )
        assert response.json()["result"]["serverInfo"]["name"] == SERVER_NAME

    @pytest.mark.asyncio
    async def test_tool_call(self, http):
        response = await http.post(
            "/mcp", json=tools_call("gusto_get_employee", {"employeeId": "emp-1"}), headers=AUTH_HEADERS
        )
        result = response.json()["result"]
        assert result["isError"] is False
        assert json.loads(result["content"][0]["text"])["lastName"] == "Hamilton"

    @pytest.mark.asyncio
    async def test_upstream_failure_is_tool_error_not_http_error(self, http):
        response = await http.post(
            "/mcp", json=tools_call("gusto_get_company", {"companyId": "nope"}), headers=AUTH_HEADERS
        )
        assert response.status_code == 200
        assert response.json()["result"]["isError"] is True


# -----------------------------------------------------------------------------
# Auxiliary endpoints
# -----------------------------------------------------------------------------


class TestAuxiliaryEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, http):
        response = await http.get("/health")
        assert response.json() == {"status": "ok", "server": SERVER_NAME}

    @pytest.mark.asyncio
    async def test_info(self, http):
        body = (await http.get("/")).json()
        assert body["name"] == SERVER_NAME
        assert ACCESS_TOKEN_HEADER in body["authentication"]["required_headers"]
        assert "gusto_list_employees" in body["tools"]
        assert "/mcp" in body["endpoints"]

    @pytest.mark.asyncio
    async def test_tools_needs_no_credentials(self, http, mock_transport):
        response = await http.get("/tools")
        assert response.status_code == 200
        assert len(response.json()["tools"]) == 67
        assert mock_transport.call_count == 0


@pytest.mark.asyncio
async def test_lifespan_creates_adapter(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(server, "adapter", None)
    async with server.lifespan(server.app):
        assert isinstance(server.adapter, GustoMcpAdapter)
    assert server.adapter is None


@pytest.mark.asyncio
async def test_mcp_unavailable_without_adapter(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(server, "adapter", None)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=server.app), base_url="http://testserver"
    ) as client:
        response = await client.post("/mcp", json={}, headers=AUTH_HEADERS)
    assert response.status_code == 503
