"""
MCP Server

FastAPI application exposing the Gusto adapter as an MCP-compliant server.
Handles JSON-RPC 2.0 over HTTP POST in stateless mode: every request carries
its tenant's credentials in headers and nothing is kept between requests.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from .adapter import GustoMcpAdapter, create_gusto_adapter
from .config import (
    ACCESS_TOKEN_HEADER,
    API_VERSION_HEADER,
    LOG_LEVEL,
    SERVER_NAME,
    SERVER_VERSION,
)
from .credentials import parse_tenant_credentials
from .errors import MissingCredentialsError
from .models import ErrorCode, JsonRpcRequest, make_error_response

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Application Lifecycle
# -----------------------------------------------------------------------------

adapter: GustoMcpAdapter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the process-wide adapter. It holds tools, never tokens."""
    global adapter
    adapter = create_gusto_adapter()
    logger.info("%s %s ready with %d tools", SERVER_NAME, SERVER_VERSION, len(adapter.tools))
    yield
    adapter = None


# -----------------------------------------------------------------------------
# FastAPI Application
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Gusto MCP Server",
    description=(
        "Multi-tenant MCP server for the Gusto payroll API. "
        "Tenant credentials are passed per request in headers."
    ),
    version=SERVER_VERSION,
    lifespan=lifespan,
)


@app.post("/mcp", response_model=None)
async def mcp_endpoint(request: Request) -> Response:
    """
    Main MCP endpoint accepting JSON-RPC 2.0 requests.

    Credentials are checked before the body is even parsed: a request
    without a token never reaches the adapter.
    """
    if adapter is None:
        raise HTTPException(status_code=503, detail="Adapter not initialized")

    try:
        credentials = parse_tenant_credentials(request.headers)
    except MissingCredentialsError as e:
        logger.info("Rejected /mcp request without credentials")
        return JSONResponse(
            content={
                "error": "Unauthorized",
                "message": str(e),
                "required_headers": e.required_headers,
            },
            status_code=401,
        )

    # Parse raw JSON to handle malformed requests gracefully
    try:
        body = await request.json()
    except Exception:
        error = make_error_response(None, ErrorCode.PARSE_ERROR, "Invalid JSON")
        return JSONResponse(content=error.model_dump(), status_code=200)

    # Validate as JSON-RPC request
    try:
        rpc_request = JsonRpcRequest(**body)
    except (ValidationError, TypeError) as e:
        error = make_error_response(
            body.get("id") if isinstance(body, dict) else None,
            ErrorCode.INVALID_REQUEST,
            f"Invalid request: {e}",
        )
        return JSONResponse(content=error.model_dump(), status_code=200)

    # Notifications (no id) are acknowledged without a JSON-RPC reply
    if rpc_request.id is None:
        logger.debug("Notification %s acknowledged", rpc_request.method)
        return Response(status_code=202)

    response = await adapter.handle_request(rpc_request, credentials)
    return JSONResponse(content=response.model_dump(), status_code=200)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "server": SERVER_NAME}


@app.get("/")
async def info() -> dict[str, Any]:
    """Describe the server, its endpoints and how to authenticate."""
    tool_names = list(adapter.tools) if adapter is not None else []
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "Multi-tenant MCP server for the Gusto payroll API",
        "endpoints": {
            "/mcp": "POST - MCP JSON-RPC endpoint (requires credentials)",
            "/tools": "GET - Tool definitions",
            "/health": "GET - Health check",
        },
        "authentication": {
            "required_headers": {
                ACCESS_TOKEN_HEADER: "Gusto OAuth access token",
            },
            "optional_headers": {
                API_VERSION_HEADER: "Gusto API version override",
            },
        },
        "tools": tool_names,
    }


@app.get("/tools")
async def list_tools() -> dict[str, Any]:
    """
    Convenience endpoint to list available tools.

    Not part of MCP - useful for debugging and exploration. Needs no
    credentials since no upstream call is made.
    """
    if adapter is None:
        raise HTTPException(status_code=503, detail="Adapter not initialized")

    tools = adapter.list_tools()
    return {"tools": [t.model_dump() for t in tools]}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=8000)
