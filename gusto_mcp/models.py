"""
MCP Protocol Models

Pydantic schemas for the JSON-RPC 2.0 messages exchanged with MCP clients.
Only the subset the Gusto adapter speaks is modelled: initialize,
tools/list and tools/call, with text-only content blocks.

Reference: https://modelcontextprotocol.io/specification
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .config import MCP_PROTOCOL_VERSION, SERVER_NAME, SERVER_VERSION


# -----------------------------------------------------------------------------
# JSON-RPC 2.0 Base Types
# -----------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """
    JSON-RPC 2.0 request object.

    Every tool invocation from an agent arrives wrapped in this envelope.
    Tenant credentials are NOT part of it; they travel in HTTP headers.
    A request without an id is a notification and gets no reply.
    """

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    method: str
    params: dict[str, Any] | None = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 success response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    result: Any


class JsonRpcErrorData(BaseModel):
    code: int
    message: str
    data: Any | None = None


class JsonRpcErrorResponse(BaseModel):
    """JSON-RPC 2.0 error response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    error: JsonRpcErrorData


# Standard JSON-RPC error codes
class ErrorCode(int, Enum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


# -----------------------------------------------------------------------------
# MCP Tool Types
# -----------------------------------------------------------------------------


class ToolInputSchema(BaseModel):
    """
    JSON Schema describing a tool's input parameters.

    Built from each tool's pydantic parameter model, so required fields and
    enumerated values advertised to the agent match what is validated.
    """

    type: Literal["object"] = "object"
    properties: dict[str, dict[str, Any]] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class Tool(BaseModel):
    """MCP tool definition as returned by tools/list."""

    name: str
    description: str
    inputSchema: ToolInputSchema  # noqa: N815 (MCP wire name)


class ToolCallParams(BaseModel):
    """
    Parameters for the tools/call method.

    ``_meta`` carries client bookkeeping such as a progress token; it is
    accepted and not acted on.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


# -----------------------------------------------------------------------------
# Content Types
# -----------------------------------------------------------------------------


class TextContent(BaseModel):
    """Text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """
    Terminal output of every tool invocation.

    Exactly one shape per call: a success payload, or an error payload with
    isError set. Never both.
    """

    content: list[TextContent]
    isError: bool = False  # noqa: N815

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "\n".join(block.text for block in self.content)


# -----------------------------------------------------------------------------
# MCP Method Responses
# -----------------------------------------------------------------------------


class ListToolsResult(BaseModel):
    tools: list[Tool]


class InitializeResult(BaseModel):
    """Response to the initialize method."""

    protocolVersion: str = MCP_PROTOCOL_VERSION  # noqa: N815
    serverInfo: dict[str, str] = Field(  # noqa: N815
        default_factory=lambda: {"name": SERVER_NAME, "version": SERVER_VERSION}
    )
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def make_error_response(
    request_id: int | str | None,
    code: ErrorCode,
    message: str,
    data: Any | None = None,
) -> JsonRpcErrorResponse:
    """Construct a JSON-RPC error response."""
    return JsonRpcErrorResponse(
        id=request_id,
        error=JsonRpcErrorData(code=code.value, message=message, data=data),
    )


def make_success_response(request_id: int | str | None, result: Any) -> JsonRpcResponse:
    """Construct a JSON-RPC success response."""
    return JsonRpcResponse(id=request_id, result=result)
