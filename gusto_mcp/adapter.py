"""
Gusto-to-MCP Adapter

Routes MCP JSON-RPC requests to the registered Gusto tools.

The adapter:
1. Holds a fixed, read-only registry of tools built at construction
2. Handles initialize, tools/list and tools/call
3. Runs every tool call against a fresh gateway client bound to the
   caller's credentials, so no tenant state outlives a request
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

import httpx

from .client import GustoClient, create_gusto_client
from .config import MAX_RESPONSE_CHARS
from .credentials import TenantCredentials
from .endpoints import GustoTool
from .errors import ToolValidationError, classify_error
from .formatters import format_error, truncate_result
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .tools import ALL_TOOLS

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., GustoClient]


class GustoMcpAdapter:
    """
    Adapts the Gusto REST API to the MCP protocol.

    One adapter serves every tenant. It never stores credentials: they are
    passed into each request and handed to a client that lives only for
    the duration of one tool call.
    """

    def __init__(
        self,
        tools: Iterable[GustoTool] = ALL_TOOLS,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        client_factory: ClientFactory = create_gusto_client,
        max_response_chars: int = MAX_RESPONSE_CHARS,
    ):
        registry: dict[str, GustoTool] = {}
        for tool in tools:
            if tool.name in registry:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            registry[tool.name] = tool
        self._tools: Mapping[str, GustoTool] = MappingProxyType(registry)
        self._transport = transport
        self._client_factory = client_factory
        self._max_response_chars = max_response_chars

    @property
    def tools(self) -> Mapping[str, GustoTool]:
        """Read-only view of the registry, keyed by tool name."""
        return self._tools

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any],
        credentials: TenantCredentials,
    ) -> ToolCallResult:
        """
        Execute one tool for one tenant.

        Flow:
        1. Look up the tool (unknown name is an error result)
        2. Validate arguments (raises ToolValidationError)
        3. Open a client for these credentials, run the handler, render
        4. Any failure from the gateway or handler becomes an error result

        Raises:
            ToolValidationError: If the arguments do not match the tool's schema.
        """
        tool = self._tools.get(name)
        if tool is None:
            return ToolCallResult(
                content=[TextContent(text=f"Unknown tool: {name}")],
                isError=True,
            )

        params = tool.validate_arguments(arguments)

        try:
            async with self._client_factory(credentials, transport=self._transport) as client:
                result = await tool.invoke(client, params)
        except Exception as exc:
            classified = classify_error(exc)
            logger.warning(
                "Tool %s failed: %s (%s)", name, classified.message, classified.kind.value
            )
            result = format_error(exc)

        return truncate_result(result, self._max_response_chars)

    async def handle_request(
        self,
        request: JsonRpcRequest,
        credentials: TenantCredentials,
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """
        Single entry point for all MCP operations.

        Supported methods:
            initialize  → server capabilities
            tools/list  → available tools
            tools/call  → execute tool with the caller's credentials
        """
        match request.method:
            case "initialize":
                return make_success_response(request.id, InitializeResult().model_dump())

            case "tools/list":
                list_result = ListToolsResult(tools=self.list_tools())
                return make_success_response(request.id, list_result.model_dump())

            case "tools/call":
                return await self._handle_tools_call(request, credentials)

            case _:
                return make_error_response(
                    request.id,
                    ErrorCode.METHOD_NOT_FOUND,
                    f"Unknown method: {request.method}",
                )

    async def _handle_tools_call(
        self,
        request: JsonRpcRequest,
        credentials: TenantCredentials,
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        if request.params is None:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                "Missing params for tools/call",
            )

        try:
            params = ToolCallParams(**request.params)
        except Exception as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        logger.info("tools/call %s", params.name)

        try:
            call_result = await self.call_tool(params.name, params.arguments, credentials)
        except ToolValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                str(e),
                data={"tool": e.tool_name, "errors": e.errors},
            )

        return make_success_response(request.id, call_result.model_dump())


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_gusto_adapter(
    transport: httpx.AsyncBaseTransport | None = None,
) -> GustoMcpAdapter:
    """Create an adapter with the full Gusto tool catalog registered."""
    return GustoMcpAdapter(ALL_TOOLS, transport=transport)
