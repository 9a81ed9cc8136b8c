"""Gusto MCP server package."""

from .adapter import GustoMcpAdapter, create_gusto_adapter
from .client import NO_CONTENT, GustoClient, create_gusto_client
from .config import (
    ACCESS_TOKEN_HEADER,
    API_VERSION_HEADER,
    GUSTO_API_BASE_URL,
    MAX_RESPONSE_CHARS,
    MCP_PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
)
from .credentials import TenantCredentials, parse_tenant_credentials
from .endpoints import GustoTool, ToolParams
from .errors import (
    ApiError,
    AuthenticationError,
    ClassifiedError,
    ErrorKind,
    GatewayFailure,
    MissingCredentialsError,
    RateLimitError,
    ToolValidationError,
    UnknownFailure,
    classify_error,
)
from .formatters import (
    EntityKind,
    ResponseFormat,
    format_error,
    format_response,
    format_success,
    truncate_result,
)
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorData,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    ToolInputSchema,
    make_error_response,
    make_success_response,
)
from .normalizer import Entity, EntityMapping, from_wire, snake_to_camel, to_wire
from .pagination import PaginatedResponse, PaginationParams, normalize_pagination_params
from .tools import ALL_TOOLS

__all__ = [
    # Adapter
    "GustoMcpAdapter",
    "create_gusto_adapter",
    "ALL_TOOLS",
    "GustoTool",
    "ToolParams",
    # Gateway
    "GustoClient",
    "create_gusto_client",
    "NO_CONTENT",
    "TenantCredentials",
    "parse_tenant_credentials",
    # Config
    "ACCESS_TOKEN_HEADER",
    "API_VERSION_HEADER",
    "GUSTO_API_BASE_URL",
    "MAX_RESPONSE_CHARS",
    "MCP_PROTOCOL_VERSION",
    "SERVER_NAME",
    "SERVER_VERSION",
    # Errors
    "GatewayFailure",
    "AuthenticationError",
    "RateLimitError",
    "ApiError",
    "UnknownFailure",
    "MissingCredentialsError",
    "ToolValidationError",
    "ErrorKind",
    "ClassifiedError",
    "classify_error",
    # Normalizer & pagination
    "Entity",
    "EntityMapping",
    "from_wire",
    "to_wire",
    "snake_to_camel",
    "PaginatedResponse",
    "PaginationParams",
    "normalize_pagination_params",
    # Formatting
    "EntityKind",
    "ResponseFormat",
    "format_response",
    "format_success",
    "format_error",
    "truncate_result",
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcErrorResponse",
    "JsonRpcErrorData",
    "Tool",
    "ToolInputSchema",
    "ToolCallParams",
    "ToolCallResult",
    "TextContent",
    "ListToolsResult",
    "InitializeResult",
    "ErrorCode",
    "make_error_response",
    "make_success_response",
]
