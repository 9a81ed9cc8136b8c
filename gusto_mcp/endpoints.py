"""
Tool definitions for the Gusto MCP adapter.

This module contains the core types of the operation registry:
- ToolParams / FormattedParams: pydantic parameter models
- GustoTool: one externally exposed tool, bound to one gateway call

Concrete tools live in the tools/ package, one module per domain area.
To add a tool: append a GustoTool to the right tools/<area>.py list.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ToolValidationError
from .formatters import (
    EntityKind,
    ResponseFormat,
    format_json,
    format_message,
    format_response,
    format_success,
)
from .models import Tool, ToolCallResult, ToolInputSchema

if TYPE_CHECKING:
    from .client import GustoClient


# -----------------------------------------------------------------------------
# Parameter Models
# -----------------------------------------------------------------------------


class ToolParams(BaseModel):
    """
    Base for every tool's parameters.

    Arguments arrive in camelCase. Unknown arguments are rejected: a tool
    receives only what it declares.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def body(self, *exclude: str) -> dict[str, Any]:
        """
        Domain (camelCase) dict of the arguments that were provided.

        ``exclude`` names path identifiers that belong in the URL, not the
        request body. ``format`` is never part of a body.
        """
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"format", *exclude})


class FormattedParams(ToolParams):
    format: Literal["json", "markdown"] = Field(
        default="json", description="Response format"
    )


class CompanyParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")


class EmployeeParams(FormattedParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")


class ContractorParams(FormattedParams):
    contractor_id: str = Field(min_length=1, description="Contractor UUID")


class NoParams(ToolParams):
    pass


# -----------------------------------------------------------------------------
# Tool
# -----------------------------------------------------------------------------

Handler = Callable[["GustoClient", Any], Awaitable[Any]]


def _describe(error: Any) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
    return f"{location}: {error.get('msg', 'invalid value')}"


def _flatten_property(prop: dict[str, Any]) -> dict[str, Any]:
    """Collapse pydantic's ``anyOf [T, null]`` for optionals into plain ``T``."""
    prop = {k: v for k, v in prop.items() if k != "title"}
    options = prop.pop("anyOf", None)
    if options is not None:
        concrete = [o for o in options if o.get("type") != "null"]
        if len(concrete) == 1:
            prop = {**concrete[0], **prop}
        else:
            prop["anyOf"] = concrete
    if prop.get("default", ...) is None:
        del prop["default"]
    return prop


@dataclass(frozen=True)
class GustoTool:
    """
    One MCP tool, 1:1 with an upstream operation.

    Rendering is decided by the declaration, not by the handler:
    - empty_message: result when the handler returns None
    - success_message: confirmation for operations without a response body
    - result_key: mutation results wrap as {"success": true, key: result}
    - kind: read results go through format_response with this tag
    """

    name: str
    description: str
    handler: Handler
    params: type[ToolParams] = NoParams
    kind: EntityKind | None = None
    result_key: str | None = None
    success_message: str | None = None
    empty_message: str | None = None

    def validate_arguments(self, arguments: dict[str, Any]) -> ToolParams:
        """
        Validate arguments against this tool's parameter model.

        Raises:
            ToolValidationError: On unknown, missing or ill-typed arguments.
        """
        try:
            return self.params.model_validate(arguments)
        except ValidationError as exc:
            raise ToolValidationError(self.name, [_describe(err) for err in exc.errors()]) from exc

    async def invoke(self, client: GustoClient, params: ToolParams) -> ToolCallResult:
        data = await self.handler(client, params)
        return self.render(data, params)

    def render(self, data: Any, params: ToolParams) -> ToolCallResult:
        if data is None and self.empty_message is not None:
            return format_json({"message": self.empty_message})
        if self.success_message is not None:
            return format_message(self.success_message)
        if self.result_key is not None:
            return format_success(self.result_key, data)
        if self.kind is not None:
            fmt = getattr(params, "format", ResponseFormat.JSON)
            return format_response(data, fmt, self.kind)
        return format_json(data)

    def to_mcp_tool(self) -> Tool:
        """Convert this tool to its MCP definition, schema taken from the params model."""
        schema = self.params.model_json_schema(by_alias=True)
        properties = {
            name: _flatten_property(prop)
            for name, prop in schema.get("properties", {}).items()
        }
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=ToolInputSchema(
                properties=properties,
                required=list(schema.get("required", [])),
            ),
        )
