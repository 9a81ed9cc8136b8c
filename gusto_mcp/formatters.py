"""
Response Formatter

Renders normalized results as MCP tool output, either as indented JSON or
as Markdown for human-facing agents.

Markdown rendering is selected by a closed EntityKind tag. A handful of
kinds have dedicated table layouts; every other kind falls back to a
generic table built from the first item's first five keys. The renderer
table is a plain dict so adding a layout is a one-line change.

Errors are always rendered by ``format_error``: an isError result whose
text is JSON carrying the human message and a machine-readable details
block.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any

from .config import MAX_RESPONSE_CHARS
from .errors import classify_error
from .models import TextContent, ToolCallResult
from .pagination import PaginatedResponse


class ResponseFormat(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"


class EntityKind(str, Enum):
    """Every kind of result a tool can render."""

    TOKEN_INFO = "tokenInfo"
    COMPANY = "company"
    LOCATION = "location"
    DEPARTMENT = "department"
    ADMIN = "admin"
    SIGNATORY = "signatory"
    BANK_ACCOUNT = "bankAccount"
    EMPLOYEE = "employee"
    ONBOARDING_STATUS = "onboardingStatus"
    JOB = "job"
    COMPENSATION = "compensation"
    HOME_ADDRESS = "homeAddress"
    FEDERAL_TAXES = "federalTaxes"
    STATE_TAXES = "stateTaxes"
    PAYMENT_METHOD = "paymentMethod"
    TERMINATION = "termination"
    GARNISHMENT = "garnishment"
    FORM = "form"
    REIMBURSEMENT = "reimbursement"
    CONTRACTOR = "contractor"
    CONTRACTOR_PAYMENT = "contractorPayment"
    PAYROLL = "payroll"
    PAY_SCHEDULE = "paySchedule"
    PAY_PERIOD = "payPeriod"
    EARNING_TYPE = "earningType"
    NOTIFICATION = "notification"
    SUPPORTED_BENEFIT = "supportedBenefit"
    COMPANY_BENEFIT = "companyBenefit"
    EMPLOYEE_BENEFIT = "employeeBenefit"
    TIME_OFF_POLICY = "timeOffPolicy"
    HOLIDAY_PAY_POLICY = "holidayPayPolicy"
    WEBHOOK_SUBSCRIPTION = "webhookSubscription"
    EVENT = "event"

    @property
    def singular(self) -> str:
        return _title(self.value)

    @property
    def plural(self) -> str:
        return _IRREGULAR_PLURALS.get(self, f"{self.singular}s")


_IRREGULAR_PLURALS: dict[EntityKind, str] = {
    EntityKind.TOKEN_INFO: "Token Info",
    EntityKind.COMPANY: "Companies",
    EntityKind.SIGNATORY: "Signatories",
    EntityKind.ONBOARDING_STATUS: "Onboarding Statuses",
    EntityKind.HOME_ADDRESS: "Home Addresses",
    EntityKind.FEDERAL_TAXES: "Federal Taxes",
    EntityKind.STATE_TAXES: "State Taxes",
    EntityKind.TIME_OFF_POLICY: "Time Off Policies",
    EntityKind.HOLIDAY_PAY_POLICY: "Holiday Pay Policies",
}

_CAMEL_HUMP = re.compile(r"([A-Z])")


def _title(key: str) -> str:
    """camelCase to Title Case: ``payPeriodStartDate`` -> ``Pay Period Start Date``."""
    spaced = _CAMEL_HUMP.sub(r" \1", key).strip()
    return spaced[:1].upper() + spaced[1:]


format_key = _title


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list)):
        return json.dumps(value, default=str)
    return str(value)


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _full_name(item: Mapping[str, Any]) -> str:
    name = f"{item.get('firstName') or ''} {item.get('lastName') or ''}".strip()
    return name or "-"


# -----------------------------------------------------------------------------
# Collection renderers
# -----------------------------------------------------------------------------


def _employees_table(items: Sequence[Mapping[str, Any]]) -> str:
    lines = ["| UUID | Name | Email | Status | Onboarded |", "|---|---|---|---|---|"]
    for emp in items:
        status = "Terminated" if emp.get("terminated") else (emp.get("currentEmploymentStatus") or "Active")
        lines.append(
            f"| {_cell(emp.get('uuid'))} | {_full_name(emp)} | {_cell(emp.get('email'))} "
            f"| {status} | {_yes_no(emp.get('onboarded'))} |"
        )
    return "\n".join(lines)


def _contractors_table(items: Sequence[Mapping[str, Any]]) -> str:
    lines = ["| UUID | Name/Business | Type | Email | Active |", "|---|---|---|---|---|"]
    for c in items:
        if c.get("type") == "Business":
            name = c.get("businessName") or "-"
        else:
            name = _full_name(c)
        lines.append(
            f"| {_cell(c.get('uuid'))} | {name} | {_cell(c.get('type'))} "
            f"| {_cell(c.get('email'))} | {_yes_no(c.get('isActive'))} |"
        )
    return "\n".join(lines)


def _payrolls_table(items: Sequence[Mapping[str, Any]]) -> str:
    lines = ["| UUID | Pay Period | Check Date | Processed | Gross Pay |", "|---|---|---|---|---|"]
    for p in items:
        start, end = p.get("payPeriodStartDate"), p.get("payPeriodEndDate")
        pay_period = f"{start} - {end}" if start and end else "-"
        totals = p.get("totals") or {}
        gross = totals.get("grossPay") if isinstance(totals, Mapping) else None
        lines.append(
            f"| {p.get('uuid') or p.get('payrollUuid') or '-'} | {pay_period} "
            f"| {_cell(p.get('checkDate'))} | {_yes_no(p.get('processed'))} "
            f"| {f'${gross}' if gross else '-'} |"
        )
    return "\n".join(lines)


def _companies_table(items: Sequence[Mapping[str, Any]]) -> str:
    lines = ["| UUID | Name | EIN | Status |", "|---|---|---|---|"]
    for c in items:
        lines.append(
            f"| {_cell(c.get('uuid'))} | {_cell(c.get('name'))} | {_cell(c.get('ein'))} "
            f"| {_cell(c.get('companyStatus'))} |"
        )
    return "\n".join(lines)


def _pay_schedules_blocks(items: Sequence[Mapping[str, Any]]) -> str:
    lines: list[str] = []
    for schedule in items:
        lines.append(f"### {schedule.get('name') or 'Pay Schedule'}")
        lines.append(f"**UUID:** `{_cell(schedule.get('uuid'))}`")
        lines.append(f"**Frequency:** {_cell(schedule.get('frequency'))}")
        lines.append(f"**AutoPilot:** {_yes_no(schedule.get('autoPilot'))}")
        if schedule.get("anchorPayDate"):
            lines.append(f"**Anchor Pay Date:** {schedule['anchorPayDate']}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def generic_table(items: Sequence[Any]) -> str:
    """Columns are the first item's first five keys; missing values render as ``-``."""
    first = items[0] if isinstance(items[0], Mapping) else {}
    keys = list(first)[:5]
    if not keys:
        return "\n".join(f"- {_cell(item)}" for item in items)

    lines = [f"| {' | '.join(keys)} |", f"|{'|'.join('---' for _ in keys)}|"]
    for item in items:
        record = item if isinstance(item, Mapping) else {}
        lines.append(f"| {' | '.join(_cell(record.get(k)) for k in keys)} |")
    return "\n".join(lines)


Renderer = Callable[[Sequence[Any]], str]

COLLECTION_RENDERERS: dict[EntityKind, Renderer] = {
    EntityKind.EMPLOYEE: _employees_table,
    EntityKind.CONTRACTOR: _contractors_table,
    EntityKind.PAYROLL: _payrolls_table,
    EntityKind.COMPANY: _companies_table,
    EntityKind.PAY_SCHEDULE: _pay_schedules_blocks,
}


def render_collection(items: Sequence[Any], kind: EntityKind) -> str:
    if not items:
        return "_No items found._"
    return COLLECTION_RENDERERS.get(kind, generic_table)(items)


# -----------------------------------------------------------------------------
# Markdown
# -----------------------------------------------------------------------------


def _paginated_markdown(page: PaginatedResponse, kind: EntityKind) -> str:
    lines = [f"## {kind.plural}", ""]
    if page.total is not None:
        lines.append(f"**Total:** {page.total} | **Showing:** {page.count}")
    else:
        lines.append(f"**Showing:** {page.count}")
    if page.has_more:
        lines.append(f"**More available:** Yes (page: {page.next_page})")
    lines.append("")
    lines.append(render_collection(page.items, kind))
    return "\n".join(lines)


def _list_markdown(items: Sequence[Any], kind: EntityKind) -> str:
    return "\n".join([f"## {kind.plural}", "", render_collection(items, kind)])


def _object_markdown(data: Mapping[str, Any], kind: EntityKind) -> str:
    lines = [f"## {kind.singular}", ""]
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (Mapping, list)):
            lines.append(f"**{format_key(key)}:**")
            lines.append("```json")
            lines.append(json.dumps(value, indent=2, default=str))
            lines.append("```")
        else:
            lines.append(f"**{format_key(key)}:** {_cell(value)}")
    return "\n".join(lines)


def to_markdown(data: Any, kind: EntityKind) -> str:
    if isinstance(data, PaginatedResponse):
        return _paginated_markdown(data, kind)
    if isinstance(data, (list, tuple)):
        return _list_markdown(data, kind)
    if isinstance(data, Mapping):
        return _object_markdown(data, kind)
    return str(data)


def to_jsonable(data: Any) -> Any:
    if isinstance(data, PaginatedResponse):
        return data.to_dict()
    return data


# -----------------------------------------------------------------------------
# Tool results
# -----------------------------------------------------------------------------


def _text_result(text: str, *, is_error: bool = False) -> ToolCallResult:
    return ToolCallResult(content=[TextContent(text=text)], isError=is_error)


def format_json(data: Any) -> ToolCallResult:
    return _text_result(json.dumps(to_jsonable(data), indent=2, default=str))


def format_response(
    data: Any,
    fmt: ResponseFormat | str = ResponseFormat.JSON,
    kind: EntityKind = EntityKind.EMPLOYEE,
) -> ToolCallResult:
    """Render a successful result as JSON (default) or Markdown."""
    if ResponseFormat(fmt) is ResponseFormat.MARKDOWN:
        return _text_result(to_markdown(data, kind))
    return format_json(data)


def format_success(entity_name: str, data: Any) -> ToolCallResult:
    """Mutation result: ``{"success": true, "<entityName>": data}``."""
    return format_json({"success": True, entity_name: to_jsonable(data)})


def format_message(message: str) -> ToolCallResult:
    """Confirmation for operations with no response body."""
    return format_json({"success": True, "message": message})


def format_error(error: BaseException) -> ToolCallResult:
    """
    Render any failure as an isError result.

    The message always says whether the failure is retryable; the details
    block carries kind, status code and retryability for programmatic use.
    """
    classified = classify_error(error)
    message = f"Error: {classified.message}"
    if classified.retryable:
        message += " (retryable)"
    payload = {"error": message, "details": classified.details()}
    return _text_result(json.dumps(payload, indent=2), is_error=True)


def truncate_result(result: ToolCallResult, max_chars: int = MAX_RESPONSE_CHARS) -> ToolCallResult:
    """Cap the total text length, appending a notice with shown/total characters."""
    total = sum(len(block.text) for block in result.content)
    if total <= max_chars:
        return result

    remaining = max_chars
    blocks: list[TextContent] = []
    for block in result.content:
        if remaining <= 0:
            break
        blocks.append(TextContent(text=block.text[:remaining]))
        remaining -= len(blocks[-1].text)

    if not blocks:
        blocks.append(TextContent(text=""))

    shown = sum(len(block.text) for block in blocks)
    notice = f"\n\n[Response truncated: showing {shown} of {total} characters]"
    blocks[-1] = TextContent(text=blocks[-1].text + notice)
    return ToolCallResult(content=blocks, isError=result.isError)
