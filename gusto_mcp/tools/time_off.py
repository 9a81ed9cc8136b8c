"""
Time Off Tools

Time off policies and the company holiday pay policy.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..endpoints import CompanyParams, FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind

PolicyType = Literal["vacation", "sick", "holiday", "bereavement", "jury_duty", "other"]
AccrualMethod = Literal["unlimited", "per_pay_period", "per_calendar_year"]


class TimeOffPolicyParams(FormattedParams):
    policy_id: str = Field(min_length=1, description="Time off policy UUID")


class CreateTimeOffPolicyParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    name: str = Field(min_length=1, description="Policy name")
    policy_type: PolicyType = Field(description="Policy type")
    accrual_method: AccrualMethod = Field(description="Accrual method")
    accrual_rate: str | None = Field(default=None, description="Accrual rate")
    paid_out_on_termination: bool | None = Field(default=None, description="Paid out on termination")


class AddEmployeesToPolicyParams(ToolParams):
    policy_id: str = Field(min_length=1, description="Time off policy UUID")
    employee_uuids: list[str] = Field(min_length=1, description="Employee UUIDs to add")


TIME_OFF_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_time_off_policies",
        description="List time off policies for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_time_off_policies(p.company_id),
        kind=EntityKind.TIME_OFF_POLICY,
    ),
    GustoTool(
        name="gusto_get_time_off_policy",
        description="Get details of a time off policy.",
        params=TimeOffPolicyParams,
        handler=lambda client, p: client.get_time_off_policy(p.policy_id),
        kind=EntityKind.TIME_OFF_POLICY,
    ),
    GustoTool(
        name="gusto_create_time_off_policy",
        description="Create a time off policy for a company.",
        params=CreateTimeOffPolicyParams,
        handler=lambda client, p: client.create_time_off_policy(p.company_id, p.body("company_id")),
        result_key="policy",
    ),
    GustoTool(
        name="gusto_add_employees_to_time_off_policy",
        description="Add employees to a time off policy.",
        params=AddEmployeesToPolicyParams,
        handler=lambda client, p: client.add_employees_to_time_off_policy(
            p.policy_id, p.employee_uuids
        ),
        success_message="Employees added to policy",
    ),
    GustoTool(
        name="gusto_get_holiday_pay_policy",
        description="Get the holiday pay policy for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.get_holiday_pay_policy(p.company_id),
        kind=EntityKind.HOLIDAY_PAY_POLICY,
        empty_message="No holiday pay policy found",
    ),
]
