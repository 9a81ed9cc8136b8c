"""
Payroll Tools

Payroll runs, pay schedules, pay periods and earning types, plus the
company-level forms and notifications that come with running payroll.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..endpoints import CompanyParams, FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind

OffCycleReason = Literal["Bonus", "Correction", "Dismissed Employee", "Transition"]
PayFrequency = Literal["Every week", "Every other week", "Twice per month", "Monthly"]


class ListPayrollsParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    start_date: str | None = Field(default=None, description="Start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="End date (YYYY-MM-DD)")
    processed: bool | None = Field(default=None, description="Filter by processed status")


class PayrollParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    payroll_id: str = Field(min_length=1, description="Payroll UUID")


class PayrollActionParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    payroll_id: str = Field(min_length=1, description="Payroll UUID")


class CreateOffCyclePayrollParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    off_cycle_reason: OffCycleReason = Field(description="Reason for the off-cycle payroll")
    check_date: str = Field(description="Check date (YYYY-MM-DD)")
    start_date: str | None = Field(default=None, description="Pay period start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="Pay period end date (YYYY-MM-DD)")
    employee_uuids: list[str] | None = Field(default=None, description="Employees to include")


class CreatePayScheduleParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    frequency: PayFrequency = Field(description="Pay frequency")
    anchor_pay_date: str = Field(description="First pay date (YYYY-MM-DD)")
    anchor_end_of_pay_period: str = Field(description="End of first pay period (YYYY-MM-DD)")
    name: str | None = Field(default=None, description="Pay schedule name")
    auto_pilot: bool | None = Field(default=None, description="Enable AutoPilot")


class ListPayPeriodsParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    start_date: str | None = Field(default=None, description="Start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="End date (YYYY-MM-DD)")


class CreateEarningTypeParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    name: str = Field(min_length=1, description="Earning type name")
    description: str | None = Field(default=None, description="Description")


PAYROLL_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_payrolls",
        description="List payrolls for a company.",
        params=ListPayrollsParams,
        handler=lambda client, p: client.list_payrolls(
            p.company_id,
            start_date=p.start_date,
            end_date=p.end_date,
            processed=p.processed,
        ),
        kind=EntityKind.PAYROLL,
    ),
    GustoTool(
        name="gusto_get_payroll",
        description="Get details of a single payroll.",
        params=PayrollParams,
        handler=lambda client, p: client.get_payroll(p.company_id, p.payroll_id),
        kind=EntityKind.PAYROLL,
    ),
    GustoTool(
        name="gusto_calculate_payroll",
        description="Calculate a payroll (preview taxes and totals before submitting).",
        params=PayrollActionParams,
        handler=lambda client, p: client.calculate_payroll(p.company_id, p.payroll_id),
        result_key="payroll",
    ),
    GustoTool(
        name="gusto_submit_payroll",
        description="Submit a payroll for processing.",
        params=PayrollActionParams,
        handler=lambda client, p: client.submit_payroll(p.company_id, p.payroll_id),
        result_key="payroll",
    ),
    GustoTool(
        name="gusto_create_off_cycle_payroll",
        description="Create an off-cycle payroll (bonus, correction, etc.).",
        params=CreateOffCyclePayrollParams,
        handler=lambda client, p: client.create_off_cycle_payroll(p.company_id, p.body("company_id")),
        result_key="payroll",
    ),
    GustoTool(
        name="gusto_list_pay_schedules",
        description="List pay schedules for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_pay_schedules(p.company_id),
        kind=EntityKind.PAY_SCHEDULE,
    ),
    GustoTool(
        name="gusto_create_pay_schedule",
        description="Create a pay schedule for a company.",
        params=CreatePayScheduleParams,
        handler=lambda client, p: client.create_pay_schedule(p.company_id, p.body("company_id")),
        result_key="paySchedule",
    ),
    GustoTool(
        name="gusto_list_pay_periods",
        description="List pay periods for a company.",
        params=ListPayPeriodsParams,
        handler=lambda client, p: client.list_pay_periods(
            p.company_id, start_date=p.start_date, end_date=p.end_date
        ),
        kind=EntityKind.PAY_PERIOD,
    ),
    GustoTool(
        name="gusto_list_earning_types",
        description="List earning types (default and custom) for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_earning_types(p.company_id),
        kind=EntityKind.EARNING_TYPE,
    ),
    GustoTool(
        name="gusto_create_earning_type",
        description="Create a custom earning type for a company.",
        params=CreateEarningTypeParams,
        handler=lambda client, p: client.create_earning_type(p.company_id, p.body("company_id")),
        result_key="earningType",
    ),
    GustoTool(
        name="gusto_list_company_forms",
        description="List forms for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_company_forms(p.company_id),
        kind=EntityKind.FORM,
    ),
    GustoTool(
        name="gusto_list_notifications",
        description="List notifications for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_notifications(p.company_id),
        kind=EntityKind.NOTIFICATION,
    ),
]
