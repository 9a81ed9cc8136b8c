"""
Employee Tools

Employees and everything hanging off an employee record: jobs,
compensations, addresses, taxes, bank accounts, payment method,
terminations, garnishments, forms and recurring reimbursements.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..endpoints import EmployeeParams, FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind
from ..pagination import PaginationParams

PaymentUnit = Literal["Hour", "Week", "Month", "Year", "Paycheck"]
FlsaStatus = Literal["Exempt", "Salaried Nonexempt", "Nonexempt", "Owner"]


class ListEmployeesParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    page: int | None = Field(default=None, ge=1, description="Page number")
    per: int | None = Field(default=None, ge=1, le=100, description="Items per page")
    terminated: bool | None = Field(default=None, description="Include terminated employees")


class CreateEmployeeParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    middle_name: str | None = Field(default=None, description="Middle name")
    email: str | None = Field(default=None, description="Email address")
    date_of_birth: str | None = Field(default=None, description="Date of birth (YYYY-MM-DD)")
    ssn: str | None = Field(default=None, description="Social Security Number")
    self_onboarding: bool | None = Field(default=None, description="Enable self-onboarding")


class UpdateEmployeeParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    two_percent_shareholder: bool | None = None


class JobParams(FormattedParams):
    job_id: str = Field(min_length=1, description="Job UUID")


class CreateJobParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    title: str = Field(description="Job title")
    location_uuid: str | None = Field(default=None, description="Location UUID")
    hire_date: str | None = Field(default=None, description="Hire date (YYYY-MM-DD)")


class CreateCompensationParams(ToolParams):
    job_id: str = Field(min_length=1, description="Job UUID")
    rate: str = Field(description="Pay rate")
    payment_unit: PaymentUnit = Field(description="Payment unit")
    flsa_status: FlsaStatus | None = None
    effective_date: str | None = Field(default=None, description="Effective date (YYYY-MM-DD)")


class CreateHomeAddressParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    street1: str = Field(description="Street address")
    city: str = Field(description="City")
    state: str = Field(description="State (2-letter code)")
    zip: str = Field(description="ZIP code")
    street2: str | None = None
    effective_date: str | None = Field(default=None, description="Effective date (YYYY-MM-DD)")


class CreateTerminationParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    effective_date: str = Field(description="Termination date (YYYY-MM-DD)")
    run_termination_payroll: bool | None = Field(default=None, description="Run termination payroll")


class CreateGarnishmentParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    description: str = Field(description="Description")
    amount: str = Field(description="Amount")
    court_ordered: bool | None = Field(default=None, description="Is court ordered")
    recurring: bool | None = Field(default=None, description="Is recurring")
    deduct_as_percentage: bool | None = Field(default=None, description="Deduct as percentage")


class CreateReimbursementParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    description: str = Field(description="Description")
    amount: str = Field(description="Amount")
    effective_date: str | None = Field(default=None, description="Effective date (YYYY-MM-DD)")
    active: bool | None = Field(default=None, description="Is active")


EMPLOYEE_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_employees",
        description="List employees for a company with pagination.",
        params=ListEmployeesParams,
        handler=lambda client, p: client.list_employees(
            p.company_id,
            PaginationParams(page=p.page, per=p.per),
            terminated=p.terminated,
        ),
        kind=EntityKind.EMPLOYEE,
    ),
    GustoTool(
        name="gusto_get_employee",
        description="Get details of a single employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.get_employee(p.employee_id),
        kind=EntityKind.EMPLOYEE,
    ),
    GustoTool(
        name="gusto_create_employee",
        description="Create a new employee.",
        params=CreateEmployeeParams,
        handler=lambda client, p: client.create_employee(p.company_id, p.body("company_id")),
        result_key="employee",
    ),
    GustoTool(
        name="gusto_update_employee",
        description="Update an existing employee.",
        params=UpdateEmployeeParams,
        handler=lambda client, p: client.update_employee(p.employee_id, p.body("employee_id")),
        result_key="employee",
    ),
    GustoTool(
        name="gusto_get_employee_onboarding_status",
        description="Get onboarding status for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.get_employee_onboarding_status(p.employee_id),
        kind=EntityKind.ONBOARDING_STATUS,
    ),
    GustoTool(
        name="gusto_list_jobs",
        description="List jobs for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_jobs(p.employee_id),
        kind=EntityKind.JOB,
    ),
    GustoTool(
        name="gusto_create_job",
        description="Create a job for an employee.",
        params=CreateJobParams,
        handler=lambda client, p: client.create_job(p.employee_id, p.body("employee_id")),
        result_key="job",
    ),
    GustoTool(
        name="gusto_list_compensations",
        description="List compensations for a job.",
        params=JobParams,
        handler=lambda client, p: client.list_compensations(p.job_id),
        kind=EntityKind.COMPENSATION,
    ),
    GustoTool(
        name="gusto_create_compensation",
        description="Create a compensation for a job.",
        params=CreateCompensationParams,
        handler=lambda client, p: client.create_compensation(p.job_id, p.body("job_id")),
        result_key="compensation",
    ),
    GustoTool(
        name="gusto_list_home_addresses",
        description="List home addresses for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_home_addresses(p.employee_id),
        kind=EntityKind.HOME_ADDRESS,
    ),
    GustoTool(
        name="gusto_create_home_address",
        description="Create a home address for an employee.",
        params=CreateHomeAddressParams,
        handler=lambda client, p: client.create_home_address(p.employee_id, p.body("employee_id")),
        result_key="address",
    ),
    GustoTool(
        name="gusto_get_federal_taxes",
        description="Get federal tax information for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.get_federal_taxes(p.employee_id),
        kind=EntityKind.FEDERAL_TAXES,
    ),
    GustoTool(
        name="gusto_get_state_taxes",
        description="Get state tax information for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.get_state_taxes(p.employee_id),
        kind=EntityKind.STATE_TAXES,
    ),
    GustoTool(
        name="gusto_list_employee_bank_accounts",
        description="List bank accounts for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_employee_bank_accounts(p.employee_id),
        kind=EntityKind.BANK_ACCOUNT,
    ),
    GustoTool(
        name="gusto_get_employee_payment_method",
        description="Get payment method for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.get_employee_payment_method(p.employee_id),
        kind=EntityKind.PAYMENT_METHOD,
    ),
    GustoTool(
        name="gusto_list_terminations",
        description="List terminations for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_terminations(p.employee_id),
        kind=EntityKind.TERMINATION,
    ),
    GustoTool(
        name="gusto_create_termination",
        description="Create a termination for an employee.",
        params=CreateTerminationParams,
        handler=lambda client, p: client.create_termination(p.employee_id, p.body("employee_id")),
        result_key="termination",
    ),
    GustoTool(
        name="gusto_list_garnishments",
        description="List garnishments for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_garnishments(p.employee_id),
        kind=EntityKind.GARNISHMENT,
    ),
    GustoTool(
        name="gusto_create_garnishment",
        description="Create a garnishment for an employee.",
        params=CreateGarnishmentParams,
        handler=lambda client, p: client.create_garnishment(p.employee_id, p.body("employee_id")),
        result_key="garnishment",
    ),
    GustoTool(
        name="gusto_list_employee_forms",
        description="List forms for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_employee_forms(p.employee_id),
        kind=EntityKind.FORM,
    ),
    GustoTool(
        name="gusto_list_recurring_reimbursements",
        description="List recurring reimbursements for an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_recurring_reimbursements(p.employee_id),
        kind=EntityKind.REIMBURSEMENT,
    ),
    GustoTool(
        name="gusto_create_recurring_reimbursement",
        description="Create a recurring reimbursement for an employee.",
        params=CreateReimbursementParams,
        handler=lambda client, p: client.create_recurring_reimbursement(
            p.employee_id, p.body("employee_id")
        ),
        result_key="reimbursement",
    ),
]
