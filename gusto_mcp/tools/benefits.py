"""
Benefit Tools
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import CompanyParams, EmployeeParams, FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind


class ListSupportedBenefitsParams(FormattedParams):
    pass


class CreateCompanyBenefitParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    benefit_type: str = Field(min_length=1, description="Benefit type (from supported benefits)")
    description: str | None = Field(default=None, description="Description")
    active: bool | None = Field(default=None, description="Is active")


class CreateEmployeeBenefitParams(ToolParams):
    employee_id: str = Field(min_length=1, description="Employee UUID")
    company_benefit_uuid: str = Field(min_length=1, description="Company benefit UUID")
    employee_deduction: str | None = Field(default=None, description="Employee deduction amount")
    company_contribution: str | None = Field(default=None, description="Company contribution amount")
    deduct_as_percentage: bool | None = Field(default=None, description="Deduct as percentage")
    contribute_as_percentage: bool | None = Field(default=None, description="Contribute as percentage")
    active: bool | None = Field(default=None, description="Is active")


BENEFIT_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_supported_benefits",
        description="List all benefit types supported by Gusto.",
        params=ListSupportedBenefitsParams,
        handler=lambda client, p: client.list_supported_benefits(),
        kind=EntityKind.SUPPORTED_BENEFIT,
    ),
    GustoTool(
        name="gusto_list_company_benefits",
        description="List benefits offered by a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_company_benefits(p.company_id),
        kind=EntityKind.COMPANY_BENEFIT,
    ),
    GustoTool(
        name="gusto_create_company_benefit",
        description="Create a benefit for a company.",
        params=CreateCompanyBenefitParams,
        handler=lambda client, p: client.create_company_benefit(p.company_id, p.body("company_id")),
        result_key="benefit",
    ),
    GustoTool(
        name="gusto_list_employee_benefits",
        description="List benefits enrolled by an employee.",
        params=EmployeeParams,
        handler=lambda client, p: client.list_employee_benefits(p.employee_id),
        kind=EntityKind.EMPLOYEE_BENEFIT,
    ),
    GustoTool(
        name="gusto_create_employee_benefit",
        description="Enroll an employee in a company benefit.",
        params=CreateEmployeeBenefitParams,
        handler=lambda client, p: client.create_employee_benefit(p.employee_id, p.body("employee_id")),
        result_key="benefit",
    ),
]
