"""
Company Tools

Company profile, locations, departments, admins, signatories and company
bank accounts.
"""

from __future__ import annotations

from pydantic import Field

from ..endpoints import CompanyParams, GustoTool, ToolParams
from ..formatters import EntityKind


class CreateLocationParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    street1: str = Field(description="Street address")
    city: str = Field(description="City")
    state: str = Field(description="State (2-letter code)")
    zip: str = Field(description="ZIP code")
    street2: str | None = Field(default=None, description="Street address line 2")
    phone_number: str | None = Field(default=None, description="Phone number")
    mailing_address: bool | None = Field(default=None, description="Is this the mailing address?")
    filing_address: bool | None = Field(default=None, description="Is this the filing address?")


class CreateDepartmentParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    title: str = Field(min_length=1, description="Department title")


COMPANY_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_get_company",
        description="Get details of a company by ID.",
        params=CompanyParams,
        handler=lambda client, p: client.get_company(p.company_id),
        kind=EntityKind.COMPANY,
    ),
    GustoTool(
        name="gusto_list_locations",
        description="List all locations for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_locations(p.company_id),
        kind=EntityKind.LOCATION,
    ),
    GustoTool(
        name="gusto_create_location",
        description="Create a new location for a company.",
        params=CreateLocationParams,
        handler=lambda client, p: client.create_location(p.company_id, p.body("company_id")),
        result_key="location",
    ),
    GustoTool(
        name="gusto_list_departments",
        description="List all departments for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_departments(p.company_id),
        kind=EntityKind.DEPARTMENT,
    ),
    GustoTool(
        name="gusto_create_department",
        description="Create a new department for a company.",
        params=CreateDepartmentParams,
        handler=lambda client, p: client.create_department(p.company_id, p.title),
        result_key="department",
    ),
    GustoTool(
        name="gusto_list_admins",
        description="List all admins for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_admins(p.company_id),
        kind=EntityKind.ADMIN,
    ),
    GustoTool(
        name="gusto_list_signatories",
        description="List all signatories for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_signatories(p.company_id),
        kind=EntityKind.SIGNATORY,
    ),
    GustoTool(
        name="gusto_list_company_bank_accounts",
        description="List all bank accounts for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_company_bank_accounts(p.company_id),
        kind=EntityKind.BANK_ACCOUNT,
    ),
]
