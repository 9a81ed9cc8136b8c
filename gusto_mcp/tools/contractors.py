"""
Contractor Tools
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..endpoints import CompanyParams, ContractorParams, FormattedParams, GustoTool, ToolParams
from ..formatters import EntityKind


class CreateContractorParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    type: Literal["Individual", "Business"] = Field(description="Contractor type")
    wage_type: Literal["Fixed", "Hourly"] = Field(description="Wage type")
    first_name: str | None = Field(default=None, description="First name (for Individual)")
    last_name: str | None = Field(default=None, description="Last name (for Individual)")
    business_name: str | None = Field(default=None, description="Business name (for Business)")
    email: str | None = Field(default=None, description="Email address")
    start_date: str | None = Field(default=None, description="Start date (YYYY-MM-DD)")
    self_onboarding: bool | None = Field(default=None, description="Enable self-onboarding")


class UpdateContractorParams(ToolParams):
    contractor_id: str = Field(min_length=1, description="Contractor UUID")
    first_name: str | None = None
    last_name: str | None = None
    business_name: str | None = None
    email: str | None = None


class DeleteContractorParams(ToolParams):
    contractor_id: str = Field(min_length=1, description="Contractor UUID")


class ListContractorPaymentsParams(FormattedParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    start_date: str | None = Field(default=None, description="Start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="End date (YYYY-MM-DD)")
    contractor_uuid: str | None = Field(default=None, description="Filter by contractor UUID")


class CreateContractorPaymentParams(ToolParams):
    company_id: str = Field(min_length=1, description="Company UUID")
    contractor_uuid: str = Field(min_length=1, description="Contractor UUID")
    date: str = Field(description="Payment date (YYYY-MM-DD)")
    wage: str | None = Field(default=None, description="Wage amount")
    hours: str | None = Field(default=None, description="Hours worked")
    bonus: str | None = Field(default=None, description="Bonus amount")
    reimbursement: str | None = Field(default=None, description="Reimbursement amount")
    payment_method: Literal["Direct Deposit", "Check", "Historical Payment"] | None = None


CONTRACTOR_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_list_contractors",
        description="List all contractors for a company.",
        params=CompanyParams,
        handler=lambda client, p: client.list_contractors(p.company_id),
        kind=EntityKind.CONTRACTOR,
    ),
    GustoTool(
        name="gusto_get_contractor",
        description="Get details of a single contractor.",
        params=ContractorParams,
        handler=lambda client, p: client.get_contractor(p.contractor_id),
        kind=EntityKind.CONTRACTOR,
    ),
    GustoTool(
        name="gusto_create_contractor",
        description="Create a new contractor (individual or business).",
        params=CreateContractorParams,
        handler=lambda client, p: client.create_contractor(p.company_id, p.body("company_id")),
        result_key="contractor",
    ),
    GustoTool(
        name="gusto_update_contractor",
        description="Update an existing contractor.",
        params=UpdateContractorParams,
        handler=lambda client, p: client.update_contractor(p.contractor_id, p.body("contractor_id")),
        result_key="contractor",
    ),
    GustoTool(
        name="gusto_delete_contractor",
        description="Delete a contractor.",
        params=DeleteContractorParams,
        handler=lambda client, p: client.delete_contractor(p.contractor_id),
        success_message="Contractor deleted",
    ),
    GustoTool(
        name="gusto_list_contractor_payments",
        description="List contractor payments for a company.",
        params=ListContractorPaymentsParams,
        handler=lambda client, p: client.list_contractor_payments(
            p.company_id,
            start_date=p.start_date,
            end_date=p.end_date,
            contractor_uuid=p.contractor_uuid,
        ),
        kind=EntityKind.CONTRACTOR_PAYMENT,
    ),
    GustoTool(
        name="gusto_create_contractor_payment",
        description="Create a payment for a contractor.",
        params=CreateContractorPaymentParams,
        handler=lambda client, p: client.create_contractor_payment(p.company_id, p.body("company_id")),
        result_key="payment",
    ),
    GustoTool(
        name="gusto_list_contractor_bank_accounts",
        description="List bank accounts for a contractor.",
        params=ContractorParams,
        handler=lambda client, p: client.list_contractor_bank_accounts(p.contractor_id),
        kind=EntityKind.BANK_ACCOUNT,
    ),
    GustoTool(
        name="gusto_list_contractor_forms",
        description="List forms for a contractor.",
        params=ContractorParams,
        handler=lambda client, p: client.list_contractor_forms(p.contractor_id),
        kind=EntityKind.FORM,
    ),
]
