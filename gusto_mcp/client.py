"""
Gusto Request Gateway

A GustoClient is scoped to exactly one tenant: it is built from that
tenant's credentials for one inbound request and closed when the request
completes. There is no module-level client and no shared token, so two
concurrent requests for different tenants can never see each other's
credentials.

Every upstream call goes through ``GustoClient.request``, which owns the
response classification:

    204 / empty body    NO_CONTENT
    429                 RateLimitError (Retry-After seconds, default 60)
    401, 403            AuthenticationError
    other non-2xx       ApiError with the upstream message
    2xx                 decoded JSON

Nothing is retried. The typed operations below decode every successful
body through the entity normalizer.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from . import entities as e
from .config import (
    ACCESS_TOKEN_HEADER,
    API_VERSION_HEADER,
    DEFAULT_RATE_LIMIT_RETRY_SECONDS,
    GUSTO_API_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
)
from .credentials import TenantCredentials
from .errors import (
    ApiError,
    AuthenticationError,
    GatewayFailure,
    RateLimitError,
    UnknownFailure,
    extract_error_message,
)
from .normalizer import Entity, EntityMapping, from_wire, from_wire_many, to_wire
from .pagination import (
    PaginatedResponse,
    PaginationParams,
    normalize_pagination_params,
    paginate_page,
)

logger = logging.getLogger(__name__)


class _NoContent:
    """Sentinel for a successful response without a body."""

    _instance: _NoContent | None = None

    def __new__(cls) -> _NoContent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = _NoContent()


def _parse_retry_after(value: str | None) -> int:
    if value is None:
        return DEFAULT_RATE_LIMIT_RETRY_SECONDS
    try:
        seconds = int(value.strip())
    except ValueError:
        return DEFAULT_RATE_LIMIT_RETRY_SECONDS
    return seconds if seconds >= 0 else DEFAULT_RATE_LIMIT_RETRY_SECONDS


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class GustoClient:
    """HTTP gateway to the Gusto API for a single tenant."""

    def __init__(
        self,
        credentials: TenantCredentials,
        *,
        base_url: str = GUSTO_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(transport=transport, timeout=timeout)

    async def __aenter__(self) -> GustoClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    # -------------------------------------------------------------------------
    # Core request path
    # -------------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        if not self.credentials.access_token:
            raise AuthenticationError(
                f"No credentials provided. Include {ACCESS_TOKEN_HEADER} header."
            )
        headers = {
            "Authorization": f"Bearer {self.credentials.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.credentials.api_version:
            headers[API_VERSION_HEADER] = self.credentials.api_version
        return headers

    def _build_url(self, path: str, path_params: Mapping[str, Any] | None) -> str:
        """Substitute ``{name}`` placeholders with URL-quoted values."""
        if path_params:
            path = path.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})
        return self.base_url + path

    @staticmethod
    def _build_query(params: Mapping[str, Any] | None) -> dict[str, Any]:
        if not params:
            return {}
        return {k: _query_value(v) for k, v in params.items() if v is not None}

    async def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Issue one upstream call and classify the response.

        Returns the decoded JSON body, or NO_CONTENT for 204 and empty bodies.

        Raises:
            AuthenticationError: Token missing (before any I/O), or 401/403.
            RateLimitError: 429.
            ApiError: Any other non-2xx.
            UnknownFailure: Transport failure or undecodable body.
        """
        headers = self._headers()
        url = self._build_url(path, path_params)
        query = self._build_query(params)

        try:
            response = await self._http.request(
                method,
                url,
                params=query or None,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, type(exc).__name__)
            raise UnknownFailure(f"HTTP error: {exc!s}", cause=exc) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        status = response.status_code

        if status == 429:
            raise RateLimitError(
                "Rate limit exceeded",
                retry_after_seconds=_parse_retry_after(response.headers.get("Retry-After")),
            )
        if status in (401, 403):
            raise AuthenticationError(
                "Authentication failed. Check your API credentials.",
                status_code=status,
            )
        if not response.is_success:
            raise ApiError(extract_error_message(response.text, status), status_code=status)

        if status == 204 or not response.content.strip():
            return NO_CONTENT

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UnknownFailure(
                f"Invalid JSON in response (status {status})", status_code=status, cause=exc
            ) from exc

    # -------------------------------------------------------------------------
    # Decoding helpers
    # -------------------------------------------------------------------------

    async def _one(
        self,
        mapping: EntityMapping,
        method: str,
        path: str,
        *,
        body: Any = None,
        **path_params: Any,
    ) -> Entity:
        data = await self.request(method, path, path_params=path_params, json=body)
        return from_wire(mapping, data if isinstance(data, Mapping) else None)

    async def _many(
        self,
        mapping: EntityMapping,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        **path_params: Any,
    ) -> list[Entity]:
        data = await self.request("GET", path, path_params=path_params, params=params)
        return from_wire_many(mapping, data if isinstance(data, list) else None)

    async def _delete(self, path: str, **path_params: Any) -> None:
        await self.request("DELETE", path, path_params=path_params)

    # -------------------------------------------------------------------------
    # Connection
    # -------------------------------------------------------------------------

    async def get_token_info(self) -> Entity:
        return await self._one(e.TOKEN_INFO, "GET", "/token_info")

    async def test_connection(self) -> dict[str, Any]:
        """
        Probe the token with a token-info call.

        Gateway and transport failures are reported in the result rather
        than raised.
        """
        try:
            info = await self.get_token_info()
        except GatewayFailure as exc:
            return {"connected": False, "message": exc.message, "kind": exc.kind.value}
        except httpx.HTTPError as exc:
            return {"connected": False, "message": str(exc), "kind": "Unknown"}
        owner = info.get("resourceOwner") or {}
        return {
            "connected": True,
            "message": f"Connected as {owner.get('email') or 'authenticated user'}",
        }

    # -------------------------------------------------------------------------
    # Companies
    # -------------------------------------------------------------------------

    async def get_company(self, company_id: str) -> Entity:
        return await self._one(e.COMPANY, "GET", "/companies/{company_id}", company_id=company_id)

    async def update_company(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPANY,
            "PUT",
            "/companies/{company_id}",
            body=to_wire(e.COMPANY_UPDATE_INPUT, data),
            company_id=company_id,
        )

    async def list_locations(self, company_id: str) -> list[Entity]:
        return await self._many(e.LOCATION, "/companies/{company_id}/locations", company_id=company_id)

    async def get_location(self, location_id: str) -> Entity:
        return await self._one(e.LOCATION, "GET", "/locations/{location_id}", location_id=location_id)

    async def create_location(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.LOCATION,
            "POST",
            "/companies/{company_id}/locations",
            body=to_wire(e.LOCATION_INPUT, data),
            company_id=company_id,
        )

    async def update_location(self, location_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.LOCATION,
            "PUT",
            "/locations/{location_id}",
            body=to_wire(e.LOCATION_INPUT, data),
            location_id=location_id,
        )

    async def list_company_bank_accounts(self, company_id: str) -> list[Entity]:
        return await self._many(
            e.COMPANY_BANK_ACCOUNT, "/companies/{company_id}/bank_accounts", company_id=company_id
        )

    async def create_company_bank_account(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPANY_BANK_ACCOUNT,
            "POST",
            "/companies/{company_id}/bank_accounts",
            body=to_wire(e.BANK_ACCOUNT_INPUT, data),
            company_id=company_id,
        )

    async def list_departments(self, company_id: str) -> list[Entity]:
        return await self._many(e.DEPARTMENT, "/companies/{company_id}/departments", company_id=company_id)

    async def get_department(self, department_id: str) -> Entity:
        return await self._one(
            e.DEPARTMENT, "GET", "/departments/{department_id}", department_id=department_id
        )

    async def create_department(self, company_id: str, title: str) -> Entity:
        return await self._one(
            e.DEPARTMENT,
            "POST",
            "/companies/{company_id}/departments",
            body=to_wire(e.DEPARTMENT_INPUT, {"title": title}),
            company_id=company_id,
        )

    async def update_department(self, department_id: str, title: str) -> Entity:
        return await self._one(
            e.DEPARTMENT,
            "PUT",
            "/departments/{department_id}",
            body=to_wire(e.DEPARTMENT_INPUT, {"title": title}),
            department_id=department_id,
        )

    async def delete_department(self, department_id: str) -> None:
        await self._delete("/departments/{department_id}", department_id=department_id)

    async def list_admins(self, company_id: str) -> list[Entity]:
        return await self._many(e.ADMIN, "/companies/{company_id}/admins", company_id=company_id)

    async def create_admin(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.ADMIN,
            "POST",
            "/companies/{company_id}/admins",
            body=to_wire(e.ADMIN_INPUT, data),
            company_id=company_id,
        )

    async def list_signatories(self, company_id: str) -> list[Entity]:
        return await self._many(e.SIGNATORY, "/companies/{company_id}/signatories", company_id=company_id)

    async def create_signatory(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.SIGNATORY,
            "POST",
            "/companies/{company_id}/signatories",
            body=to_wire(e.SIGNATORY_INPUT, data),
            company_id=company_id,
        )

    # -------------------------------------------------------------------------
    # Employees
    # -------------------------------------------------------------------------

    async def list_employees(
        self,
        company_id: str,
        params: PaginationParams | None = None,
        *,
        terminated: bool | None = None,
    ) -> PaginatedResponse:
        """The one paginated collection. ``hasMore`` follows the full-page heuristic."""
        requested = normalize_pagination_params(params)
        query = {"page": requested.page, "per": requested.per, "terminated": terminated}
        items = await self._many(
            e.EMPLOYEE, "/companies/{company_id}/employees", params=query, company_id=company_id
        )
        return paginate_page(items, requested)

    async def get_employee(self, employee_id: str) -> Entity:
        return await self._one(e.EMPLOYEE, "GET", "/employees/{employee_id}", employee_id=employee_id)

    async def create_employee(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EMPLOYEE,
            "POST",
            "/companies/{company_id}/employees",
            body=to_wire(e.EMPLOYEE_CREATE_INPUT, data),
            company_id=company_id,
        )

    async def update_employee(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EMPLOYEE,
            "PUT",
            "/employees/{employee_id}",
            body=to_wire(e.EMPLOYEE_UPDATE_INPUT, data),
            employee_id=employee_id,
        )

    async def delete_onboarding_employee(self, employee_id: str) -> None:
        await self._delete("/employees/{employee_id}", employee_id=employee_id)

    async def get_employee_onboarding_status(self, employee_id: str) -> Entity:
        return await self._one(
            e.ONBOARDING_STATUS,
            "GET",
            "/employees/{employee_id}/onboarding_status",
            employee_id=employee_id,
        )

    async def list_jobs(self, employee_id: str) -> list[Entity]:
        return await self._many(e.JOB, "/employees/{employee_id}/jobs", employee_id=employee_id)

    async def get_job(self, job_id: str) -> Entity:
        return await self._one(e.JOB, "GET", "/jobs/{job_id}", job_id=job_id)

    async def create_job(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.JOB,
            "POST",
            "/employees/{employee_id}/jobs",
            body=to_wire(e.JOB_INPUT, data),
            employee_id=employee_id,
        )

    async def update_job(self, job_id: str, data: Mapping[str, Any]) -> Entity:
        # hire_date is fixed once the job exists
        body = to_wire(e.JOB_INPUT, data)
        body.pop("hire_date", None)
        return await self._one(e.JOB, "PUT", "/jobs/{job_id}", body=body, job_id=job_id)

    async def delete_job(self, job_id: str) -> None:
        await self._delete("/jobs/{job_id}", job_id=job_id)

    async def list_compensations(self, job_id: str) -> list[Entity]:
        return await self._many(e.COMPENSATION, "/jobs/{job_id}/compensations", job_id=job_id)

    async def get_compensation(self, compensation_id: str) -> Entity:
        return await self._one(
            e.COMPENSATION,
            "GET",
            "/compensations/{compensation_id}",
            compensation_id=compensation_id,
        )

    async def create_compensation(self, job_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPENSATION,
            "POST",
            "/jobs/{job_id}/compensations",
            body=to_wire(e.COMPENSATION_INPUT, data),
            job_id=job_id,
        )

    async def update_compensation(self, compensation_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPENSATION,
            "PUT",
            "/compensations/{compensation_id}",
            body=to_wire(e.COMPENSATION_INPUT, data),
            compensation_id=compensation_id,
        )

    async def list_home_addresses(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.HOME_ADDRESS, "/employees/{employee_id}/home_addresses", employee_id=employee_id
        )

    async def create_home_address(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.HOME_ADDRESS,
            "POST",
            "/employees/{employee_id}/home_addresses",
            body=to_wire(e.HOME_ADDRESS_INPUT, data),
            employee_id=employee_id,
        )

    async def update_home_address(self, address_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.HOME_ADDRESS,
            "PUT",
            "/home_addresses/{address_id}",
            body=to_wire(e.HOME_ADDRESS_INPUT, data),
            address_id=address_id,
        )

    async def list_work_addresses(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.WORK_ADDRESS, "/employees/{employee_id}/work_addresses", employee_id=employee_id
        )

    async def create_work_address(
        self, employee_id: str, location_uuid: str, effective_date: str | None = None
    ) -> Entity:
        return await self._one(
            e.WORK_ADDRESS,
            "POST",
            "/employees/{employee_id}/work_addresses",
            body=to_wire(
                e.WORK_ADDRESS_INPUT,
                {"locationUuid": location_uuid, "effectiveDate": effective_date},
            ),
            employee_id=employee_id,
        )

    async def list_terminations(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.TERMINATION, "/employees/{employee_id}/terminations", employee_id=employee_id
        )

    async def create_termination(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.TERMINATION,
            "POST",
            "/employees/{employee_id}/terminations",
            body=to_wire(e.TERMINATION_INPUT, data),
            employee_id=employee_id,
        )

    async def delete_termination(self, employee_id: str) -> None:
        await self._delete("/employees/{employee_id}/terminations", employee_id=employee_id)

    async def get_rehire(self, employee_id: str) -> Entity:
        return await self._one(e.REHIRE, "GET", "/employees/{employee_id}/rehire", employee_id=employee_id)

    async def create_rehire(self, employee_id: str, effective_date: str) -> Entity:
        return await self._one(
            e.REHIRE,
            "POST",
            "/employees/{employee_id}/rehire",
            body=to_wire(e.REHIRE_INPUT, {"effectiveDate": effective_date}),
            employee_id=employee_id,
        )

    async def get_federal_taxes(self, employee_id: str) -> Entity:
        return await self._one(
            e.FEDERAL_TAXES, "GET", "/employees/{employee_id}/federal_taxes", employee_id=employee_id
        )

    async def update_federal_taxes(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.FEDERAL_TAXES,
            "PUT",
            "/employees/{employee_id}/federal_taxes",
            body=to_wire(e.FEDERAL_TAXES_INPUT, data),
            employee_id=employee_id,
        )

    async def get_state_taxes(self, employee_id: str) -> list[Entity]:
        return await self._many(e.STATE_TAXES, "/employees/{employee_id}/state_taxes", employee_id=employee_id)

    async def update_state_taxes(
        self, employee_id: str, state: str, data: Mapping[str, Any]
    ) -> Entity:
        return await self._one(
            e.STATE_TAXES,
            "PUT",
            "/employees/{employee_id}/state_taxes/{state}",
            body=to_wire(e.STATE_TAXES_INPUT, data),
            employee_id=employee_id,
            state=state,
        )

    async def list_employee_bank_accounts(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.EMPLOYEE_BANK_ACCOUNT, "/employees/{employee_id}/bank_accounts", employee_id=employee_id
        )

    async def create_employee_bank_account(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EMPLOYEE_BANK_ACCOUNT,
            "POST",
            "/employees/{employee_id}/bank_accounts",
            body=to_wire(e.BANK_ACCOUNT_INPUT, data),
            employee_id=employee_id,
        )

    async def get_employee_payment_method(self, employee_id: str) -> Entity:
        return await self._one(
            e.PAYMENT_METHOD, "GET", "/employees/{employee_id}/payment_method", employee_id=employee_id
        )

    async def update_employee_payment_method(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.PAYMENT_METHOD,
            "PUT",
            "/employees/{employee_id}/payment_method",
            body=to_wire(e.PAYMENT_METHOD_INPUT, data),
            employee_id=employee_id,
        )

    async def list_garnishments(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.GARNISHMENT, "/employees/{employee_id}/garnishments", employee_id=employee_id
        )

    async def get_garnishment(self, garnishment_id: str) -> Entity:
        return await self._one(
            e.GARNISHMENT, "GET", "/garnishments/{garnishment_id}", garnishment_id=garnishment_id
        )

    async def create_garnishment(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.GARNISHMENT,
            "POST",
            "/employees/{employee_id}/garnishments",
            body=to_wire(e.GARNISHMENT_INPUT, data),
            employee_id=employee_id,
        )

    async def update_garnishment(self, garnishment_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.GARNISHMENT,
            "PUT",
            "/garnishments/{garnishment_id}",
            body=to_wire(e.GARNISHMENT_INPUT, data),
            garnishment_id=garnishment_id,
        )

    async def list_recurring_reimbursements(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.RECURRING_REIMBURSEMENT,
            "/employees/{employee_id}/recurring_reimbursements",
            employee_id=employee_id,
        )

    async def create_recurring_reimbursement(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.RECURRING_REIMBURSEMENT,
            "POST",
            "/employees/{employee_id}/recurring_reimbursements",
            body=to_wire(e.RECURRING_REIMBURSEMENT_INPUT, data),
            employee_id=employee_id,
        )

    async def update_recurring_reimbursement(
        self, reimbursement_id: str, data: Mapping[str, Any]
    ) -> Entity:
        return await self._one(
            e.RECURRING_REIMBURSEMENT,
            "PUT",
            "/recurring_reimbursements/{reimbursement_id}",
            body=to_wire(e.RECURRING_REIMBURSEMENT_INPUT, data),
            reimbursement_id=reimbursement_id,
        )

    async def delete_recurring_reimbursement(self, reimbursement_id: str) -> None:
        await self._delete("/recurring_reimbursements/{reimbursement_id}", reimbursement_id=reimbursement_id)

    # -------------------------------------------------------------------------
    # Contractors
    # -------------------------------------------------------------------------

    async def list_contractors(self, company_id: str) -> list[Entity]:
        return await self._many(e.CONTRACTOR, "/companies/{company_id}/contractors", company_id=company_id)

    async def get_contractor(self, contractor_id: str) -> Entity:
        return await self._one(
            e.CONTRACTOR, "GET", "/contractors/{contractor_id}", contractor_id=contractor_id
        )

    async def create_contractor(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.CONTRACTOR,
            "POST",
            "/companies/{company_id}/contractors",
            body=to_wire(e.CONTRACTOR_CREATE_INPUT, data),
            company_id=company_id,
        )

    async def update_contractor(self, contractor_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.CONTRACTOR,
            "PUT",
            "/contractors/{contractor_id}",
            body=to_wire(e.CONTRACTOR_UPDATE_INPUT, data),
            contractor_id=contractor_id,
        )

    async def delete_contractor(self, contractor_id: str) -> None:
        await self._delete("/contractors/{contractor_id}", contractor_id=contractor_id)

    async def get_contractor_onboarding_status(self, contractor_id: str) -> Entity:
        return await self._one(
            e.CONTRACTOR_ONBOARDING_STATUS,
            "GET",
            "/contractors/{contractor_id}/onboarding_status",
            contractor_id=contractor_id,
        )

    async def list_contractor_bank_accounts(self, contractor_id: str) -> list[Entity]:
        return await self._many(
            e.CONTRACTOR_BANK_ACCOUNT,
            "/contractors/{contractor_id}/bank_accounts",
            contractor_id=contractor_id,
        )

    async def create_contractor_bank_account(self, contractor_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.CONTRACTOR_BANK_ACCOUNT,
            "POST",
            "/contractors/{contractor_id}/bank_accounts",
            body=to_wire(e.BANK_ACCOUNT_INPUT, data),
            contractor_id=contractor_id,
        )

    async def list_contractor_payments(
        self,
        company_id: str,
        *,
        start_date: str | None = None,
        end_date: str | None = None,
        contractor_uuid: str | None = None,
    ) -> list[Entity]:
        return await self._many(
            e.CONTRACTOR_PAYMENT,
            "/companies/{company_id}/contractor_payments",
            params={
                "start_date": start_date,
                "end_date": end_date,
                "contractor_uuid": contractor_uuid,
            },
            company_id=company_id,
        )

    async def create_contractor_payment(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.CONTRACTOR_PAYMENT,
            "POST",
            "/companies/{company_id}/contractor_payments",
            body=to_wire(e.CONTRACTOR_PAYMENT_INPUT, data),
            company_id=company_id,
        )

    async def list_contractor_payment_groups(self, company_id: str) -> list[Entity]:
        return await self._many(
            e.CONTRACTOR_PAYMENT_GROUP,
            "/companies/{company_id}/contractor_payment_groups",
            company_id=company_id,
        )

    # -------------------------------------------------------------------------
    # Payroll
    # -------------------------------------------------------------------------

    async def list_payrolls(
        self,
        company_id: str,
        *,
        start_date: str | None = None,
        end_date: str | None = None,
        processed: bool | None = None,
    ) -> list[Entity]:
        return await self._many(
            e.PAYROLL,
            "/companies/{company_id}/payrolls",
            params={"start_date": start_date, "end_date": end_date, "processed": processed},
            company_id=company_id,
        )

    async def get_payroll(self, company_id: str, payroll_id: str) -> Entity:
        return await self._one(
            e.PAYROLL,
            "GET",
            "/companies/{company_id}/payrolls/{payroll_id}",
            company_id=company_id,
            payroll_id=payroll_id,
        )

    async def update_payroll(
        self, company_id: str, payroll_id: str, data: Mapping[str, Any]
    ) -> Entity:
        return await self._one(
            e.PAYROLL,
            "PUT",
            "/companies/{company_id}/payrolls/{payroll_id}",
            body=to_wire(e.PAYROLL_UPDATE_INPUT, data),
            company_id=company_id,
            payroll_id=payroll_id,
        )

    async def calculate_payroll(self, company_id: str, payroll_id: str) -> Entity:
        return await self._one(
            e.PAYROLL,
            "PUT",
            "/companies/{company_id}/payrolls/{payroll_id}/calculate",
            company_id=company_id,
            payroll_id=payroll_id,
        )

    async def submit_payroll(self, company_id: str, payroll_id: str) -> Entity:
        return await self._one(
            e.PAYROLL,
            "PUT",
            "/companies/{company_id}/payrolls/{payroll_id}/submit",
            company_id=company_id,
            payroll_id=payroll_id,
        )

    async def create_off_cycle_payroll(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.PAYROLL,
            "POST",
            "/companies/{company_id}/payrolls",
            body=to_wire(e.OFF_CYCLE_PAYROLL_INPUT, data),
            company_id=company_id,
        )

    async def list_pay_schedules(self, company_id: str) -> list[Entity]:
        return await self._many(e.PAY_SCHEDULE, "/companies/{company_id}/pay_schedules", company_id=company_id)

    async def get_pay_schedule(self, company_id: str, pay_schedule_id: str) -> Entity:
        return await self._one(
            e.PAY_SCHEDULE,
            "GET",
            "/companies/{company_id}/pay_schedules/{pay_schedule_id}",
            company_id=company_id,
            pay_schedule_id=pay_schedule_id,
        )

    async def create_pay_schedule(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.PAY_SCHEDULE,
            "POST",
            "/companies/{company_id}/pay_schedules",
            body=to_wire(e.PAY_SCHEDULE_INPUT, data),
            company_id=company_id,
        )

    async def list_pay_periods(
        self,
        company_id: str,
        *,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[Entity]:
        return await self._many(
            e.PAY_PERIOD,
            "/companies/{company_id}/pay_periods",
            params={"start_date": start_date, "end_date": end_date},
            company_id=company_id,
        )

    async def list_earning_types(self, company_id: str) -> list[Entity]:
        """Default and custom earning types, merged in that order."""
        data = await self.request(
            "GET", "/companies/{company_id}/earning_types", path_params={"company_id": company_id}
        )
        if not isinstance(data, Mapping):
            return []
        merged = [*(data.get("default") or []), *(data.get("custom") or [])]
        return from_wire_many(e.EARNING_TYPE, merged)

    async def create_earning_type(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EARNING_TYPE,
            "POST",
            "/companies/{company_id}/earning_types",
            body=to_wire(e.EARNING_TYPE_INPUT, data),
            company_id=company_id,
        )

    async def update_earning_type(
        self, company_id: str, earning_type_id: str, data: Mapping[str, Any]
    ) -> Entity:
        return await self._one(
            e.EARNING_TYPE,
            "PUT",
            "/companies/{company_id}/earning_types/{earning_type_id}",
            body=to_wire(e.EARNING_TYPE_INPUT, data),
            company_id=company_id,
            earning_type_id=earning_type_id,
        )

    async def deactivate_earning_type(self, company_id: str, earning_type_id: str) -> None:
        await self._delete(
            "/companies/{company_id}/earning_types/{earning_type_id}",
            company_id=company_id,
            earning_type_id=earning_type_id,
        )

    # -------------------------------------------------------------------------
    # Benefits
    # -------------------------------------------------------------------------

    async def list_company_benefits(self, company_id: str) -> list[Entity]:
        return await self._many(
            e.COMPANY_BENEFIT, "/companies/{company_id}/company_benefits", company_id=company_id
        )

    async def get_company_benefit(self, benefit_id: str) -> Entity:
        return await self._one(
            e.COMPANY_BENEFIT, "GET", "/company_benefits/{benefit_id}", benefit_id=benefit_id
        )

    async def create_company_benefit(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPANY_BENEFIT,
            "POST",
            "/companies/{company_id}/company_benefits",
            body=to_wire(e.COMPANY_BENEFIT_INPUT, data),
            company_id=company_id,
        )

    async def update_company_benefit(self, benefit_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.COMPANY_BENEFIT,
            "PUT",
            "/company_benefits/{benefit_id}",
            body=to_wire(e.COMPANY_BENEFIT_INPUT, data),
            benefit_id=benefit_id,
        )

    async def delete_company_benefit(self, benefit_id: str) -> None:
        await self._delete("/company_benefits/{benefit_id}", benefit_id=benefit_id)

    async def list_supported_benefits(self) -> list[Entity]:
        return await self._many(e.SUPPORTED_BENEFIT, "/benefits")

    async def list_employee_benefits(self, employee_id: str) -> list[Entity]:
        return await self._many(
            e.EMPLOYEE_BENEFIT, "/employees/{employee_id}/employee_benefits", employee_id=employee_id
        )

    async def get_employee_benefit(self, benefit_id: str) -> Entity:
        return await self._one(
            e.EMPLOYEE_BENEFIT, "GET", "/employee_benefits/{benefit_id}", benefit_id=benefit_id
        )

    async def create_employee_benefit(self, employee_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EMPLOYEE_BENEFIT,
            "POST",
            "/employees/{employee_id}/employee_benefits",
            body=to_wire(e.EMPLOYEE_BENEFIT_INPUT, data),
            employee_id=employee_id,
        )

    async def update_employee_benefit(self, benefit_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.EMPLOYEE_BENEFIT,
            "PUT",
            "/employee_benefits/{benefit_id}",
            body=to_wire(e.EMPLOYEE_BENEFIT_INPUT, data),
            benefit_id=benefit_id,
        )

    async def delete_employee_benefit(self, benefit_id: str) -> None:
        await self._delete("/employee_benefits/{benefit_id}", benefit_id=benefit_id)

    # -------------------------------------------------------------------------
    # Time Off
    # -------------------------------------------------------------------------

    async def list_time_off_policies(self, company_id: str) -> list[Entity]:
        return await self._many(
            e.TIME_OFF_POLICY, "/companies/{company_id}/time_off_policies", company_id=company_id
        )

    async def get_time_off_policy(self, policy_id: str) -> Entity:
        return await self._one(
            e.TIME_OFF_POLICY, "GET", "/time_off_policies/{policy_id}", policy_id=policy_id
        )

    async def create_time_off_policy(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.TIME_OFF_POLICY,
            "POST",
            "/companies/{company_id}/time_off_policies",
            body=to_wire(e.TIME_OFF_POLICY_INPUT, data),
            company_id=company_id,
        )

    async def update_time_off_policy(self, policy_id: str, data: Mapping[str, Any]) -> Entity:
        # policy_type cannot change after creation
        body = to_wire(e.TIME_OFF_POLICY_INPUT, data)
        body.pop("policy_type", None)
        return await self._one(
            e.TIME_OFF_POLICY, "PUT", "/time_off_policies/{policy_id}", body=body, policy_id=policy_id
        )

    async def add_employees_to_time_off_policy(self, policy_id: str, employee_uuids: list[str]) -> None:
        await self.request(
            "PUT",
            "/time_off_policies/{policy_id}/add_employees",
            path_params={"policy_id": policy_id},
            json={"employees": [{"uuid": uuid} for uuid in employee_uuids]},
        )

    async def remove_employees_from_time_off_policy(
        self, policy_id: str, employee_uuids: list[str]
    ) -> None:
        await self.request(
            "PUT",
            "/time_off_policies/{policy_id}/remove_employees",
            path_params={"policy_id": policy_id},
            json={"employees": [{"uuid": uuid} for uuid in employee_uuids]},
        )

    async def get_holiday_pay_policy(self, company_id: str) -> Entity | None:
        """None when the company has no holiday pay policy (upstream 404)."""
        try:
            return await self._one(
                e.HOLIDAY_PAY_POLICY,
                "GET",
                "/companies/{company_id}/holiday_pay_policy",
                company_id=company_id,
            )
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise

    async def create_holiday_pay_policy(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.HOLIDAY_PAY_POLICY,
            "POST",
            "/companies/{company_id}/holiday_pay_policy",
            body=to_wire(e.HOLIDAY_PAY_POLICY_INPUT, data),
            company_id=company_id,
        )

    async def update_holiday_pay_policy(self, company_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.HOLIDAY_PAY_POLICY,
            "PUT",
            "/companies/{company_id}/holiday_pay_policy",
            body=to_wire(e.HOLIDAY_PAY_POLICY_INPUT, data),
            company_id=company_id,
        )

    # -------------------------------------------------------------------------
    # Forms
    # -------------------------------------------------------------------------

    async def list_employee_forms(self, employee_id: str) -> list[Entity]:
        return await self._many(e.FORM, "/employees/{employee_id}/forms", employee_id=employee_id)

    async def list_company_forms(self, company_id: str) -> list[Entity]:
        return await self._many(e.FORM, "/companies/{company_id}/forms", company_id=company_id)

    async def list_contractor_forms(self, contractor_id: str) -> list[Entity]:
        return await self._many(e.FORM, "/contractors/{contractor_id}/forms", contractor_id=contractor_id)

    # -------------------------------------------------------------------------
    # Webhooks, Events, Notifications
    # -------------------------------------------------------------------------

    async def list_webhook_subscriptions(self) -> list[Entity]:
        return await self._many(e.WEBHOOK_SUBSCRIPTION, "/webhook_subscriptions")

    async def get_webhook_subscription(self, subscription_id: str) -> Entity:
        return await self._one(
            e.WEBHOOK_SUBSCRIPTION,
            "GET",
            "/webhook_subscriptions/{subscription_id}",
            subscription_id=subscription_id,
        )

    async def create_webhook_subscription(self, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.WEBHOOK_SUBSCRIPTION,
            "POST",
            "/webhook_subscriptions",
            body=to_wire(e.WEBHOOK_SUBSCRIPTION_INPUT, data),
        )

    async def update_webhook_subscription(self, subscription_id: str, data: Mapping[str, Any]) -> Entity:
        return await self._one(
            e.WEBHOOK_SUBSCRIPTION,
            "PUT",
            "/webhook_subscriptions/{subscription_id}",
            body=to_wire(e.WEBHOOK_SUBSCRIPTION_INPUT, data),
            subscription_id=subscription_id,
        )

    async def delete_webhook_subscription(self, subscription_id: str) -> None:
        await self._delete("/webhook_subscriptions/{subscription_id}", subscription_id=subscription_id)

    async def list_events(
        self,
        *,
        starting_after_uuid: str | None = None,
        resource_uuid: str | None = None,
        resource_type: str | None = None,
        limit: int | None = None,
    ) -> list[Entity]:
        return await self._many(
            e.EVENT,
            "/events",
            params={
                "starting_after_uuid": starting_after_uuid,
                "resource_uuid": resource_uuid,
                "resource_type": resource_type,
                "limit": limit,
            },
        )

    async def list_notifications(self, company_id: str) -> list[Entity]:
        return await self._many(e.NOTIFICATION, "/companies/{company_id}/notifications", company_id=company_id)


# -----------------------------------------------------------------------------
# Factory
# -----------------------------------------------------------------------------


def create_gusto_client(
    credentials: TenantCredentials,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GustoClient:
    """Build a client for one tenant and one request. Caller closes it."""
    return GustoClient(credentials, transport=transport)
