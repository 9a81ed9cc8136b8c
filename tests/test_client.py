"""
Tests for the Gusto request gateway.

All HTTP goes through MockTransport; assertions are made against the
recorded httpx requests.
"""

import httpx
import pytest

from gusto_mcp.client import NO_CONTENT, GustoClient, create_gusto_client
from gusto_mcp.config import API_VERSION_HEADER
from gusto_mcp.credentials import TenantCredentials
from gusto_mcp.errors import (
    ApiError,
    AuthenticationError,
    ErrorKind,
    RateLimitError,
    UnknownFailure,
    classify_error,
)
from gusto_mcp.normalizer import Entity
from gusto_mcp.pagination import PaginatedResponse, PaginationParams

from conftest import (
    API_PATH_PREFIX,
    MOCK_EMPLOYEE_WIRE,
    FailingTransport,
    MockResponse,
    MockTransport,
    employee_wire,
)


def make_client(transport: httpx.AsyncBaseTransport, token: str = "token-a", version: str | None = None):
    return GustoClient(TenantCredentials(access_token=token, api_version=version), transport=transport)


# -----------------------------------------------------------------------------
# Request construction
# -----------------------------------------------------------------------------


class TestRequestConstruction:
    @pytest.mark.asyncio
    async def test_bearer_and_version_headers(self):
        transport = MockTransport({"/employees/emp-1": (200, MOCK_EMPLOYEE_WIRE)})
        async with make_client(transport, version="2024-04-01") as client:
            await client.get_employee("emp-1")

        request = transport.requests[0]
        assert request.headers["Authorization"] == "Bearer token-a"
        assert request.headers[API_VERSION_HEADER] == "2024-04-01"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_no_version_header_when_unset(self):
        transport = MockTransport({"/employees/emp-1": (200, MOCK_EMPLOYEE_WIRE)})
        async with make_client(transport) as client:
            await client.get_employee("emp-1")

        assert API_VERSION_HEADER not in transport.requests[0].headers

    @pytest.mark.asyncio
    async def test_url_uses_base_and_path(self):
        transport = MockTransport({"/employees/emp-1": (200, MOCK_EMPLOYEE_WIRE)})
        async with make_client(transport) as client:
            await client.get_employee("emp-1")

        url = transport.requests[0].url
        assert url.host == "api.gusto.com"
        assert url.path == "/v1/employees/emp-1"

    @pytest.mark.asyncio
    async def test_path_params_are_quoted(self):
        transport = MockTransport()
        async with make_client(transport) as client:
            with pytest.raises(ApiError):
                await client.get_employee("../companies/co-1")

        assert transport.requests[0].url.raw_path == b"/v1/employees/..%2Fcompanies%2Fco-1"

    @pytest.mark.asyncio
    async def test_query_drops_none_and_renders_bools(self):
        transport = MockTransport({"/companies/co-1/payrolls": (200, [])})
        async with make_client(transport) as client:
            await client.list_payrolls("co-1", start_date="2024-01-01", processed=True)

        params = transport.requests[0].url.params
        assert params["start_date"] == "2024-01-01"
        assert params["processed"] == "true"
        assert "end_date" not in params

    @pytest.mark.asyncio
    async def test_body_is_snake_case(self):
        transport = MockTransport({"POST /companies/co-1/employees": (201, MOCK_EMPLOYEE_WIRE)})
        async with make_client(transport) as client:
            await client.create_employee(
                "co-1", {"firstName": "Ada", "lastName": "Lovelace", "email": None}
            )

        assert transport.body() == {"first_name": "Ada", "last_name": "Lovelace"}

    @pytest.mark.asyncio
    async def test_empty_token_fails_before_io(self):
        transport = MockTransport()
        async with make_client(transport, token="") as client:
            with pytest.raises(AuthenticationError):
                await client.get_employee("emp-1")

        assert transport.call_count == 0


# -----------------------------------------------------------------------------
# Response classification
# -----------------------------------------------------------------------------


class TestResponseClassification:
    @pytest.mark.asyncio
    async def test_rate_limit_with_retry_after(self):
        transport = MockTransport({
            "/employees/emp-1": MockResponse(429, {"message": "slow"}, headers={"Retry-After": "30"}),
        })
        async with make_client(transport) as client:
            with pytest.raises(RateLimitError) as exc_info:
                await client.get_employee("emp-1")

        classified = classify_error(exc_info.value)
        assert classified.kind is ErrorKind.RATE_LIMIT
        assert classified.retryable is True
        assert classified.retry_after_seconds == 30

    @pytest.mark.asyncio
    @pytest.mark.parametrize("headers", [{}, {"Retry-After": "soon"}, {"Retry-After": "-5"}])
    async def test_rate_limit_defaults_to_sixty_seconds(self, headers):
        transport = MockTransport({"/employees/emp-1": MockResponse(429, {}, headers=headers)})
        async with make_client(transport) as client:
            with pytest.raises(RateLimitError) as exc_info:
                await client.get_employee("emp-1")

        assert exc_info.value.retry_after_seconds == 60

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_authentication_failures(self, status: int):
        transport = MockTransport({"/employees/emp-1": (status, {"message": "invalid token"})})
        async with make_client(transport) as client:
            with pytest.raises(AuthenticationError) as exc_info:
                await client.get_employee("emp-1")

        assert exc_info.value.status_code == status
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_api_error_carries_upstream_message(self):
        transport = MockTransport({
            "/employees/emp-1": (422, {"errors": [{"message": "Rate must be positive"}]}),
        })
        async with make_client(transport) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get_employee("emp-1")

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "Rate must be positive"

    @pytest.mark.asyncio
    async def test_no_content(self):
        transport = MockTransport({"DELETE /contractors/con-1": MockResponse(204)})
        async with make_client(transport) as client:
            assert await client.request("DELETE", "/contractors/con-1") is NO_CONTENT
            assert await client.delete_contractor("con-1") is None

    @pytest.mark.asyncio
    async def test_empty_success_body_is_no_content(self):
        transport = MockTransport({"/token_info": MockResponse(200, text="")})
        async with make_client(transport) as client:
            assert await client.request("GET", "/token_info") is NO_CONTENT

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        transport = MockTransport({"/token_info": MockResponse(200, text="{not json")})
        async with make_client(transport) as client:
            with pytest.raises(UnknownFailure):
                await client.get_token_info()

    @pytest.mark.asyncio
    async def test_network_error_becomes_unknown_failure(self):
        transport = FailingTransport()
        async with make_client(transport) as client:
            with pytest.raises(UnknownFailure) as exc_info:
                await client.get_employee("emp-1")

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.retryable is False

    def test_no_content_is_falsy_singleton(self):
        assert not NO_CONTENT
        assert repr(NO_CONTENT) == "NO_CONTENT"


# -----------------------------------------------------------------------------
# Typed operations
# -----------------------------------------------------------------------------


class TestOperations:
    @pytest.mark.asyncio
    async def test_get_employee_returns_entity(self):
        transport = MockTransport({"/employees/emp-1": (200, MOCK_EMPLOYEE_WIRE)})
        async with make_client(transport) as client:
            employee = await client.get_employee("emp-1")

        assert isinstance(employee, Entity)
        assert employee["firstName"] == "Alexander"

    @pytest.mark.asyncio
    async def test_list_employees_full_page_has_more(self):
        transport = MockTransport({
            "/companies/co-1/employees": (200, [employee_wire(i) for i in range(25)]),
        })
        async with make_client(transport) as client:
            page = await client.list_employees("co-1", PaginationParams(page=2, per=25))

        assert isinstance(page, PaginatedResponse)
        assert page.count == 25
        assert page.has_more is True
        assert page.next_page == 3
        params = transport.requests[0].url.params
        assert params["page"] == "2"
        assert params["per"] == "25"

    @pytest.mark.asyncio
    async def test_list_employees_short_page(self):
        transport = MockTransport({
            "/companies/co-1/employees": (200, [employee_wire(i) for i in range(10)]),
        })
        async with make_client(transport) as client:
            page = await client.list_employees("co-1", PaginationParams(per=25))

        assert page.has_more is False
        assert page.next_page is None

    @pytest.mark.asyncio
    async def test_list_employees_clamps_per(self):
        transport = MockTransport({"/companies/co-1/employees": (200, [])})
        async with make_client(transport) as client:
            await client.list_employees("co-1", PaginationParams(per=500), terminated=False)

        params = transport.requests[0].url.params
        assert params["per"] == "100"
        assert params["terminated"] == "false"
        assert "page" not in params

    @pytest.mark.asyncio
    async def test_earning_types_merged(self):
        transport = MockTransport({
            "/companies/co-1/earning_types": (200, {
                "default": [{"uuid": "et-1", "name": "Bonus"}],
                "custom": [{"uuid": "et-2", "name": "Stipend"}],
            }),
        })
        async with make_client(transport) as client:
            types = await client.list_earning_types("co-1")

        assert [t["name"] for t in types] == ["Bonus", "Stipend"]

    @pytest.mark.asyncio
    async def test_holiday_pay_policy_404_is_none(self):
        transport = MockTransport({"/companies/co-1/holiday_pay_policy": (404, {"message": "Not found"})})
        async with make_client(transport) as client:
            assert await client.get_holiday_pay_policy("co-1") is None

    @pytest.mark.asyncio
    async def test_holiday_pay_policy_other_errors_raise(self):
        transport = MockTransport({"/companies/co-1/holiday_pay_policy": (500, {"message": "boom"})})
        async with make_client(transport) as client:
            with pytest.raises(ApiError):
                await client.get_holiday_pay_policy("co-1")

    @pytest.mark.asyncio
    async def test_404_elsewhere_is_api_error(self):
        transport = MockTransport()
        async with make_client(transport) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get_time_off_policy("missing")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_calculate_payroll_uses_put(self):
        transport = MockTransport({
            "PUT /companies/co-1/payrolls/pay-1/calculate": (200, {"payroll_uuid": "pay-1"}),
        })
        async with make_client(transport) as client:
            payroll = await client.calculate_payroll("co-1", "pay-1")

        assert payroll["payrollUuid"] == "pay-1"
        assert transport.requests[0].method == "PUT"

    @pytest.mark.asyncio
    async def test_add_employees_to_time_off_policy_body(self):
        transport = MockTransport({"PUT /time_off_policies/pol-1/add_employees": (200, {})})
        async with make_client(transport) as client:
            await client.add_employees_to_time_off_policy("pol-1", ["emp-1", "emp-2"])

        assert transport.body() == {"employees": [{"uuid": "emp-1"}, {"uuid": "emp-2"}]}

    @pytest.mark.asyncio
    async def test_update_time_off_policy_drops_policy_type(self):
        transport = MockTransport({"PUT /time_off_policies/pol-1": (200, {"uuid": "pol-1"})})
        async with make_client(transport) as client:
            await client.update_time_off_policy("pol-1", {"name": "PTO", "policyType": "vacation"})

        assert transport.body() == {"name": "PTO"}

    @pytest.mark.asyncio
    async def test_contractor_payment_filters(self):
        transport = MockTransport({"/companies/co-1/contractor_payments": (200, [])})
        async with make_client(transport) as client:
            await client.list_contractor_payments("co-1", contractor_uuid="con-1")

        params = transport.requests[0].url.params
        assert params["contractor_uuid"] == "con-1"
        assert "start_date" not in params


class TestMutationBodies:
    @pytest.mark.asyncio
    async def test_update_job_never_sends_hire_date(self):
        transport = MockTransport({"PUT /jobs/job-1": (200, {"uuid": "job-1", "title": "Lead"})})
        async with make_client(transport) as client:
            job = await client.update_job(
                "job-1", {"title": "Lead", "hireDate": "2020-01-01", "locationUuid": "loc-1"}
            )

        assert job["title"] == "Lead"
        assert transport.body() == {"title": "Lead", "location_uuid": "loc-1"}

    @pytest.mark.asyncio
    async def test_update_time_off_policy_never_sends_policy_type(self):
        transport = MockTransport({"PUT /time_off_policies/pol-1": (200, {"uuid": "pol-1"})})
        async with make_client(transport) as client:
            await client.update_time_off_policy(
                "pol-1", {"policyType": "sick", "accrualRate": "4.0", "maxHours": "80"}
            )

        body = transport.body()
        assert "policy_type" not in body
        assert body == {"accrual_rate": "4.0", "max_hours": "80"}

    @pytest.mark.asyncio
    async def test_update_payroll_forwards_version(self):
        transport = MockTransport({
            "PUT /companies/co-1/payrolls/pay-1": (200, {"payroll_uuid": "pay-1", "version": "v-next"}),
        })
        async with make_client(transport) as client:
            payroll = await client.update_payroll("co-1", "pay-1", {
                "version": "19de4b4a9b1ac15f",
                "employeeCompensations": [{
                    "employeeUuid": "emp-1",
                    "grossPay": "999.00",
                    "fixedCompensations": [{"name": "Bonus", "amount": "100.00", "jobUuid": "job-1"}],
                }],
            })

        assert payroll["version"] == "v-next"
        assert transport.body() == {
            "version": "19de4b4a9b1ac15f",
            "employee_compensations": [{
                "employee_uuid": "emp-1",
                "fixed_compensations": [{"name": "Bonus", "amount": "100.00", "job_uuid": "job-1"}],
            }],
        }

    @pytest.mark.asyncio
    async def test_remove_employees_from_time_off_policy_body(self):
        transport = MockTransport({"PUT /time_off_policies/pol-1/remove_employees": (200, {})})
        async with make_client(transport) as client:
            result = await client.remove_employees_from_time_off_policy("pol-1", ["emp-3"])

        assert result is None
        assert transport.body() == {"employees": [{"uuid": "emp-3"}]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT"])
    async def test_holiday_pay_policy_writes(self, method: str):
        transport = MockTransport({
            f"{method} /companies/co-1/holiday_pay_policy": (200, {"company_uuid": "co-1"}),
        })
        data = {
            "federalHolidays": {"new_years_day": {"selected": True}},
            "customHolidays": [{"name": "Founders Day", "date": "2024-06-01"}],
        }
        async with make_client(transport) as client:
            if method == "POST":
                await client.create_holiday_pay_policy("co-1", data)
            else:
                await client.update_holiday_pay_policy("co-1", data)

        assert transport.requests[0].method == method
        assert transport.body() == {
            "federal_holidays": {"new_years_day": {"selected": True}},
            "custom_holidays": [{"name": "Founders Day", "date": "2024-06-01"}],
        }

    @pytest.mark.asyncio
    async def test_update_federal_taxes_keeps_scalar_deductions(self):
        transport = MockTransport({"PUT /employees/emp-1/federal_taxes": (200, {"deductions": "500.00"})})
        async with make_client(transport) as client:
            taxes = await client.update_federal_taxes("emp-1", {
                "version": "abc",
                "filingStatus": "Single",
                "twoJobs": False,
                "deductions": "500.00",
            })

        assert taxes["deductions"] == "500.00"
        assert transport.body() == {
            "version": "abc",
            "filing_status": "Single",
            "two_jobs": False,
            "deductions": "500.00",
        }

    @pytest.mark.asyncio
    async def test_update_state_taxes_path_includes_state(self):
        transport = MockTransport({"PUT /employees/emp-1/state_taxes/CA": (200, {"state": "CA"})})
        async with make_client(transport) as client:
            taxes = await client.update_state_taxes("emp-1", "CA", {"filingStatus": "M", "allowances": 2})

        assert taxes["state"] == "CA"
        assert transport.requests[0].url.path == f"{API_PATH_PREFIX}/employees/emp-1/state_taxes/CA"
        assert transport.body() == {"filing_status": "M", "allowances": 2}

    @pytest.mark.asyncio
    async def test_deactivate_earning_type(self):
        transport = MockTransport({"DELETE /companies/co-1/earning_types/et-2": MockResponse(204)})
        async with make_client(transport) as client:
            assert await client.deactivate_earning_type("co-1", "et-2") is None

        assert transport.requests[0].method == "DELETE"

    @pytest.mark.asyncio
    async def test_contractor_payment_groups_normalized(self):
        transport = MockTransport({
            "GET /companies/co-1/contractor_payment_groups": (200, [{
                "uuid": "grp-1",
                "check_date": "2024-03-01",
                "contractor_payments": [{"uuid": "cp-1", "contractor_uuid": "con-1", "wage": "250.00"}],
            }]),
        })
        async with make_client(transport) as client:
            groups = await client.list_contractor_payment_groups("co-1")

        assert groups[0]["checkDate"] == "2024-03-01"
        assert groups[0]["contractorPayments"][0]["contractorUuid"] == "con-1"


# Operations that map one call onto one upstream request with no extra logic:
# (call, method, path, expected body or None for no body)
PASS_THROUGH_OPERATIONS = [
    (lambda c: c.update_company("co-1", {"tradeName": "Acme"}),
     "PUT", "/companies/co-1", {"trade_name": "Acme"}),
    (lambda c: c.get_location("loc-1"), "GET", "/locations/loc-1", None),
    (lambda c: c.update_location("loc-1", {"street1": "2 Elm St", "zip": "80202"}),
     "PUT", "/locations/loc-1", {"street_1": "2 Elm St", "zip": "80202"}),
    (lambda c: c.create_company_bank_account("co-1", {"routingNumber": "111", "accountType": "Checking"}),
     "POST", "/companies/co-1/bank_accounts", {"routing_number": "111", "account_type": "Checking"}),
    (lambda c: c.get_department("dep-1"), "GET", "/departments/dep-1", None),
    (lambda c: c.update_department("dep-1", "Finance"), "PUT", "/departments/dep-1", {"title": "Finance"}),
    (lambda c: c.delete_department("dep-1"), "DELETE", "/departments/dep-1", None),
    (lambda c: c.create_admin("co-1", {"email": "a@example.com", "firstName": "Ann"}),
     "POST", "/companies/co-1/admins", {"email": "a@example.com", "first_name": "Ann"}),
    (lambda c: c.create_signatory("co-1", {"lastName": "Lee", "title": "CEO"}),
     "POST", "/companies/co-1/signatories", {"last_name": "Lee", "title": "CEO"}),
    (lambda c: c.delete_onboarding_employee("emp-1"), "DELETE", "/employees/emp-1", None),
    (lambda c: c.get_job("job-1"), "GET", "/jobs/job-1", None),
    (lambda c: c.delete_job("job-1"), "DELETE", "/jobs/job-1", None),
    (lambda c: c.get_compensation("comp-1"), "GET", "/compensations/comp-1", None),
    (lambda c: c.update_compensation("comp-1", {"rate": "30.00", "paymentUnit": "Hour"}),
     "PUT", "/compensations/comp-1", {"rate": "30.00", "payment_unit": "Hour"}),
    (lambda c: c.update_home_address("addr-1", {"city": "Boulder"}),
     "PUT", "/home_addresses/addr-1", {"city": "Boulder"}),
    (lambda c: c.list_work_addresses("emp-1"), "GET", "/employees/emp-1/work_addresses", None),
    (lambda c: c.create_work_address("emp-1", "loc-1"),
     "POST", "/employees/emp-1/work_addresses", {"location_uuid": "loc-1"}),
    (lambda c: c.delete_termination("emp-1"), "DELETE", "/employees/emp-1/terminations", None),
    (lambda c: c.get_rehire("emp-1"), "GET", "/employees/emp-1/rehire", None),
    (lambda c: c.create_rehire("emp-1", "2024-05-01"),
     "POST", "/employees/emp-1/rehire", {"effective_date": "2024-05-01"}),
    (lambda c: c.create_employee_bank_account("emp-1", {"name": "Main", "accountNumber": "9999"}),
     "POST", "/employees/emp-1/bank_accounts", {"name": "Main", "account_number": "9999"}),
    (lambda c: c.update_employee_payment_method("emp-1", {"type": "Check"}),
     "PUT", "/employees/emp-1/payment_method", {"type": "Check"}),
    (lambda c: c.get_garnishment("gar-1"), "GET", "/garnishments/gar-1", None),
    (lambda c: c.update_garnishment("gar-1", {"active": False}),
     "PUT", "/garnishments/gar-1", {"active": False}),
    (lambda c: c.update_recurring_reimbursement("rr-1", {"amount": "50.00"}),
     "PUT", "/recurring_reimbursements/rr-1", {"amount": "50.00"}),
    (lambda c: c.delete_recurring_reimbursement("rr-1"), "DELETE", "/recurring_reimbursements/rr-1", None),
    (lambda c: c.get_contractor_onboarding_status("con-1"),
     "GET", "/contractors/con-1/onboarding_status", None),
    (lambda c: c.create_contractor_bank_account("con-1", {"accountType": "Savings"}),
     "POST", "/contractors/con-1/bank_accounts", {"account_type": "Savings"}),
    (lambda c: c.get_pay_schedule("co-1", "ps-1"), "GET", "/companies/co-1/pay_schedules/ps-1", None),
    (lambda c: c.update_earning_type("co-1", "et-2", {"name": "Stipend"}),
     "PUT", "/companies/co-1/earning_types/et-2", {"name": "Stipend"}),
    (lambda c: c.get_company_benefit("cb-1"), "GET", "/company_benefits/cb-1", None),
    (lambda c: c.update_company_benefit("cb-1", {"description": "Dental"}),
     "PUT", "/company_benefits/cb-1", {"description": "Dental"}),
    (lambda c: c.delete_company_benefit("cb-1"), "DELETE", "/company_benefits/cb-1", None),
    (lambda c: c.get_employee_benefit("eb-1"), "GET", "/employee_benefits/eb-1", None),
    (lambda c: c.update_employee_benefit("eb-1", {"employeeDeduction": "25.00"}),
     "PUT", "/employee_benefits/eb-1", {"employee_deduction": "25.00"}),
    (lambda c: c.delete_employee_benefit("eb-1"), "DELETE", "/employee_benefits/eb-1", None),
    (lambda c: c.get_webhook_subscription("sub-1"), "GET", "/webhook_subscriptions/sub-1", None),
    (lambda c: c.update_webhook_subscription("sub-1", {"subscriptionTypes": ["Employee"]}),
     "PUT", "/webhook_subscriptions/sub-1", {"subscription_types": ["Employee"]}),
]


class TestPassThroughOperations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call,method,path,body",
        PASS_THROUGH_OPERATIONS,
        ids=[f"{method} {path}" for _, method, path, _ in PASS_THROUGH_OPERATIONS],
    )
    async def test_method_path_and_body(self, call, method, path, body):
        status = 204 if method == "DELETE" else 200
        transport = MockTransport({f"{method} {path}": MockResponse(status, None if status == 204 else {})})
        async with make_client(transport) as client:
            await call(client)

        request = transport.requests[0]
        assert request.method == method
        assert request.url.path == f"{API_PATH_PREFIX}{path}"
        if body is None:
            assert request.content == b""
        else:
            assert transport.body() == body


class TestConnection:
    @pytest.mark.asyncio
    async def test_connected(self, mock_transport: MockTransport):
        async with make_client(mock_transport) as client:
            result = await client.test_connection()

        assert result == {"connected": True, "message": "Connected as admin@example.com"}

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        transport = MockTransport({"/token_info": (401, {"message": "invalid"})})
        async with make_client(transport) as client:
            result = await client.test_connection()

        assert result["connected"] is False
        assert result["kind"] == "Authentication"

    @pytest.mark.asyncio
    async def test_network_failure(self):
        async with make_client(FailingTransport()) as client:
            result = await client.test_connection()

        assert result["connected"] is False
        assert result["kind"] == "Unknown"


@pytest.mark.asyncio
async def test_factory_builds_fresh_clients(credentials: TenantCredentials):
    transport = MockTransport()
    first = create_gusto_client(credentials, transport=transport)
    second = create_gusto_client(credentials, transport=transport)
    try:
        assert first is not second
        assert first.credentials == credentials
    finally:
        await first.close()
        await second.close()
