"""
Gusto Entity Tables

One EntityMapping per upstream entity, and one per create/update input.
Field lists name the supported wire fields; domain (camelCase) names are
derived, so ``street_1`` reads back as ``street1`` and ``day_1`` as ``day1``.

Fields listed without a nested mapping are carried verbatim. That covers
scalars and the opaque structures Gusto returns as-is: ``custom_fields``,
``employees: [{"uuid": ...}]``, ``subscription_types``, ``scope`` and the
like.

To support a new upstream field: add its wire name to the right table.
"""

from __future__ import annotations

from .normalizer import EntityMapping, nested

# -----------------------------------------------------------------------------
# Shared
# -----------------------------------------------------------------------------

ADDRESS = EntityMapping.of(
    "address", "street_1", "street_2", "city", "state", "zip", "country"
)

PERSON_SUMMARY = EntityMapping.of("personSummary", "first_name", "last_name", "email")

# -----------------------------------------------------------------------------
# Token / Connection
# -----------------------------------------------------------------------------

RESOURCE_OWNER = EntityMapping.of("resourceOwner", "uuid", "type", "email")

TOKEN_INFO = EntityMapping.of(
    "tokenInfo",
    nested("resource_owner", RESOURCE_OWNER),
    "scope",
    "application_id",
    "created_at",
    "expires_in",
)

# -----------------------------------------------------------------------------
# Companies
# -----------------------------------------------------------------------------

LOCATION = EntityMapping.of(
    "location",
    "uuid",
    "company_uuid",
    "phone_number",
    "street_1",
    "street_2",
    "city",
    "state",
    "zip",
    "country",
    "active",
    "mailing_address",
    "filing_address",
)

LOCATION_INPUT = EntityMapping.of(
    "locationInput",
    "phone_number",
    "street_1",
    "street_2",
    "city",
    "state",
    "zip",
    "country",
    "mailing_address",
    "filing_address",
)

COMPANY = EntityMapping.of(
    "company",
    "uuid",
    "name",
    "trade_name",
    "ein",
    "entity_type",
    "company_status",
    "tier",
    "is_partner_managed",
    nested("primary_signatory", PERSON_SUMMARY),
    nested("primary_payroll_admin", PERSON_SUMMARY),
    nested("locations", LOCATION),
)

COMPANY_UPDATE_INPUT = EntityMapping.of("companyUpdateInput", "name", "trade_name")

COMPANY_BANK_ACCOUNT = EntityMapping.of(
    "companyBankAccount",
    "uuid",
    "company_uuid",
    "name",
    "routing_number",
    "hidden_account_number",
    "account_type",
    "verification_status",
)

BANK_ACCOUNT_INPUT = EntityMapping.of(
    "bankAccountInput", "name", "routing_number", "account_number", "account_type"
)

DEPARTMENT = EntityMapping.of(
    "department", "uuid", "title", "company_uuid", "contractors", "employees"
)

DEPARTMENT_INPUT = EntityMapping.of("departmentInput", "title")

ADMIN = EntityMapping.of("admin", "uuid", "email", "first_name", "last_name")

ADMIN_INPUT = EntityMapping.of("adminInput", "email", "first_name", "last_name")

SIGNATORY = EntityMapping.of(
    "signatory",
    "uuid",
    "first_name",
    "middle_initial",
    "last_name",
    "email",
    "phone",
    "title",
    "birthday",
    nested("home_address", ADDRESS),
)

SIGNATORY_INPUT = EntityMapping.of(
    "signatoryInput",
    "first_name",
    "middle_initial",
    "last_name",
    "email",
    "phone",
    "title",
    "birthday",
)

# -----------------------------------------------------------------------------
# Employees
# -----------------------------------------------------------------------------

MINIMUM_WAGE = EntityMapping.of("minimumWage", "uuid", "effective_date", "wage")

COMPENSATION = EntityMapping.of(
    "compensation",
    "uuid",
    "job_uuid",
    "rate",
    "payment_unit",
    "flsa_status",
    "effective_date",
    "adjust_for_minimum_wage",
    nested("minimum_wages", MINIMUM_WAGE),
)

COMPENSATION_INPUT = EntityMapping.of(
    "compensationInput",
    "rate",
    "payment_unit",
    "flsa_status",
    "effective_date",
    "adjust_for_minimum_wage",
)

JOB = EntityMapping.of(
    "job",
    "uuid",
    "employee_uuid",
    "location_uuid",
    "title",
    "primary",
    "rate",
    "payment_unit",
    "current_compensation_uuid",
    "hire_date",
    nested("compensations", COMPENSATION),
)

JOB_INPUT = EntityMapping.of("jobInput", "title", "location_uuid", "hire_date")

GARNISHMENT = EntityMapping.of(
    "garnishment",
    "uuid",
    "employee_uuid",
    "active",
    "amount",
    "description",
    "court_ordered",
    "times",
    "recurring",
    "annual_maximum",
    "pay_period_maximum",
    "deduct_as_percentage",
)

GARNISHMENT_INPUT = EntityMapping.of(
    "garnishmentInput",
    "description",
    "active",
    "amount",
    "court_ordered",
    "times",
    "recurring",
    "annual_maximum",
    "pay_period_maximum",
    "deduct_as_percentage",
)

EMPLOYEE = EntityMapping.of(
    "employee",
    "uuid",
    "company_uuid",
    "first_name",
    "middle_name",
    "last_name",
    "email",
    "date_of_birth",
    "ssn",
    "phone",
    "preferred_first_name",
    "two_percent_shareholder",
    "onboarded",
    "department",
    "terminated",
    "termination_date",
    "current_employment_status",
    "work_email",
    nested("home_address", ADDRESS),
    nested("jobs", JOB),
    nested("garnishments", GARNISHMENT),
    "custom_fields",
    "payment_method",
    "has_direct_deposit",
)

EMPLOYEE_CREATE_INPUT = EntityMapping.of(
    "employeeCreateInput",
    "first_name",
    "last_name",
    "middle_name",
    "date_of_birth",
    "email",
    "ssn",
    "self_onboarding",
)

EMPLOYEE_UPDATE_INPUT = EntityMapping.of(
    "employeeUpdateInput",
    "first_name",
    "last_name",
    "middle_name",
    "preferred_first_name",
    "email",
    "date_of_birth",
    "ssn",
    "two_percent_shareholder",
)

ONBOARDING_REQUIREMENT = EntityMapping.of("onboardingRequirement", "name", "completed")

ONBOARDING_STEP = EntityMapping.of(
    "onboardingStep",
    "title",
    "id",
    "required",
    "completed",
    nested("requirements", ONBOARDING_REQUIREMENT),
)

ONBOARDING_STATUS = EntityMapping.of(
    "onboardingStatus",
    "uuid",
    "onboarding_status",
    nested("onboarding_steps", ONBOARDING_STEP),
)

HOME_ADDRESS = EntityMapping.of(
    "homeAddress",
    "uuid",
    "employee_uuid",
    "version",
    "street_1",
    "street_2",
    "city",
    "state",
    "zip",
    "country",
    "active",
    "effective_date",
)

HOME_ADDRESS_INPUT = EntityMapping.of(
    "homeAddressInput",
    "street_1",
    "street_2",
    "city",
    "state",
    "zip",
    "effective_date",
)

WORK_ADDRESS = EntityMapping.of(
    "workAddress", "uuid", "employee_uuid", "location_uuid", "effective_date"
)

WORK_ADDRESS_INPUT = EntityMapping.of("workAddressInput", "location_uuid", "effective_date")

TERMINATION = EntityMapping.of(
    "termination",
    "uuid",
    "employee_uuid",
    "active",
    "effective_date",
    "run_termination_payroll",
)

TERMINATION_INPUT = EntityMapping.of(
    "terminationInput", "effective_date", "run_termination_payroll"
)

REHIRE = EntityMapping.of(
    "rehire",
    "uuid",
    "employee_uuid",
    "effective_date",
    "file_new_hire_report",
    "work_location_uuid",
    "employment_status",
    "two_percent_shareholder",
)

REHIRE_INPUT = EntityMapping.of("rehireInput", "effective_date")

FEDERAL_TAXES = EntityMapping.of(
    "federalTaxes",
    "uuid",
    "version",
    "filing_status",
    "extra_withholding",
    "two_jobs",
    "dependents_amount",
    "other_income",
    "deductions",
    "w4_data_type",
)

FEDERAL_TAXES_INPUT = EntityMapping.of(
    "federalTaxesInput",
    "version",
    "filing_status",
    "extra_withholding",
    "two_jobs",
    "dependents_amount",
    "other_income",
    "deductions",
)

STATE_TAXES = EntityMapping.of(
    "stateTaxes",
    "uuid",
    "state",
    "filing_status",
    "extra_withholding",
    "exemptions",
    "allowances",
)

STATE_TAXES_INPUT = EntityMapping.of(
    "stateTaxesInput", "filing_status", "extra_withholding", "exemptions", "allowances"
)

EMPLOYEE_BANK_ACCOUNT = EntityMapping.of(
    "employeeBankAccount",
    "uuid",
    "employee_uuid",
    "name",
    "routing_number",
    "account_number",
    "account_type",
    "hidden_account_number",
)

PAYMENT_SPLIT = EntityMapping.of(
    "paymentSplit", "uuid", "bank_account_uuid", "name", "priority", "split_amount"
)

PAYMENT_METHOD = EntityMapping.of(
    "paymentMethod", "type", "split_by", nested("splits", PAYMENT_SPLIT)
)

PAYMENT_SPLIT_INPUT = EntityMapping.of(
    "paymentSplitInput", "bank_account_uuid", "priority", "split_amount"
)

PAYMENT_METHOD_INPUT = EntityMapping.of(
    "paymentMethodInput", "type", "split_by", nested("splits", PAYMENT_SPLIT_INPUT)
)

RECURRING_REIMBURSEMENT = EntityMapping.of(
    "recurringReimbursement",
    "uuid",
    "employee_uuid",
    "description",
    "amount",
    "effective_date",
    "active",
)

RECURRING_REIMBURSEMENT_INPUT = EntityMapping.of(
    "recurringReimbursementInput", "description", "amount", "effective_date", "active"
)

# -----------------------------------------------------------------------------
# Contractors
# -----------------------------------------------------------------------------

CONTRACTOR = EntityMapping.of(
    "contractor",
    "uuid",
    "company_uuid",
    "type",
    "wage_type",
    "first_name",
    "last_name",
    "middle_initial",
    "email",
    "business_name",
    "ein",
    "ssn",
    "is_active",
    "start_date",
    nested("address", ADDRESS),
    "hourly_rate",
    "onboarded",
    "self_onboarding",
)

CONTRACTOR_CREATE_INPUT = EntityMapping.of(
    "contractorCreateInput",
    "type",
    "wage_type",
    "first_name",
    "last_name",
    "middle_initial",
    "email",
    "business_name",
    "ein",
    "ssn",
    "start_date",
    "hourly_rate",
    "self_onboarding",
)

CONTRACTOR_UPDATE_INPUT = EntityMapping.of(
    "contractorUpdateInput",
    "type",
    "wage_type",
    "first_name",
    "last_name",
    "middle_initial",
    "email",
    "business_name",
    "ein",
    "start_date",
    "hourly_rate",
)

CONTRACTOR_ONBOARDING_STATUS = EntityMapping.of(
    "contractorOnboardingStatus", "uuid", "onboarding_status"
)

CONTRACTOR_BANK_ACCOUNT = EntityMapping.of(
    "contractorBankAccount",
    "uuid",
    "contractor_uuid",
    "name",
    "routing_number",
    "hidden_account_number",
    "account_type",
)

CONTRACTOR_PAYMENT = EntityMapping.of(
    "contractorPayment",
    "uuid",
    "contractor_uuid",
    "company_uuid",
    "bonus",
    "date",
    "hours",
    "payment_method",
    "reimbursement",
    "wage",
    "wage_total",
    "status",
)

CONTRACTOR_PAYMENT_INPUT = EntityMapping.of(
    "contractorPaymentInput",
    "contractor_uuid",
    "date",
    "wage",
    "hours",
    "bonus",
    "reimbursement",
    "payment_method",
)

CONTRACTOR_PAYMENT_GROUP = EntityMapping.of(
    "contractorPaymentGroup",
    "uuid",
    "company_uuid",
    "check_date",
    "status",
    nested("contractor_payments", CONTRACTOR_PAYMENT),
)

# -----------------------------------------------------------------------------
# Payroll
# -----------------------------------------------------------------------------

PAYROLL_TOTALS = EntityMapping.of(
    "payrollTotals",
    "company_debit",
    "reimbursements",
    "net_pay",
    "gross_pay",
    "employer_taxes",
    "employee_taxes",
    "benefits",
    "employer_benefits",
    "employee_benefits",
    "deferred_payroll",
    "child_support_debit",
)

FIXED_COMPENSATION = EntityMapping.of("fixedCompensation", "name", "amount", "job_uuid")

HOURLY_COMPENSATION = EntityMapping.of(
    "hourlyCompensation", "name", "hours", "job_uuid", "compensation_multiplier"
)

PAID_TIME_OFF = EntityMapping.of("paidTimeOff", "name", "hours")

PAYROLL_TAX = EntityMapping.of("payrollTax", "name", "amount", "employer")

PAYROLL_BENEFIT = EntityMapping.of(
    "payrollBenefit", "name", "employee_deduction", "company_contribution", "imputed"
)

PAYROLL_DEDUCTION = EntityMapping.of("payrollDeduction", "name", "amount")

EMPLOYEE_COMPENSATION = EntityMapping.of(
    "employeeCompensation",
    "employee_uuid",
    "excluded",
    "gross_pay",
    "net_pay",
    "payment_method",
    nested("fixed_compensations", FIXED_COMPENSATION),
    nested("hourly_compensations", HOURLY_COMPENSATION),
    nested("paid_time_off", PAID_TIME_OFF),
    nested("taxes", PAYROLL_TAX),
    nested("benefits", PAYROLL_BENEFIT),
    nested("deductions", PAYROLL_DEDUCTION),
)

PAYROLL = EntityMapping.of(
    "payroll",
    "payroll_uuid",
    "uuid",
    "company_uuid",
    "processed",
    "processed_date",
    "pay_period_start_date",
    "pay_period_end_date",
    "check_date",
    "payroll_deadline",
    "pay_schedule_uuid",
    "pay_schedule_type",
    "version",
    nested("totals", PAYROLL_TOTALS),
    nested("employee_compensations", EMPLOYEE_COMPENSATION),
)

EMPLOYEE_COMPENSATION_INPUT = EntityMapping.of(
    "employeeCompensationInput",
    "employee_uuid",
    "excluded",
    nested("fixed_compensations", FIXED_COMPENSATION),
    nested("hourly_compensations", EntityMapping.of("hourlyInput", "name", "hours", "job_uuid")),
    nested("paid_time_off", PAID_TIME_OFF),
)

PAYROLL_UPDATE_INPUT = EntityMapping.of(
    "payrollUpdateInput",
    "version",
    nested("employee_compensations", EMPLOYEE_COMPENSATION_INPUT),
)

OFF_CYCLE_PAYROLL_INPUT = EntityMapping.of(
    "offCyclePayrollInput",
    "off_cycle_reason",
    "check_date",
    "start_date",
    "end_date",
    "employee_uuids",
    "withholds_only_taxes",
    "skip_regular_deductions",
)

PAY_SCHEDULE = EntityMapping.of(
    "paySchedule",
    "uuid",
    "company_uuid",
    "frequency",
    "anchor_pay_date",
    "anchor_end_of_pay_period",
    "day_1",
    "day_2",
    "name",
    "auto_pilot",
    "employees",
)

PAY_SCHEDULE_INPUT = EntityMapping.of(
    "payScheduleInput",
    "frequency",
    "anchor_pay_date",
    "anchor_end_of_pay_period",
    "day_1",
    "day_2",
    "name",
    "auto_pilot",
)

PAY_PERIOD = EntityMapping.of(
    "payPeriod",
    "start_date",
    "end_date",
    "pay_schedule_uuid",
    "check_date",
    "payroll_uuid",
    "processed",
    "eligible_employees",
)

EARNING_TYPE = EntityMapping.of(
    "earningType", "uuid", "company_uuid", "name", "description", "active"
)

EARNING_TYPE_INPUT = EntityMapping.of("earningTypeInput", "name", "description")

# -----------------------------------------------------------------------------
# Benefits
# -----------------------------------------------------------------------------

COMPANY_BENEFIT = EntityMapping.of(
    "companyBenefit",
    "uuid",
    "company_uuid",
    "benefit_type",
    "description",
    "active",
    "responsible_for_employer_taxes",
    "responsible_for_employee_w2",
)

COMPANY_BENEFIT_INPUT = EntityMapping.of(
    "companyBenefitInput",
    "benefit_type",
    "description",
    "active",
    "responsible_for_employer_taxes",
    "responsible_for_employee_w2",
)

SUPPORTED_BENEFIT = EntityMapping.of(
    "supportedBenefit",
    "benefit_type",
    "name",
    "description",
    "pretax",
    "posttax",
    "imputed",
    "healthcare_benefit",
    "retirement_benefit",
)

EMPLOYEE_BENEFIT = EntityMapping.of(
    "employeeBenefit",
    "uuid",
    "employee_uuid",
    "company_benefit_uuid",
    "active",
    "employee_deduction",
    "employee_deduction_annual",
    "company_contribution",
    "company_contribution_annual",
    "deduction_reduces_taxable_income",
    "contribution_type",
    "deduct_as_percentage",
    "contribute_as_percentage",
    "catch_up",
    "coverage_amount",
    "coverage_salary_multiplier",
    "hra_exclusion",
)

EMPLOYEE_BENEFIT_INPUT = EntityMapping.of(
    "employeeBenefitInput",
    "company_benefit_uuid",
    "active",
    "employee_deduction",
    "company_contribution",
    "deduct_as_percentage",
    "contribute_as_percentage",
    "catch_up",
)

# -----------------------------------------------------------------------------
# Time Off
# -----------------------------------------------------------------------------

TIME_OFF_POLICY = EntityMapping.of(
    "timeOffPolicy",
    "uuid",
    "company_uuid",
    "name",
    "policy_type",
    "accrual_method",
    "accrual_rate",
    "accrual_rate_unit",
    "paid_out_on_termination",
    "accrual_waiting_period_days",
    "carryover_limit_hours",
    "max_accrual_hours_per_year",
    "max_hours",
    "employees",
)

TIME_OFF_POLICY_INPUT = EntityMapping.of(
    "timeOffPolicyInput",
    "name",
    "policy_type",
    "accrual_method",
    "accrual_rate",
    "accrual_rate_unit",
    "paid_out_on_termination",
    "accrual_waiting_period_days",
    "carryover_limit_hours",
    "max_accrual_hours_per_year",
    "max_hours",
)

CUSTOM_HOLIDAY = EntityMapping.of("customHoliday", "name", "date")

HOLIDAY_PAY_POLICY = EntityMapping.of(
    "holidayPayPolicy",
    "uuid",
    "company_uuid",
    "name",
    "federal_holidays",
    nested("custom_holidays", CUSTOM_HOLIDAY),
    "employees",
)

HOLIDAY_PAY_POLICY_INPUT = EntityMapping.of(
    "holidayPayPolicyInput",
    "name",
    "federal_holidays",
    nested("custom_holidays", CUSTOM_HOLIDAY),
)

# -----------------------------------------------------------------------------
# Forms, Webhooks, Events, Notifications
# -----------------------------------------------------------------------------

FORM = EntityMapping.of(
    "form",
    "uuid",
    "employee_uuid",
    "company_uuid",
    "contractor_uuid",
    "name",
    "title",
    "description",
    "signed",
    "requires_signing",
)

WEBHOOK_SUBSCRIPTION = EntityMapping.of(
    "webhookSubscription", "uuid", "url", "subscription_types", "status"
)

WEBHOOK_SUBSCRIPTION_INPUT = EntityMapping.of(
    "webhookSubscriptionInput", "url", "subscription_types"
)

EVENT = EntityMapping.of(
    "event",
    "uuid",
    "resource_uuid",
    "resource_type",
    "event_type",
    "timestamp",
    "company_uuid",
)

NOTIFICATION = EntityMapping.of(
    "notification", "uuid", "company_uuid", "type", "message", "status", "created_at"
)
