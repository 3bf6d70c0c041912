"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from amortizy.config import settings
from amortizy.models.enums import FeeTreatment, Frequency, InterestMethod, PaymentType


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    start_date: date
    principal: Decimal = Field(..., description="Loan principal before fees")
    term_months: int = Field(..., description="6, 9, 12, 15 or 18")
    annual_rate: Decimal = Field(..., description="Annual rate as a fraction, e.g. 0.1775")
    frequency: Frequency
    origination_fee: Decimal = Decimal("0")
    additional_fee: Decimal = Decimal("0")
    additional_fee_label: str = settings.additional_fee_label
    additional_fee_treatment: FeeTreatment = FeeTreatment.DISTRIBUTED
    bank_days_only: bool = False
    interest_only_periods: int = 0
    grace_period_days: int = 0
    interest_method: InterestMethod = InterestMethod.SIMPLE


# ---- Response schemas ----

class PaymentRecordResponse(BaseModel):
    sequence: int | None
    date: date
    days_in_period: int
    principal_payment: Decimal
    interest_payment: Decimal
    additional_fee_payment: Decimal
    total_payment: Decimal
    principal_balance: Decimal
    accrued_interest: Decimal
    total_balance: Decimal
    payment_type: PaymentType
    grace_interest_capitalized: Decimal | None = None


class LoanSummaryResponse(BaseModel):
    first_payment_date: date
    total_payments: int
    scheduled_payments_made: int
    principal_with_origination: Decimal
    grace_interest: Decimal
    effective_principal: Decimal
    fee_per_payment: Decimal
    level_payment: Decimal
    estimated_total_days: Decimal | None = None
    precomputed_total_interest: Decimal | None = None
    precomputed_interest_per_payment: Decimal | None = None
    total_interest: Decimal
    total_interest_with_grace: Decimal
    total_additional_fees: Decimal
    total_paid: Decimal
    final_balance: Decimal


class ScheduleResponse(BaseModel):
    summary: LoanSummaryResponse
    payments: list[PaymentRecordResponse]
