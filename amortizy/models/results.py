from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from amortizy.models.enums import FeeTreatment, Frequency, InterestMethod


@dataclass(frozen=True)
class LoanSummary:
    # Terms
    start_date: date
    first_payment_date: date
    term_months: int
    frequency: Frequency
    grace_period_days: int
    bank_days_only: bool
    interest_only_periods: int
    interest_method: InterestMethod

    # Principal
    principal: Decimal
    origination_fee: Decimal
    principal_with_origination: Decimal
    grace_interest: Decimal  # Capitalized, not paid
    effective_principal: Decimal

    # Additional fee
    additional_fee: Decimal
    additional_fee_label: str
    additional_fee_treatment: FeeTreatment
    fee_per_payment: Decimal  # Zero unless distributed

    # Payments
    total_payments: int
    scheduled_payments_made: int
    level_payment: Decimal

    # Precomputed method only
    estimated_total_days: Decimal | None
    precomputed_total_interest: Decimal | None
    precomputed_interest_per_payment: Decimal | None

    # Totals over the generated schedule
    total_interest: Decimal  # Paid during payments
    total_additional_fees: Decimal
    total_paid: Decimal
    final_balance: Decimal

    @property
    def total_interest_with_grace(self) -> Decimal:
        return self.total_interest + self.grace_interest
