"""Level payment calculation under the simple and precomputed methods.

Everything here is computed once per schedule and held constant; the final
scheduled payment absorbs any residual balance.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from amortizy.engine.dates import DateStepper
from amortizy.engine.principal import (
    DAYS_PER_YEAR,
    effective_principal,
    grace_period_interest,
    principal_with_origination,
)
from amortizy.models.enums import FeeTreatment, InterestMethod
from amortizy.models.loan import LoanTerms


@dataclass(frozen=True)
class PaymentPlan:
    """Derived figures shared by the schedule generator and the loan summary."""
    total_payments: int
    first_payment_date: date
    average_days_per_period: Decimal
    principal_with_origination: Decimal
    grace_interest: Decimal
    effective_principal: Decimal
    fee_per_payment: Decimal
    level_payment: Decimal
    # Precomputed method only
    estimated_total_days: Decimal | None = None
    precomputed_total_interest: Decimal | None = None
    precomputed_interest_per_payment: Decimal | None = None


def fee_per_payment(terms: LoanTerms) -> Decimal:
    if terms.additional_fee_treatment != FeeTreatment.DISTRIBUTED:
        return Decimal("0")
    return terms.additional_fee / terms.total_payments


def precomputed_total_interest(
    principal: Decimal, annual_rate: Decimal, estimated_total_days: Decimal
) -> Decimal:
    """Interest fixed upfront over the estimated life of the loan."""
    return principal * annual_rate * (estimated_total_days / DAYS_PER_YEAR)


def annuity_payment(principal: Decimal, period_rate: Decimal, periods: int) -> Decimal:
    """Level amortizing payment. Straight-line when the rate is zero."""
    if period_rate == 0:
        return principal / periods
    # PMT = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + period_rate) ** periods
    return principal * (period_rate * factor) / (factor - 1)


def plan_payments(terms: LoanTerms, stepper: DateStepper) -> PaymentPlan:
    """Resolve principal and the level payment for a loan."""
    n_total = terms.total_payments
    first_date = stepper.first_payment_date(terms.start_date, terms.grace_period_days)
    avg_days = stepper.average_days_per_period(first_date, n_total)
    principal = effective_principal(terms)
    fee_share = fee_per_payment(terms)

    if terms.interest_method == InterestMethod.PRECOMPUTED:
        total_days = n_total * avg_days
        total_interest = precomputed_total_interest(principal, terms.annual_rate, total_days)
        interest_share = total_interest / n_total
        level = principal / terms.principal_payments + interest_share + fee_share
        return PaymentPlan(
            total_payments=n_total,
            first_payment_date=first_date,
            average_days_per_period=avg_days,
            principal_with_origination=principal_with_origination(terms),
            grace_interest=grace_period_interest(terms),
            effective_principal=principal,
            fee_per_payment=fee_share,
            level_payment=level,
            estimated_total_days=total_days,
            precomputed_total_interest=total_interest,
            precomputed_interest_per_payment=interest_share,
        )

    period_rate = terms.annual_rate / DAYS_PER_YEAR * avg_days
    level = annuity_payment(principal, period_rate, terms.principal_payments) + fee_share
    return PaymentPlan(
        total_payments=n_total,
        first_payment_date=first_date,
        average_days_per_period=avg_days,
        principal_with_origination=principal_with_origination(terms),
        grace_interest=grace_period_interest(terms),
        effective_principal=principal,
        fee_per_payment=fee_share,
        level_payment=level,
    )
