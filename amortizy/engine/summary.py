"""Loan summary: schedule totals alongside the derived principal and payment figures."""

from decimal import Decimal

from amortizy.engine.calendar import BankCalendar, default_calendar
from amortizy.engine.dates import DateStepper
from amortizy.engine.payment import plan_payments
from amortizy.engine.schedule import generate_schedule
from amortizy.models.loan import LoanTerms, PaymentRecord
from amortizy.models.results import LoanSummary


def summarize_schedule(
    terms: LoanTerms,
    schedule: list[PaymentRecord] | None = None,
    calendar: BankCalendar | None = None,
) -> LoanSummary:
    """Summarize a loan, generating its schedule if one is not supplied."""
    calendar = calendar or default_calendar()
    plan = plan_payments(terms, DateStepper.for_terms(terms, calendar))
    if schedule is None:
        schedule = generate_schedule(terms, calendar)

    scheduled = [r for r in schedule if r.is_scheduled_payment]
    final_balance = schedule[-1].principal_balance if schedule else plan.effective_principal

    return LoanSummary(
        start_date=terms.start_date,
        first_payment_date=plan.first_payment_date,
        term_months=terms.term_months,
        frequency=terms.frequency,
        grace_period_days=terms.grace_period_days,
        bank_days_only=terms.bank_days_only,
        interest_only_periods=terms.interest_only_periods,
        interest_method=terms.interest_method,
        principal=terms.principal,
        origination_fee=terms.origination_fee,
        principal_with_origination=plan.principal_with_origination,
        grace_interest=plan.grace_interest,
        effective_principal=plan.effective_principal,
        additional_fee=terms.additional_fee,
        additional_fee_label=terms.additional_fee_label,
        additional_fee_treatment=terms.additional_fee_treatment,
        fee_per_payment=plan.fee_per_payment,
        total_payments=plan.total_payments,
        scheduled_payments_made=len(scheduled),
        level_payment=plan.level_payment,
        estimated_total_days=plan.estimated_total_days,
        precomputed_total_interest=plan.precomputed_total_interest,
        precomputed_interest_per_payment=plan.precomputed_interest_per_payment,
        total_interest=sum((r.interest_payment for r in schedule), Decimal("0")),
        total_additional_fees=sum((r.additional_fee_payment for r in schedule), Decimal("0")),
        total_paid=sum((r.total_payment for r in schedule), Decimal("0")),
        final_balance=final_balance,
    )
