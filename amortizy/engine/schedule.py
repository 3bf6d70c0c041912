"""Amortization schedule generation.

Walks payment dates from the first payment date, accrues interest under the
selected method and emits one PaymentRecord per period until the balance is
retired or the payment count is exhausted. A grace-period row and a
separate-fee row may precede the numbered payments.
"""

import logging
from datetime import date
from decimal import Decimal

from amortizy.engine.calendar import BankCalendar, default_calendar
from amortizy.engine.dates import DateStepper
from amortizy.engine.payment import PaymentPlan, plan_payments
from amortizy.engine.principal import daily_rate
from amortizy.models.enums import FeeTreatment, InterestMethod, PaymentType
from amortizy.models.loan import LoanTerms, PaymentRecord

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
BALANCE_EPSILON = Decimal("0.01")


def _grace_record(terms: LoanTerms, plan: PaymentPlan) -> PaymentRecord:
    return PaymentRecord(
        sequence=None,
        date=plan.first_payment_date,
        days_in_period=terms.grace_period_days,
        principal_payment=ZERO,
        interest_payment=ZERO,
        additional_fee_payment=ZERO,
        total_payment=ZERO,
        principal_balance=plan.effective_principal,
        accrued_interest=ZERO,
        total_balance=plan.effective_principal,
        payment_type=PaymentType.GRACE_PERIOD,
        grace_interest_capitalized=plan.grace_interest,
    )


def _fee_record(terms: LoanTerms, plan: PaymentPlan, payment_date: date) -> PaymentRecord:
    return PaymentRecord(
        sequence=None,
        date=payment_date,
        days_in_period=0,
        principal_payment=ZERO,
        interest_payment=ZERO,
        additional_fee_payment=terms.additional_fee,
        total_payment=terms.additional_fee,
        principal_balance=plan.effective_principal,
        accrued_interest=ZERO,
        total_balance=plan.effective_principal,
        payment_type=PaymentType.ADDITIONAL_FEE_PAYMENT,
    )


def generate_schedule(
    terms: LoanTerms,
    calendar: BankCalendar | None = None,
) -> list[PaymentRecord]:
    """Generate the full payment schedule for a loan.

    Args:
        terms: Validated loan terms
        calendar: Bank holiday calendar; defaults to the configured one.
            Only consulted when terms.bank_days_only is set.
    """
    stepper = DateStepper.for_terms(terms, calendar or default_calendar())
    plan = plan_payments(terms, stepper)
    return _walk_schedule(terms, plan, stepper)


def _walk_schedule(terms: LoanTerms, plan: PaymentPlan, stepper: DateStepper) -> list[PaymentRecord]:
    records: list[PaymentRecord] = []
    previous_date = plan.first_payment_date

    if terms.grace_period_days > 0:
        records.append(_grace_record(terms, plan))

    if terms.additional_fee_treatment == FeeTreatment.SEPARATE_PAYMENT and terms.additional_fee > 0:
        previous_date = stepper.next_payment_date(previous_date)
        records.append(_fee_record(terms, plan, previous_date))

    rate_per_day = daily_rate(terms)
    precomputed = terms.interest_method == InterestMethod.PRECOMPUTED
    fee_share = plan.fee_per_payment
    balance = plan.effective_principal
    payment_number = 0

    while payment_number < plan.total_payments and balance > BALANCE_EPSILON:
        payment_number += 1
        payment_date = stepper.next_payment_date(previous_date)
        days_in_period = (payment_date - previous_date).days

        if precomputed:
            interest = plan.precomputed_interest_per_payment
        else:
            interest = balance * rate_per_day * days_in_period

        if payment_number <= terms.interest_only_periods:
            principal_paid = ZERO
            payment_type = PaymentType.INTEREST_ONLY
        else:
            principal_paid = max(min(plan.level_payment - interest - fee_share, balance), ZERO)
            # Final payment retires whatever rounding drift left behind
            if payment_number == plan.total_payments:
                principal_paid = balance
            payment_type = PaymentType.REGULAR

        total = principal_paid + interest + fee_share
        balance -= principal_paid
        if balance < BALANCE_EPSILON:
            balance = ZERO

        records.append(PaymentRecord(
            sequence=payment_number,
            date=payment_date,
            days_in_period=days_in_period,
            principal_payment=principal_paid,
            interest_payment=interest,
            additional_fee_payment=fee_share,
            total_payment=total,
            principal_balance=balance,
            accrued_interest=interest,
            total_balance=balance + interest,
            payment_type=payment_type,
        ))
        previous_date = payment_date

    logger.debug(
        "Generated %d records (%d scheduled payments) for %s %s-month loan, final balance %s",
        len(records), payment_number, terms.frequency.value, terms.term_months, balance,
    )
    return records
