"""Effective starting principal.

Pure functions: LoanTerms in, Decimal out. No I/O.
"""

from decimal import Decimal

from amortizy.models.enums import FeeTreatment
from amortizy.models.loan import LoanTerms

DAYS_PER_YEAR = Decimal("365")


def daily_rate(terms: LoanTerms) -> Decimal:
    return terms.annual_rate / DAYS_PER_YEAR


def principal_with_origination(terms: LoanTerms) -> Decimal:
    """The origination fee is financed, not collected upfront."""
    return terms.principal + terms.origination_fee


def grace_period_interest(terms: LoanTerms) -> Decimal:
    """Simple daily interest over the grace window, capitalized into principal."""
    if terms.grace_period_days == 0:
        return Decimal("0")
    return principal_with_origination(terms) * daily_rate(terms) * terms.grace_period_days


def effective_principal(terms: LoanTerms) -> Decimal:
    """Principal + origination + grace interest (+ fee when rolled into principal)."""
    base = principal_with_origination(terms) + grace_period_interest(terms)
    if terms.additional_fee_treatment == FeeTreatment.ADD_TO_PRINCIPAL:
        return base + terms.additional_fee
    return base
