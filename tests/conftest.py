"""Shared fixtures for engine, reporting and API tests.

Canonical loans: a $10K 6-month daily loan at 15%, and a $100K 12-month
daily loan at 17.75% with a $10K origination fee.
"""

from datetime import date
from decimal import Decimal

import pytest

from amortizy.engine.calendar import StaticHolidayCalendar
from amortizy.models.loan import LoanTerms


@pytest.fixture
def no_holidays() -> StaticHolidayCalendar:
    """Weekends only, no holidays."""
    return StaticHolidayCalendar([])


@pytest.fixture
def us_holidays_2025() -> StaticHolidayCalendar:
    """A handful of late-2025 / 2026 US holidays, enough for bank-day tests."""
    return StaticHolidayCalendar([
        date(2025, 11, 27),  # Thanksgiving
        date(2025, 12, 25),  # Christmas
        date(2026, 1, 1),    # New Year's Day
        date(2026, 1, 19),   # MLK Day
        date(2026, 7, 4),    # Independence Day (Saturday, observed Friday)
    ])


@pytest.fixture
def small_daily_terms() -> LoanTerms:
    """$10K, 6 months, 15%, daily, no fees or grace."""
    return LoanTerms(
        start_date=date(2025, 11, 15),
        principal=Decimal("10000"),
        term_months=6,
        annual_rate=Decimal("0.15"),
        frequency="daily",
    )


@pytest.fixture
def origination_terms() -> LoanTerms:
    """$100K + $10K origination, 12 months, 17.75%, daily."""
    return LoanTerms(
        start_date=date(2025, 11, 15),
        principal=Decimal("100000"),
        term_months=12,
        annual_rate=Decimal("0.1775"),
        frequency="daily",
        origination_fee=Decimal("10000"),
    )
