"""Payment date stepping.

Dates advance by the payment frequency and, for bank-days-only loans, roll
forward to the next bank day.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from amortizy.engine.calendar import BankCalendar
from amortizy.models.enums import Frequency
from amortizy.models.loan import LoanTerms

FREQUENCY_DAYS = {
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 7,
}

# Steps sampled when estimating bank-day period length. Changing this changes
# precomputed interest totals.
AVERAGE_SAMPLE_CAP = 30


@dataclass(frozen=True)
class DateStepper:
    frequency: Frequency
    bank_days_only: bool
    calendar: BankCalendar

    @classmethod
    def for_terms(cls, terms: LoanTerms, calendar: BankCalendar) -> "DateStepper":
        return cls(
            frequency=terms.frequency,
            bank_days_only=terms.bank_days_only,
            calendar=calendar,
        )

    @property
    def step(self) -> timedelta:
        return timedelta(days=FREQUENCY_DAYS[self.frequency])

    def next_bank_day(self, day: date) -> date:
        """Roll forward to the first bank day on or after day (no-op if unrestricted)."""
        if not self.bank_days_only:
            return day
        while not self.calendar.is_bank_day(day):
            day += timedelta(days=1)
        return day

    def next_payment_date(self, previous: date) -> date:
        return self.next_bank_day(previous + self.step)

    def first_payment_date(self, start_date: date, grace_period_days: int) -> date:
        """Start date, or the first bank day after the grace window closes."""
        if grace_period_days > 0:
            return self.next_bank_day(start_date + timedelta(days=grace_period_days))
        return start_date

    def average_days_per_period(self, first_payment_date: date, total_payments: int) -> Decimal:
        """Mean calendar days between payments.

        Exact for unrestricted schedules. For bank-days-only schedules, samples
        up to AVERAGE_SAMPLE_CAP steps forward from the first payment date.
        Only used to estimate loan duration; per-period accrual always uses
        the actual days elapsed.
        """
        if not self.bank_days_only:
            return Decimal(FREQUENCY_DAYS[self.frequency])

        sample_size = min(AVERAGE_SAMPLE_CAP, total_payments)
        current = first_payment_date
        total_days = 0
        for _ in range(sample_size):
            following = self.next_payment_date(current)
            total_days += (following - current).days
            current = following
        return Decimal(total_days) / Decimal(sample_size)
