from datetime import date
from decimal import Decimal

from amortizy.engine.dates import DateStepper
from amortizy.models.enums import Frequency

FRIDAY = date(2025, 11, 14)


def _stepper(calendar, frequency=Frequency.DAILY, bank_days_only=True) -> DateStepper:
    return DateStepper(frequency=frequency, bank_days_only=bank_days_only, calendar=calendar)


class TestNextPaymentDate:
    def test_daily_unrestricted_steps_one_day(self, no_holidays):
        stepper = _stepper(no_holidays, bank_days_only=False)
        assert stepper.next_payment_date(FRIDAY) == date(2025, 11, 15)

    def test_daily_bank_days_skips_weekend(self, no_holidays):
        assert _stepper(no_holidays).next_payment_date(FRIDAY) == date(2025, 11, 17)

    def test_weekly_steps_seven_days(self, no_holidays):
        stepper = _stepper(no_holidays, frequency=Frequency.WEEKLY)
        assert stepper.next_payment_date(FRIDAY) == date(2025, 11, 21)

    def test_skips_holiday(self, us_holidays_2025):
        # Dec 24 -> Dec 25 (Christmas) -> Dec 26
        assert _stepper(us_holidays_2025).next_payment_date(date(2025, 12, 24)) == date(2025, 12, 26)

    def test_weekly_rolls_past_observed_holiday(self, us_holidays_2025):
        # Friday Jun 26 + 7 = Friday Jul 3 (observed Independence Day) -> Monday Jul 6
        stepper = _stepper(us_holidays_2025, frequency=Frequency.WEEKLY)
        assert stepper.next_payment_date(date(2026, 6, 26)) == date(2026, 7, 6)

    def test_unrestricted_ignores_holidays(self, us_holidays_2025):
        stepper = _stepper(us_holidays_2025, bank_days_only=False)
        assert stepper.next_payment_date(date(2025, 12, 24)) == date(2025, 12, 25)


class TestFirstPaymentDate:
    def test_no_grace_is_start_date(self, no_holidays):
        # Not rolled even when the start date is a weekend
        assert _stepper(no_holidays).first_payment_date(date(2025, 11, 15), 0) == date(2025, 11, 15)

    def test_grace_rolls_to_bank_day(self, no_holidays):
        assert _stepper(no_holidays).first_payment_date(FRIDAY, 1) == date(2025, 11, 17)

    def test_grace_unrestricted(self, no_holidays):
        stepper = _stepper(no_holidays, bank_days_only=False)
        assert stepper.first_payment_date(FRIDAY, 5) == date(2025, 11, 19)


class TestAverageDaysPerPeriod:
    def test_unrestricted_daily(self, no_holidays):
        stepper = _stepper(no_holidays, bank_days_only=False)
        assert stepper.average_days_per_period(FRIDAY, 124) == Decimal("1")

    def test_unrestricted_weekly(self, no_holidays):
        stepper = _stepper(no_holidays, frequency=Frequency.WEEKLY, bank_days_only=False)
        assert stepper.average_days_per_period(FRIDAY, 53) == Decimal("7")

    def test_bank_days_daily_samples_thirty_steps(self, no_holidays):
        # From a Monday, 30 bank-day steps span exactly six weeks
        monday = date(2025, 11, 17)
        assert _stepper(no_holidays).average_days_per_period(monday, 124) == Decimal("1.4")

    def test_sample_capped_by_total_payments(self, no_holidays):
        monday = date(2025, 11, 17)
        # 5 steps Mon -> next Mon = 7 days
        assert _stepper(no_holidays).average_days_per_period(monday, 5) == Decimal("1.4")

    def test_holidays_lengthen_average(self, no_holidays, us_holidays_2025):
        start = date(2025, 12, 1)
        plain = _stepper(no_holidays).average_days_per_period(start, 124)
        with_holidays = _stepper(us_holidays_2025).average_days_per_period(start, 124)
        assert with_holidays > plain
