from datetime import date

import pytest

from amortizy.engine.calendar import (
    BankCalendar,
    QuantLibBankCalendar,
    StaticHolidayCalendar,
    default_calendar,
    observed_date,
)
from amortizy.errors import ConfigurationError


class TestObservedDate:
    def test_saturday_observed_friday(self):
        assert observed_date(date(2026, 7, 4)) == date(2026, 7, 3)

    def test_sunday_observed_monday(self):
        assert observed_date(date(2027, 7, 4)) == date(2027, 7, 5)

    def test_weekday_unchanged(self):
        assert observed_date(date(2025, 12, 25)) == date(2025, 12, 25)


class TestStaticHolidayCalendar:
    def test_holiday(self, us_holidays_2025):
        assert us_holidays_2025.is_bank_holiday(date(2025, 12, 25))
        assert not us_holidays_2025.is_bank_day(date(2025, 12, 25))

    def test_observed_holiday(self, us_holidays_2025):
        assert us_holidays_2025.is_bank_holiday(date(2026, 7, 3))
        assert not us_holidays_2025.is_bank_holiday(date(2026, 7, 4))

    def test_weekends_are_not_bank_days(self, no_holidays):
        assert not no_holidays.is_bank_day(date(2025, 1, 4))  # Saturday
        assert not no_holidays.is_bank_day(date(2025, 1, 5))  # Sunday
        assert no_holidays.is_bank_day(date(2025, 1, 6))  # Monday


class TestQuantLibBankCalendar:
    @pytest.fixture
    def calendar(self):
        return QuantLibBankCalendar("settlement")

    def test_detects_federal_holidays(self, calendar):
        assert calendar.is_bank_holiday(date(2025, 1, 1))
        assert not calendar.is_bank_holiday(date(2025, 1, 2))

    def test_christmas(self, calendar):
        assert not calendar.is_bank_day(date(2025, 12, 25))

    def test_saturday_holiday_observed_friday(self, calendar):
        assert calendar.is_bank_holiday(date(2026, 7, 3))

    def test_sunday_holiday_observed_monday(self, calendar):
        # July 4th 2027 is a Sunday
        assert calendar.is_bank_holiday(date(2027, 7, 5))
        assert not calendar.is_bank_day(date(2027, 7, 5))
        assert calendar.is_bank_day(date(2027, 7, 6))

    def test_weekend_is_not_a_holiday_but_not_a_bank_day(self, calendar):
        saturday = date(2025, 1, 4)
        assert not calendar.is_bank_holiday(saturday)
        assert not calendar.is_bank_day(saturday)

    def test_unknown_market(self):
        with pytest.raises(ConfigurationError, match="Unknown bank calendar"):
            QuantLibBankCalendar("tokyo")

    def test_default_calendar_uses_settings(self):
        assert default_calendar().name == "settlement"


class TestBankCalendarContract:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            BankCalendar()

    def test_subclass_without_holiday_rule_cannot_be_built(self):
        class Incomplete(BankCalendar):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_subclass_inherits_weekend_rule(self):
        class NoHolidays(BankCalendar):
            def is_bank_holiday(self, day):
                return False

        calendar = NoHolidays()
        assert not calendar.is_bank_day(date(2025, 1, 4))
        assert calendar.is_bank_day(date(2025, 1, 6))
