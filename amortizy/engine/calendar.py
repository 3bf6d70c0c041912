"""Bank-day calendars.

The schedule engine only asks one question of a calendar: is this date an
observed bank holiday? Weekend exclusion is layered on top in is_bank_day.
Holidays falling on a Saturday are observed the preceding Friday, those on a
Sunday the following Monday.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, timedelta

import QuantLib as ql

from amortizy.config import settings
from amortizy.errors import ConfigurationError

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6

QUANTLIB_MARKETS = {
    "settlement": ql.UnitedStates.Settlement,
    "federal_reserve": ql.UnitedStates.FederalReserve,
    "nyse": ql.UnitedStates.NYSE,
}


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def observed_date(holiday: date) -> date:
    """Shift a weekend holiday to the weekday it is observed on."""
    if holiday.weekday() == SATURDAY:
        return holiday - timedelta(days=1)
    if holiday.weekday() == SUNDAY:
        return holiday + timedelta(days=1)
    return holiday


class BankCalendar(ABC):
    """Base calendar: subclasses answer is_bank_holiday."""

    name = "base"

    @abstractmethod
    def is_bank_holiday(self, day: date) -> bool:
        """True when the bank is closed on a weekday for a holiday."""

    def is_bank_day(self, day: date) -> bool:
        """A bank day is a weekday that is not an observed holiday."""
        return not is_weekend(day) and not self.is_bank_holiday(day)


class QuantLibBankCalendar(BankCalendar):
    """US bank holidays from QuantLib's UnitedStates calendar.

    The settlement market observes Saturday holidays on the preceding Friday
    and Sunday holidays on the following Monday.
    """

    def __init__(self, market: str = "settlement"):
        try:
            ql_market = QUANTLIB_MARKETS[market]
        except KeyError:
            raise ConfigurationError(
                f"Unknown bank calendar market {market!r}; "
                f"expected one of: {', '.join(QUANTLIB_MARKETS)}"
            ) from None
        self.name = market
        self._ql_calendar = ql.UnitedStates(ql_market)

    @staticmethod
    def _to_ql_date(day: date) -> ql.Date:
        return ql.Date(day.day, day.month, day.year)

    def is_bank_holiday(self, day: date) -> bool:
        # QuantLib reports weekends as holidays too; only weekday closures count here
        if is_weekend(day):
            return False
        return self._ql_calendar.isHoliday(self._to_ql_date(day))


class StaticHolidayCalendar(BankCalendar):
    """Calendar over a fixed list of actual holiday dates.

    The observation rule is applied to each date, so passing July 4th of a
    year where it falls on Saturday closes Friday July 3rd.
    """

    name = "static"

    def __init__(self, holidays: Iterable[date]):
        self.holidays = frozenset(holidays)
        self._observed = frozenset(observed_date(h) for h in self.holidays)

    def is_bank_holiday(self, day: date) -> bool:
        return day in self._observed


def default_calendar() -> BankCalendar:
    """Build the calendar configured in settings."""
    logger.debug("Using %s bank calendar", settings.bank_calendar)
    return QuantLibBankCalendar(settings.bank_calendar)
