"""FastAPI dependency injection."""

from amortizy.engine.calendar import BankCalendar, default_calendar


def get_calendar() -> BankCalendar:
    return default_calendar()
