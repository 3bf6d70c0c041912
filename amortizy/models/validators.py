"""Field validators for LoanTerms.

Each validator either returns the normalized value or raises ValidationError
naming the offending field.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from amortizy.errors import ValidationError

E = TypeVar("E", bound=Enum)

SUPPORTED_TERMS = (6, 9, 12, 15, 18)


def to_decimal(value, name: str) -> Decimal:
    """Convert int/float/str/Decimal to Decimal via its string form."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError(name, f"must be a number, got {type(value).__name__}")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(name, f"{value!r} is not a valid number")
    if not result.is_finite():
        raise ValidationError(name, "must be finite")
    return result


def positive_decimal(value, name: str) -> Decimal:
    result = to_decimal(value, name)
    if result <= 0:
        raise ValidationError(name, "must be greater than 0")
    return result


def non_negative_decimal(value, name: str) -> Decimal:
    result = to_decimal(value, name)
    if result < 0:
        raise ValidationError(name, "must be greater or equal to 0")
    return result


def non_negative_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, "must be an integer")
    if value < 0:
        raise ValidationError(name, "must be greater or equal to 0")
    return value


def to_date(value, name: str) -> date:
    """Accept a date, datetime or 'YYYY-MM-DD' string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            raise ValidationError(name, f"{value!r} is not a valid YYYY-MM-DD date")
    raise ValidationError(name, "must be a date or a YYYY-MM-DD string")


def term_months(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value not in SUPPORTED_TERMS:
        raise ValidationError(name, "Term must be 6, 9, 12, 15, or 18 months")
    return value


def to_enum(enum_cls: type[E], value, name: str) -> E:
    """Coerce an enum member or its string value to the enum."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(item.value for item in enum_cls)
        raise ValidationError(name, f"must be one of: {choices}")


def interest_only_periods(value, name: str, total_payments: int) -> int:
    value = non_negative_int(value, name)
    if value >= total_payments:
        raise ValidationError(
            name,
            f"Interest-only periods ({value}) must be less than total payments ({total_payments})",
        )
    return value


# Generous upper bound on calendar days per payment once bank-day rolling is
# applied (weekly step plus a long weekend and holidays).
MAX_DAYS_PER_PAYMENT = 14


def schedule_within_calendar(start: date, grace_period_days: int, total_payments: int) -> None:
    """Reject terms whose payment dates would run past the last representable date."""
    span = grace_period_days + (total_payments + 1) * MAX_DAYS_PER_PAYMENT
    try:
        start + timedelta(days=span)
    except OverflowError:
        name = "grace_period_days" if grace_period_days > 0 else "start_date"
        raise ValidationError(name, "payment schedule would extend past the last supported date")
