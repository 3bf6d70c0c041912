"""Payment count table: (term months, frequency) -> total scheduled payments.

A fixed convention, not a formula. Bank-day calendars make periods per month
irregular, so the counts are looked up rather than derived.
"""

from amortizy.errors import ConfigurationError
from amortizy.models.enums import Frequency

PAYMENT_COUNTS: dict[tuple[int, Frequency], int] = {
    (6, Frequency.DAILY): 124,
    (6, Frequency.WEEKLY): 27,
    (9, Frequency.DAILY): 185,
    (9, Frequency.WEEKLY): 39,
    (12, Frequency.DAILY): 248,
    (12, Frequency.WEEKLY): 53,
    (15, Frequency.DAILY): 312,
    (15, Frequency.WEEKLY): 65,
    (18, Frequency.DAILY): 370,
    (18, Frequency.WEEKLY): 79,
}


def total_payments(term_months: int, frequency: Frequency) -> int:
    """Look up the number of scheduled payments for a term and frequency."""
    try:
        return PAYMENT_COUNTS[(term_months, frequency)]
    except KeyError:
        raise ConfigurationError(
            f"No payment count configured for {term_months} months / {frequency.value}"
        ) from None
