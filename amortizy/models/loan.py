from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from amortizy.config import settings
from amortizy.errors import ValidationError
from amortizy.engine.payment_counts import total_payments
from amortizy.models import validators
from amortizy.models.enums import FeeTreatment, Frequency, InterestMethod, PaymentType


@dataclass(frozen=True)
class LoanTerms:
    """Validated, immutable input to the schedule engine.

    Numeric fields accept int, float, str or Decimal and are stored as Decimal.
    Enum fields accept the member or its string value.
    """
    start_date: date
    principal: Decimal
    term_months: int
    annual_rate: Decimal  # Fraction, e.g. Decimal("0.1775")
    frequency: Frequency
    origination_fee: Decimal = Decimal("0")  # Financed: added to principal
    additional_fee: Decimal = Decimal("0")
    additional_fee_treatment: FeeTreatment = FeeTreatment.DISTRIBUTED
    bank_days_only: bool = False
    interest_only_periods: int = 0
    grace_period_days: int = 0
    interest_method: InterestMethod = InterestMethod.SIMPLE
    additional_fee_label: str = settings.additional_fee_label

    def __post_init__(self):
        fields = {
            "start_date": validators.to_date(self.start_date, "start_date"),
            "principal": validators.positive_decimal(self.principal, "principal"),
            "term_months": validators.term_months(self.term_months, "term_months"),
            "annual_rate": validators.non_negative_decimal(self.annual_rate, "annual_rate"),
            "frequency": validators.to_enum(Frequency, self.frequency, "frequency"),
            "origination_fee": validators.non_negative_decimal(self.origination_fee, "origination_fee"),
            "additional_fee": validators.non_negative_decimal(self.additional_fee, "additional_fee"),
            "additional_fee_treatment": validators.to_enum(
                FeeTreatment, self.additional_fee_treatment, "additional_fee_treatment"
            ),
            "grace_period_days": validators.non_negative_int(self.grace_period_days, "grace_period_days"),
            "interest_method": validators.to_enum(InterestMethod, self.interest_method, "interest_method"),
        }
        if not isinstance(self.bank_days_only, bool):
            raise ValidationError("bank_days_only", "must be True or False")
        count = total_payments(fields["term_months"], fields["frequency"])
        fields["interest_only_periods"] = validators.interest_only_periods(
            self.interest_only_periods, "interest_only_periods", count
        )
        validators.schedule_within_calendar(fields["start_date"], fields["grace_period_days"], count)
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    @property
    def total_payments(self) -> int:
        return total_payments(self.term_months, self.frequency)

    @property
    def principal_payments(self) -> int:
        """Payments that carry principal (total minus the interest-only phase)."""
        return self.total_payments - self.interest_only_periods


@dataclass(frozen=True)
class PaymentRecord:
    """One row of an amortization schedule.

    sequence is None for the grace-period and separate-fee rows; payment_type
    discriminates them. accrued_interest is the interest attributed to this
    period alone and never accumulates across rows.
    """
    sequence: int | None
    date: date
    days_in_period: int
    principal_payment: Decimal
    interest_payment: Decimal
    additional_fee_payment: Decimal
    total_payment: Decimal
    principal_balance: Decimal
    accrued_interest: Decimal
    total_balance: Decimal
    payment_type: PaymentType
    grace_interest_capitalized: Decimal | None = None

    @property
    def period_interest(self) -> Decimal:
        return self.accrued_interest

    @property
    def is_scheduled_payment(self) -> bool:
        """True for interest-only and regular rows (the numbered payments)."""
        return self.payment_type in (PaymentType.INTEREST_ONLY, PaymentType.REGULAR)
