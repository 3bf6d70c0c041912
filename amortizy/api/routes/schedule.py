"""Schedule routes: loan terms in, amortization schedule out."""

from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, Depends, HTTPException

from amortizy.api.deps import get_calendar
from amortizy.api.schemas import (
    LoanSummaryResponse,
    PaymentRecordResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from amortizy.engine.calendar import BankCalendar
from amortizy.engine.schedule import generate_schedule
from amortizy.engine.summary import summarize_schedule
from amortizy.errors import ValidationError
from amortizy.models.loan import LoanTerms, PaymentRecord
from amortizy.models.results import LoanSummary

router = APIRouter(prefix="/api/v1", tags=["schedule"])

TWO_PLACES = Decimal("0.01")


def _cents(v: Decimal | None) -> Decimal | None:
    if v is None:
        return None
    return v.quantize(TWO_PLACES, ROUND_HALF_UP)


def _record_to_response(r: PaymentRecord) -> PaymentRecordResponse:
    return PaymentRecordResponse(
        sequence=r.sequence,
        date=r.date,
        days_in_period=r.days_in_period,
        principal_payment=_cents(r.principal_payment),
        interest_payment=_cents(r.interest_payment),
        additional_fee_payment=_cents(r.additional_fee_payment),
        total_payment=_cents(r.total_payment),
        principal_balance=_cents(r.principal_balance),
        accrued_interest=_cents(r.accrued_interest),
        total_balance=_cents(r.total_balance),
        payment_type=r.payment_type,
        grace_interest_capitalized=_cents(r.grace_interest_capitalized),
    )


def _summary_to_response(s: LoanSummary) -> LoanSummaryResponse:
    return LoanSummaryResponse(
        first_payment_date=s.first_payment_date,
        total_payments=s.total_payments,
        scheduled_payments_made=s.scheduled_payments_made,
        principal_with_origination=_cents(s.principal_with_origination),
        grace_interest=_cents(s.grace_interest),
        effective_principal=_cents(s.effective_principal),
        fee_per_payment=_cents(s.fee_per_payment),
        level_payment=_cents(s.level_payment),
        estimated_total_days=s.estimated_total_days,
        precomputed_total_interest=_cents(s.precomputed_total_interest),
        precomputed_interest_per_payment=_cents(s.precomputed_interest_per_payment),
        total_interest=_cents(s.total_interest),
        total_interest_with_grace=_cents(s.total_interest_with_grace),
        total_additional_fees=_cents(s.total_additional_fees),
        total_paid=_cents(s.total_paid),
        final_balance=_cents(s.final_balance),
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def create_schedule(
    req: ScheduleRequest,
    calendar: BankCalendar = Depends(get_calendar),
):
    """Generate a full amortization schedule with its loan summary."""
    try:
        terms = LoanTerms(**req.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    schedule = generate_schedule(terms, calendar)
    summary = summarize_schedule(terms, schedule, calendar)
    return ScheduleResponse(
        summary=_summary_to_response(summary),
        payments=[_record_to_response(r) for r in schedule],
    )
