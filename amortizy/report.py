"""Console and CSV rendering of generated schedules.

Formatting only: amounts are rounded to cents here, never in the engine.
"""

import csv
import logging
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from amortizy.models.enums import FeeTreatment, InterestMethod, PaymentType
from amortizy.models.loan import PaymentRecord
from amortizy.models.results import LoanSummary

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
RULE_WIDTH = 195

CSV_COLUMNS = [
    "Payment Number",
    "Date",
    "Days in Period",
    "Principal Payment",
    "Interest Payment",
    "Additional Fee Payment",
    "Total Payment",
    "Principal Balance Remaining",
    "Accrued Interest",
    "Total Balance",
    "Payment Type",
    "Grace Interest Capitalized",
]


def _money(v: Decimal) -> str:
    return str(v.quantize(TWO_PLACES, ROUND_HALF_UP))


def _dollar(v: Decimal) -> str:
    return f"${_money(v)}"


def _label(record: PaymentRecord) -> str:
    """Row label: the payment number, or Grace / Fee for the unnumbered rows."""
    if record.payment_type == PaymentType.GRACE_PERIOD:
        return "Grace"
    if record.payment_type == PaymentType.ADDITIONAL_FEE_PAYMENT:
        return "Fee"
    return str(record.sequence)


def format_header(fee_label: str) -> str:
    return (
        f"{'Payment':<8} {'Date':<12} {'Days':<8} {'Principal Pmt':>15} {'Interest Pmt':>15} "
        f"{fee_label:>18} {'Total Payment':>18} {'Principal Balance':>20} "
        f"{'Accrued Interest':>18} {'Total Balance':>18} {'Payment Type':>20}"
    )


def format_row(record: PaymentRecord) -> str:
    date_str = record.date.isoformat()
    if record.payment_type == PaymentType.GRACE_PERIOD:
        return (
            f"{'Grace':<8} {date_str:<12} {record.days_in_period:<8d} {'---':>15} "
            f"{'+' + _money(record.grace_interest_capitalized):>15} {'---':>18} {'0.00':>18} "
            f"{_money(record.principal_balance):>20} {'---':>18} "
            f"{_money(record.total_balance):>18} {record.payment_type.value:>20}"
        )
    return (
        f"{_label(record):<8} {date_str:<12} {record.days_in_period:<8d} "
        f"{_money(record.principal_payment):>15} {_money(record.interest_payment):>15} "
        f"{_money(record.additional_fee_payment):>18} {_money(record.total_payment):>18} "
        f"{_money(record.principal_balance):>20} {_money(record.accrued_interest):>18} "
        f"{_money(record.total_balance):>18} {record.payment_type.value:>20}"
    )


def format_schedule_table(schedule: list[PaymentRecord], fee_label: str) -> str:
    lines = [format_header(fee_label), "-" * RULE_WIDTH]
    lines.extend(format_row(r) for r in schedule)
    return "\n".join(lines)


def format_summary(summary: LoanSummary) -> str:
    label = summary.additional_fee_label
    treatment = summary.additional_fee_treatment.value.replace("_", " ").title()
    lines = [
        "=" * RULE_WIDTH,
        "LOAN SUMMARY",
        "=" * RULE_WIDTH,
        f"Loan Start Date: {summary.start_date.isoformat()}",
        f"First Payment Date: {summary.first_payment_date.isoformat()}",
        f"Term: {summary.term_months} months",
        f"Payment Frequency: {summary.frequency.value.capitalize()}",
        f"Grace Period: {summary.grace_period_days} days",
    ]
    if summary.grace_period_days > 0:
        lines.append(f"Grace Period Interest (Capitalized): {_dollar(summary.grace_interest)}")

    lines += [
        "",
        f"Original Principal: {_dollar(summary.principal)}",
        f"Origination Fee: {_dollar(summary.origination_fee)} (added to principal)",
        f"Additional Fee: {_dollar(summary.additional_fee)}",
        f"{label} Treatment: {treatment}",
        f"Bank Days Only: {summary.bank_days_only}",
        f"Interest-Only Periods: {summary.interest_only_periods}",
        f"Interest Method: {summary.interest_method.value.capitalize()}",
        "",
        f"Principal after Origination Fee: {_dollar(summary.principal_with_origination)}",
    ]
    if summary.grace_period_days > 0:
        with_grace = summary.principal_with_origination + summary.grace_interest
        lines.append(f"Principal after Grace Period (with capitalized interest): {_dollar(with_grace)}")

    if summary.additional_fee_treatment == FeeTreatment.ADD_TO_PRINCIPAL:
        lines.append(f"Total Principal (with all fees): {_dollar(summary.effective_principal)}")
    elif summary.additional_fee_treatment == FeeTreatment.DISTRIBUTED:
        lines.append(f"{label} per payment: {_dollar(summary.fee_per_payment)}")
    else:
        lines.append(f"{label} collected as separate payment")

    lines.append(f"Level Payment: {_dollar(summary.level_payment)}")

    if summary.interest_method == InterestMethod.PRECOMPUTED:
        lines += [
            "",
            "Precomputed Interest Calculation:",
            f"  Estimated Total Loan Days: {summary.estimated_total_days:.0f}",
            f"  Total Precomputed Interest: {_dollar(summary.precomputed_total_interest)}",
            f"  Interest per Payment: {_dollar(summary.precomputed_interest_per_payment)}",
        ]

    lines += ["", f"Total Interest Paid (during payments): {_dollar(summary.total_interest)}"]
    if summary.grace_period_days > 0:
        lines.append(f"Total Interest Including Grace Period: {_dollar(summary.total_interest_with_grace)}")
    lines += [
        f"Total {label} Paid: {_dollar(summary.total_additional_fees)}",
        f"Total Amount Paid: {_dollar(summary.total_paid)}",
        "=" * RULE_WIDTH,
    ]
    return "\n".join(lines)


def csv_row(record: PaymentRecord) -> list[str]:
    grace = record.grace_interest_capitalized
    return [
        _label(record),
        record.date.isoformat(),
        str(record.days_in_period),
        _money(record.principal_payment),
        _money(record.interest_payment),
        _money(record.additional_fee_payment),
        _money(record.total_payment),
        _money(record.principal_balance),
        _money(record.accrued_interest),
        _money(record.total_balance),
        record.payment_type.value,
        _money(grace) if grace is not None else "",
    ]


def write_csv(schedule: list[PaymentRecord], path: str | Path) -> Path:
    """Write the schedule to a CSV file and return its path."""
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        writer.writerows(csv_row(r) for r in schedule)
    logger.info("Wrote %d schedule rows to %s", len(schedule), path)
    return path
