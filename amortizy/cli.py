"""CLI for generating amortization schedules.

Usage:
    amortizy --start-date 2025-11-15 --principal 100000 --term 12 --rate 17.75 --frequency daily
    amortizy --start-date 2025-11-15 --principal 100000 --term 12 --rate 17.75 --frequency weekly \
        --origination-fee 10000 --grace-days 5 --bank-days-only --csv schedule.csv
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from amortizy.config import settings
from amortizy.engine.calendar import default_calendar
from amortizy.engine.schedule import generate_schedule
from amortizy.engine.summary import summarize_schedule
from amortizy.errors import AmortizyError
from amortizy.models.enums import FeeTreatment, Frequency, InterestMethod
from amortizy.models.loan import LoanTerms
from amortizy.models.validators import SUPPORTED_TERMS
from amortizy.report import format_schedule_table, format_summary, write_csv

logger = logging.getLogger(__name__)


def _decimal(value: str) -> Decimal:
    """argparse type for monetary and rate arguments."""
    try:
        result = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not result.is_finite():
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan amortization schedule generator")
    parser.add_argument("--start-date", required=True, help="Loan start date (YYYY-MM-DD)")
    parser.add_argument("--principal", type=_decimal, required=True, help="Loan principal")
    parser.add_argument("--term", type=int, required=True, choices=SUPPORTED_TERMS, help="Term in months")
    parser.add_argument("--rate", type=_decimal, required=True, help="Annual interest rate in percent (e.g. 17.75)")
    parser.add_argument("--frequency", choices=[f.value for f in Frequency], default="daily")
    parser.add_argument("--origination-fee", type=_decimal, default=Decimal("0"))
    parser.add_argument("--additional-fee", type=_decimal, default=Decimal("0"))
    parser.add_argument("--fee-label", default=settings.additional_fee_label, help="Display label for the additional fee")
    parser.add_argument(
        "--fee-treatment",
        choices=[t.value for t in FeeTreatment],
        default=FeeTreatment.DISTRIBUTED.value,
    )
    parser.add_argument("--bank-days-only", action="store_true", help="Skip weekends and bank holidays")
    parser.add_argument("--interest-only", type=int, default=0, help="Number of interest-only payments")
    parser.add_argument("--grace-days", type=int, default=0, help="Grace period in days")
    parser.add_argument(
        "--interest-method",
        choices=[m.value for m in InterestMethod],
        default=InterestMethod.SIMPLE.value,
    )
    parser.add_argument("--csv", dest="csv_path", help="Write the schedule to this CSV file instead of printing")
    return parser


def terms_from_args(args: argparse.Namespace) -> LoanTerms:
    return LoanTerms(
        start_date=args.start_date,
        principal=args.principal,
        term_months=args.term,
        annual_rate=args.rate / 100,
        frequency=args.frequency,
        origination_fee=args.origination_fee,
        additional_fee=args.additional_fee,
        additional_fee_treatment=args.fee_treatment,
        bank_days_only=args.bank_days_only,
        interest_only_periods=args.interest_only,
        grace_period_days=args.grace_days,
        interest_method=args.interest_method,
        additional_fee_label=args.fee_label,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        terms = terms_from_args(args)
    except AmortizyError as e:
        parser.error(str(e))

    calendar = default_calendar()
    schedule = generate_schedule(terms, calendar)

    if args.csv_path:
        path = write_csv(schedule, args.csv_path)
        print(f"CSV file generated: {path}")
        return 0

    print(format_schedule_table(schedule, terms.additional_fee_label))
    print()
    print(format_summary(summarize_schedule(terms, schedule, calendar)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
