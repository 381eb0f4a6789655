"""
Command-line interface for co-credit-estimator.

Usage:
    co-credit estimate --filing-status single --income 50000 --child 4
    co-credit estimate --input household.json --json
    co-credit annualize biweekly 1500
    co-credit batch households.csv -o estimates.csv
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .engine import calculate_all_credits
from .income import calculate_annual_income, estimate_annual_income, parse_amount
from .logging import LOG_FORMATS, configure_logging
from .models import (
    Answer,
    CareWorkerType,
    ChildInfo,
    ChildRelationship,
    ColoradoResidency,
    FilingStatus,
    PayFrequency,
    TaxCreditInput,
)
from .report import summary_report


def parse_child(text: str) -> ChildInfo:
    """
    Parse a ``--child`` value: ``AGE[:LIVES[:RELATIONSHIP[:ID]]]``.

    Omitted parts default to yes / biological / yes, so ``4`` and
    ``4:yes:biological:yes`` describe the same child.
    """
    parts = text.split(":")
    if len(parts) > 4:
        raise argparse.ArgumentTypeError(
            f"invalid child '{text}' (expected AGE[:LIVES[:RELATIONSHIP[:ID]]])"
        )
    try:
        return ChildInfo.from_dict(
            dict(zip(("age", "lives_with_you", "relationship", "has_valid_id"), parts))
        )
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid child '{text}': {e}")


def _values(enum_cls):
    return [member.value for member in enum_cls]


def build_input(args: argparse.Namespace) -> TaxCreditInput:
    """Build the household from ``estimate`` arguments."""
    if args.input:
        data = json.loads(args.input.read_text())
        return TaxCreditInput.from_dict(data)

    has_earned_income = not args.no_earned_income
    if args.income is not None:
        annual_income = parse_amount(args.income) if has_earned_income else 0.0
    else:
        annual_income = estimate_annual_income(
            has_earned_income,
            args.pay_frequency,
            args.pay_amount,
            args.additional_income,
        )

    return TaxCreditInput(
        filing_status=FilingStatus(args.filing_status),
        colorado_resident=ColoradoResidency(args.resident),
        has_earned_income=has_earned_income,
        annual_income=annual_income,
        children=tuple(args.child or ()),
        has_child_care_expenses=parse_amount(args.child_care_expenses) > 0,
        child_care_expenses=parse_amount(args.child_care_expenses),
        is_care_worker=args.care_worker is not None
        and args.care_worker != CareWorkerType.NONE.value,
        care_worker_type=CareWorkerType(args.care_worker) if args.care_worker else None,
        care_worker_hours=args.care_hours,
    )


def _write(text: str, output: Optional[Path], what: str):
    if output:
        output.write_text(text + "\n")
        print(f"Wrote {what} -> {output}", file=sys.stderr)
    else:
        print(text)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="co-credit",
        description="Estimate Colorado and federal tax credits for a household",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every credit evaluation (-vv) to stderr",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="console",
        help="Log output format (default: console)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Estimate command
    estimate_parser = subparsers.add_parser(
        "estimate",
        help="Estimate all credits for one household",
    )
    estimate_parser.add_argument(
        "--input",
        type=Path,
        help="Household JSON file (overrides the household options below)",
    )
    estimate_parser.add_argument(
        "--filing-status",
        choices=_values(FilingStatus),
        default=FilingStatus.SINGLE.value,
        help="Filing status (default: single)",
    )
    estimate_parser.add_argument(
        "--resident",
        choices=_values(ColoradoResidency),
        default=ColoradoResidency.FULL_YEAR.value,
        help="Colorado residency (default: full-year)",
    )
    estimate_parser.add_argument(
        "--no-earned-income",
        action="store_true",
        help="The filer has no earned income",
    )
    estimate_parser.add_argument(
        "--income",
        help="Annual income (overrides --pay-frequency/--pay-amount)",
    )
    estimate_parser.add_argument(
        "--pay-frequency",
        choices=_values(PayFrequency),
        default=PayFrequency.BIWEEKLY.value,
        help="How often the filer is paid (default: biweekly)",
    )
    estimate_parser.add_argument(
        "--pay-amount",
        default="0",
        help="Pay per period",
    )
    estimate_parser.add_argument(
        "--additional-income",
        default="0",
        help="Other yearly income",
    )
    estimate_parser.add_argument(
        "--child",
        action="append",
        type=parse_child,
        metavar="AGE[:LIVES[:RELATIONSHIP[:ID]]]",
        help=(
            "Add a child; LIVES and ID are "
            f"{'/'.join(_values(Answer))}, RELATIONSHIP is "
            f"{'/'.join(_values(ChildRelationship))}. Repeatable."
        ),
    )
    estimate_parser.add_argument(
        "--child-care-expenses",
        default="0",
        help="Yearly child care expenses",
    )
    estimate_parser.add_argument(
        "--care-worker",
        choices=_values(CareWorkerType),
        help="Care worker type, if the filer is a care worker",
    )
    estimate_parser.add_argument(
        "--care-hours",
        type=float,
        help="Hours worked as a care worker this year",
    )
    estimate_parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of a text summary",
    )
    estimate_parser.add_argument(
        "--details",
        action="store_true",
        help="Include every credit's explanation and reasons in the summary",
    )
    estimate_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file path (default: stdout)",
    )

    # Annualize command
    annualize_parser = subparsers.add_parser(
        "annualize",
        help="Convert pay per period to annual income",
    )
    annualize_parser.add_argument("frequency", choices=_values(PayFrequency))
    annualize_parser.add_argument("amount", help="Pay per period")

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Estimate every household in a .csv, .json or .jsonl file",
    )
    batch_parser.add_argument(
        "input",
        type=Path,
        help="Household file",
    )
    batch_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output CSV path (default: stdout)",
    )
    batch_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar",
    )

    args = parser.parse_args()

    level = ("WARNING", "INFO", "DEBUG")[min(args.verbose, 2)]
    configure_logging(level=level, log_format=args.log_format)

    if args.command == "estimate":
        if args.input and not args.input.exists():
            print(f"Error: {args.input} not found", file=sys.stderr)
            sys.exit(1)

        try:
            tax_input = build_input(args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        results = calculate_all_credits(tax_input)
        if args.json:
            text = json.dumps(results.to_dict(), indent=2)
        else:
            text = summary_report(tax_input, results, details=args.details)
        _write(text, args.output, "estimate")

    elif args.command == "annualize":
        annual = calculate_annual_income(args.frequency, parse_amount(args.amount))
        print(f"{annual:.2f}")

    elif args.command == "batch":
        # pandas is only needed here
        from .batch import load_households, run_estimator

        try:
            df = load_households(args.input)
            estimates = run_estimator(df, show_progress=not args.no_progress)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if args.output:
            estimates.to_csv(args.output, index=False)
            print(
                f"Estimated {len(estimates)} households -> {args.output}",
                file=sys.stderr,
            )
        else:
            print(estimates.to_csv(index=False), end="")

    elif args.command is None:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
