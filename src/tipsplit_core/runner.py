"""
tipsplit-core CLI Runner

Minimal CLI for splitting a bill from the command line.

Usage:
    python -m tipsplit_core.runner --bill 42.50 --preset 15 --people 2
    python -m tipsplit_core.runner --bill 50 --custom-tip 18 --people 4 --rounding round_per_person --summary

Compare every preset:
    python -m tipsplit_core.runner --bill 120 --people 3 --compare
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from tipsplit_core.app_config import AppConfig, load_config
from tipsplit_core.calculator import compute
from tipsplit_core.domain.entities import BillRequest
from tipsplit_core.domain.errors import BillValidationError
from tipsplit_core.domain.value_objects import RoundingMode
from tipsplit_core.summary import build_summary_fields, format_currency, format_summary
from tipsplit_core.use_cases.preset_comparison import compare_presets

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None, config: AppConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="tipsplit-core: Split a bill with tip",
    )
    parser.add_argument(
        "--bill",
        required=True,
        help="Bill amount (e.g. 42.50)",
    )
    parser.add_argument(
        "--preset",
        type=int,
        default=None,
        choices=config.presets.percents(),
        help="Preset tip percentage",
    )
    parser.add_argument(
        "--custom-tip",
        default=None,
        help="Custom tip percentage (overrides --preset)",
    )
    parser.add_argument(
        "--people",
        type=int,
        default=config.party.min_people,
        help=f"Number of people ({config.party.min_people}-{config.party.max_people})",
    )
    parser.add_argument(
        "--rounding",
        default=config.rounding_mode().value,
        choices=[m.value for m in RoundingMode],
        help="Rounding policy (default: TIPSPLIT_DEFAULT_ROUNDING from .env)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the copyable summary block instead of the result lines",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also print a table of every preset",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    if not config.party.min_people <= args.people <= config.party.max_people:
        parser.error(
            f"--people must be between {config.party.min_people} and {config.party.max_people}"
        )
    return args


def _print_comparison(args: argparse.Namespace, config: AppConfig) -> None:
    symbol = config.display.currency_symbol
    table = compare_presets(
        args.bill,
        people_count=args.people,
        rounding_mode=args.rounding,
        rates=config.presets.rates,
    )
    print("=== Preset Comparison ===\n")
    print(f"  {'Tip':>6} {'Tip Amount':>14} {'Total':>14} {'Per Person':>14}")
    print(f"  {'-'*6} {'-'*14} {'-'*14} {'-'*14}")
    for percent, (_, row) in zip(config.presets.percents(), table.iterrows()):
        print(
            f"  {percent:>5}% "
            f"{format_currency(row['tip_amount'], symbol):>14} "
            f"{format_currency(row['total'], symbol):>14} "
            f"{format_currency(row['per_person'], symbol):>14}"
        )
    print()


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    config = load_config()
    args = parse_args(argv, config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    preset_rate = None
    if args.preset is not None:
        preset_rate = config.presets.rate_for_percent(args.preset)

    request = BillRequest(
        bill_amount=args.bill,
        preset_rate=preset_rate,
        custom_tip_percent=args.custom_tip,
        people_count=args.people,
        rounding_mode=args.rounding,
    )
    if preset_rate is not None and args.custom_tip and args.custom_tip.strip():
        logger.debug("Custom tip %r overrides preset %r", args.custom_tip, preset_rate)
    outcome = compute(request)
    if isinstance(outcome, BillValidationError):
        logger.debug("Validation failed: %s", outcome)
        print(outcome.status_message, file=sys.stderr)
        return 1

    symbol = config.display.currency_symbol
    if args.summary:
        print(format_summary(build_summary_fields(request, outcome, symbol)))
    else:
        print(f"Tip Amount: {format_currency(outcome.tip_amount, symbol)}")
        print(f"Total:      {format_currency(outcome.total, symbol)}")
        print(f"Per Person: {format_currency(outcome.per_person, symbol)}")
    print()

    if args.compare:
        _print_comparison(args, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
