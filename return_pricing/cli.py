"""Command line quotes for ops and support staff.

Usage:
    python -m return_pricing quote --distance 5 --minutes 30 --size M --tip 2
    python -m return_pricing quote --distance 5 --minutes 30 --item-value 40 --json
    python -m return_pricing estimate --pickup 38.6270 -90.1994 --store 38.6167 -90.3461

Exit codes:
    0 - Quote produced
    1 - Pricing configuration error
    2 - Invalid input
"""

import argparse
import json
import logging
import sys

from .calculator import PaymentCalculator, validate_payment_breakdown
from .exceptions import InvalidInputError, PricingError
from .explain import explain_breakdown
from .models import RouteInfo
from .pricing_logging import setup_logging
from .route import estimate_route
from .settings import get_settings
from .timing import format_duration

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="return_pricing",
        description="Quote return pickups and show the driver/company split",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    quote = subparsers.add_parser("quote", help="Price a pickup")
    quote.add_argument("--distance", type=float, required=True, help="Route distance in miles")
    quote.add_argument(
        "--minutes", type=float, required=True, help="Estimated route time in minutes"
    )
    sizing = quote.add_mutually_exclusive_group(required=True)
    sizing.add_argument("--size", choices=["S", "M", "L", "XL"], help="Item size category")
    sizing.add_argument(
        "--item-value",
        type=float,
        help="Declared item value in USD; sizes the item and caps the charge below it",
    )
    quote.add_argument("--items", type=int, default=1, help="Number of items (default: 1)")
    quote.add_argument("--rush", action="store_true", help="Same-day rush pickup")
    quote.add_argument("--tip", type=float, default=0.0, help="Tip in USD (default: 0)")
    quote.add_argument("--json", action="store_true", help="Print the breakdown as JSON")

    estimate = subparsers.add_parser("estimate", help="Estimate a route from coordinates")
    estimate.add_argument("--pickup", type=float, nargs=2, metavar=("LAT", "LNG"), required=True)
    estimate.add_argument("--store", type=float, nargs=2, metavar=("LAT", "LNG"), required=True)
    estimate.add_argument("--json", action="store_true", help="Print the estimate as JSON")

    return parser


def _run_quote(args: argparse.Namespace, calculator: PaymentCalculator) -> None:
    route = RouteInfo(distance=args.distance, estimated_time=args.minutes)
    if args.item_value is not None:
        breakdown = calculator.calculate_with_value(
            route, args.item_value, args.items, args.rush, args.tip
        )
    else:
        breakdown = calculator.calculate(route, args.size, args.items, args.rush, args.tip)
    validation = validate_payment_breakdown(breakdown)

    if args.json:
        print(
            json.dumps(
                {"breakdown": breakdown.model_dump(), "validation": validation.model_dump()},
                indent=2,
            )
        )
    else:
        print(explain_breakdown(breakdown, calculator.config))
        print()
        print(validation.explanation)


def _run_estimate(args: argparse.Namespace) -> None:
    estimate = estimate_route(args.pickup[0], args.pickup[1], args.store[0], args.store[1])

    if args.json:
        print(json.dumps(estimate.model_dump(), indent=2))
    else:
        print(f"Route Distance: {estimate.distance_miles:.1f} miles")
        print(f"Estimated Time: {format_duration(estimate.estimated_minutes)}")
        print(f"Time Cap (for payment): {format_duration(estimate.time_cap_minutes)}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(
        level=settings.logging.level,
        json_output=settings.logging.format == "json",
        environment=settings.logging.environment,
    )

    try:
        if args.command == "quote":
            _run_quote(args, PaymentCalculator(settings.rates, settings.pricing))
        else:
            _run_estimate(args)
    except InvalidInputError as e:
        logger.error("Invalid input: %s", e.message)
        print(f"error: {e.message}", file=sys.stderr)
        return 2
    except PricingError as e:
        logger.error("Pricing failed: %s (%s)", e.message, e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    return 0
