#!/usr/bin/env python3
"""
Order status tracker command line.

Looks up a batch of order numbers concurrently, prints one line per order
as results arrive and finishes with a per-status summary.

Usage:
    # Fully interactive (menus for fascia, locale, postcode and orders)
    order-tracker

    # Non-interactive
    order-tracker --fascia jdsports --locale nl --postcode 1234AB --orders 1001 1002 1003

    # Read order numbers from a file, at most 20 lookups in flight
    order-tracker --fascia size --locale uk --postcode "M1 1AA" --orders-file orders.txt --max-concurrent 20
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from order_tracker.core.config import load_settings
from order_tracker.core.logging_config import setup_logging
from order_tracker.domain.models import Locale, OrderResult, StoreCode
from order_tracker.services.order_status_aggregator import track_orders
from order_tracker.services.report import render_report
from order_tracker.session import SessionPrompter, resolve_session
from order_tracker.utils.error_handler import ConfigurationException, ValidationException

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="order-tracker",
        description="Look up order statuses concurrently and tally them per status.",
    )
    parser.add_argument("--fascia", choices=[code.value for code in StoreCode], help="Store to query")
    parser.add_argument("--locale", choices=[locale.value for locale in Locale], help="Store locale")
    parser.add_argument("--postcode", help="Delivery postcode")

    orders = parser.add_mutually_exclusive_group()
    orders.add_argument("--orders", nargs="+", metavar="ORDER", help="Order numbers")
    orders.add_argument(
        "--orders-file",
        metavar="PATH",
        help="File with one order number per line (default: ORDER_NUMBERS_FILE setting)",
    )

    parser.add_argument(
        "--max-concurrent",
        type=non_negative_int,
        default=None,
        help="Maximum lookups in flight (0 = one per order; default: MAX_CONCURRENT_LOOKUPS setting)",
    )
    parser.add_argument(
        "--hide-unclassified",
        action="store_true",
        help="Only show the five known statuses in the summary",
    )
    parser.add_argument("--wait", action="store_true", help="Wait for Enter before exiting")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tracker; returns the process exit code."""
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        settings = load_settings()
    except ConfigurationException as e:
        console.print(f"[red]❌ {e.message}[/red]")
        return 2

    setup_logging(level="DEBUG" if args.verbose else None, settings=settings)

    try:
        session = resolve_session(
            prompter=SessionPrompter(),
            orders_file=args.orders_file or settings.ORDER_NUMBERS_FILE,
            store_code=args.fascia,
            locale=args.locale,
            postal_code=args.postcode,
            order_ids=args.orders,
            use_orders_file=args.orders_file is not None,
        )
    except ValidationException as e:
        console.print(f"[red]❌ {e.message}[/red]")
        return 2
    except (EOFError, KeyboardInterrupt):
        console.print()
        return 130

    def print_result(result: OrderResult) -> None:
        console.print(result.line, markup=False, highlight=False)

    try:
        tally = asyncio.run(
            track_orders(
                session.to_requests(),
                settings=settings,
                on_result=print_result,
                max_concurrent=args.max_concurrent,
            )
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130

    include_unclassified = settings.REPORT_INCLUDE_UNCLASSIFIED and not args.hide_unclassified
    render_report(tally, console, include_unclassified=include_unclassified)

    if args.wait:
        try:
            input()
        except EOFError:
            pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
