"""
Final tally report.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from order_tracker.domain.models import KNOWN_STATUSES, StatusCategory, Tally

UNCLASSIFIED = (StatusCategory.UNRECOGNIZED, StatusCategory.LOOKUP_FAILED)


def report_rows(tally: Tally, include_unclassified: bool = True) -> list[tuple[str, int]]:
    """
    Rows of the final report as ``(label, count)`` pairs.

    The five known statuses always come first, in lifecycle order.

    Args:
        tally: Final tally of the run
        include_unclassified: Also list unrecognized and failed lookups
    """
    categories = KNOWN_STATUSES + UNCLASSIFIED if include_unclassified else KNOWN_STATUSES
    counts = tally.snapshot()
    return [(category.label, counts[category]) for category in categories]


def build_report_table(tally: Tally, include_unclassified: bool = True) -> Table:
    """Build a rich table for the final report."""
    table = Table(title="Order status summary")
    table.add_column("Status", style="cyan")
    table.add_column("Orders", justify="right", style="bold")

    for label, count in report_rows(tally, include_unclassified):
        table.add_row(label, str(count))

    table.add_section()
    table.add_row("total", str(tally.total))
    return table


def render_report(tally: Tally, console: Optional[Console] = None, include_unclassified: bool = True) -> None:
    """Print the final report to ``console`` (stdout by default)."""
    console = console or Console()
    console.print()
    console.print(build_report_table(tally, include_unclassified))
