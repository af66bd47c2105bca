"""
Order status categories and per-order results.
"""

from dataclasses import dataclass
from enum import Enum

from .lookup import LookupOutcome


class StatusCategory(str, Enum):
    """
    Closed set of categories an order lookup can end in.

    The first five are the statuses the tracking endpoint reports;
    UNRECOGNIZED is a successful lookup with unknown text and
    LOOKUP_FAILED is a lookup that never produced text.
    """

    PLACED = "placed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    UNRECOGNIZED = "unrecognized"
    LOOKUP_FAILED = "lookup_failed"

    @property
    def label(self) -> str:
        """Short label used in per-order lines and the report."""
        if self is StatusCategory.LOOKUP_FAILED:
            return "error"
        return self.value

    @classmethod
    def known(cls) -> tuple["StatusCategory", ...]:
        return KNOWN_STATUSES


KNOWN_STATUSES = (
    StatusCategory.PLACED,
    StatusCategory.PROCESSING,
    StatusCategory.SHIPPED,
    StatusCategory.DELIVERED,
    StatusCategory.CANCELLED,
)


@dataclass(frozen=True)
class OrderResult:
    """
    Result of one completed unit of work.

    Attributes:
        order_id: Order number that was looked up
        category: Classified status
        outcome: Raw lookup outcome
    """

    order_id: str
    category: StatusCategory
    outcome: LookupOutcome

    @property
    def line(self) -> str:
        """
        Per-order output line: ``<order_id> <label>``.

        Unrecognized statuses carry the endpoint text in parentheses.
        """
        line = f"{self.order_id} {self.category.label}"
        if self.category is StatusCategory.UNRECOGNIZED and self.outcome.ok and self.outcome.raw_text:
            line += f" ({self.outcome.raw_text})"
        return line
