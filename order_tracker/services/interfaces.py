"""
Interfaces/Protocols for tracking services.

The aggregator depends on these contracts rather than on the concrete
HTTP client, so tests can drive it with stubs.
"""

from typing import Any, Protocol

from order_tracker.domain.models import LookupOutcome, LookupRequest, OrderResult


class IOrderLookupClient(Protocol):
    """Protocol for single order-status lookups."""

    async def lookup(self, request: LookupRequest) -> LookupOutcome:
        """Look up one order; must return an outcome rather than raise."""
        ...


class IResultSink(Protocol):
    """Protocol for receiving per-order results as they complete."""

    def __call__(self, result: OrderResult) -> Any:
        ...
