"""Test doubles and builders shared across the suite."""

import asyncio
from typing import Iterable, Optional

from order_tracker.domain.models import (
    FailureKind,
    Locale,
    LookupFailure,
    LookupOutcome,
    LookupRequest,
    StoreCode,
)

PLACED_TEXT = "Your order has been placed."
PROCESSING_TEXT = "Your order is currently being processed."
SHIPPED_TEXT = "Your order has been despatched."
DELIVERED_TEXT = "Your order has been delivered."
CANCELLED_TEXT = "It looks like your order has been cancelled."


class StubLookupClient:
    """
    In-memory lookup client.

    Returns a fixed outcome per order number after an optional delay and
    records how many lookups were in flight at the same time.
    """

    def __init__(
        self,
        outcomes: dict[str, LookupOutcome],
        delays: Optional[dict[str, float]] = None,
        default_delay: float = 0.0,
        raise_for: Iterable[str] = (),
    ):
        self.outcomes = outcomes
        self.delays = delays or {}
        self.default_delay = default_delay
        self.raise_for = set(raise_for)
        self.calls: list[LookupRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def lookup(self, request: LookupRequest) -> LookupOutcome:
        self.calls.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(request.order_id, self.default_delay))
            if request.order_id in self.raise_for:
                raise RuntimeError(f"stub exploded for {request.order_id}")
            return self.outcomes[request.order_id]
        finally:
            self.in_flight -= 1


def make_request(order_id: str, store_code: StoreCode = StoreCode.JDSPORTS, locale: Locale = Locale.NL) -> LookupRequest:
    return LookupRequest(store_code=store_code, locale=locale, postal_code="1234AB", order_id=order_id)


def transport_failure(cause: str = "Network error: connection refused") -> LookupFailure:
    return LookupFailure(cause=cause, kind=FailureKind.TRANSPORT)


