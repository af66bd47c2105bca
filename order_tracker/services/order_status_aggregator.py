"""
Order Status Aggregator - concurrent fan-out over a batch of order numbers.

Architecture:
- Fan-out: one asyncio task per lookup request, optionally gated by a semaphore
- Lookup: IOrderLookupClient answers each request with a LookupOutcome
- Classify: status_classifier maps the outcome to a StatusCategory
- Report: each result is handed to ``on_result`` as soon as it completes
- Tally: one locked increment per completed request; read after the barrier
"""

import asyncio
import inspect
import logging
import time
from typing import Optional, Sequence

from order_tracker.clients.tracking_client import OrderLookupClient
from order_tracker.core.config import Settings, get_settings
from order_tracker.domain.models import (
    FailureKind,
    LookupFailure,
    LookupRequest,
    OrderResult,
    Tally,
)
from order_tracker.services.interfaces import IOrderLookupClient, IResultSink
from order_tracker.services.status_classifier import classify_outcome
from order_tracker.utils.error_handler import log_error

logger = logging.getLogger(__name__)


class OrderStatusAggregator:
    """
    Runs one lookup per request concurrently and tallies the results.

    Units are isolated: a failing lookup, or a failing ``on_result``
    callback, never affects the other units or the final counts.
    """

    def __init__(
        self,
        lookup_client: IOrderLookupClient,
        max_concurrent: Optional[int] = None,
        on_result: Optional[IResultSink] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            lookup_client: Client used for every lookup
            max_concurrent: Cap on in-flight lookups (None or 0 = one per request)
            on_result: Called once per completed request, in completion order;
                may be a plain function or a coroutine function
        """
        if max_concurrent is not None and max_concurrent < 0:
            raise ValueError(f"max_concurrent cannot be negative: {max_concurrent}")

        self.lookup_client = lookup_client
        self.max_concurrent = max_concurrent or None
        self.on_result = on_result

    async def run(self, requests: Sequence[LookupRequest]) -> Tally:
        """
        Look up every request and return the final tally.

        Returns only after every unit has finished, so the tally always
        accounts for exactly ``len(requests)`` results.

        Args:
            requests: Lookup requests, one per order number

        Returns:
            Tally: Per-category counts
        """
        tally = Tally()
        start_time = time.perf_counter()

        semaphore = asyncio.Semaphore(self.max_concurrent) if self.max_concurrent else None

        async def process_with_semaphore(request: LookupRequest) -> None:
            """Process one request, holding the semaphore when one is configured."""
            if semaphore is None:
                await self._process_one(request, tally)
                return
            async with semaphore:
                await self._process_one(request, tally)

        tasks = [process_with_semaphore(request) for request in requests]

        logger.info(
            f"🚀 Looking up {len(tasks)} orders "
            f"(max concurrent: {self.max_concurrent or 'unbounded'})"
        )
        results = await asyncio.gather(*tasks, return_exceptions=True)

        for request, result in zip(requests, results):
            if isinstance(result, Exception):
                # _process_one absorbs lookup and callback errors; anything here is a bug
                log_error(result, {"order_id": request.order_id})

        duration = time.perf_counter() - start_time
        logger.info(f"🎉 Lookups completed in {duration:.2f}s - {tally.as_dict()}")

        return tally

    async def _process_one(self, request: LookupRequest, tally: Tally) -> OrderResult:
        """
        Look up, classify, emit and count a single request.

        Args:
            request: Request to process
            tally: Shared tally for this run

        Returns:
            OrderResult: The emitted result
        """
        try:
            outcome = await self.lookup_client.lookup(request)
        except Exception as e:
            logger.warning(f"Lookup client raised for order {request.order_id}: {e}")
            outcome = LookupFailure(cause=f"{type(e).__name__}: {e}", kind=FailureKind.TRANSPORT)

        category = classify_outcome(outcome)
        result = OrderResult(order_id=request.order_id, category=category, outcome=outcome)

        await self._emit(result)
        tally.increment(category)

        return result

    async def _emit(self, result: OrderResult) -> None:
        """Hand the result to ``on_result``; callback errors are logged only."""
        if self.on_result is None:
            return
        try:
            emitted = self.on_result(result)
            if inspect.isawaitable(emitted):
                await emitted
        except Exception as e:
            log_error(e, {"order_id": result.order_id, "stage": "on_result"}, level=logging.WARNING)


async def track_orders(
    requests: Sequence[LookupRequest],
    settings: Optional[Settings] = None,
    on_result: Optional[IResultSink] = None,
    max_concurrent: Optional[int] = None,
) -> Tally:
    """
    Open a lookup client, run the aggregator over ``requests`` and close it.

    Args:
        requests: Lookup requests
        settings: Application settings (defaults to the cached instance)
        on_result: Per-order result callback
        max_concurrent: Overrides ``MAX_CONCURRENT_LOOKUPS`` when given

    Returns:
        Tally: Final per-category counts
    """
    settings = settings or get_settings()
    if max_concurrent is None:
        max_concurrent = settings.MAX_CONCURRENT_LOOKUPS

    async with OrderLookupClient(settings=settings) as client:
        aggregator = OrderStatusAggregator(client, max_concurrent=max_concurrent, on_result=on_result)
        return await aggregator.run(requests)
