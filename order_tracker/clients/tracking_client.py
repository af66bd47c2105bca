"""
Client for the third-party track-my-order endpoint.

One ``lookup`` call issues exactly one GET request and always returns a
``LookupOutcome``: transport errors, bad statuses and unexpected bodies
are folded into ``LookupFailure`` instead of being raised.
"""

import asyncio
import logging
import time
from typing import Any, Optional

import aiohttp

from order_tracker.core.config import Settings, get_settings
from order_tracker.core.logging_config import log_api_call
from order_tracker.domain.models import (
    FailureKind,
    LookupFailure,
    LookupOutcome,
    LookupRequest,
    LookupSuccess,
)
from order_tracker.utils.error_handler import (
    AppException,
    LookupParseException,
    LookupTransportException,
)

logger = logging.getLogger(__name__)


class OrderLookupClient:
    """
    Async client for single order-status lookups.

    No retries and no timeout override: aiohttp's default client timeout
    applies, and bounding a hung lookup is left to the caller.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Application settings (defaults to the cached instance)
            session: Externally managed HTTP session; it is used as-is and
                never closed by this client
        """
        self.settings = settings or get_settings()
        self.endpoint_url = self.settings.TRACKING_ENDPOINT_URL
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def initialize(self):
        """Open the HTTP session if none was injected."""
        if self.session is None:
            self.session = aiohttp.ClientSession(
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.settings.user_agent,
                },
            )
            self._owns_session = True
            logger.debug(f"Opened HTTP session for {self.endpoint_url}")

    async def close(self):
        """Close the HTTP session if this client opened it."""
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None
            logger.debug("Order lookup client closed")

    async def __aenter__(self) -> "OrderLookupClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def lookup(self, request: LookupRequest) -> LookupOutcome:
        """
        Look up the status text of one order.

        Args:
            request: Order number plus store/locale/postcode

        Returns:
            LookupOutcome: ``LookupSuccess`` with ``message.text`` or
            ``LookupFailure`` describing what went wrong
        """
        try:
            raw_text = await self._fetch_status_text(request)
        except LookupTransportException as e:
            kind = FailureKind.HTTP_STATUS if e.status_code is not None else FailureKind.TRANSPORT
            logger.info(f"Lookup failed for order {request.order_id}: {e}")
            return LookupFailure(cause=e.message, kind=kind)
        except LookupParseException as e:
            logger.info(f"Lookup failed for order {request.order_id}: {e}")
            return LookupFailure(cause=e.message, kind=FailureKind.PARSE)

        return LookupSuccess(raw_text=raw_text)

    async def _fetch_status_text(self, request: LookupRequest) -> str:
        """
        Perform the GET request and extract ``message.text``.

        Raises:
            LookupTransportException: Network error or non-2xx status
            LookupParseException: Body is not JSON or has the wrong shape
        """
        if self.session is None:
            raise LookupTransportException(
                "Client not initialized. Call initialize() first.", order_id=request.order_id
            )

        params = request.to_query_params()
        start = time.perf_counter()
        status_code = 0

        try:
            async with self.session.get(self.endpoint_url, params=params) as response:
                status_code = response.status
                if not 200 <= response.status < 300:
                    raise LookupTransportException(
                        f"HTTP {response.status} from tracking endpoint",
                        order_id=request.order_id,
                        status_code=response.status,
                    )

                try:
                    payload = await response.json(content_type=None)
                except (ValueError, RecursionError) as e:
                    raise LookupParseException(
                        f"Response body is not valid JSON: {e}", order_id=request.order_id
                    ) from e

        except AppException:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise LookupTransportException(
                f"Network error: {type(e).__name__}: {e}", order_id=request.order_id
            ) from e
        finally:
            log_api_call(
                "GET",
                self.endpoint_url,
                status_code,
                time.perf_counter() - start,
                order_id=request.order_id,
                fascia=params["fascia"],
            )

        return extract_status_text(payload, order_id=request.order_id)


def extract_status_text(payload: Any, order_id: Optional[str] = None) -> str:
    """
    Pull ``message.text`` out of a decoded response body.

    Missing ``message`` or ``text`` keys yield an empty string; values of
    the wrong JSON type are rejected.

    Raises:
        LookupParseException: If the payload does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise LookupParseException(
            f"Expected a JSON object, got {type(payload).__name__}", order_id=order_id
        )

    message = payload.get("message")
    if message is None:
        return ""
    if not isinstance(message, dict):
        raise LookupParseException(
            f"Expected 'message' to be an object, got {type(message).__name__}", order_id=order_id
        )

    text = message.get("text")
    if text is None:
        return ""
    if not isinstance(text, str):
        raise LookupParseException(
            f"Expected 'message.text' to be a string, got {type(text).__name__}", order_id=order_id
        )
    return text
