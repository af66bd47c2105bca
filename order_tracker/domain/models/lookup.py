"""
Lookup request and outcome value objects.

A ``LookupRequest`` is built once per order number; the lookup client
answers each one with exactly one ``LookupOutcome``.
"""

from dataclasses import dataclass
from enum import Enum

from .store import Locale, StoreCode, composite_store_id


@dataclass(frozen=True)
class LookupRequest:
    """
    Immutable parameters for a single order-status lookup.

    Attributes:
        store_code: Store (fascia) the order was placed with
        locale: Store locale
        postal_code: Delivery postcode, as typed by the operator
        order_id: Order number
    """

    store_code: StoreCode
    locale: Locale
    postal_code: str
    order_id: str

    def __post_init__(self) -> None:
        """Coerce plain strings into the enumerations and validate the order id."""
        object.__setattr__(self, "store_code", StoreCode(self.store_code))
        object.__setattr__(self, "locale", Locale(self.locale))
        if not self.order_id:
            raise ValueError("Order number is required")

    @property
    def fascia(self) -> str:
        """Composite store identifier sent as the ``fascia`` query parameter."""
        return composite_store_id(self.store_code, self.locale)

    def to_query_params(self) -> dict[str, str]:
        """Query parameters for the tracking endpoint."""
        return {
            "orderNumber": self.order_id,
            "fascia": self.fascia,
            "postcode": self.postal_code,
        }


class FailureKind(str, Enum):
    """Why a lookup produced no status text."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    PARSE = "parse"


@dataclass(frozen=True)
class LookupSuccess:
    """The endpoint answered; ``raw_text`` is ``message.text`` (may be empty)."""

    raw_text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LookupFailure:
    """The lookup failed before a status text could be extracted."""

    cause: str
    kind: FailureKind = FailureKind.TRANSPORT

    @property
    def ok(self) -> bool:
        return False


LookupOutcome = LookupSuccess | LookupFailure
