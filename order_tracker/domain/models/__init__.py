"""
Domain models for order status tracking.

These models represent the core concepts of a tracking run: what is
looked up, what comes back, and how results are counted.
"""

from .lookup import FailureKind, LookupFailure, LookupOutcome, LookupRequest, LookupSuccess
from .status import KNOWN_STATUSES, OrderResult, StatusCategory
from .store import Locale, StoreCode, composite_store_id
from .tally import Tally

__all__ = [
    "FailureKind",
    "KNOWN_STATUSES",
    "Locale",
    "LookupFailure",
    "LookupOutcome",
    "LookupRequest",
    "LookupSuccess",
    "OrderResult",
    "StatusCategory",
    "StoreCode",
    "Tally",
    "composite_store_id",
]
