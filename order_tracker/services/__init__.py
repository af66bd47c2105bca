"""
Tracking services: classification, fan-out aggregation and reporting.
"""

from .order_status_aggregator import OrderStatusAggregator, track_orders
from .status_classifier import STATUS_PHRASES, classify, classify_outcome

__all__ = [
    "OrderStatusAggregator",
    "STATUS_PHRASES",
    "classify",
    "classify_outcome",
    "track_orders",
]
