"""
HTTP clients for external order-tracking services.
"""

from .tracking_client import OrderLookupClient

__all__ = ["OrderLookupClient"]
