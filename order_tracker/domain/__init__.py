"""
Domain layer for order status tracking.

Value objects and counters shared by the lookup client, the fan-out
aggregator and the session collaborator.
"""
