"""
Order Status Tracker.

Looks up a batch of order numbers against the track-my-order endpoint
concurrently and tallies the results per status.
"""

__version__ = "0.1.0"
