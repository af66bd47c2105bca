"""Shared fixtures for the order tracker test suite."""

import pytest

from order_tracker.core.config import Settings
from order_tracker.domain.models import LookupSuccess
from tests.helpers import DELIVERED_TEXT, PLACED_TEXT, transport_failure


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment."""
    return Settings(
        TRACKING_ENDPOINT_URL="https://tracking.example.test/v1/track-my-order",
        MAX_CONCURRENT_LOOKUPS=None,
        ENVIRONMENT="testing",
    )


@pytest.fixture
def scenario_outcomes():
    """A1 placed, A2 delivered, A3 transport failure."""
    return {
        "A1": LookupSuccess(PLACED_TEXT),
        "A2": LookupSuccess(DELIVERED_TEXT),
        "A3": transport_failure(),
    }
