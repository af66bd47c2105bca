"""
Maps the tracking endpoint's message text to a status category.
"""

from order_tracker.domain.models import LookupOutcome, LookupSuccess, StatusCategory

STATUS_PHRASES: dict[str, StatusCategory] = {
    "Your order has been placed.": StatusCategory.PLACED,
    "Your order is currently being processed.": StatusCategory.PROCESSING,
    "Your order has been despatched.": StatusCategory.SHIPPED,
    "Your order has been delivered.": StatusCategory.DELIVERED,
    "It looks like your order has been cancelled.": StatusCategory.CANCELLED,
}


def classify(raw_text: str) -> StatusCategory:
    """
    Classify a status message by exact, case-sensitive match.

    Args:
        raw_text: ``message.text`` from the tracking endpoint

    Returns:
        StatusCategory: Matching category, or UNRECOGNIZED for any other text
    """
    return STATUS_PHRASES.get(raw_text, StatusCategory.UNRECOGNIZED)


def classify_outcome(outcome: LookupOutcome) -> StatusCategory:
    """Classify a lookup outcome; failures are LOOKUP_FAILED."""
    if isinstance(outcome, LookupSuccess):
        return classify(outcome.raw_text)
    return StatusCategory.LOOKUP_FAILED
