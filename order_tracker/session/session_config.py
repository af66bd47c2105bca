"""
Session configuration: the fixed input set of one tracking run.

Values given on the command line are used as-is (after validation);
anything missing is asked for interactively.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from order_tracker.domain.models import Locale, LookupRequest, StoreCode
from order_tracker.session.order_numbers import load_order_numbers, parse_order_numbers
from order_tracker.session.prompts import SessionPrompter
from order_tracker.utils.error_handler import ValidationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """
    Resolved inputs of a tracking run.

    Attributes:
        store_code: Selected store (fascia)
        locale: Selected locale
        postal_code: Delivery postcode
        order_ids: Order numbers, in input order (never empty)
    """

    store_code: StoreCode
    locale: Locale
    postal_code: str
    order_ids: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.order_ids:
            raise ValidationException("At least one order number is required", field="order_numbers")

    def to_requests(self) -> list[LookupRequest]:
        """One lookup request per order number."""
        return [
            LookupRequest(
                store_code=self.store_code,
                locale=self.locale,
                postal_code=self.postal_code,
                order_id=order_id,
            )
            for order_id in self.order_ids
        ]


def parse_store_code(value: str) -> StoreCode:
    """Parse a store code given by name (case-insensitive)."""
    try:
        return StoreCode(value.strip().lower())
    except ValueError as e:
        raise ValidationException(
            f"invalid fascia: {value}",
            field="fascia",
            invalid_value=value,
            expected_format=", ".join(code.value for code in StoreCode),
        ) from e


def parse_locale(value: str) -> Locale:
    """Parse a locale given by code (case-insensitive)."""
    try:
        return Locale(value.strip().lower())
    except ValueError as e:
        raise ValidationException(
            f"invalid locale: {value}",
            field="locale",
            invalid_value=value,
            expected_format=", ".join(locale.value for locale in Locale),
        ) from e


def resolve_session(
    prompter: SessionPrompter,
    orders_file: str | Path,
    store_code: Optional[str] = None,
    locale: Optional[str] = None,
    postal_code: Optional[str] = None,
    order_ids: Optional[Sequence[str]] = None,
    use_orders_file: bool = False,
) -> SessionConfig:
    """
    Build the session from explicit values, prompting for the rest.

    Args:
        prompter: Used for every value not given explicitly
        orders_file: Order-number file offered by the prompt (and read
            directly when ``use_orders_file`` is set)
        store_code: Store name, e.g. "jdsports"
        locale: Locale code, e.g. "nl"
        postal_code: Delivery postcode
        order_ids: Order numbers; entries may themselves hold several
            whitespace-separated numbers
        use_orders_file: Read ``orders_file`` without asking

    Returns:
        SessionConfig: Resolved session

    Raises:
        ValidationException: If an explicit value is invalid
    """
    resolved_store = parse_store_code(store_code) if store_code else prompter.choose_store()
    resolved_locale = parse_locale(locale) if locale else prompter.choose_locale()
    resolved_postcode = postal_code.strip() if postal_code and postal_code.strip() else prompter.ask_postcode()

    if order_ids:
        resolved_orders = [order for entry in order_ids for order in parse_order_numbers(entry)]
    elif use_orders_file:
        resolved_orders = load_order_numbers(orders_file)
    else:
        resolved_orders = prompter.ask_order_numbers(orders_file)

    session = SessionConfig(
        store_code=resolved_store,
        locale=resolved_locale,
        postal_code=resolved_postcode,
        order_ids=tuple(resolved_orders),
    )
    logger.info(
        f"Session resolved: fascia={session.store_code.value}, locale={session.locale.value}, "
        f"orders={len(session.order_ids)}"
    )
    return session
