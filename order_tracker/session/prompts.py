"""
Interactive operator prompts.

Each question is asked in a loop until the answer is valid; an optional
``max_attempts`` turns the loop into a bounded one.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

from order_tracker.domain.models import Locale, StoreCode
from order_tracker.session.order_numbers import load_order_numbers, parse_order_numbers
from order_tracker.utils.error_handler import ValidationException

logger = logging.getLogger(__name__)

T = TypeVar("T")

STORE_MENU: dict[str, tuple[str, StoreCode]] = {
    "1": ("Footpatrol", StoreCode.FOOTPATROL),
    "2": ("Size", StoreCode.SIZE),
    "3": ("JDsports", StoreCode.JDSPORTS),
}

LOCALE_MENU: dict[str, tuple[str, Locale]] = {
    "1": ("UK", Locale.UK),
    "2": ("NL", Locale.NL),
    "3": ("DE", Locale.DE),
    "4": ("DK", Locale.DK),
    "5": ("BE", Locale.BE),
    "6": ("IT", Locale.IT),
    "7": ("ES", Locale.ES),
    "8": ("FR", Locale.FR),
}

SOURCE_FILE = "1"
SOURCE_MANUAL = "2"


def format_menu(title: str, menu: dict[str, tuple[str, object]]) -> str:
    lines = [title]
    lines.extend(f"[{key}] {name}" for key, (name, _) in menu.items())
    return "\n".join(lines)


class SessionPrompter:
    """
    Asks the operator for the store, locale, postcode and order numbers.

    ``input_fn`` and ``output_fn`` default to ``input`` and ``print`` and
    can be replaced in tests.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
        max_attempts: Optional[int] = None,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.max_attempts = max_attempts

    def _ask(self, prompt: str, parse: Callable[[str], T], field: str) -> T:
        """
        Show ``prompt`` and read answers until ``parse`` accepts one.

        ``parse`` signals a bad answer by raising ValidationException; its
        message is shown to the operator before asking again.

        Raises:
            ValidationException: When ``max_attempts`` answers were all invalid
        """
        attempts = 0
        while True:
            self.output_fn(prompt)
            answer = self.input_fn().strip()
            try:
                return parse(answer)
            except ValidationException as e:
                attempts += 1
                self.output_fn(e.message)
                logger.debug(f"Invalid {field} answer {answer!r} (attempt {attempts})")
                if self.max_attempts is not None and attempts >= self.max_attempts:
                    raise ValidationException(
                        f"No valid {field} after {attempts} attempts",
                        field=field,
                        invalid_value=answer,
                    ) from e

    def choose_store(self) -> StoreCode:
        def parse(answer: str) -> StoreCode:
            if answer not in STORE_MENU:
                raise ValidationException("invalid fascia chosen", field="fascia", invalid_value=answer)
            return STORE_MENU[answer][1]

        return self._ask(format_menu("please put in your fascia:", STORE_MENU), parse, "fascia")

    def choose_locale(self) -> Locale:
        def parse(answer: str) -> Locale:
            if answer not in LOCALE_MENU:
                raise ValidationException("invalid locale chosen", field="locale", invalid_value=answer)
            return LOCALE_MENU[answer][1]

        return self._ask(format_menu("which locale:", LOCALE_MENU), parse, "locale")

    def ask_postcode(self) -> str:
        def parse(answer: str) -> str:
            if not answer:
                raise ValidationException("postcode cannot be empty", field="postcode")
            return answer

        return self._ask("please put in your zip", parse, "postcode")

    def ask_order_numbers(self, orders_file: str | Path) -> list[str]:
        """
        Ask where order numbers come from and read them.

        A missing or empty file sends the operator back to the source
        menu rather than aborting.
        """
        orders_file = Path(orders_file)
        menu = (
            "how do you want to input your ordernumbers?\n"
            f"[{SOURCE_FILE}] {orders_file.name} (separated by a newline)\n"
            f"[{SOURCE_MANUAL}] manual input"
        )

        def parse_source(answer: str) -> list[str]:
            if answer == SOURCE_FILE:
                return load_order_numbers(orders_file)
            if answer == SOURCE_MANUAL:
                return self._ask(
                    "please put in your order number (separated by a space)",
                    parse_manual,
                    "order numbers",
                )
            raise ValidationException("invalid input method chosen", field="order_source", invalid_value=answer)

        def parse_manual(answer: str) -> list[str]:
            order_numbers = parse_order_numbers(answer)
            if not order_numbers:
                raise ValidationException("please put in at least one order number", field="order_numbers")
            return order_numbers

        return self._ask(menu, parse_source, "order source")
