"""
Order number parsing and loading.
"""

import logging
from pathlib import Path

from order_tracker.utils.error_handler import ValidationException

logger = logging.getLogger(__name__)


def parse_order_numbers(text: str) -> list[str]:
    """
    Split typed input into order numbers.

    Any run of whitespace separates two order numbers; empty entries are
    dropped and input order is kept.
    """
    return text.split()


def parse_order_numbers_file(content: str) -> list[str]:
    """
    Parse the contents of an order-number file, one order per line.

    Handles both ``\\n`` and ``\\r\\n`` line endings; blank lines and
    surrounding whitespace are ignored.
    """
    return [line.strip() for line in content.splitlines() if line.strip()]


def load_order_numbers(path: str | Path) -> list[str]:
    """
    Read order numbers from a file.

    Args:
        path: File with one order number per line

    Returns:
        list[str]: Order numbers in file order

    Raises:
        ValidationException: If the file cannot be read or holds no order numbers
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ValidationException(
            f"error reading {path.name}, make sure the file exists and is readable",
            field="orders_file",
            invalid_value=str(path),
        ) from e

    order_numbers = parse_order_numbers_file(content)
    if not order_numbers:
        raise ValidationException(
            f"{path.name} does not contain any order numbers",
            field="orders_file",
            invalid_value=str(path),
            expected_format="one order number per line",
        )

    logger.info(f"Loaded {len(order_numbers)} order numbers from {path}")
    return order_numbers
