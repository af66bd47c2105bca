"""
Session configuration: operator input for a tracking run.
"""

from .order_numbers import load_order_numbers, parse_order_numbers, parse_order_numbers_file
from .prompts import SessionPrompter
from .session_config import SessionConfig, parse_locale, parse_store_code, resolve_session

__all__ = [
    "SessionConfig",
    "SessionPrompter",
    "load_order_numbers",
    "parse_locale",
    "parse_order_numbers",
    "parse_order_numbers_file",
    "parse_store_code",
    "resolve_session",
]
