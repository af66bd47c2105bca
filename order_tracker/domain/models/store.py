"""
Store (fascia) and locale enumerations, and the composite store identifier.
"""

from enum import Enum


class StoreCode(str, Enum):
    """Retail brands whose order-tracking backend can be queried."""

    FOOTPATROL = "footpatrol"
    SIZE = "size"
    JDSPORTS = "jdsports"


class Locale(str, Enum):
    """Country/region codes accepted by the tracking endpoint."""

    UK = "uk"
    NL = "nl"
    DE = "de"
    DK = "dk"
    BE = "be"
    IT = "it"
    ES = "es"
    FR = "fr"


# Upstream quirks for the UK locale; everything else is store_code + locale
COMPOSITE_STORE_OVERRIDES: dict[tuple[StoreCode, Locale], str] = {
    (StoreCode.FOOTPATROL, Locale.UK): "footpatrolgb",
    (StoreCode.SIZE, Locale.UK): "size",
}


def composite_store_id(store_code: StoreCode, locale: Locale) -> str:
    """
    Build the ``fascia`` value sent upstream for a store/locale pair.

    Args:
        store_code: Selected store
        locale: Selected locale

    Returns:
        str: Composite store identifier (e.g. "jdsportsnl", "footpatrolgb")
    """
    store_code = StoreCode(store_code)
    locale = Locale(locale)
    override = COMPOSITE_STORE_OVERRIDES.get((store_code, locale))
    if override is not None:
        return override
    return f"{store_code.value}{locale.value}"
