"""Unit tests for the composite store identifier."""

import itertools

import pytest

from order_tracker.domain.models import Locale, LookupRequest, StoreCode, composite_store_id

EXPECTED_COMPOSITE_IDS = {
    (StoreCode.FOOTPATROL, Locale.UK): "footpatrolgb",
    (StoreCode.FOOTPATROL, Locale.NL): "footpatrolnl",
    (StoreCode.FOOTPATROL, Locale.DE): "footpatrolde",
    (StoreCode.FOOTPATROL, Locale.DK): "footpatroldk",
    (StoreCode.FOOTPATROL, Locale.BE): "footpatrolbe",
    (StoreCode.FOOTPATROL, Locale.IT): "footpatrolit",
    (StoreCode.FOOTPATROL, Locale.ES): "footpatroles",
    (StoreCode.FOOTPATROL, Locale.FR): "footpatrolfr",
    (StoreCode.SIZE, Locale.UK): "size",
    (StoreCode.SIZE, Locale.NL): "sizenl",
    (StoreCode.SIZE, Locale.DE): "sizede",
    (StoreCode.SIZE, Locale.DK): "sizedk",
    (StoreCode.SIZE, Locale.BE): "sizebe",
    (StoreCode.SIZE, Locale.IT): "sizeit",
    (StoreCode.SIZE, Locale.ES): "sizees",
    (StoreCode.SIZE, Locale.FR): "sizefr",
    (StoreCode.JDSPORTS, Locale.UK): "jdsportsuk",
    (StoreCode.JDSPORTS, Locale.NL): "jdsportsnl",
    (StoreCode.JDSPORTS, Locale.DE): "jdsportsde",
    (StoreCode.JDSPORTS, Locale.DK): "jdsportsdk",
    (StoreCode.JDSPORTS, Locale.BE): "jdsportsbe",
    (StoreCode.JDSPORTS, Locale.IT): "jdsportsit",
    (StoreCode.JDSPORTS, Locale.ES): "jdsportses",
    (StoreCode.JDSPORTS, Locale.FR): "jdsportsfr",
}


class TestCompositeStoreId:
    """Tests for composite_store_id()."""

    def test_table_covers_every_combination(self):
        """Should enumerate every store code x locale pair."""
        assert set(EXPECTED_COMPOSITE_IDS) == set(itertools.product(StoreCode, Locale))

    @pytest.mark.parametrize("store_code, locale", list(EXPECTED_COMPOSITE_IDS))
    def test_composite_id(self, store_code, locale):
        """Should apply the UK exceptions and plain concatenation elsewhere."""
        assert composite_store_id(store_code, locale) == EXPECTED_COMPOSITE_IDS[(store_code, locale)]

    def test_accepts_plain_strings(self):
        """Should accept enum values given as strings."""
        assert composite_store_id("footpatrol", "uk") == "footpatrolgb"

    def test_rejects_unknown_store(self):
        """Should refuse store codes outside the enumeration."""
        with pytest.raises(ValueError):
            composite_store_id("unknownstore", Locale.UK)


class TestLookupRequest:
    """Tests for LookupRequest."""

    def test_query_params(self):
        """Should carry order number, fascia and postcode."""
        request = LookupRequest(store_code="size", locale="uk", postal_code="M1 1AA", order_id="123")

        assert request.to_query_params() == {
            "orderNumber": "123",
            "fascia": "size",
            "postcode": "M1 1AA",
        }

    def test_is_immutable(self):
        """Should not allow mutation after construction."""
        request = LookupRequest(store_code="size", locale="nl", postal_code="1234AB", order_id="123")

        with pytest.raises(AttributeError):
            request.order_id = "456"

    def test_requires_order_id(self):
        """Should reject an empty order number."""
        with pytest.raises(ValueError):
            LookupRequest(store_code="size", locale="nl", postal_code="1234AB", order_id="")
