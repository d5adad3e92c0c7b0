"""Unit tests for PriceConfigStore."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.cache import cache

from modules.pricing.exceptions import InvalidPriceTable
from modules.pricing.models import PriceEntry
from modules.pricing.repositories.django_repository import PriceDjangoRepository
from modules.pricing.services import CACHE_KEY, PriceConfigStore

pytestmark = pytest.mark.unit

DEFAULTS = {
    "small": Decimal("39.00"),
    "medium": Decimal("49.00"),
    "large": Decimal("59.00"),
    "xl": Decimal("79.00"),
}


@pytest.fixture()
def store():
    return PriceConfigStore(PriceDjangoRepository(), DEFAULTS, cache)


class TestGet:
    def test_defaults_when_nothing_stored(self, store):
        assert store.get().as_dict() == DEFAULTS

    def test_stored_values_override_defaults(self, store):
        PriceEntry.objects.create(size="xl", amount=Decimal("99.00"))
        table = store.get()
        assert table.xl == Decimal("99.00")
        assert table.small == Decimal("39.00")

    def test_result_is_cached(self, store):
        store.get()
        assert cache.get(CACHE_KEY) is not None


class TestSet:
    def test_replaces_whole_table(self, store):
        store.set({"small": 35, "medium": "45.50", "large": 55, "xl": 75})

        assert PriceEntry.objects.count() == 4
        table = store.get()
        assert table.medium == Decimal("45.50")
        assert table.xl == Decimal("75")

    def test_set_invalidates_cache(self, store):
        store.get()
        store.set({"small": 1, "medium": 2, "large": 3, "xl": 4})
        assert store.get().small == Decimal("1")

    @pytest.mark.parametrize(
        "payload",
        [
            {"small": 35, "medium": 45, "large": 55},
            {"small": 35, "medium": 45, "large": 55, "xl": -1},
            {"small": 35, "medium": 45, "large": 55, "xl": "teuer"},
            {"small": 35, "medium": 45, "large": 55, "xl": 75, "xxl": 95},
        ],
    )
    def test_invalid_table_writes_nothing(self, store, payload):
        with pytest.raises(InvalidPriceTable):
            store.set(payload)
        assert PriceEntry.objects.count() == 0
        assert store.get().as_dict() == DEFAULTS
