"""Django ORM implementation of the price repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict

from django.db import transaction

from modules.pricing.models import PriceEntry
from modules.pricing.repositories.interfaces import IPriceRepository


class PriceDjangoRepository(IPriceRepository):
    def as_table(self) -> Dict[str, Decimal]:
        return dict(PriceEntry.objects.values_list("size", "amount"))

    @transaction.atomic
    def replace_all(self, table: Dict[str, Decimal]) -> None:
        for size, amount in table.items():
            PriceEntry.objects.update_or_create(size=size, defaults={"amount": amount})
