"""Price configuration store.

Keeps the per-size tree prices.  Reads go through the Django cache, then
the ``prices`` table, then the configured defaults; writes validate the
whole table first and replace it in one transaction, so a reader never
sees a half-written table.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

import structlog
from django.core.cache import BaseCache
from pydantic import ValidationError as PydanticValidationError

from modules.pricing.dtos import PriceTableDTO
from modules.pricing.exceptions import InvalidPriceTable
from modules.pricing.repositories.interfaces import IPriceRepository

logger = structlog.get_logger(__name__)

CACHE_KEY = "pricing:table"
CACHE_TTL_SECONDS = 300


class PriceConfigStore:
    def __init__(
        self,
        repository: IPriceRepository,
        defaults: Mapping[str, Decimal],
        cache: BaseCache,
    ) -> None:
        self._repo = repository
        self._defaults = PriceTableDTO(**defaults)
        self._cache = cache

    def get(self) -> PriceTableDTO:
        """Current table; sizes never stored fall back to the defaults."""
        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return PriceTableDTO(**cached)

        table = {**self._defaults.as_dict(), **self._repo.as_table()}
        self._cache.set(CACHE_KEY, table, CACHE_TTL_SECONDS)
        return PriceTableDTO(**table)

    def set(self, data: Mapping[str, Any]) -> PriceTableDTO:
        """Validate and store a complete table.

        Raises:
            InvalidPriceTable: a size is missing, unknown or not a
                non-negative amount.  Nothing is written in that case.
        """
        try:
            table = PriceTableDTO(**data)
        except (PydanticValidationError, TypeError) as exc:
            logger.warning("pricing.invalid_table", error=str(exc))
            raise InvalidPriceTable(attr=_first_error_field(exc)) from None

        self._repo.replace_all(table.as_dict())
        self._cache.delete(CACHE_KEY)
        logger.info("pricing.table_updated", **{k: str(v) for k, v in table})
        return table


def _first_error_field(exc: Exception) -> Optional[str]:
    if isinstance(exc, PydanticValidationError) and exc.errors():
        loc = exc.errors()[0].get("loc") or ()
        return str(loc[0]) if loc else None
    return None


def build_price_store() -> PriceConfigStore:
    """Wire the store with the Django repository, cache and configured defaults."""
    from django.core.cache import cache

    from modules.core.conf import ShopSettings
    from modules.pricing.repositories.django_repository import PriceDjangoRepository

    return PriceConfigStore(
        repository=PriceDjangoRepository(),
        defaults=ShopSettings.from_django().default_prices,
        cache=cache,
    )
