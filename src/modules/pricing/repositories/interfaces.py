"""Price repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict


class IPriceRepository(ABC):
    """Repository contract for the per-size price rows."""

    @abstractmethod
    def as_table(self) -> Dict[str, Decimal]:
        """Return the stored prices keyed by size (may be incomplete)."""

    @abstractmethod
    def replace_all(self, table: Dict[str, Decimal]) -> None:
        """Write every size of *table* in one transaction."""
