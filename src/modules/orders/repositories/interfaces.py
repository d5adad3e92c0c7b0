"""Order repository interface.

Declares the reads and atomic writes the lifecycle needs.  Every
mutation is a single conditional step at the storage boundary (unique
constraints, row locks); the service never performs a separate read
followed by an unguarded write.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from django.db.models import QuerySet

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(ABC):
    """Repository contract for the Order entity."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Insert a new order.

        Must raise ``django.db.IntegrityError`` when ``email`` or
        ``customer_id`` already exists, leaving the store unchanged.
        """

    @abstractmethod
    def exists_for_email(self, email: str) -> bool:
        """Return ``True`` if an order with *email* is stored."""

    @abstractmethod
    def get_by_identity(self, email: str, customer_id: str) -> Optional[Order]:
        """Retrieve the order matching the exact ``(email, customer_id)`` pair."""

    @abstractmethod
    def update_by_identity(
        self, email: str, customer_id: str, changes: Dict[str, Any]
    ) -> Optional[Order]:
        """Atomically apply *changes* to the matching order and return it.

        Returns ``None`` (and writes nothing) when no order matches.
        """

    @abstractmethod
    def delete_by_identity(
        self,
        email: str,
        customer_id: str,
        guard: Callable[[Order], None],
    ) -> Optional[Order]:
        """Atomically delete the matching order and return the removed row.

        *guard* runs against the locked row before deletion; an exception
        it raises aborts the delete.  Returns ``None`` when nothing matches.
        """

    @abstractmethod
    def update_status(self, customer_id: str, status: str) -> Optional[Order]:
        """Atomically set the admin status of the order with *customer_id*."""

    @abstractmethod
    def get_by_customer_id(self, customer_id: str) -> Optional[Order]:
        """Retrieve an order by its customer id (admin operations)."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List orders with optional field filters (admin overview)."""

    @abstractmethod
    def list_planned_for(self, day: date, fallback_created_on: date) -> List[Order]:
        """Orders delivered on *day*.

        Those with an explicit ``date == day`` plus those without a date
        created on *fallback_created_on* (local calendar day).
        """
