"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.

Concurrency control:
- Inserts rely on the UNIQUE constraints on ``email`` / ``customer_id``;
  each insert runs in its own savepoint so an ``IntegrityError`` leaves
  the surrounding transaction usable.
- Updates, status changes and deletes lock the target row with
  ``select_for_update()`` inside ``transaction.atomic()``, so the lookup
  and the write form one serialized step.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, List, Optional

import structlog
from django.db import transaction
from django.db.models import Q, QuerySet

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Order:
        with transaction.atomic():
            order = Order.objects.create(**data)
        logger.info("order.inserted", customer_id=order.customer_id)
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def exists_for_email(self, email: str) -> bool:
        return Order.objects.filter(email=email).exists()

    def get_by_identity(self, email: str, customer_id: str) -> Optional[Order]:
        return Order.objects.filter(email=email, customer_id=customer_id).first()

    def get_by_customer_id(self, customer_id: str) -> Optional[Order]:
        return Order.objects.filter(customer_id=customer_id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List orders, newest first, with optional field filters."""
        queryset = Order.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def list_planned_for(self, day: date, fallback_created_on: date) -> List[Order]:
        queryset = Order.objects.filter(
            Q(date=day) | Q(date__isnull=True, created_at__date=fallback_created_on)
        ).order_by("zip", "street")
        return list(queryset)

    # ------------------------------------------------------------------
    # Atomic conditional mutations
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_by_identity(
        self, email: str, customer_id: str, changes: Dict[str, Any]
    ) -> Optional[Order]:
        order = (
            Order.objects.select_for_update()
            .filter(email=email, customer_id=customer_id)
            .first()
        )
        if order is None:
            return None

        for field, value in changes.items():
            setattr(order, field, value)
        order.save(update_fields=list(changes))

        logger.info(
            "order.row_updated",
            customer_id=customer_id,
            fields=sorted(changes),
        )
        return order

    @transaction.atomic
    def delete_by_identity(
        self,
        email: str,
        customer_id: str,
        guard: Callable[[Order], None],
    ) -> Optional[Order]:
        order = (
            Order.objects.select_for_update()
            .filter(email=email, customer_id=customer_id)
            .first()
        )
        if order is None:
            return None

        guard(order)
        order.delete()
        logger.info("order.row_deleted", customer_id=customer_id)
        return order

    @transaction.atomic
    def update_status(self, customer_id: str, status: str) -> Optional[Order]:
        order = Order.objects.select_for_update().filter(customer_id=customer_id).first()
        if order is None:
            return None
        order.status = status
        order.save(update_fields=["status"])
        return order
