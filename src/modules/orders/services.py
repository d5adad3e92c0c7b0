"""Order service layer (Use Cases).

Owns the order lifecycle: create, look up, update and cancel for
customers, plus listing and status changes for the administrator.
Validation happens before any store access; every mutation is a single
atomic repository call, so a rejected request never leaves a partial
write behind.

Business rules enforced:
- At most one order per email (UNIQUE constraint, mapped to DuplicateEmail).
- customerId is system generated and never changes.
- Update/cancel require the exact (email, customerId) pair.
- Cancellation only while now <= planned delivery - 24h.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import structlog
from django.db import IntegrityError
from django.utils import timezone

from modules.orders import date_policy
from modules.orders.constants import (
    CUSTOMER_ID_MAX_RETRIES,
    FALLBACK_DELIVERY_DAYS,
    OrderStatus,
)
from modules.orders.dtos import OrderSnapshotDTO
from modules.orders.exceptions import (
    CancellationWindowClosed,
    DuplicateEmail,
    InvalidOrderStatus,
    OrderNotFound,
)

if TYPE_CHECKING:
    from modules.orders.dtos import OrderInputDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository and a clock via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        now: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._order_repo = order_repository
        self._now = now

    # ------------------------------------------------------------------
    # Customer commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderInputDTO) -> Order:
        """Persist a new order under a fresh customer id.

        Raises:
            DuplicateEmail: an order with this email already exists.
            RuntimeError: no free customer id after the retry budget.
        """
        from modules.orders.models import Order

        log = logger.bind(zip=dto.zip, size=dto.size.value)
        log.info("order.creation_started")

        for attempt in range(1, CUSTOMER_ID_MAX_RETRIES + 1):
            customer_id = Order.generate_customer_id()
            try:
                order = self._order_repo.create(
                    {
                        "customer_id": customer_id,
                        "email": dto.email,
                        "name": dto.name,
                        "size": dto.size,
                        "street": dto.street,
                        "zip": dto.zip,
                        "city": dto.city,
                        "date": dto.date,
                        "special_requests": dto.special_requests,
                    }
                )
            except IntegrityError:
                if self._order_repo.exists_for_email(dto.email):
                    log.warning("order.duplicate_email")
                    raise DuplicateEmail(attr="email") from None
                log.warning("order.customer_id_collision", attempt=attempt)
                continue

            log.info("order.created", customer_id=order.customer_id)
            return order

        raise RuntimeError(
            f"Failed to generate unique customer_id after "
            f"{CUSTOMER_ID_MAX_RETRIES} attempts"
        )

    def update_order(self, email: str, customer_id: str, dto: OrderInputDTO) -> Order:
        """Overwrite the order's delivery details.

        ``name`` is only replaced when the submission carries a non-blank
        one; ``customer_id``, ``email`` and ``created_at`` never change.

        Raises:
            OrderNotFound: no order matches ``(email, customer_id)``.
        """
        changes: Dict[str, Any] = {
            "size": dto.size,
            "street": dto.street,
            "zip": dto.zip,
            "city": dto.city,
            "date": dto.date,
            "special_requests": dto.special_requests,
        }
        if dto.name:
            changes["name"] = dto.name

        order = self._order_repo.update_by_identity(email, customer_id, changes)
        if order is None:
            logger.info("order.update_not_found", customer_id=customer_id)
            raise OrderNotFound()

        logger.info("order.updated", customer_id=customer_id)
        return order

    def cancel_order(self, email: str, customer_id: str) -> OrderSnapshotDTO:
        """Remove the order and return what was removed.

        Raises:
            OrderNotFound: no order matches ``(email, customer_id)``.
            CancellationWindowClosed: planned delivery is less than 24h away.
        """
        now = self._now()

        def ensure_cancelable(order: Order) -> None:
            if not date_policy.is_cancelable_now(order, now):
                logger.warning(
                    "order.cancel_window_closed",
                    customer_id=customer_id,
                    deadline=date_policy.cancellation_deadline(order).isoformat(),
                )
                raise CancellationWindowClosed()

        removed = self._order_repo.delete_by_identity(
            email, customer_id, ensure_cancelable
        )
        if removed is None:
            logger.info("order.cancel_not_found", customer_id=customer_id)
            raise OrderNotFound()

        logger.info("order.cancelled", customer_id=customer_id)
        return OrderSnapshotDTO.from_entity(removed)

    # ------------------------------------------------------------------
    # Customer queries
    # ------------------------------------------------------------------

    def get_order(self, email: str, customer_id: str) -> Order:
        """Retrieve the order owned by ``(email, customer_id)``.

        Raises:
            OrderNotFound: if the pair does not match an order.
        """
        order = self._order_repo.get_by_identity(email, customer_id)
        if order is None:
            raise OrderNotFound()
        return order

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    def list_orders(self, filters: Optional[Dict[str, Any]] = None):
        """Return all orders (newest first), optionally filtered."""
        return self._order_repo.list(filters)

    def list_deliveries(self, day: date) -> List[Order]:
        """Orders whose planned delivery date falls on *day*."""
        fallback_created_on = day - timedelta(days=FALLBACK_DELIVERY_DAYS)
        return self._order_repo.list_planned_for(day, fallback_created_on)

    def get_order_for_admin(self, customer_id: str) -> Order:
        order = self._order_repo.get_by_customer_id(customer_id)
        if order is None:
            raise OrderNotFound(attr="customerId")
        return order

    def set_status(self, customer_id: str, status: str) -> Order:
        """Set the delivery status shown on the admin dashboard.

        Raises:
            InvalidOrderStatus: *status* is not one of ``OrderStatus``.
            OrderNotFound: no order with *customer_id*.
        """
        if status not in OrderStatus.values:
            raise InvalidOrderStatus(attr="status")

        order = self._order_repo.update_status(customer_id, status)
        if order is None:
            raise OrderNotFound(attr="customerId")

        logger.info("order.status_updated", customer_id=customer_id, status=status)
        return order
