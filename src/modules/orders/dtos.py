"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``OrderInputDTO``: validated create/update submission (output of
  ``validators.validate_order_input``).
- ``OrderSnapshotDTO``: detached copy of a stored order, used for
  notifications and for the record returned by a cancellation.
"""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

from modules.orders.constants import OrderStatus, TreeSize

if TYPE_CHECKING:
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class OrderInputDTO(BaseModel):
    """Immutable, already-validated order submission.

    ``city`` holds the directory's canonical spelling and ``email`` is
    normalized (stripped, lower-cased).  ``name`` may be blank only on the
    update path, where a blank name keeps the stored one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: TreeSize
    street: str
    zip: str
    city: str
    email: str
    date: Optional[dt.date] = None
    special_requests: str = ""
    customer_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderSnapshotDTO(BaseModel):
    """Immutable copy of an order as stored at a point in time."""

    model_config = ConfigDict(frozen=True)

    customer_id: str
    email: str
    name: str
    size: TreeSize
    street: str
    zip: str
    city: str
    date: Optional[dt.date] = None
    special_requests: str = ""
    status: OrderStatus = OrderStatus.OPEN
    created_at: dt.datetime

    @classmethod
    def from_entity(cls, order: Order) -> OrderSnapshotDTO:
        return cls(
            customer_id=order.customer_id,
            email=order.email,
            name=order.name,
            size=order.size,
            street=order.street,
            zip=order.zip,
            city=order.city,
            date=order.date,
            special_requests=order.special_requests,
            status=order.status,
            created_at=order.created_at,
        )
