"""Order model.

Business rules implemented at the storage level:
- One order per email: ``email`` carries a UNIQUE constraint, so two
  concurrent submissions for the same address cannot both be inserted.
- ``customer_id`` is the customer's capability token (8 uppercase
  alphanumerics), UNIQUE and never rewritten after insert.
- ``(email, customer_id)`` is indexed: every self-service lookup,
  update and cancellation filters on the pair.
- Cancellation is a hard delete; there is no soft-delete column.
"""

from __future__ import annotations

import secrets

from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    CITY_MAX_LENGTH,
    CUSTOMER_ID_ALPHABET,
    CUSTOMER_ID_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    STREET_MAX_LENGTH,
    ZIP_LENGTH,
    OrderStatus,
    TreeSize,
)


class Order(BaseModel):
    """A single customer's tree-delivery request.

    ``date`` is the customer's chosen delivery day; ``NULL`` means "no
    preference" and delivery is planned two days after ``created_at``
    (see ``date_policy.planned_delivery_date``).
    """

    customer_id: models.CharField = models.CharField(
        max_length=CUSTOMER_ID_LENGTH, unique=True, editable=False
    )
    email: models.EmailField = models.EmailField(
        max_length=EMAIL_MAX_LENGTH, unique=True
    )
    name: models.CharField = models.CharField(max_length=NAME_MAX_LENGTH)
    size: models.CharField = models.CharField(max_length=10, choices=TreeSize.choices)
    street: models.CharField = models.CharField(max_length=STREET_MAX_LENGTH)
    zip: models.CharField = models.CharField(max_length=ZIP_LENGTH)
    city: models.CharField = models.CharField(max_length=CITY_MAX_LENGTH)
    date: models.DateField = models.DateField(null=True, blank=True, default=None)
    special_requests: models.TextField = models.TextField(blank=True, default="")
    status: models.CharField = models.CharField(
        max_length=30,
        choices=OrderStatus.choices,
        default=OrderStatus.OPEN,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["email", "customer_id"], name="orders_identity_idx"),
            models.Index(fields=["date"], name="orders_date_idx"),
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    @staticmethod
    def generate_customer_id() -> str:
        """Random token from a 36^8 space; collisions are retried on insert."""
        return "".join(
            secrets.choice(CUSTOMER_ID_ALPHABET) for _ in range(CUSTOMER_ID_LENGTH)
        )

    def __str__(self) -> str:
        return f"{self.customer_id} ({self.status})"
