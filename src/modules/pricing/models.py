"""Price table rows.

One row per tree size.  Prices are informational (shown to customers)
and are never checked against orders.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import TreeSize


class PriceEntry(BaseModel):
    size: models.CharField = models.CharField(
        max_length=10, choices=TreeSize.choices, unique=True
    )
    amount: models.DecimalField = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "prices"
        ordering = ["size"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gte=0),
                name="prices_amount_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.size}: {self.amount}"
