"""Pricing DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class PriceTableDTO(BaseModel):
    """All four sizes, each a non-negative amount with two decimals."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    small: Decimal = Field(ge=0, max_digits=8, decimal_places=2)
    medium: Decimal = Field(ge=0, max_digits=8, decimal_places=2)
    large: Decimal = Field(ge=0, max_digits=8, decimal_places=2)
    xl: Decimal = Field(ge=0, max_digits=8, decimal_places=2)

    def as_dict(self) -> Dict[str, Decimal]:
        return self.model_dump()
