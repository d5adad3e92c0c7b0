"""Pricing domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainError


class InvalidPriceTable(DomainError):
    """Submitted table lacks a size, has extra keys or a non-numeric/negative price."""

    code = "invalid_price_table"
    default_detail = "Ungültige Preistabelle."
