"""Pricing DRF serializers."""

from __future__ import annotations

from rest_framework import serializers


class PriceTableSerializer(serializers.Serializer):
    """Renders the price table; amounts as JSON numbers."""

    small = serializers.DecimalField(max_digits=8, decimal_places=2)
    medium = serializers.DecimalField(max_digits=8, decimal_places=2)
    large = serializers.DecimalField(max_digits=8, decimal_places=2)
    xl = serializers.DecimalField(max_digits=8, decimal_places=2)
