"""Order DRF serializers for API input/output.

Customer submissions are checked by ``validators.validate_order_input``
(the business rules); the serializers here only render orders in the
camelCase wire format and parse the small admin payloads.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order

# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for an order in the customer/admin wire format."""

    customerId = serializers.CharField(source="customer_id", read_only=True)
    specialRequests = serializers.CharField(source="special_requests", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "customerId",
            "email",
            "name",
            "size",
            "street",
            "zip",
            "city",
            "date",
            "specialRequests",
            "status",
            "createdAt",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Input Serializers (admin)
# ---------------------------------------------------------------------------


class StatusUpdateSerializer(serializers.Serializer):
    """Validates ``POST /api/admin/status``."""

    customerId = serializers.CharField()
    status = serializers.CharField()


class DeliveryMailSerializer(serializers.Serializer):
    """Validates ``POST /api/admin/delivery-mail``."""

    customerId = serializers.CharField()
    fromTime = serializers.TimeField(format="%H:%M", input_formats=["%H:%M"])
    toTime = serializers.TimeField(format="%H:%M", input_formats=["%H:%M"])

    def validate(self, attrs):
        if attrs["toTime"] <= attrs["fromTime"]:
            raise serializers.ValidationError(
                {"toTime": "Ende des Lieferfensters muss nach dem Beginn liegen."}
            )
        return attrs
