"""Price table endpoints.

``GET /prices`` is public so the order form can show prices.  Reading
and replacing the table under ``/api/admin/prices`` needs the admin
token.
"""

from __future__ import annotations

from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.pricing.serializers import PriceTableSerializer
from modules.pricing.services import build_price_store


class PublicPriceView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]
    throttle_scope = "public_orders"

    def get(self, request: Request) -> Response:
        """GET /prices"""
        table = build_price_store().get()
        return Response(PriceTableSerializer(table.as_dict()).data)


class AdminPriceView(APIView):
    def get(self, request: Request) -> Response:
        """GET /api/admin/prices"""
        table = build_price_store().get()
        return Response(PriceTableSerializer(table.as_dict()).data)

    def post(self, request: Request) -> Response:
        """POST /api/admin/prices

        Body: ``{"small": 39, "medium": 49, "large": 59, "xl": 79}``.
        All four sizes are required; the table is replaced as a whole.
        """
        table = build_price_store().set(request.data)
        return Response(
            {"success": True, "prices": PriceTableSerializer(table.as_dict()).data}
        )
