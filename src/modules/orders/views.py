"""Order API views.

Customer endpoints (public, keyed by ``email`` + ``customerId``) and the
administrator endpoints under ``/api/admin/``.  Views only parse input,
call ``OrderService`` and render; domain exceptions propagate to
``modules.core.handlers.api_exception_handler``.

Mail is sent after the order mutation has committed.  A failed send is
reported in ``warnings`` and never turns a successful mutation into an
error response.
"""

from __future__ import annotations

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.generics import ListAPIView
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.conf import ShopSettings
from modules.notifications.composer import DeliveryWindow, NotificationEvent
from modules.notifications.services import (
    CUSTOMER_MAIL_WARNING,
    build_notification_service,
)
from modules.orders.date_policy import parse_delivery_date
from modules.orders.dtos import OrderSnapshotDTO
from modules.orders.exceptions import InvalidDateFormat
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    DeliveryMailSerializer,
    OrderSerializer,
    StatusUpdateSerializer,
)
from modules.orders.services import OrderService
from modules.orders.validators import (
    normalize_customer_id,
    validate_identity,
    validate_order_input,
)


class OrderServiceMixin:
    """Builds the ``OrderService`` with injected repository (DIP)."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(order_repository=OrderDjangoRepository())
        self._shop = ShopSettings.from_django()


class PublicOrderView(OrderServiceMixin, APIView):
    """Base for customer endpoints: no admin token, rate limited."""

    authentication_classes: list = []
    permission_classes = [AllowAny]
    throttle_scope = "public_orders"


# ---------------------------------------------------------------------------
# Customer endpoints
# ---------------------------------------------------------------------------


class OrderCreateView(PublicOrderView):
    def post(self, request: Request) -> Response:
        """POST /order"""
        dto = validate_order_input(
            request.data,
            today=timezone.localdate(),
            max_date=self._shop.max_delivery_date,
        )
        order = self._service.create_order(dto)

        warnings = build_notification_service().notify(
            NotificationEvent.CREATED, OrderSnapshotDTO.from_entity(order)
        )
        return Response(
            {
                "success": True,
                "customerId": order.customer_id,
                "order": OrderSerializer(order).data,
                "warnings": warnings,
            },
            status=status.HTTP_201_CREATED,
        )


class OrderLookupView(PublicOrderView):
    def post(self, request: Request) -> Response:
        """POST /lookup"""
        email, customer_id = validate_identity(request.data)
        order = self._service.get_order(email, customer_id)
        return Response(OrderSerializer(order).data)


class OrderUpdateView(PublicOrderView):
    def post(self, request: Request) -> Response:
        """POST /update

        Same checks as creation; ``name`` may be left blank to keep it.
        """
        dto = validate_order_input(
            request.data,
            today=timezone.localdate(),
            max_date=self._shop.max_delivery_date,
            for_update=True,
        )
        order = self._service.update_order(dto.email, dto.customer_id, dto)

        warnings = build_notification_service().notify(
            NotificationEvent.UPDATED, OrderSnapshotDTO.from_entity(order)
        )
        return Response(
            {
                "success": True,
                "order": OrderSerializer(order).data,
                "warnings": warnings,
            }
        )


class OrderCancelView(PublicOrderView):
    def post(self, request: Request) -> Response:
        """POST /delete"""
        email, customer_id = validate_identity(request.data)
        removed = self._service.cancel_order(email, customer_id)

        warnings = build_notification_service().notify(
            NotificationEvent.CANCELLED, removed
        )
        return Response(
            {
                "success": True,
                "customerId": removed.customer_id,
                "warnings": warnings,
            }
        )


# ---------------------------------------------------------------------------
# Admin endpoints (bearer token, see modules.core.authentication)
# ---------------------------------------------------------------------------


class AdminOrderListView(OrderServiceMixin, ListAPIView):
    """GET /api/admin/orders

    Filtering (status, size, zip, city, date, created range) is handled by
    ``OrderFilter``; ordering by ``OrderingFilter``.  Not paginated: the
    dashboard renders the whole season in one table.
    """

    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["created_at", "date", "zip", "status"]
    ordering = ["-created_at"]

    def get_queryset(self):
        return self._service.list_orders()


class AdminDeliveriesView(OrderServiceMixin, APIView):
    def get(self, request: Request, day: str) -> Response:
        """GET /api/admin/deliveries/<YYYY-MM-DD>

        A malformed day is ``InvalidDateFormat`` (400, ``attr="date"``).
        """
        planned_day = parse_delivery_date(day)
        if planned_day is None:
            raise InvalidDateFormat(attr="date")

        orders = self._service.list_deliveries(planned_day)
        return Response(OrderSerializer(orders, many=True).data)


class AdminStatusView(OrderServiceMixin, APIView):
    def post(self, request: Request) -> Response:
        """POST /api/admin/status"""
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.set_status(
            normalize_customer_id(serializer.validated_data["customerId"]),
            serializer.validated_data["status"],
        )
        return Response({"success": True, "order": OrderSerializer(order).data})


class AdminDeliveryMailView(OrderServiceMixin, APIView):
    def post(self, request: Request) -> Response:
        """POST /api/admin/delivery-mail

        Sends the delivery-time window to the customer.  Here the mail is
        the whole operation, so ``success`` reflects the customer send.
        """
        serializer = DeliveryMailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = self._service.get_order_for_admin(
            normalize_customer_id(data["customerId"])
        )
        warnings = build_notification_service().notify(
            NotificationEvent.DELIVERY_SCHEDULED,
            OrderSnapshotDTO.from_entity(order),
            delivery_window=DeliveryWindow(start=data["fromTime"], end=data["toTime"]),
        )
        return Response(
            {
                "success": CUSTOMER_MAIL_WARNING not in warnings,
                "warnings": warnings,
            }
        )
