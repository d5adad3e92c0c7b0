"""Order URL configuration.

Customer endpoints use flat paths; admin
endpoints live under ``api/admin/``.
"""

from __future__ import annotations

from django.urls import path

from modules.orders.views import (
    AdminDeliveriesView,
    AdminDeliveryMailView,
    AdminOrderListView,
    AdminStatusView,
    OrderCancelView,
    OrderCreateView,
    OrderLookupView,
    OrderUpdateView,
)

urlpatterns = [
    path("order", OrderCreateView.as_view(), name="order_create"),
    path("lookup", OrderLookupView.as_view(), name="order_lookup"),
    path("update", OrderUpdateView.as_view(), name="order_update"),
    path("delete", OrderCancelView.as_view(), name="order_cancel"),
    path("api/admin/orders", AdminOrderListView.as_view(), name="admin_orders"),
    path(
        "api/admin/deliveries/<str:day>",
        AdminDeliveriesView.as_view(),
        name="admin_deliveries",
    ),
    path("api/admin/status", AdminStatusView.as_view(), name="admin_status"),
    path(
        "api/admin/delivery-mail",
        AdminDeliveryMailView.as_view(),
        name="admin_delivery_mail",
    ),
]
