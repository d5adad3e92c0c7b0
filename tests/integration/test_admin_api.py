"""Integration tests for the administrator endpoints under /api/admin/."""

from datetime import timedelta

import pytest
from django.utils import timezone

from modules.orders.models import Order

pytestmark = pytest.mark.integration


def in_days(days: int) -> str:
    return (timezone.localdate() + timedelta(days=days)).isoformat()


@pytest.fixture()
def orders(api_client, order_payload, mail_outbox):
    """Three orders: two for the same day, one without a date."""
    payloads = [
        {**order_payload, "email": "anna@example.com", "date": in_days(5)},
        {
            **order_payload,
            "email": "ben@example.com",
            "zip": "57223",
            "city": "Kreuztal",
            "date": in_days(5),
        },
        {**order_payload, "email": "carla@example.com", "size": "xl"},
    ]
    created = []
    for payload in payloads:
        response = api_client.post("/order", payload, format="json")
        assert response.status_code == 201, response.content
        created.append(response.json()["customerId"])
    mail_outbox.clear()
    return created


class TestAdminGate:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/api/admin/orders"),
            ("get", "/api/admin/deliveries/2025-12-20"),
            ("post", "/api/admin/status"),
            ("post", "/api/admin/delivery-mail"),
            ("get", "/api/admin/prices"),
        ],
    )
    def test_requires_token(self, api_client, method, path):
        response = getattr(api_client, method)(path)
        assert response.status_code == 401


class TestAdminOrders:
    def test_lists_all_orders(self, admin_client, orders):
        response = admin_client.get("/api/admin/orders")
        assert response.status_code == 200
        assert {row["customerId"] for row in response.json()} == set(orders)

    def test_filter_by_size(self, admin_client, orders):
        response = admin_client.get("/api/admin/orders", {"size": "XL"})
        assert [row["customerId"] for row in response.json()] == [orders[2]]

    def test_filter_by_city(self, admin_client, orders):
        response = admin_client.get("/api/admin/orders", {"city": "kreuztal"})
        assert [row["customerId"] for row in response.json()] == [orders[1]]


class TestDeliveries:
    def test_orders_for_day_sorted_by_zip(self, admin_client, orders):
        response = admin_client.get(f"/api/admin/deliveries/{in_days(5)}")
        assert response.status_code == 200
        rows = response.json()
        assert [row["customerId"] for row in rows] == [orders[0], orders[1]]

    def test_undated_orders_planned_two_days_out(self, admin_client, orders):
        response = admin_client.get(f"/api/admin/deliveries/{in_days(2)}")
        assert [row["customerId"] for row in response.json()] == [orders[2]]

    @pytest.mark.parametrize("day", ["gestern", "2025-13-01", "24.12.2025", "%20"])
    def test_invalid_day(self, admin_client, day):
        response = admin_client.get(f"/api/admin/deliveries/{day}")
        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["code"] == "invalid_date_format"
        assert error["attr"] == "date"


class TestStatus:
    def test_set_status(self, admin_client, orders):
        response = admin_client.post(
            "/api/admin/status",
            {"customerId": orders[0], "status": "Geplant"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["order"]["status"] == "Geplant"
        assert Order.objects.get(customer_id=orders[0]).status == "Geplant"

    def test_unknown_status(self, admin_client, orders):
        response = admin_client.post(
            "/api/admin/status",
            {"customerId": orders[0], "status": "Verschollen"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_order_status"

    def test_unknown_order(self, admin_client):
        response = admin_client.post(
            "/api/admin/status",
            {"customerId": "XXXXXXXX", "status": "Geplant"},
            format="json",
        )
        assert response.status_code == 404


class TestDeliveryMail:
    def test_sends_window_to_customer(self, admin_client, orders, mail_outbox):
        response = admin_client.post(
            "/api/admin/delivery-mail",
            {"customerId": orders[0], "fromTime": "14:00", "toTime": "16:00"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "warnings": []}
        assert mail_outbox[0]["to"] == "anna@example.com"
        assert "zwischen 14:00 und 16:00 Uhr" in mail_outbox[0]["text"]

    def test_window_must_be_ordered(self, admin_client, orders):
        response = admin_client.post(
            "/api/admin/delivery-mail",
            {"customerId": orders[0], "fromTime": "16:00", "toTime": "14:00"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "toTime"
