from __future__ import annotations

from unittest import mock

import pytest
from django.core.cache import cache

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Price table and throttle counters live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def mail_outbox():
    """Intercept the mail provider; each item is the JSON payload posted."""
    outbox = []

    def fake_post(url, json=None, headers=None, timeout=None):
        outbox.append(json)
        return mock.Mock(status_code=200)

    with mock.patch("modules.notifications.mail.requests.post", side_effect=fake_post):
        yield outbox


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def admin_client():
    """APIClient carrying a bearer token from the admin login endpoint."""
    client = APIClient()
    response = client.post(
        "/api/admin/login",
        {"username": "admin", "password": "tannenbaum"},
        format="json",
    )
    assert response.status_code == 200, response.content
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.json()['token']}")
    return client


@pytest.fixture()
def order_payload():
    """A valid submission for the Siegen delivery area (no date chosen)."""
    return {
        "name": "Anna Schmidt",
        "size": "medium",
        "street": "Hauptstr. 1",
        "zip": "57072",
        "city": "Siegen",
        "email": "anna@example.com",
        "date": "",
        "specialRequests": "Bitte klingeln",
    }
