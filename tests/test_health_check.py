from unittest import mock

import pytest
from django.db import DatabaseError

from modules.core.checks import check_primary_store
from modules.core.exceptions import StoreUnavailable


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_database_status(self, client):
        data = client.get("/health").json()
        assert data["services"]["database"]["status"] == "up"
        assert "response_time_ms" in data["services"]["database"]

    def test_health_check_reports_cache_status(self, client):
        data = client.get("/health").json()
        assert data["services"]["cache"]["status"] == "up"

    def test_cache_down_reports_503(self, client):
        with mock.patch(
            "django.core.cache.backends.locmem.LocMemCache.set",
            side_effect=ConnectionError,
        ):
            response = client.get("/health")
        assert response.status_code == 503
        assert response.json()["services"]["cache"]["status"] == "down"


class TestPrimaryStoreCheck:
    def test_reachable_store_passes(self):
        check_primary_store()

    def test_unreachable_store_raises(self):
        with mock.patch(
            "django.db.backends.base.base.BaseDatabaseWrapper.ensure_connection",
            side_effect=DatabaseError("no route"),
        ):
            with pytest.raises(StoreUnavailable):
                check_primary_store()
