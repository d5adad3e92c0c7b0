import logging
import uuid

import pytest

from config.settings import mask_sensitive_data


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, api_client_with_correlation, caplog, order_payload):
        api_client, custom_id = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            api_client.post("/order", order_payload, format="json")
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )


class TestSensitiveDataMasking:
    def test_email_masked(self):
        event_dict = {"event": "test", "to": "anna@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "anna@example.com" not in result["to"]
        assert "***MASKED***" in result["to"]

    def test_password_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]

    @pytest.mark.parametrize(
        "value", ["Authorization: eyJhbGciOi.payload.sig", "api_key=re_123456"]
    )
    def test_credentials_masked(self, value):
        result = mask_sensitive_data(None, None, {"event": "test", "data": value})
        assert "***MASKED***" in result["data"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "order.created", "customer_id": "AB12CD34"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["customer_id"] == "AB12CD34"
        assert result["event"] == "order.created"
