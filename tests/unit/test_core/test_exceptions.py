"""Unit tests for application exceptions."""

from __future__ import annotations

import pytest

from vocab_service.core.exceptions import (
    AppException,
    BadRequestException,
    PersistenceError,
    ServiceUnavailableException,
)


@pytest.mark.unit
class TestExceptions:
    def test_bad_request(self):
        exc = BadRequestException(detail="Endpoint is required", type="missing-endpoint")

        assert exc.status_code == 400
        assert exc.title == "Bad Request"
        assert exc.type == "missing-endpoint"
        assert str(exc) == "Endpoint is required"

    def test_service_unavailable(self):
        exc = ServiceUnavailableException(detail="Push notifications are not configured")

        assert exc.status_code == 503
        assert exc.type == "service-unavailable"

    def test_persistence_error_carries_path(self):
        exc = PersistenceError("Cannot write subscriptions.json", path="/data/subscriptions.json")

        assert isinstance(exc, AppException)
        assert exc.status_code == 500
        assert exc.type == "persistence-error"
        assert exc.path == "/data/subscriptions.json"
        assert exc.extra == {"path": "/data/subscriptions.json"}

    def test_default_title_for_unknown_status(self):
        assert AppException(status_code=418, detail="teapot").title == "Error"
