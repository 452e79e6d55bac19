"""Tests for the health, scrape and middleware surface of the application."""

from __future__ import annotations

import pytest

from vocab_service.core.settings import get_storage_settings
from vocab_service.core.settings.storage import StorageSettings


@pytest.mark.unit
class TestHealth:
    @pytest.mark.asyncio
    async def test_liveness(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "vocab-service"

    @pytest.mark.asyncio
    async def test_ready_when_data_files_exist(self, app, client, data_dir, subscription_repo, word_repo):
        app.dependency_overrides[get_storage_settings] = lambda: StorageSettings(data_dir=data_dir)

        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {
            "ready": True,
            "checks": {"subscriptions": True, "dictionary": True},
        }

    @pytest.mark.asyncio
    async def test_not_ready_without_data_files(self, app, client, tmp_path):
        app.dependency_overrides[get_storage_settings] = lambda: StorageSettings(
            data_dir=tmp_path / "missing"
        )

        response = await client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["ready"] is False


@pytest.mark.unit
class TestMetrics:
    @pytest.mark.asyncio
    async def test_exposes_push_metrics(self, client):
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "push_deliveries_total" in response.text
        assert "push_broadcasts_total" in response.text

    @pytest.mark.asyncio
    async def test_not_under_api_prefix(self, client):
        response = await client.get("/api/metrics")

        assert response.status_code == 404


@pytest.mark.unit
class TestMiddleware:
    @pytest.mark.asyncio
    async def test_generates_request_id(self, client):
        response = await client.get("/health")

        assert response.headers["X-Request-ID"]
        assert "X-Process-Time" in response.headers

    @pytest.mark.asyncio
    async def test_echoes_request_id(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_problem_detail_carries_request_id(self, client):
        response = await client.post(
            "/api/notifications/unsubscribe", json={}, headers={"X-Request-ID": "req-456"}
        )

        assert response.status_code == 400
        assert response.json()["request_id"] == "req-456"

    @pytest.mark.asyncio
    async def test_oversized_request_id_is_replaced(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "x" * 500})

        assert response.headers["X-Request-ID"] != "x" * 500
        assert len(response.headers["X-Request-ID"]) == 32

    @pytest.mark.asyncio
    async def test_request_id_reaches_log_records(self, client, queued_log_records):
        body = {"endpoint": "https://push.example/a", "keys": {"p256dh": "k", "auth": "a"}}

        await client.post("/api/notifications/subscribe", json=body, headers={"X-Request-ID": "req-789"})

        records = [
            record
            for record in queued_log_records()
            if record.name == "vocab_service.features.subscriptions.repository"
        ]
        assert [record.request_id for record in records] == ["req-789"]
