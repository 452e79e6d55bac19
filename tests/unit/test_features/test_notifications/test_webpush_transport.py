"""Unit tests for the pywebpush-backed transport."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from pywebpush import WebPushException

from tests.utils import make_subscription
from vocab_service.core.exceptions import ServiceUnavailableException
from vocab_service.core.settings.push import PushSettings
from vocab_service.features.notifications.channels.base import classify_status
from vocab_service.features.notifications.channels.webpush import WebPushTransport

WEBPUSH = "vocab_service.features.notifications.channels.webpush.webpush"


def _rejected(status_code: int) -> WebPushException:
    return WebPushException(f"Push failed: {status_code}", response=MagicMock(status_code=status_code))


@pytest.mark.unit
class TestClassifyStatus:
    @pytest.mark.parametrize("status_code", [404, 410])
    def test_gone_statuses(self, status_code):
        assert classify_status(status_code) == "gone"

    @pytest.mark.parametrize("status_code", [400, 413, 429, 500, 503, None])
    def test_everything_else_is_transient(self, status_code):
        assert classify_status(status_code) == "transient"


@pytest.mark.unit
class TestWebPushTransport:
    """Test suite for WebPushTransport.send."""

    def test_requires_vapid_keys(self):
        with pytest.raises(ServiceUnavailableException):
            WebPushTransport(PushSettings(vapid_public_key=None, vapid_private_key=None))

    @pytest.mark.asyncio
    async def test_success(self, push_settings):
        transport = WebPushTransport(push_settings)

        with patch(WEBPUSH, return_value=MagicMock(status_code=201)) as webpush:
            result = await transport.send(make_subscription("https://push.example/a"), b"{}")

        assert result.success is True
        assert result.status_code == 201
        assert result.response_time_ms is not None
        kwargs = webpush.call_args.kwargs
        assert kwargs["subscription_info"] == {
            "endpoint": "https://push.example/a",
            "keys": {"p256dh": "BPk3-key", "auth": "auth-secret"},
        }
        assert kwargs["data"] == b"{}"
        assert kwargs["vapid_private_key"] == "private-key-for-tests"
        assert kwargs["vapid_claims"] == {"sub": "mailto:test@example.com"}
        assert kwargs["ttl"] == push_settings.ttl
        assert kwargs["timeout"] == push_settings.request_timeout

    @pytest.mark.asyncio
    async def test_claims_are_fresh_per_call(self, push_settings):
        """pywebpush mutates the claims dict, so each send gets its own."""
        transport = WebPushTransport(push_settings)

        def mutate(**kwargs):
            kwargs["vapid_claims"]["aud"] = "https://push.example"
            return MagicMock(status_code=201)

        with patch(WEBPUSH, side_effect=mutate) as webpush:
            await transport.send(make_subscription("https://push.example/a"), b"{}")
            await transport.send(make_subscription("https://push.example/b"), b"{}")

        first, second = (c.kwargs["vapid_claims"] for c in webpush.call_args_list)
        assert first is not second

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 410])
    async def test_gone(self, push_settings, status_code):
        transport = WebPushTransport(push_settings)

        with patch(WEBPUSH, side_effect=_rejected(status_code)):
            result = await transport.send(make_subscription("https://push.example/a"), b"{}")

        assert result.success is False
        assert result.status_code == status_code
        assert result.error_category == "gone"
        assert result.is_gone

    @pytest.mark.asyncio
    async def test_rate_limited_is_transient(self, push_settings):
        transport = WebPushTransport(push_settings)

        with patch(WEBPUSH, side_effect=_rejected(429)):
            result = await transport.send(make_subscription("https://push.example/a"), b"{}")

        assert result.error_category == "transient"
        assert not result.is_gone

    @pytest.mark.asyncio
    async def test_rejection_without_response_is_transient(self, push_settings):
        transport = WebPushTransport(push_settings)

        with patch(WEBPUSH, side_effect=WebPushException("Invalid VAPID key")):
            result = await transport.send(make_subscription("https://push.example/a"), b"{}")

        assert result.status_code is None
        assert result.error_category == "transient"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_classified_not_raised(self, push_settings):
        transport = WebPushTransport(push_settings)

        with patch(WEBPUSH, side_effect=TimeoutError("timed out")):
            result = await transport.send(make_subscription("https://push.example/a"), b"{}")

        assert result.success is False
        assert result.error_category == "exception"
        assert "timed out" in result.error_message
