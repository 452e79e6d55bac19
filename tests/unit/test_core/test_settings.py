"""Unit tests for the settings classes and cached loaders."""

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from vocab_service.core.settings import (
    clear_all_caches,
    get_push_settings,
    get_scheduler_settings,
    get_storage_settings,
)
from vocab_service.core.settings.app import AppSettings
from vocab_service.core.settings.logs import LoggingSettings
from vocab_service.core.settings.push import PushSettings
from vocab_service.core.settings.scheduler import SchedulerSettings
from vocab_service.core.settings.storage import StorageSettings


@pytest.mark.unit
class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.port == 3001
        assert settings.api_prefix == "/api"

    def test_frozen(self):
        settings = AppSettings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.port = 8080

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "8123")

        assert AppSettings(_env_file=None).port == 8123

    def test_rejects_bad_prefix(self):
        with pytest.raises(ValidationError):
            AppSettings(api_prefix="api")


@pytest.mark.unit
class TestPushSettings:
    """Test suite for PushSettings."""

    def test_unconfigured_by_default(self, monkeypatch):
        monkeypatch.delenv("PUSH_VAPID_PUBLIC_KEY", raising=False)
        monkeypatch.delenv("PUSH_VAPID_PRIVATE_KEY", raising=False)

        assert PushSettings(_env_file=None).is_configured is False

    def test_needs_both_keys(self):
        assert PushSettings(vapid_public_key="pub", vapid_private_key=None).is_configured is False
        assert PushSettings(vapid_public_key="pub", vapid_private_key="priv").is_configured is True

    def test_private_key_is_secret(self):
        settings = PushSettings(vapid_public_key="pub", vapid_private_key="priv")

        assert "priv" not in repr(settings)
        assert settings.vapid_private_key.get_secret_value() == "priv"

    def test_claims_are_fresh(self):
        settings = PushSettings(vapid_subject="mailto:ops@example.com")

        first = settings.vapid_claims()
        first["aud"] = "https://push.example"

        assert settings.vapid_claims() == {"sub": "mailto:ops@example.com"}

    def test_rejects_bad_subject(self):
        with pytest.raises(ValidationError):
            PushSettings(vapid_subject="ops@example.com")


@pytest.mark.unit
class TestSchedulerSettings:
    def test_defaults(self):
        settings = SchedulerSettings(enabled=True)

        assert (settings.hour, settings.minute) == (9, 0)
        assert settings.interval_hours == 24
        assert settings.misfire_grace_time == 300

    def test_timezone(self):
        settings = SchedulerSettings(timezone="Europe/Berlin")

        assert settings.tzinfo == ZoneInfo("Europe/Berlin")

    def test_rejects_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            SchedulerSettings(timezone="Mars/Olympus_Mons")

    @pytest.mark.parametrize("field,value", [("hour", 24), ("minute", 60), ("interval_hours", 0)])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            SchedulerSettings(**{field: value})


@pytest.mark.unit
class TestStorageSettings:
    def test_paths(self, tmp_path):
        settings = StorageSettings(data_dir=tmp_path)

        assert settings.subscriptions_path == tmp_path / "subscriptions.json"
        assert settings.dictionary_path == tmp_path / "dictionary.json"

    def test_default_data_dir(self, monkeypatch):
        monkeypatch.delenv("STORAGE_DATA_DIR", raising=False)

        assert StorageSettings(_env_file=None).data_dir == Path("data")


@pytest.mark.unit
class TestLoggingSettings:
    def test_json_alias(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "false")

        assert LoggingSettings(_env_file=None).json_logs is False

    def test_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_file_path_only_when_enabled(self):
        assert LoggingSettings(file_enabled=False).to_logging_kwargs()["file_path"] is None


@pytest.mark.unit
class TestLoaders:
    def test_cached_until_cleared(self, monkeypatch):
        monkeypatch.setenv("SCHEDULER_HOUR", "7")
        clear_all_caches()

        first = get_scheduler_settings()
        monkeypatch.setenv("SCHEDULER_HOUR", "8")

        assert get_scheduler_settings() is first
        assert first.hour == 7

        clear_all_caches()
        assert get_scheduler_settings().hour == 8

    def test_each_loader_returns_its_type(self):
        assert isinstance(get_push_settings(), PushSettings)
        assert isinstance(get_storage_settings(), StorageSettings)
