from __future__ import annotations

from pathlib import Path

import pytest

from event_viewer.config import (
    DEFAULT_BACKEND_URL,
    DEFAULT_REQUEST_TIMEOUT,
    Settings,
    SettingsManager,
)


def test_defaults_without_env_file(tmp_path: Path) -> None:
    settings = SettingsManager(env_file=tmp_path / "missing.env").load()

    assert settings.backend_url == DEFAULT_BACKEND_URL
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert settings.verify_tls is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EVENT_VIEWER_BACKEND_URL", "https://events.example.com/")
    monkeypatch.setenv("EVENT_VIEWER_REQUEST_TIMEOUT", "3.5")
    monkeypatch.setenv("EVENT_VIEWER_VERIFY_TLS", "off")
    monkeypatch.setenv("EVENT_VIEWER_LOG_LEVEL", "debug")
    monkeypatch.setenv("EVENT_VIEWER_LOCALE", " zh_CN ")

    settings = SettingsManager(env_file=tmp_path / "settings.env").load()

    assert settings.base_url == "https://events.example.com"
    assert settings.request_timeout == 3.5
    assert settings.verify_tls is False
    assert settings.log_level == "DEBUG"
    assert settings.ui_locale == "zh_CN"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("REQUEST_TIMEOUT", "soon"),
        ("REQUEST_TIMEOUT", "-2"),
        ("VERIFY_TLS", "maybe"),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_fall_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    name: str,
    value: str,
) -> None:
    monkeypatch.setenv(f"EVENT_VIEWER_{name}", value)

    settings = SettingsManager(env_file=tmp_path / "settings.env").load()

    assert settings == Settings()


def test_save_then_load_round_trip(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / "nested" / "settings.env"
    manager = SettingsManager(env_file=env_file)
    manager.save(
        Settings(
            backend_url="http://10.0.0.5:9000",
            request_timeout=4.0,
            verify_tls=False,
            log_level="WARNING",
            ui_locale="de",
        )
    )
    for name in ("BACKEND_URL", "REQUEST_TIMEOUT", "VERIFY_TLS", "LOG_LEVEL", "LOCALE"):
        monkeypatch.delenv(f"EVENT_VIEWER_{name}", raising=False)

    loaded = manager.load()

    assert env_file.exists()
    assert loaded.backend_url == "http://10.0.0.5:9000"
    assert loaded.request_timeout == 4.0
    assert loaded.verify_tls is False
    assert loaded.log_level == "WARNING"
    assert loaded.ui_locale == "de"


def test_save_if_missing_writes_only_once(tmp_path: Path) -> None:
    env_file = tmp_path / "settings.env"
    manager = SettingsManager(env_file=env_file)

    assert manager.save_if_missing(Settings(backend_url="http://first")) is True
    assert manager.save_if_missing(Settings(backend_url="http://second")) is False

    content = env_file.read_text(encoding="utf-8")
    assert "EVENT_VIEWER_BACKEND_URL=http://first" in content
    assert "http://second" not in content
