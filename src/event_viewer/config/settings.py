from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "DeviceEventViewer"
ENV_PREFIX = "EVENT_VIEWER_"
ENV_FILE_NAME = "settings.env"

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"
DEFAULT_REQUEST_TIMEOUT = 10.0
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Connection details for the event collection backend."""

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify_tls: bool = True
    log_level: str = "INFO"
    ui_locale: str = ""

    @property
    def base_url(self) -> str:
        """Backend URL without a trailing slash."""
        return self.backend_url.rstrip("/")


class SettingsManager:
    """Load and persist viewer settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings()

        backend_url = self._get_env("BACKEND_URL")
        if backend_url:
            settings.backend_url = backend_url

        timeout = self._get_env("REQUEST_TIMEOUT")
        if timeout:
            try:
                value = float(timeout)
            except ValueError:
                value = -1.0
            if value > 0:
                settings.request_timeout = value
            else:
                self._warn_invalid("REQUEST_TIMEOUT", timeout)

        verify = self._get_env("VERIFY_TLS")
        if verify:
            lowered = verify.strip().lower()
            if lowered in _TRUE_VALUES:
                settings.verify_tls = True
            elif lowered in _FALSE_VALUES:
                settings.verify_tls = False
            else:
                self._warn_invalid("VERIFY_TLS", verify)

        level = self._get_env("LOG_LEVEL")
        if level:
            if level.upper() in _LOG_LEVELS:
                settings.log_level = level.upper()
            else:
                self._warn_invalid("LOG_LEVEL", level)

        ui_locale = self._get_env("LOCALE")
        if ui_locale:
            settings.ui_locale = ui_locale.strip()

        return settings

    def save(self, settings: Settings) -> None:
        """Persist configuration fields to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}BACKEND_URL={settings.backend_url}",
            f"{ENV_PREFIX}REQUEST_TIMEOUT={settings.request_timeout}",
            f"{ENV_PREFIX}VERIFY_TLS={'true' if settings.verify_tls else 'false'}",
            f"{ENV_PREFIX}LOG_LEVEL={settings.log_level}",
            f"{ENV_PREFIX}LOCALE={settings.ui_locale}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def save_if_missing(self, settings: Settings) -> bool:
        """Write ``settings`` when no env file exists yet. Returns True if written."""
        if self._env_file.exists():
            return False
        self.save(settings)
        return True

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None

    def _warn_invalid(self, name: str, value: str) -> None:
        # Imported lazily: the logging module resolves its directory from here.
        from event_viewer.utils.logging import get_logger

        get_logger(__name__).warning(
            "Ignoring invalid setting; using default",
            setting=f"{ENV_PREFIX}{name}",
            value=value,
        )


__all__ = [
    "APP_NAME",
    "DEFAULT_BACKEND_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
