from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from PySide6.QtWidgets import QApplication

from event_viewer.utils import LoggingOptions, configure_logging


os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Configured before test modules import loggers so nothing is written to the
# user cache directory.
configure_logging(
    LoggingOptions(
        level="WARNING",
        file_sink=False,
        log_path=Path(tempfile.gettempdir()) / "event-viewer-tests.log",
    )
)


@pytest.fixture(scope="session")
def qt_app() -> Iterator[QApplication]:
    """Ensure a QApplication instance exists for UI tests."""

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _isolated_user_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Point platformdirs lookups and env overrides at a scratch location."""

    monkeypatch.setattr(
        "event_viewer.config.settings.user_config_dir",
        lambda *_args, **_kwargs: str(tmp_path / "config"),
    )
    monkeypatch.setattr(
        "event_viewer.config.settings.user_cache_dir",
        lambda *_args, **_kwargs: str(tmp_path / "cache"),
    )
    for name in list(os.environ):
        if name.startswith("EVENT_VIEWER_"):
            monkeypatch.delenv(name, raising=False)
