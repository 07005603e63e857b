from __future__ import annotations

import asyncio
import sys

from PySide6.QtWidgets import QApplication

from event_viewer.bootstrap import build_services
from event_viewer.config import SettingsManager
from event_viewer.ui import MainWindow
from event_viewer.ui.i18n import TranslationManager
from event_viewer.utils import (
    LoggingOptions,
    configure_logging,
    ensure_qt_event_loop,
    get_logger,
)


def main() -> None:
    settings_manager = SettingsManager()
    settings = settings_manager.load()
    first_run = settings_manager.save_if_missing(settings)
    configure_logging(LoggingOptions(level=settings.log_level))  # type: ignore[arg-type]
    logger = get_logger(__name__)
    logger.info("Starting Device Event Viewer", backend_url=settings.base_url)
    if first_run:
        logger.info("Wrote default settings", path=str(settings_manager.env_file))

    app = QApplication(sys.argv)
    app.setApplicationName("Device Event Viewer")
    translations = TranslationManager(app)
    translations.load(settings.ui_locale or None)
    loop = ensure_qt_event_loop(app)

    services = build_services(settings)
    window = MainWindow(services)
    window.show()

    quit_requested = asyncio.Event()
    app.aboutToQuit.connect(quit_requested.set)

    async def _run_until_quit() -> None:
        await quit_requested.wait()
        await services.close()

    try:
        with loop:
            loop.run_until_complete(_run_until_quit())
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    finally:
        logger.info("Device Event Viewer stopped")


if __name__ == "__main__":
    main()
