from __future__ import annotations

from typing import Awaitable, Callable

from PySide6.QtCore import QLocale, QSize, Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut, QShowEvent
from PySide6.QtWidgets import QMainWindow, QStatusBar, QWidget

from event_viewer.data import Device, DeviceEvent
from event_viewer.services import RefreshEvent, ServiceErrorEvent, ServiceRegistry
from event_viewer.ui.components import UIContext
from event_viewer.ui.devices import DevicesWidget
from event_viewer.utils import get_logger
from event_viewer.utils.asyncio import AsyncBridge
from event_viewer.utils.errors import describe_exception


logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Primary PySide6 window hosting the device event viewer."""

    def __init__(
        self,
        services: ServiceRegistry,
        *,
        locale: QLocale | None = None,
        run_async: Callable[[Awaitable[object]], object] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._services = services
        self._bridge = AsyncBridge()
        self._bridge.task_completed.connect(self._handle_task_completed)
        self._status_default_message = "Ready"
        self._shortcuts: list[QShortcut] = []
        self._subscriptions: list[Callable[[], None]] = []
        self._initial_load_started = False
        self._ui_context = UIContext(
            run_async=run_async or self._bridge.run_coroutine,
            show_status=self._show_status,
        )

        self._configure_window()
        self.devices = DevicesWidget(services, context=self._ui_context, locale=locale)
        self.setCentralWidget(self.devices)
        self._register_shortcuts()
        self._connect_services()

    # ------------------------------------------------------------------ Setup

    def _configure_window(self) -> None:
        self.setWindowTitle("Device Event Viewer")
        self.resize(1100, 720)
        self.setMinimumSize(QSize(640, 420))
        status = QStatusBar()
        status.setObjectName("MainStatusBar")
        status.setSizeGripEnabled(False)
        status.showMessage(self._status_default_message)
        self.setStatusBar(status)

    def _register_shortcuts(self) -> None:
        bindings: list[tuple[QKeySequence, Callable[[], None]]] = [
            (QKeySequence(QKeySequence.StandardKey.Refresh), self.reload),
            (QKeySequence("Ctrl+B"), self.devices.panel.toggle),
        ]
        for sequence, callback in bindings:
            if sequence == QKeySequence():
                continue
            shortcut = QShortcut(sequence, self)
            shortcut.setContext(Qt.ShortcutContext.ApplicationShortcut)
            shortcut.activated.connect(callback)
            self._shortcuts.append(shortcut)

    def _connect_services(self) -> None:
        self.devices.controller.register_callbacks(
            devices_loaded=self._handle_devices_loaded,
            events_loaded=self._handle_events_loaded,
            error=self._handle_service_error,
        )

    # ------------------------------------------------------------------ Actions

    def reload(self) -> None:
        self._show_status("Loading devices…")
        self.devices.reload()

    @property
    def ui_context(self) -> UIContext:
        return self._ui_context

    # ------------------------------------------------------------------ Handlers

    def _show_status(self, message: str, /, *, timeout_ms: int = 0) -> None:
        self.statusBar().showMessage(message, timeout_ms)

    def _handle_devices_loaded(self, event: RefreshEvent[list[Device]]) -> None:
        count = len(event.items)
        noun = "device" if count == 1 else "devices"
        self._show_status(f"{count} {noun} loaded", timeout_ms=5000)

    def _handle_events_loaded(self, event: RefreshEvent[list[DeviceEvent]]) -> None:
        count = len(event.items)
        noun = "event" if count == 1 else "events"
        self._show_status(f"{count} {noun} loaded for {event.device_id}", timeout_ms=5000)

    def _handle_service_error(self, event: ServiceErrorEvent) -> None:
        descriptor = describe_exception(event.error)
        self._show_status(descriptor.headline, timeout_ms=8000)

    def _handle_task_completed(self, _result: object, error: object) -> None:
        if error is None:
            if not self.statusBar().currentMessage():
                self.statusBar().showMessage(self._status_default_message)
            return
        if isinstance(error, Exception):
            logger.error(
                "Background task failed",
                error_type=type(error).__name__,
                error=str(error),
            )
            self._show_status(describe_exception(error).headline, timeout_ms=8000)

    def showEvent(self, event: QShowEvent) -> None:  # type: ignore[override]
        super().showEvent(event)
        if not self._initial_load_started:
            self._initial_load_started = True
            self.reload()

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self.devices.dispose()
        super().closeEvent(event)


__all__ = ["MainWindow"]
