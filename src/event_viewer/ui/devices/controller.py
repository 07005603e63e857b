from __future__ import annotations

from collections.abc import Callable

from event_viewer.data import Device, DeviceEvent
from event_viewer.services import (
    DeviceService,
    RefreshEvent,
    ServiceErrorEvent,
    ServiceRegistry,
)


class DeviceController:
    """Bridge between the devices UI and the underlying service layer."""

    def __init__(self, services: ServiceRegistry) -> None:
        self._services = services
        self._service: DeviceService | None = services.devices
        self._subscriptions: list[Callable[[], None]] = []

    @property
    def is_configured(self) -> bool:
        return self._service is not None

    # ----------------------------------------------------------------- Events

    def register_callbacks(
        self,
        *,
        devices_loaded: Callable[[RefreshEvent[list[Device]]], None] | None = None,
        events_loaded: Callable[[RefreshEvent[list[DeviceEvent]]], None] | None = None,
        error: Callable[[ServiceErrorEvent], None] | None = None,
    ) -> None:
        if self._service is None:
            return
        if devices_loaded is not None:
            self._subscriptions.append(
                self._service.devices_loaded.subscribe(devices_loaded)
            )
        if events_loaded is not None:
            self._subscriptions.append(
                self._service.events_loaded.subscribe(events_loaded)
            )
        if error is not None:
            self._subscriptions.append(self._service.errors.subscribe(error))

    def dispose(self) -> None:
        while self._subscriptions:
            unsubscribe = self._subscriptions.pop()
            unsubscribe()

    # ----------------------------------------------------------------- Queries

    async def fetch_device_list(self) -> list[Device]:
        if self._service is None:
            raise RuntimeError("Device service is not configured")
        return await self._service.fetch_device_list()

    async def fetch_device_events(self, device_id: str) -> list[DeviceEvent]:
        if self._service is None:
            raise RuntimeError("Device service is not configured")
        return await self._service.fetch_device_events(device_id)


__all__ = ["DeviceController"]
