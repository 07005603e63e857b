from __future__ import annotations

from event_viewer.api import DataUnavailable, EventApiClient
from event_viewer.data import Device, DeviceEvent
from event_viewer.services.base import EventHook, RefreshEvent, ServiceErrorEvent
from event_viewer.utils import get_logger


logger = get_logger(__name__)


class DeviceService:
    """Fetches the device roster and per-device event logs.

    Nothing is cached: every call goes to the backend and returns a fresh
    snapshot in the order the backend produced it.
    """

    def __init__(self, client: EventApiClient) -> None:
        self._client = client

        self.devices_loaded: EventHook[RefreshEvent[list[Device]]] = EventHook()
        self.events_loaded: EventHook[RefreshEvent[list[DeviceEvent]]] = EventHook()
        self.errors: EventHook[ServiceErrorEvent] = EventHook()

    async def fetch_device_list(self) -> list[Device]:
        try:
            devices = await self._client.fetch_device_list()
        except DataUnavailable as exc:
            logger.error(
                "Failed to fetch device roster",
                category=exc.category.value,
                status_code=exc.status_code,
                error=str(exc),
            )
            self.errors.emit(ServiceErrorEvent(operation="device_list", error=exc))
            raise
        logger.info("Device roster loaded", count=len(devices))
        self.devices_loaded.emit(RefreshEvent(items=devices))
        return devices

    async def fetch_device_events(self, device_id: str) -> list[DeviceEvent]:
        try:
            events = await self._client.fetch_device_events(device_id)
        except DataUnavailable as exc:
            logger.error(
                "Failed to fetch device events",
                device_id=device_id,
                category=exc.category.value,
                status_code=exc.status_code,
                error=str(exc),
            )
            self.errors.emit(
                ServiceErrorEvent(operation="device_events", error=exc, device_id=device_id)
            )
            raise
        logger.debug("Device events loaded", device_id=device_id, count=len(events))
        self.events_loaded.emit(RefreshEvent(items=events, device_id=device_id))
        return events

    async def close(self) -> None:
        await self._client.close()


__all__ = ["DeviceService"]
