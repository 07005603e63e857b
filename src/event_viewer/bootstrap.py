from __future__ import annotations

import httpx

from event_viewer.api import ApiClientConfig, EventApiClient
from event_viewer.config import Settings, SettingsManager
from event_viewer.services import DeviceService, ServiceRegistry
from event_viewer.utils import get_logger


logger = get_logger(__name__)


def build_services(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ServiceRegistry:
    """Create the backend client and the services the UI consumes."""

    settings = settings or SettingsManager().load()
    client = EventApiClient(ApiClientConfig.from_settings(settings), transport=transport)
    devices = DeviceService(client)
    logger.info(
        "Services initialised",
        backend_url=settings.base_url,
        timeout=settings.request_timeout,
    )
    return ServiceRegistry(devices=devices)


__all__ = ["build_services"]
