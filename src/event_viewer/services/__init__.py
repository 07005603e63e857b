"""Service layer between the backend client and the views."""

from .base import EventHook, RefreshEvent, ServiceErrorEvent
from .devices import DeviceService
from .registry import ServiceRegistry

__all__ = [
    "DeviceService",
    "EventHook",
    "RefreshEvent",
    "ServiceErrorEvent",
    "ServiceRegistry",
]
