"""Domain models returned by the event collection backend."""

from .models import Device, DeviceEvent, EventType, ViewerBaseModel

__all__ = ["Device", "DeviceEvent", "EventType", "ViewerBaseModel"]
