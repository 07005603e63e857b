from __future__ import annotations

from enum import StrEnum
from typing import Any, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ViewerBaseModel(BaseModel):
    """Base class for backend payload helpers."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """Hydrate a model from a raw backend record."""
        return cls.model_validate(payload)


class EventType(StrEnum):
    KEYBOARD_PRESS = "keyboard_press"
    KEYBOARD_RELEASE = "keyboard_release"
    CLIPBOARD_COPY = "clipboard_copy"


class Device(ViewerBaseModel):
    device_id: str
    device_name: str


class DeviceEvent(ViewerBaseModel):
    # Plain str: unrecognised event types are displayed, never rejected.
    event_type: str
    time: int = Field(validation_alias=AliasChoices("time", "timestamp"))
    timezone: str = ""
    content: str = ""

    @property
    def known_type(self) -> EventType | None:
        try:
            return EventType(self.event_type)
        except ValueError:
            return None


__all__ = ["ViewerBaseModel", "EventType", "Device", "DeviceEvent"]
