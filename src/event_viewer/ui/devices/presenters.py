from __future__ import annotations

from dataclasses import dataclass, field
from datetime import tzinfo
from enum import StrEnum
from typing import Iterable, Sequence

from PySide6.QtCore import QCoreApplication, QLocale

from event_viewer.data import Device, DeviceEvent
from event_viewer.utils.errors import ErrorDescriptor
from event_viewer.utils.formatters import event_type_label, format_event_timestamp


DEVICE_LIST_HEADING = "Devices"
EMPTY_ROSTER_MESSAGE = "No devices reported yet."
PLACEHOLDER_MESSAGE = "← Select a device to view details"
LOADING_MESSAGE = "Loading events…"
NO_EVENTS_MESSAGE = "No events recorded"
RELOAD_ACTION = "Reload"

TRANSLATION_CONTEXT = "DeviceViews"


def ui_text(source: str) -> str:
    """Translate a device view string through the installed Qt catalog."""
    return QCoreApplication.translate(TRANSLATION_CONTEXT, source)


class ListState(StrEnum):
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"


class DetailState(StrEnum):
    PLACEHOLDER = "placeholder"
    LOADING = "loading"
    EVENTS = "events"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DeviceListEntry:
    device_id: str
    device_name: str


@dataclass(frozen=True, slots=True)
class DetailHeader:
    device_id: str
    device_name: str

    @property
    def title(self) -> str:
        return f"{self.device_name} - {self.device_id}"


@dataclass(frozen=True, slots=True)
class EventRow:
    """One formatted event as shown in the detail pane."""

    time_text: str
    type_label: str
    content: str


@dataclass(frozen=True, slots=True)
class DetailPresentation:
    state: DetailState
    header: DetailHeader | None = None
    rows: tuple[EventRow, ...] = field(default_factory=tuple)
    message: str | None = None
    error: ErrorDescriptor | None = None


def present_device_list(devices: Iterable[Device]) -> list[DeviceListEntry]:
    """One entry per device, in the order supplied."""

    return [DeviceListEntry(device.device_id, device.device_name) for device in devices]


def present_event(
    event: DeviceEvent,
    *,
    tz: tzinfo | None = None,
    locale: QLocale | None = None,
    fmt: str | None = None,
) -> EventRow:
    return EventRow(
        time_text=format_event_timestamp(
            event.time, event.timezone, tz=tz, locale=locale, fmt=fmt
        ),
        type_label=event_type_label(event.known_type or event.event_type),
        content=event.content,
    )


def present_placeholder() -> DetailPresentation:
    return DetailPresentation(
        state=DetailState.PLACEHOLDER,
        message=ui_text(PLACEHOLDER_MESSAGE),
    )


def present_loading(device_id: str, device_name: str) -> DetailPresentation:
    return DetailPresentation(
        state=DetailState.LOADING,
        header=DetailHeader(device_id, device_name),
        message=ui_text(LOADING_MESSAGE),
    )


def present_events(
    device_id: str,
    device_name: str,
    events: Sequence[DeviceEvent],
    *,
    tz: tzinfo | None = None,
    locale: QLocale | None = None,
    fmt: str | None = None,
) -> DetailPresentation:
    header = DetailHeader(device_id, device_name)
    if not events:
        return DetailPresentation(
            state=DetailState.EMPTY,
            header=header,
            message=ui_text(NO_EVENTS_MESSAGE),
        )
    rows = tuple(
        present_event(event, tz=tz, locale=locale, fmt=fmt) for event in events
    )
    return DetailPresentation(state=DetailState.EVENTS, header=header, rows=rows)


def present_error(
    device_id: str,
    device_name: str,
    error: ErrorDescriptor,
) -> DetailPresentation:
    return DetailPresentation(
        state=DetailState.ERROR,
        header=DetailHeader(device_id, device_name),
        message=error.headline,
        error=error,
    )


__all__ = [
    "DEVICE_LIST_HEADING",
    "EMPTY_ROSTER_MESSAGE",
    "LOADING_MESSAGE",
    "NO_EVENTS_MESSAGE",
    "PLACEHOLDER_MESSAGE",
    "RELOAD_ACTION",
    "DetailHeader",
    "DetailPresentation",
    "DetailState",
    "DeviceListEntry",
    "EventRow",
    "ListState",
    "present_device_list",
    "present_error",
    "present_event",
    "present_events",
    "present_loading",
    "present_placeholder",
    "ui_text",
]
