"""Formatting utilities for displaying recorded device events."""

from __future__ import annotations

import re
from datetime import datetime, tzinfo

from PySide6.QtCore import QCoreApplication, QDate, QDateTime, QLocale, QTime

from event_viewer.data import EventType


# Source strings; translated through the "EventTypes" Qt context when a
# catalog is installed.
EVENT_TYPE_LABELS: dict[EventType, str] = {
    EventType.KEYBOARD_PRESS: "pressed",
    EventType.KEYBOARD_RELEASE: "released",
    EventType.CLIPBOARD_COPY: "copied",
}

_ZONE_TOKEN = re.compile(r"\s*t+")


def event_type_label(event_type: EventType | str) -> str:
    """Return the display label for an event type.

    Unknown types are returned unchanged so they stay visible.

    Examples:
        >>> event_type_label(EventType.KEYBOARD_PRESS)
        'pressed'
        >>> event_type_label("unknown_type_x")
        'unknown_type_x'
    """
    label = EVENT_TYPE_LABELS.get(event_type)  # type: ignore[call-overload]
    if label is None:
        return str(event_type)
    return QCoreApplication.translate("EventTypes", label)


def default_time_pattern(locale: QLocale) -> str:
    """Short date followed by a time with seconds, without the zone name."""
    date_part = locale.dateFormat(QLocale.FormatType.ShortFormat)
    time_part = _ZONE_TOKEN.sub("", locale.timeFormat(QLocale.FormatType.LongFormat))
    return f"{date_part} {time_part.strip()}"


def format_event_time(
    timestamp: int,
    *,
    tz: tzinfo | None = None,
    locale: QLocale | None = None,
    fmt: str | None = None,
) -> str:
    """Render Unix seconds as a localized date/time string.

    Args:
        timestamp: Seconds since the epoch. Values outside the platform's
            date range are rendered as the raw number.
        tz: Zone used for the wall-clock value; the viewer's local zone when omitted.
        locale: Locale used for formatting; the default application locale when omitted.
        fmt: Optional Qt date/time pattern overriding :func:`default_time_pattern`.
    """
    try:
        moment = datetime.fromtimestamp(int(timestamp), tz=tz)
    except (ValueError, OverflowError, OSError):
        return str(timestamp)
    qt_moment = QDateTime(
        QDate(moment.year, moment.month, moment.day),
        QTime(moment.hour, moment.minute, moment.second),
    )
    active_locale = locale or QLocale()
    return active_locale.toString(qt_moment, fmt or default_time_pattern(active_locale))


def format_event_timestamp(
    timestamp: int,
    timezone_label: str,
    *,
    tz: tzinfo | None = None,
    locale: QLocale | None = None,
    fmt: str | None = None,
) -> str:
    """Localized time followed by the stored timezone label, e.g. ``"… (UTC+8)"``.

    The label is an annotation only; it never shifts the rendered time. A
    blank label is left out.
    """
    rendered = format_event_time(timestamp, tz=tz, locale=locale, fmt=fmt)
    label = timezone_label.strip()
    if not label:
        return rendered
    return f"{rendered} ({label})"


__all__ = [
    "EVENT_TYPE_LABELS",
    "default_time_pattern",
    "event_type_label",
    "format_event_time",
    "format_event_timestamp",
]
