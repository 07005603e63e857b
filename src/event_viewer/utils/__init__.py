"""Shared utility helpers for the Device Event Viewer."""

from .asyncio import AsyncBridge, ensure_qt_event_loop
from .logging import LoggingOptions, configure_logging, get_logger, log_file_path
from .sequence import RenderSequence, RenderToken
from .formatters import (
    EVENT_TYPE_LABELS,
    default_time_pattern,
    event_type_label,
    format_event_time,
    format_event_timestamp,
)

__all__ = [
    "LoggingOptions",
    "configure_logging",
    "get_logger",
    "log_file_path",
    "AsyncBridge",
    "ensure_qt_event_loop",
    "RenderSequence",
    "RenderToken",
    "EVENT_TYPE_LABELS",
    "default_time_pattern",
    "event_type_label",
    "format_event_time",
    "format_event_timestamp",
]
