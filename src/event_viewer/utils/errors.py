from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

from event_viewer.api.errors import ApiErrorCategory, DataUnavailable


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ErrorDescriptor:
    headline: str
    detail: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    transient: bool = False
    suggestion: str | None = None


def describe_exception(error: Exception) -> ErrorDescriptor:
    descriptor = ErrorDescriptor(
        headline="Operation failed.",
        detail=f"{type(error).__name__}: {error}",
        severity=ErrorSeverity.ERROR,
        transient=False,
    )

    unavailable = _locate_data_error(error)
    if unavailable is not None:
        descriptor.headline = _data_headline(unavailable)
        descriptor.detail = _format_data_detail(unavailable)
        descriptor.suggestion = unavailable.recovery_suggestion
        descriptor.transient = unavailable.is_transient
        if unavailable.is_transient:
            descriptor.severity = ErrorSeverity.WARNING
        return descriptor

    if isinstance(error, asyncio.TimeoutError):
        descriptor.headline = "Operation timed out."
        descriptor.detail = "asyncio.TimeoutError: Operation timed out"
        descriptor.severity = ErrorSeverity.WARNING
        descriptor.transient = True
        descriptor.suggestion = "Retry after verifying connectivity."
        return descriptor

    return descriptor


def _locate_data_error(error: Exception) -> DataUnavailable | None:
    current: BaseException | None = error
    visited: set[int] = set()
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        if isinstance(current, DataUnavailable):
            return current
        current = current.__cause__ or current.__context__
    return None


def _data_headline(error: DataUnavailable) -> str:
    match error.category:
        case ApiErrorCategory.NETWORK:
            return "Could not reach the event backend."
        case ApiErrorCategory.TIMEOUT:
            return "The event backend timed out."
        case ApiErrorCategory.HTTP:
            return "The event backend rejected the request."
        case ApiErrorCategory.PAYLOAD:
            return "The event backend returned unreadable data."
        case _:
            return "Data is unavailable."


def _format_data_detail(error: DataUnavailable) -> str:
    if error.status_code:
        return f"HTTP {error.status_code}: {error}"
    return str(error)


__all__ = [
    "ErrorDescriptor",
    "ErrorSeverity",
    "describe_exception",
]
