from __future__ import annotations

import asyncio

from event_viewer.api import ApiErrorCategory, DataUnavailable
from event_viewer.utils.errors import ErrorSeverity, describe_exception


def test_network_failure_is_transient_warning() -> None:
    error = DataUnavailable("connection refused", category=ApiErrorCategory.NETWORK)

    descriptor = describe_exception(error)

    assert descriptor.headline == "Could not reach the event backend."
    assert descriptor.severity is ErrorSeverity.WARNING
    assert descriptor.transient is True
    assert descriptor.suggestion is not None


def test_http_failure_detail_includes_status() -> None:
    error = DataUnavailable(
        "unknown device",
        category=ApiErrorCategory.HTTP,
        status_code=404,
    )

    descriptor = describe_exception(error)

    assert descriptor.detail == "HTTP 404: unknown device"
    assert descriptor.severity is ErrorSeverity.ERROR
    assert descriptor.transient is False


def test_wrapped_data_error_is_located_through_cause() -> None:
    inner = DataUnavailable("bad json", category=ApiErrorCategory.PAYLOAD)
    try:
        try:
            raise inner
        except DataUnavailable as exc:
            raise RuntimeError("render failed") from exc
    except RuntimeError as outer:
        descriptor = describe_exception(outer)

    assert descriptor.headline == "The event backend returned unreadable data."


def test_timeout_error_is_transient() -> None:
    descriptor = describe_exception(asyncio.TimeoutError())

    assert descriptor.transient is True
    assert descriptor.severity is ErrorSeverity.WARNING


def test_unexpected_error_falls_back_to_generic_headline() -> None:
    descriptor = describe_exception(ValueError("boom"))

    assert descriptor.headline == "Operation failed."
    assert descriptor.detail == "ValueError: boom"
