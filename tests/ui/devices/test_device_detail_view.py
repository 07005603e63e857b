from __future__ import annotations

import asyncio
from collections.abc import Iterator
from datetime import datetime

import pytest
from PySide6.QtCore import QLocale

from event_viewer.api import ApiErrorCategory, DataUnavailable
from event_viewer.services import ServiceRegistry
from event_viewer.ui.components import UIContext
from event_viewer.ui.devices import DeviceController, DeviceDetailView, DevicesWidget
from event_viewer.ui.devices.presenters import (
    LOADING_MESSAGE,
    NO_EVENTS_MESSAGE,
    PLACEHOLDER_MESSAGE,
    DetailState,
)

from tests.factories import (
    CoroutineCollector,
    ImmediateDeviceService,
    StubDeviceService,
    make_device,
    make_event,
)


pytestmark = pytest.mark.usefixtures("qt_app")

TIME_FORMAT = "yyyy-MM-dd HH:mm:ss"


def _local(ts: int) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


@pytest.fixture
def stub_service() -> StubDeviceService:
    return StubDeviceService()


@pytest.fixture
def detail_view(qtbot, stub_service: StubDeviceService) -> DeviceDetailView:
    controller = DeviceController(ServiceRegistry(devices=stub_service))  # type: ignore[arg-type]
    view = DeviceDetailView(controller, locale=QLocale.c(), time_format=TIME_FORMAT)
    qtbot.addWidget(view)
    return view


@pytest.fixture
def collector() -> Iterator[CoroutineCollector]:
    collector = CoroutineCollector()
    yield collector
    collector.close_all()


async def _settle() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


def test_initial_state_is_placeholder(detail_view: DeviceDetailView) -> None:
    assert detail_view.state is DetailState.PLACEHOLDER
    assert detail_view.message_label.text() == PLACEHOLDER_MESSAGE
    assert detail_view.header_widget.isHidden()
    assert detail_view.event_tree.isHidden()


@pytest.mark.asyncio
async def test_render_shows_header_and_formatted_rows(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    task = asyncio.create_task(detail_view.render_device_detail("dev1", "Sensor A"))
    await _settle()

    assert detail_view.state is DetailState.LOADING
    assert detail_view.message_label.text() == LOADING_MESSAGE
    assert detail_view.header_widget.title() == "Sensor A - dev1"

    device_id, future = stub_service.event_requests[0]
    assert device_id == "dev1"
    future.set_result(
        [
            make_event(
                event_type="clipboard_copy",
                time=1700000000,
                timezone="UTC+8",
                content="hello",
            ),
            make_event(event_type="keyboard_press", time=1700000001, content="A"),
        ]
    )
    presentation = await task

    assert presentation is not None
    assert detail_view.state is DetailState.EVENTS
    tree = detail_view.event_tree
    assert tree.topLevelItemCount() == 2
    first = tree.topLevelItem(0)
    assert first.text(0) == f"{_local(1700000000)} (UTC+8)"
    assert first.text(1) == "copied"
    assert first.text(2) == "hello"
    assert tree.topLevelItem(1).text(1) == "pressed"
    assert detail_view.message_label.isHidden()


@pytest.mark.asyncio
async def test_empty_log_shows_no_events_message(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    task = asyncio.create_task(detail_view.render_device_detail("dev1", "Sensor A"))
    await _settle()
    stub_service.event_requests[0][1].set_result([])
    await task

    assert detail_view.state is DetailState.EMPTY
    assert detail_view.message_label.text() == NO_EVENTS_MESSAGE
    assert detail_view.status_message.isHidden()


@pytest.mark.asyncio
async def test_earlier_fetch_resolving_last_is_discarded(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    first = asyncio.create_task(detail_view.render_device_detail("devA", "Alpha"))
    await _settle()
    second = asyncio.create_task(detail_view.render_device_detail("devB", "Beta"))
    await _settle()

    (_, future_a), (_, future_b) = stub_service.event_requests
    future_b.set_result([make_event(content="from-b")])
    assert await second is not None
    future_a.set_result([make_event(content="from-a")])
    assert await first is None

    assert detail_view.header_widget.title() == "Beta - devB"
    assert detail_view.event_tree.topLevelItemCount() == 1
    assert detail_view.event_tree.topLevelItem(0).text(2) == "from-b"


@pytest.mark.asyncio
async def test_stale_failure_does_not_replace_current_render(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    first = asyncio.create_task(detail_view.render_device_detail("devA", "Alpha"))
    await _settle()
    second = asyncio.create_task(detail_view.render_device_detail("devB", "Beta"))
    await _settle()

    (_, future_a), (_, future_b) = stub_service.event_requests
    future_b.set_result([])
    await second
    future_a.set_exception(
        DataUnavailable("refused", category=ApiErrorCategory.NETWORK)
    )
    assert await first is None

    assert detail_view.state is DetailState.EMPTY
    assert detail_view.status_message.isHidden()


@pytest.mark.asyncio
async def test_reset_discards_in_flight_render(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    task = asyncio.create_task(detail_view.render_device_detail("dev1", "Sensor A"))
    await _settle()

    detail_view.reset()
    stub_service.event_requests[0][1].set_result([make_event()])

    assert await task is None
    assert detail_view.state is DetailState.PLACEHOLDER


@pytest.mark.asyncio
async def test_failed_fetch_keeps_list_highlight(
    qtbot, collector: CoroutineCollector
) -> None:
    service = ImmediateDeviceService(
        [make_device("dev1", "Sensor A"), make_device("dev2", "Sensor B")],
        event_errors={
            "dev2": DataUnavailable(
                "unknown device", category=ApiErrorCategory.HTTP, status_code=404
            )
        },
    )
    widget = DevicesWidget(
        ServiceRegistry(devices=service),  # type: ignore[arg-type]
        context=UIContext(run_async=collector, show_status=lambda *_a, **_k: None),
        locale=QLocale.c(),
        time_format=TIME_FORMAT,
    )
    qtbot.addWidget(widget)
    await widget.list_view.render_device_list()

    widget.list_view.request_selection(1)
    with pytest.raises(DataUnavailable):
        await collector.pop()

    detail = widget.detail_view
    assert detail.state is DetailState.ERROR
    assert detail.header_widget.title() == "Sensor B - dev2"
    assert detail.status_message.message() == "The event backend rejected the request."
    assert "HTTP 404" in detail.status_message.detail()
    assert detail.event_tree.isHidden()
    assert widget.list_view.active_rows() == [1]
    assert widget.list_view.selection.selected_device_id == "dev2"


@pytest.mark.asyncio
async def test_out_of_range_time_still_renders_events(
    detail_view: DeviceDetailView, stub_service: StubDeviceService
) -> None:
    task = asyncio.create_task(detail_view.render_device_detail("dev1", "Sensor A"))
    await _settle()
    stub_service.event_requests[0][1].set_result(
        [
            make_event(time=1700000000000, timezone="UTC+8", content="ms"),
            make_event(time=1700000000, timezone="UTC+8", content="s"),
        ]
    )

    presentation = await task

    assert presentation is not None
    assert detail_view.state is DetailState.EVENTS
    tree = detail_view.event_tree
    assert tree.topLevelItemCount() == 2
    assert tree.topLevelItem(0).text(0) == "1700000000000 (UTC+8)"
    assert tree.topLevelItem(0).text(2) == "ms"
    assert tree.topLevelItem(1).text(0) == f"{_local(1700000000)} (UTC+8)"
