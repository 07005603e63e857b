from __future__ import annotations

import httpx
import pytest
import respx

from event_viewer.api import ApiClientConfig, DataUnavailable, EventApiClient
from event_viewer.services import (
    DeviceService,
    RefreshEvent,
    ServiceErrorEvent,
    ServiceRegistry,
)

from tests.factories import BACKEND_URL, make_settings


def _create_service() -> DeviceService:
    client = EventApiClient(ApiClientConfig.from_settings(make_settings()))
    return DeviceService(client)


@pytest.mark.asyncio
async def test_fetch_device_list_emits_loaded_event(respx_mock: respx.Router) -> None:
    service = _create_service()
    try:
        respx_mock.get(f"{BACKEND_URL}/devices").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"device_id": "dev1", "device_name": "Sensor A"},
                    {"device_id": "dev2", "device_name": "Sensor B"},
                ],
            ),
        )
        loaded: list[RefreshEvent] = []
        service.devices_loaded.subscribe(loaded.append)

        devices = await service.fetch_device_list()

        assert [device.device_id for device in devices] == ["dev1", "dev2"]
        assert len(loaded) == 1
        assert loaded[0].items == devices
    finally:
        await service.close()


@pytest.mark.asyncio
async def test_fetch_device_events_is_never_cached(respx_mock: respx.Router) -> None:
    service = _create_service()
    try:
        route = respx_mock.get(f"{BACKEND_URL}/devices/dev1/logs").mock(
            side_effect=[
                httpx.Response(200, json=[]),
                httpx.Response(
                    200,
                    json=[
                        {
                            "event_type": "keyboard_press",
                            "time": 1700000000,
                            "timezone": "UTC",
                            "content": "A",
                        }
                    ],
                ),
            ],
        )
        loaded: list[RefreshEvent] = []
        service.events_loaded.subscribe(loaded.append)

        first = await service.fetch_device_events("dev1")
        second = await service.fetch_device_events("dev1")

        assert route.call_count == 2
        assert first == []
        assert [event.content for event in second] == ["A"]
        assert [event.device_id for event in loaded] == ["dev1", "dev1"]
    finally:
        await service.close()


@pytest.mark.asyncio
async def test_fetch_failure_emits_error_and_reraises(respx_mock: respx.Router) -> None:
    service = _create_service()
    try:
        respx_mock.get(f"{BACKEND_URL}/devices/dev9/logs").mock(
            return_value=httpx.Response(404, json={"detail": "unknown device"}),
        )
        errors: list[ServiceErrorEvent] = []
        service.errors.subscribe(errors.append)

        with pytest.raises(DataUnavailable) as excinfo:
            await service.fetch_device_events("dev9")

        assert len(errors) == 1
        assert errors[0].operation == "device_events"
        assert errors[0].device_id == "dev9"
        assert errors[0].error is excinfo.value
        assert excinfo.value.status_code == 404
    finally:
        await service.close()


@pytest.mark.asyncio
async def test_roster_failure_does_not_emit_loaded(respx_mock: respx.Router) -> None:
    service = _create_service()
    try:
        respx_mock.get(f"{BACKEND_URL}/devices").mock(
            side_effect=httpx.ConnectError("refused"),
        )
        loaded: list[RefreshEvent] = []
        errors: list[ServiceErrorEvent] = []
        service.devices_loaded.subscribe(loaded.append)
        service.errors.subscribe(errors.append)

        with pytest.raises(DataUnavailable):
            await service.fetch_device_list()

        assert loaded == []
        assert [event.operation for event in errors] == ["device_list"]
    finally:
        await service.close()


@pytest.mark.asyncio
async def test_registry_close_without_services_is_noop() -> None:
    await ServiceRegistry().close()
