from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from event_viewer.api.errors import ApiErrorCategory, DataUnavailable
from event_viewer.config import Settings
from event_viewer.data import Device, DeviceEvent, ViewerBaseModel
from event_viewer.utils.logging import get_logger


logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=ViewerBaseModel)


@dataclass(slots=True)
class ApiClientConfig:
    base_url: str
    timeout: float = 10.0
    verify_tls: bool = True
    user_agent: str = "DeviceEventViewer-Python"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiClientConfig":
        return cls(
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            verify_tls=settings.verify_tls,
        )


def device_list_path() -> str:
    return "/devices"


def device_events_path(device_id: str) -> str:
    return f"/devices/{quote(device_id, safe='')}/logs"


class EventApiClient:
    """Async reader for the device roster and per-device event logs.

    Every failure (transport, timeout, non-2xx status, malformed body) is
    reported as :class:`DataUnavailable`; nothing is retried here.
    """

    def __init__(
        self,
        config: ApiClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def fetch_device_list(self) -> list[Device]:
        records = await self._get_records(device_list_path())
        return self._parse(Device, records, url=device_list_path())

    async def fetch_device_events(self, device_id: str) -> list[DeviceEvent]:
        path = device_events_path(device_id)
        records = await self._get_records(path)
        return self._parse(DeviceEvent, records, url=path)

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    # ----------------------------------------------------------------- Helpers

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                verify=self._config.verify_tls,
                headers={
                    "User-Agent": self._config.user_agent,
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        return self._http_client

    async def _get_records(self, path: str) -> list[Any]:
        client = self._get_http_client()
        start = time.perf_counter()
        try:
            response = await client.get(path)
        except httpx.TimeoutException as exc:
            raise DataUnavailable(
                message=f"Timed out contacting the backend ({path})",
                category=ApiErrorCategory.TIMEOUT,
                url=path,
                inner_error=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise DataUnavailable(
                message=f"Network error contacting the backend: {exc}",
                category=ApiErrorCategory.NETWORK,
                url=path,
                inner_error=exc,
            ) from exc

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "Backend request completed",
            url=path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        )

        if response.status_code >= 400:
            raise _map_response_to_error(response, path)

        try:
            body = response.json()
        except ValueError as exc:
            raise DataUnavailable(
                message="Backend returned a body that is not valid JSON",
                category=ApiErrorCategory.PAYLOAD,
                status_code=response.status_code,
                url=path,
                inner_error=exc,
            ) from exc
        return _unwrap_records(body, path)

    def _parse(
        self,
        model: type[ModelT],
        records: list[Any],
        *,
        url: str,
    ) -> list[ModelT]:
        items: list[ModelT] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise DataUnavailable(
                    message=f"Record {index} from the backend is not an object",
                    category=ApiErrorCategory.PAYLOAD,
                    url=url,
                )
            try:
                items.append(model.from_payload(record))
            except ValidationError as exc:
                raise DataUnavailable(
                    message=f"Record {index} from the backend is invalid: {exc.error_count()} error(s)",
                    category=ApiErrorCategory.PAYLOAD,
                    url=url,
                    inner_error=exc,
                ) from exc
        return items


def _unwrap_records(body: Any, url: str) -> list[Any]:
    if isinstance(body, list):
        return body
    if isinstance(body, dict) and isinstance(body.get("data"), list):
        return body["data"]
    raise DataUnavailable(
        message="Backend response does not contain a list of records",
        category=ApiErrorCategory.PAYLOAD,
        url=url,
    )


def _map_response_to_error(response: httpx.Response, url: str) -> DataUnavailable:
    status = response.status_code
    message: str | None = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("error") or body.get("detail") or body.get("message")
        if isinstance(detail, str):
            message = detail
    message = message or response.text or f"Backend request failed with status {status}"
    return DataUnavailable(
        message=message,
        category=ApiErrorCategory.HTTP,
        status_code=status,
        url=url,
    )


__all__ = [
    "ApiClientConfig",
    "EventApiClient",
    "device_events_path",
    "device_list_path",
]
