from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ApiErrorCategory(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP = "http"
    PAYLOAD = "payload"
    UNKNOWN = "unknown"


@dataclass(slots=True, eq=False)
class ApiError(Exception):
    """Base error raised by the backend client."""

    message: str
    category: ApiErrorCategory = ApiErrorCategory.UNKNOWN
    status_code: int | None = None
    url: str | None = None
    inner_error: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    @property
    def recovery_suggestion(self) -> str | None:
        if self.category is ApiErrorCategory.NETWORK:
            return "Check that the backend is running and reachable, then reload."
        if self.category is ApiErrorCategory.TIMEOUT:
            return "The backend did not answer in time. Reload to try again."
        if self.category is ApiErrorCategory.PAYLOAD:
            return "The backend returned data in an unexpected format."
        if self.category is ApiErrorCategory.HTTP and self.status_code == 404:
            return "The backend does not know this device."
        return None

    @property
    def is_transient(self) -> bool:
        if self.category in {ApiErrorCategory.NETWORK, ApiErrorCategory.TIMEOUT}:
            return True
        if self.status_code and 500 <= self.status_code <= 599:
            return True
        return False


class DataUnavailable(ApiError):
    """Raised when the device roster or an event log cannot be fetched."""


__all__ = ["ApiError", "ApiErrorCategory", "DataUnavailable"]
