from .client import ApiClientConfig, EventApiClient
from .errors import ApiError, ApiErrorCategory, DataUnavailable

__all__ = [
    "ApiClientConfig",
    "ApiError",
    "ApiErrorCategory",
    "DataUnavailable",
    "EventApiClient",
]
