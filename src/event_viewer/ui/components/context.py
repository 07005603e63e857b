from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol


RunAsyncCallable = Callable[[Awaitable[object]], object]


class ShowStatusCallable(Protocol):
    def __call__(self, message: str, /, *, timeout_ms: int = ...) -> None: ...


@dataclass(slots=True)
class UIContext:
    """Shared UI affordances available to feature modules."""

    run_async: RunAsyncCallable
    show_status: ShowStatusCallable


__all__ = ["UIContext", "RunAsyncCallable", "ShowStatusCallable"]
