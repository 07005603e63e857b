from __future__ import annotations

import asyncio
from typing import Awaitable, Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication
from qasync import QEventLoop


class AsyncBridge(QObject):
    """Schedule coroutines from Qt slots and report their outcome as a signal."""

    task_completed = Signal(object, object)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        super().__init__()
        self._loop = loop
        self._pending: set[asyncio.Future[None]] = set()

    def run_coroutine(self, coro: Awaitable[object]) -> asyncio.Future[None]:
        loop = self._loop or asyncio.get_event_loop()
        future = asyncio.ensure_future(self._wrap(coro), loop=loop)
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)
        return future

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def _wrap(self, coro: Awaitable[object]) -> None:
        error = None
        result = None
        try:
            result = await coro
        except Exception as exc:  # noqa: BLE001
            error = exc
        self.task_completed.emit(result, error)


def ensure_qt_event_loop(
    app: QApplication,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> QEventLoop:
    if isinstance(loop, QEventLoop):
        return loop

    new_loop = QEventLoop(app)
    asyncio.set_event_loop(new_loop)
    return new_loop


__all__ = ["AsyncBridge", "ensure_qt_event_loop"]
