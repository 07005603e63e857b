from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRequested:
    """A click on a roster entry, carrying the device identity and its row."""

    device_id: str
    device_name: str
    row: int


class SelectionState:
    """Selected device and the single roster row carrying the active highlight."""

    __slots__ = ("_device_id", "_row")

    def __init__(self) -> None:
        self._device_id: str | None = None
        self._row: int | None = None

    @property
    def selected_device_id(self) -> str | None:
        return self._device_id

    @property
    def active_row(self) -> int | None:
        return self._row

    def select(self, device_id: str, row: int) -> None:
        self._device_id = device_id
        self._row = row

    def clear(self) -> None:
        self._device_id = None
        self._row = None

    def is_active(self, row: int) -> bool:
        return self._row is not None and self._row == row


class PanelState:
    """Expanded/collapsed flag of the navigation panel; starts expanded."""

    __slots__ = ("_expanded",)

    def __init__(self, expanded: bool = True) -> None:
        self._expanded = expanded

    @property
    def expanded(self) -> bool:
        return self._expanded

    def toggle(self) -> bool:
        self._expanded = not self._expanded
        return self._expanded

    def collapse(self) -> bool:
        """Collapse the panel. Returns True when the state changed."""
        changed = self._expanded
        self._expanded = False
        return changed


__all__ = ["PanelState", "SelectionRequested", "SelectionState"]
