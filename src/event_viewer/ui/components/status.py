from __future__ import annotations

from enum import Enum

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from event_viewer.utils.errors import ErrorSeverity


class StatusLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_severity(cls, severity: ErrorSeverity) -> "StatusLevel":
        return cls(severity.value)


_LEVEL_STYLES: dict[StatusLevel, dict[str, str]] = {
    StatusLevel.INFO: {
        "bg": "rgba(59, 130, 246, 0.14)",
        "accent": "rgba(59, 130, 246, 0.75)",
        "text": "#1d4ed8",
        "detail": "#1e293b",
    },
    StatusLevel.WARNING: {
        "bg": "rgba(249, 115, 22, 0.16)",
        "accent": "rgba(249, 115, 22, 0.75)",
        "text": "#b45309",
        "detail": "#78350f",
    },
    StatusLevel.ERROR: {
        "bg": "rgba(239, 68, 68, 0.16)",
        "accent": "rgba(239, 68, 68, 0.8)",
        "text": "#b91c1c",
        "detail": "#7f1d1d",
    },
}


class InlineStatusMessage(QFrame):
    """Compact status banner placed inside a pane, with an optional action."""

    def __init__(self, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("InlineStatusMessage")
        self._level: StatusLevel | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(6)

        header = QHBoxLayout()
        header.setContentsMargins(0, 0, 0, 0)
        header.setSpacing(8)

        self._message_label = QLabel()
        self._message_label.setObjectName("InlineStatusMessageText")
        self._message_label.setWordWrap(True)
        self._message_label.setTextFormat(Qt.TextFormat.PlainText)
        self._message_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        header.addWidget(self._message_label, stretch=1)

        self._action_button = QToolButton()
        self._action_button.setObjectName("InlineStatusMessageAction")
        self._action_button.setVisible(False)
        header.addWidget(self._action_button)

        layout.addLayout(header)

        self._detail_label = QLabel()
        self._detail_label.setObjectName("InlineStatusMessageDetail")
        self._detail_label.setWordWrap(True)
        self._detail_label.setTextFormat(Qt.TextFormat.PlainText)
        self._detail_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        detail_font = self._detail_label.font()
        detail_font.setPointSizeF(max(detail_font.pointSizeF() - 1.0, 8.0))
        self._detail_label.setFont(detail_font)
        self._detail_label.setVisible(False)
        layout.addWidget(self._detail_label)

        self.hide()

    # ------------------------------------------------------------------ Public API

    @property
    def level(self) -> StatusLevel | None:
        return self._level

    @property
    def action_button(self) -> QToolButton:
        return self._action_button

    def message(self) -> str:
        return self._message_label.text()

    def detail(self) -> str:
        return self._detail_label.text()

    def display(
        self,
        message: str,
        *,
        level: StatusLevel = StatusLevel.INFO,
        detail: str | None = None,
        action_label: str | None = None,
    ) -> None:
        style = _LEVEL_STYLES.get(level, _LEVEL_STYLES[StatusLevel.INFO])
        self.setStyleSheet(
            "QFrame#InlineStatusMessage {"
            f"  background-color: {style['bg']};"
            f"  border-left: 4px solid {style['accent']};"
            "  border-radius: 12px;"
            "}"
            "QLabel#InlineStatusMessageText {"
            f"  color: {style['text']};"
            "  background: transparent;"
            "}"
            "QLabel#InlineStatusMessageDetail {"
            f"  color: {style['detail']};"
            "  background: transparent;"
            "}"
        )
        self._level = level
        self._message_label.setText(message)
        self._detail_label.setText(detail or "")
        self._detail_label.setVisible(bool(detail))
        self._action_button.setText(action_label or "")
        self._action_button.setVisible(bool(action_label))
        self.show()

    def clear(self) -> None:
        self.hide()
        self._level = None
        self._message_label.clear()
        self._detail_label.clear()
        self._detail_label.setVisible(False)
        self._action_button.setVisible(False)


__all__ = ["InlineStatusMessage", "StatusLevel"]
