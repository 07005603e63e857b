from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QToolButton,
    QVBoxLayout,
    QWidget,
)


class SectionHeader(QWidget):
    """Title with a divider underneath, used for pane headings."""

    def __init__(
        self,
        title: str = "",
        *,
        point_size_delta: float = 4,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header_row = QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)
        header_row.setSpacing(8)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("SectionTitle")
        self.title_label.setTextFormat(Qt.TextFormat.PlainText)
        self.title_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        font = self.title_label.font()
        font.setPointSizeF(font.pointSizeF() + point_size_delta)
        font.setWeight(QFont.Weight.DemiBold)
        self.title_label.setFont(font)

        header_row.addWidget(self.title_label)
        header_row.addStretch()
        layout.addLayout(header_row)

        self.divider = QFrame()
        self.divider.setFrameShape(QFrame.Shape.HLine)
        self.divider.setFrameShadow(QFrame.Shadow.Sunken)
        self.divider.setObjectName("HeaderDivider")
        layout.addWidget(self.divider)

    def set_title(self, title: str) -> None:
        self.title_label.setText(title)

    def title(self) -> str:
        return self.title_label.text()


def make_toolbar_button(
    text: str,
    *,
    tooltip: str | None = None,
    object_name: str | None = None,
    checkable: bool = False,
) -> QToolButton:
    button = QToolButton()
    button.setText(text)
    button.setCheckable(checkable)
    button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
    if tooltip:
        button.setToolTip(tooltip)
    if object_name:
        button.setObjectName(object_name)
    return button


__all__ = ["SectionHeader", "make_toolbar_button"]
