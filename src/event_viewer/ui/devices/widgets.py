from __future__ import annotations

from PySide6.QtCore import QLocale, Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from event_viewer.api import DataUnavailable
from event_viewer.data import Device
from event_viewer.services import EventHook, ServiceRegistry
from event_viewer.ui.components import (
    InlineStatusMessage,
    SectionHeader,
    StatusLevel,
    UIContext,
    make_toolbar_button,
)
from event_viewer.utils import RenderSequence, get_logger
from event_viewer.utils.errors import describe_exception

from .controller import DeviceController
from .presenters import (
    DEVICE_LIST_HEADING,
    EMPTY_ROSTER_MESSAGE,
    RELOAD_ACTION,
    DetailPresentation,
    DetailState,
    ListState,
    present_device_list,
    present_error,
    present_events,
    present_loading,
    present_placeholder,
    ui_text,
)
from .state import PanelState, SelectionRequested, SelectionState


logger = get_logger(__name__)

DEVICE_ID_ROLE = Qt.ItemDataRole.UserRole
DEVICE_NAME_ROLE = Qt.ItemDataRole.UserRole + 1
ACTIVE_ROLE = Qt.ItemDataRole.UserRole + 2

EVENT_COLUMNS = ("Time", "Event", "Content")


class NavigationPanel(QFrame):
    """Collapsible side panel hosting the device list.

    Only the toggle button and device selection change the expansion state;
    selection can collapse the panel but never expands it.
    """

    expanded_changed = Signal(bool)

    def __init__(self, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("navbar")
        self._state = PanelState()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.toggle_button = make_toolbar_button(
            "☰",
            tooltip="Show or hide the device list",
            object_name="toggleBtn",
        )
        self.toggle_button.clicked.connect(self.toggle)
        layout.addWidget(self.toggle_button, alignment=Qt.AlignmentFlag.AlignLeft)

        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._content_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._content, stretch=1)

        self._apply_state()

    @property
    def expanded(self) -> bool:
        return self._state.expanded

    @property
    def content(self) -> QWidget:
        return self._content

    def set_content(self, widget: QWidget) -> None:
        self._content_layout.addWidget(widget)

    def toggle(self) -> bool:
        expanded = self._state.toggle()
        self._apply_state()
        self.expanded_changed.emit(expanded)
        return expanded

    def collapse(self) -> None:
        if self._state.collapse():
            self._apply_state()
            self.expanded_changed.emit(False)

    def _apply_state(self) -> None:
        expanded = self._state.expanded
        self._content.setVisible(expanded)
        self.setProperty("collapsed", not expanded)
        if expanded:
            self.setMinimumWidth(220)
            self.setMaximumWidth(320)
        else:
            self.setMinimumWidth(0)
            self.setMaximumWidth(self.toggle_button.sizeHint().width() + 16)
        self.style().unpolish(self)
        self.style().polish(self)


class DeviceDetailView(QWidget):
    """Header plus the formatted event log of the selected device."""

    def __init__(
        self,
        controller: DeviceController,
        *,
        locale: QLocale | None = None,
        time_format: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("deviceInfo")
        self._controller = controller
        self._locale = locale
        self._time_format = time_format
        self._sequence = RenderSequence()
        self._presentation = present_placeholder()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self._header = SectionHeader(parent=self)
        self._header.setObjectName("deviceHeader")
        layout.addWidget(self._header)

        self._status = InlineStatusMessage(parent=self)
        layout.addWidget(self._status)

        self._message_label = QLabel()
        self._message_label.setObjectName("detailMessage")
        self._message_label.setWordWrap(True)
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._message_label, stretch=1)

        self._events = QTreeWidget()
        self._events.setObjectName("eventList")
        self._events.setColumnCount(len(EVENT_COLUMNS))
        self._events.setHeaderLabels(list(EVENT_COLUMNS))
        self._events.setRootIsDecorated(False)
        self._events.setUniformRowHeights(True)
        self._events.setAlternatingRowColors(True)
        self._events.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        header = self._events.header()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        layout.addWidget(self._events, stretch=1)

        self._apply(self._presentation)

    # ------------------------------------------------------------------ Public API

    @property
    def presentation(self) -> DetailPresentation:
        return self._presentation

    @property
    def state(self) -> DetailState:
        return self._presentation.state

    @property
    def header_widget(self) -> SectionHeader:
        return self._header

    @property
    def status_message(self) -> InlineStatusMessage:
        return self._status

    @property
    def message_label(self) -> QLabel:
        return self._message_label

    @property
    def event_tree(self) -> QTreeWidget:
        return self._events

    def reset(self) -> None:
        """Show the placeholder and drop any detail render still in flight."""

        self._sequence.invalidate()
        self._apply(present_placeholder())

    async def render_device_detail(
        self, device_id: str, device_name: str
    ) -> DetailPresentation | None:
        """Fetch and render one device's events.

        Returns the applied presentation, or ``None`` when a newer render was
        started before this one's fetch resolved.
        """

        token = self._sequence.issue()
        self._apply(present_loading(device_id, device_name))
        try:
            events = await self._controller.fetch_device_events(device_id)
        except DataUnavailable as exc:
            if not self._sequence.is_current(token):
                logger.debug(
                    "Discarding stale event fetch failure",
                    device_id=device_id,
                    token=token.value,
                )
                return None
            self._apply(present_error(device_id, device_name, describe_exception(exc)))
            raise

        if not self._sequence.is_current(token):
            logger.debug(
                "Discarding stale event fetch result",
                device_id=device_id,
                token=token.value,
                latest=self._sequence.latest,
            )
            return None

        presentation = present_events(
            device_id,
            device_name,
            events,
            locale=self._locale,
            fmt=self._time_format,
        )
        self._apply(presentation)
        return presentation

    # ------------------------------------------------------------------ Rendering

    def _apply(self, presentation: DetailPresentation) -> None:
        self._presentation = presentation

        if presentation.header is not None:
            self._header.set_title(presentation.header.title)
            self._header.setVisible(True)
        else:
            self._header.set_title("")
            self._header.setVisible(False)

        if presentation.state is DetailState.ERROR and presentation.error is not None:
            error = presentation.error
            detail = error.detail
            if error.suggestion:
                detail = f"{detail}\n{error.suggestion}"
            self._status.display(
                error.headline,
                level=StatusLevel.from_severity(error.severity),
                detail=detail,
            )
        else:
            self._status.clear()

        show_message = presentation.state in {
            DetailState.PLACEHOLDER,
            DetailState.LOADING,
            DetailState.EMPTY,
        }
        self._message_label.setText(presentation.message if show_message else "")
        self._message_label.setVisible(show_message)

        self._events.clear()
        for row in presentation.rows:
            item = QTreeWidgetItem([row.time_text, row.type_label, row.content])
            self._events.addTopLevelItem(item)
        self._events.setVisible(presentation.state is DetailState.EVENTS)


class DeviceListView(QWidget):
    """Device roster with a single active entry.

    Clicks are dispatched as :class:`SelectionRequested` events; the view's own
    handler applies the selection transition.
    """

    def __init__(
        self,
        controller: DeviceController,
        detail_view: DeviceDetailView,
        panel: NavigationPanel,
        *,
        context: UIContext,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("deviceList")
        self._controller = controller
        self._detail_view = detail_view
        self._panel = panel
        self._context = context
        self._selection = SelectionState()
        self._sequence = RenderSequence()
        self._list_state = ListState.LOADING

        self.selection_requested: EventHook[SelectionRequested] = EventHook()
        self.selection_requested.subscribe(self._handle_selection)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._heading = SectionHeader(
            ui_text(DEVICE_LIST_HEADING), point_size_delta=2, parent=self
        )
        layout.addWidget(self._heading)

        self._status = InlineStatusMessage(parent=self)
        self._status.action_button.clicked.connect(self._reload)
        layout.addWidget(self._status)

        self._empty_label = QLabel(ui_text(EMPTY_ROSTER_MESSAGE))
        self._empty_label.setObjectName("emptyRoster")
        self._empty_label.setWordWrap(True)
        self._empty_label.setVisible(False)
        layout.addWidget(self._empty_label)

        self._list = QListWidget()
        self._list.setObjectName("deviceItems")
        self._list.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self._list.setWordWrap(True)
        self._list.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self._list, stretch=1)

    # ------------------------------------------------------------------ Public API

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def list_state(self) -> ListState:
        return self._list_state

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    @property
    def status_message(self) -> InlineStatusMessage:
        return self._status

    @property
    def heading(self) -> SectionHeader:
        return self._heading

    def entry_names(self) -> list[str]:
        return [self._list.item(row).text() for row in range(self._list.count())]

    def active_rows(self) -> list[int]:
        return [
            row
            for row in range(self._list.count())
            if self._list.item(row).data(ACTIVE_ROLE)
        ]

    async def render_device_list(self) -> list[Device] | None:
        """Replace the roster with a fresh fetch and reset the detail pane.

        Returns ``None`` when a newer render superseded this one.
        """

        token = self._sequence.issue()
        self._detail_view.reset()
        self._selection.clear()
        self._list.clear()
        self._status.clear()
        self._empty_label.setVisible(False)
        self._list_state = ListState.LOADING

        try:
            devices = await self._controller.fetch_device_list()
        except DataUnavailable as exc:
            if not self._sequence.is_current(token):
                return None
            descriptor = describe_exception(exc)
            self._list_state = ListState.ERROR
            self._status.display(
                descriptor.headline,
                level=StatusLevel.from_severity(descriptor.severity),
                detail=descriptor.detail,
                action_label=ui_text(RELOAD_ACTION),
            )
            raise

        if not self._sequence.is_current(token):
            logger.debug("Discarding stale device roster", token=token.value)
            return None

        for entry in present_device_list(devices):
            item = QListWidgetItem(entry.device_name)
            item.setData(DEVICE_ID_ROLE, entry.device_id)
            item.setData(DEVICE_NAME_ROLE, entry.device_name)
            item.setData(ACTIVE_ROLE, False)
            item.setToolTip(entry.device_id)
            self._list.addItem(item)

        if devices:
            self._list_state = ListState.READY
        else:
            self._list_state = ListState.EMPTY
            self._empty_label.setVisible(True)
        return devices

    def request_selection(self, row: int) -> None:
        """Dispatch a selection for the entry at ``row`` as a click would."""

        item = self._list.item(row)
        if item is None:
            raise IndexError(f"No device entry at row {row}")
        self.selection_requested.emit(
            SelectionRequested(
                device_id=item.data(DEVICE_ID_ROLE),
                device_name=item.data(DEVICE_NAME_ROLE),
                row=row,
            )
        )

    def select_device(
        self,
        device_id: str,
        device_name: str,
        source_item: QListWidgetItem,
    ) -> None:
        for row in range(self._list.count()):
            self._set_active(self._list.item(row), False)
        self._set_active(source_item, True)
        self._selection.select(device_id, self._list.row(source_item))

        self._panel.collapse()
        logger.info("Device selected", device_id=device_id)
        self._context.run_async(
            self._detail_view.render_device_detail(device_id, device_name)
        )

    # ------------------------------------------------------------------ Handlers

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.request_selection(self._list.row(item))

    def _handle_selection(self, event: SelectionRequested) -> None:
        item = self._list.item(event.row)
        if item is None:
            logger.warning("Selection for unknown row ignored", row=event.row)
            return
        self.select_device(event.device_id, event.device_name, item)

    def _reload(self) -> None:
        self._context.run_async(self.render_device_list())

    @staticmethod
    def _set_active(item: QListWidgetItem, active: bool) -> None:
        item.setData(ACTIVE_ROLE, active)
        font = item.font()
        font.setBold(active)
        item.setFont(font)
        item.setSelected(active)


class DevicesWidget(QWidget):
    """Navigation panel with the device list beside the detail pane."""

    def __init__(
        self,
        services: ServiceRegistry,
        *,
        context: UIContext,
        locale: QLocale | None = None,
        time_format: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = DeviceController(services)
        self._context = context

        self.panel = NavigationPanel(parent=self)
        self.detail_view = DeviceDetailView(
            self._controller,
            locale=locale,
            time_format=time_format,
            parent=self,
        )
        self.list_view = DeviceListView(
            self._controller,
            self.detail_view,
            self.panel,
            context=context,
        )
        self.panel.set_content(self.list_view)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.panel)
        layout.addWidget(self.detail_view, stretch=1)

    @property
    def controller(self) -> DeviceController:
        return self._controller

    def reload(self) -> None:
        self._context.run_async(self.list_view.render_device_list())

    def dispose(self) -> None:
        self._controller.dispose()


__all__ = [
    "ACTIVE_ROLE",
    "DEVICE_ID_ROLE",
    "DEVICE_NAME_ROLE",
    "DeviceDetailView",
    "DeviceListView",
    "DevicesWidget",
    "NavigationPanel",
]
