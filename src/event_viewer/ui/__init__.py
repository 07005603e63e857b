"""UI package for the Device Event Viewer."""

from .devices import DeviceDetailView, DeviceListView, DevicesWidget, NavigationPanel
from .main import MainWindow

__all__ = [
    "DeviceDetailView",
    "DeviceListView",
    "DevicesWidget",
    "MainWindow",
    "NavigationPanel",
]
