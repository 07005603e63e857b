from .controller import DeviceController
from .widgets import DeviceDetailView, DeviceListView, DevicesWidget, NavigationPanel

__all__ = [
    "DeviceController",
    "DeviceDetailView",
    "DeviceListView",
    "DevicesWidget",
    "NavigationPanel",
]
