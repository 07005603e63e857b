"""Reusable UI components for the Device Event Viewer."""

from .context import RunAsyncCallable, ShowStatusCallable, UIContext
from .layouts import SectionHeader, make_toolbar_button
from .status import InlineStatusMessage, StatusLevel

__all__ = [
    "UIContext",
    "RunAsyncCallable",
    "ShowStatusCallable",
    "SectionHeader",
    "make_toolbar_button",
    "InlineStatusMessage",
    "StatusLevel",
]
