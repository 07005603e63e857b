"""Device Event Viewer: browse keystroke and clipboard events recorded per device."""

__all__ = ["__version__"]

__version__ = "0.1.0"
