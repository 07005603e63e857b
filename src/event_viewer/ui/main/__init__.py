from .window import MainWindow

__all__ = ["MainWindow"]
