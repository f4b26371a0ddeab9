"""Expose the application windows for convenient imports."""

from .main_window import MainWindow
from .logs_dock import LogsWidget

__all__ = [
    "MainWindow",
    "LogsWidget",
]
