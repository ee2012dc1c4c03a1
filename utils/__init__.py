"""Utility modules for deocr"""

from .display import (
    success, error, warning, info,
    create_status_table, ConsoleReporter
)

__all__ = [
    "success", "error", "warning", "info",
    "create_status_table", "ConsoleReporter"
]
