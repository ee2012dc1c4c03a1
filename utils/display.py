#!/usr/bin/env python3
"""
Display utilities using Rich for terminal output
"""

from pathlib import Path
from typing import List, Dict, Any
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from deocr.batch import BatchReporter
from deocr.models import BatchReport, FileOutcome, TargetStatus

# Status lines go to stdout, failures to stderr
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "cyan",
}


def _print(target: Console, kind: str, message: str) -> None:
    color = COLORS[kind]
    target.print(f"[{color}]{escape(message)}[/{color}]", soft_wrap=True)


def success(message: str) -> None:
    """Display a success message"""
    _print(console, "success", message)


def error(message: str) -> None:
    """Display an error message on stderr"""
    _print(err_console, "error", message)


def warning(message: str) -> None:
    """Display a warning message"""
    _print(console, "warning", message)


def info(message: str) -> None:
    """Display an info message"""
    _print(console, "info", message)


def create_status_table(title: str, data: List[Dict[str, Any]]) -> Table:
    """Create a formatted status table"""
    table = Table(title=title, show_header=True, header_style="bold magenta")

    if data:
        # Add columns based on first item keys
        for key in data[0].keys():
            table.add_column(key.replace("_", " ").title(), style="cyan")

        for item in data:
            table.add_row(*[escape(str(v)) for v in item.values()])

    return table


class ConsoleReporter(BatchReporter):
    """Prints one line per file event, plus a summary for directory runs"""

    def __init__(self, show_summary: bool = True):
        self.show_summary = show_summary

    def output_dir_created(self, path: Path) -> None:
        info(f"Created output directory: {path}")

    def processed(self, outcome: FileOutcome) -> None:
        success(f"Processed: {outcome.path}")

    def process_failed(self, outcome: FileOutcome) -> None:
        error(f"Failed to process: {outcome.path}")

    def deleted(self, outcome: FileOutcome) -> None:
        success(f"Deleted: {outcome.path}")

    def delete_failed(self, outcome: FileOutcome) -> None:
        error(f"Failed to delete: {outcome.path}")

    def skipped(self, path: Path) -> None:
        warning(f"Skipped: {path} is not a PDF file")

    def not_found(self, path: Path) -> None:
        info(f"Path {path} does not exist")

    def unsupported(self, path: Path) -> None:
        info(f"Path {path} is not a file or directory")

    def no_pdfs(self, path: Path) -> None:
        warning(f"No PDF files found in {path}")

    def finished(self, report: BatchReport) -> None:
        if not self.show_summary or report.status is not TargetStatus.DIRECTORY or not report.outcomes:
            return

        rows = [{
            "processed": report.processed_count,
            "failed": report.failed_count,
            "deleted": report.deleted_count,
            "delete_failed": report.delete_failed_count,
        }]
        console.print(create_status_table("deocr summary", rows))
