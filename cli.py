#!/usr/bin/env python3
"""
deocr CLI - remove OCR text layers from PDF files using Typer
"""

import typer
from pathlib import Path
from rich import print as rprint
from rich.table import Table

from config import settings
from deocr.batch import BatchProcessor
from deocr.engines import build_stripper
from deocr.models import TargetSpec, TargetStatus
from structured_logging import configure_logging, StructuredLogger
from utils.display import console, error, ConsoleReporter

# Initialize Typer app
app = typer.Typer(
    name="deocr",
    help="deocr - Remove the OCR text layer from PDF files",
    add_completion=False,
    rich_markup_mode="rich"
)

app_logger = StructuredLogger('deocr.app')


@app.command()
def strip(
    path: Path = typer.Option(..., "--path", "-p", help="Path to file or directory"),
    delete: bool = typer.Option(False, "--delete", "-d", help="Remove the original PDF file")
):
    """Strip the text layer from a PDF file or every PDF below a directory"""
    configure_logging(settings.log_level, settings.log_dir)

    stripper = build_stripper(settings)
    if settings.require_engine and not stripper.is_available():
        error(f"❌ {stripper.name} executable not found: {settings.ghostscript_executable}")
        raise typer.Exit(1)

    processor = BatchProcessor(
        stripper,
        output_dir_name=settings.output_dir_name,
        skip_output_dirs=settings.skip_output_dirs,
        reporter=ConsoleReporter(),
    )
    report = processor.run(TargetSpec(path=path, delete=delete))
    app_logger.info("Run complete", **report.to_dict())

    if report.status in (TargetStatus.NOT_FOUND, TargetStatus.UNSUPPORTED):
        raise typer.Exit(1)
    if settings.fail_on_error and report.has_failures:
        raise typer.Exit(1)


@app.command()
def config():
    """Show the current deocr configuration"""
    table = Table(title="deocr Configuration", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_column("Type", style="yellow")

    for field_name, field_value in settings.to_display_dict().items():
        table.add_row(
            field_name,
            str(field_value),
            type(field_value).__name__
        )

    console.print(table)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-V", help="Show version")
):
    """deocr - Remove the OCR text layer from PDF files"""
    if version:
        rprint(f"[bold cyan]deocr[/bold cyan] version [bold green]{settings.version}[/bold green]")
        raise typer.Exit()
    elif ctx.invoked_subcommand is None:
        console.print("[bold cyan]deocr[/bold cyan] - Remove the OCR text layer from PDF files")
        console.print("\nUse [bold green]--help[/bold green] to see available commands")
        raise typer.Exit()


def main():
    """Console script entry point"""
    app()


if __name__ == "__main__":
    main()
