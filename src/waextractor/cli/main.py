"""Main Typer application for waextractor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from waextractor.async_utils import run_async_safely
from waextractor.cli.errorhandler import handle_cli_errors
from waextractor.cli.views import groups_table, render_extraction
from waextractor.config.settings import ExtractorSettings, load_settings
from waextractor.export.formatter import parse_payload
from waextractor.export.writer import ExportArtifact, ExportWriter
from waextractor.extraction.models import ExtractionResult
from waextractor.extraction.orchestrator import ExtractionOrchestrator
from waextractor.logging_setup import configure_logging
from waextractor.session.session import Session
from waextractor.session.snapshot import SnapshotClient

app = typer.Typer(
    name="waextractor",
    help="Extract WhatsApp group members and export them as CSV, XLSX or JSON",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

SnapshotArg = Annotated[
    Path,
    typer.Argument(help="Account snapshot JSON file", exists=True, dir_okay=False, readable=True),
]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]
OutputDirOpt = Annotated[
    Path | None,
    typer.Option("--output-dir", "-o", help="Directory for export files", file_okay=False),
]


@app.callback()
def _initialize_cli() -> None:
    """Configure logging before any command runs."""
    configure_logging()


async def _open_session(snapshot: Path, settings: ExtractorSettings) -> Session:
    session = Session(SnapshotClient.from_path(snapshot), settings)
    await session.start()
    return session


def _print_artifact(artifact: ExportArtifact) -> None:
    console.print(f"[green]Exported[/green] {artifact.filename} -> {artifact.path}")


@app.command()
def groups(snapshot: SnapshotArg, debug: DebugOpt = False) -> None:
    """List the groups of the account."""
    with handle_cli_errors(debug=debug):
        settings = load_settings()

        async def _run() -> list:
            session = await _open_session(snapshot, settings)
            return await session.groups()

        found = run_async_safely(_run())
        if not found:
            console.print("[yellow]No groups found[/yellow]")
            return
        console.print(groups_table(found))


@app.command()
def status(snapshot: SnapshotArg, debug: DebugOpt = False) -> None:
    """Show whether the session is authenticated and how many groups it has."""
    with handle_cli_errors(debug=debug):
        settings = load_settings()

        async def _run() -> dict:
            session = await _open_session(snapshot, settings)
            return session.status()

        console.print_json(data=run_async_safely(_run()))


@app.command()
def chats(snapshot: SnapshotArg, debug: DebugOpt = False) -> None:
    """Dump a sample of raw chats for troubleshooting."""
    with handle_cli_errors(debug=debug):
        settings = load_settings()

        async def _run() -> dict:
            session = await _open_session(snapshot, settings)
            return await session.describe_chats()

        console.print_json(data=run_async_safely(_run()))


@app.command()
def extract(
    snapshot: SnapshotArg,
    group: Annotated[
        list[str],
        typer.Option("--group", "-g", help="Group id to extract (repeatable)"),
    ],
    export_format: Annotated[
        str | None,
        typer.Option("--export", "-e", help="Also export combined entries: csv, xlsx or json"),
    ] = None,
    output_dir: OutputDirOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Extract members of the selected groups and preview them."""
    with handle_cli_errors(debug=debug):
        settings = load_settings(export_dir=output_dir)

        async def _run() -> ExtractionResult:
            session = await _open_session(snapshot, settings)
            return await ExtractionOrchestrator(session).extract(group)

        result = run_async_safely(_run())
        render_extraction(console, result)

        if export_format is None:
            return
        if not result.combined.all:
            console.print("[yellow]Nothing to export[/yellow]")
            raise typer.Exit(1)
        artifact = ExportWriter(settings).write(result.combined.all, export_format)
        _print_artifact(artifact)


@app.command()
def export(
    payload_file: Annotated[
        Path,
        typer.Argument(help="JSON file holding an array of records", exists=True, dir_okay=False),
    ],
    export_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="csv, xlsx or json (default from settings)"),
    ] = None,
    output_dir: OutputDirOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Write an export file from a JSON payload of records."""
    with handle_cli_errors(debug=debug):
        settings = load_settings(export_dir=output_dir)
        payload = parse_payload(payload_file.read_text(encoding="utf-8"))
        artifact = ExportWriter(settings).write(payload, export_format)
        _print_artifact(artifact)


def main() -> None:
    app()


__all__ = ["app", "main"]
