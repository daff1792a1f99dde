"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from pydantic import ValidationError
from rich.console import Console

from waextractor.export.exceptions import ExportWriteError, InvalidFormatError, InvalidPayloadError
from waextractor.session.exceptions import SessionNotReadyError, SnapshotLoadError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except SnapshotLoadError as e:
        if debug:
            raise
        console.print(f"[bold red]Snapshot Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except SessionNotReadyError as e:
        if debug:
            raise
        console.print(f"[bold red]Not Authenticated:[/bold red] {e}")
        raise typer.Exit(1) from e
    except (InvalidPayloadError, InvalidFormatError) as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Export Request:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ExportWriteError as e:
        if debug:
            raise
        console.print(f"[bold red]Export Failed:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
