"""Rich renderings of groups and extraction results."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from waextractor.extraction.models import CombinedView, ExtractionResult, GroupResult
from waextractor.session.client import GroupSummary


def groups_table(groups: list[GroupSummary]) -> Table:
    table = Table(title=f"{len(groups)} Groups", show_header=True, header_style="bold cyan")
    table.add_column("Group ID", style="dim", no_wrap=True)
    table.add_column("Name")
    for group in groups:
        table.add_row(group.id, Text(group.name))
    return table


def group_result_table(result: GroupResult) -> Table:
    title = f"{result.group_name} ({result.group_id})"
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Type", style="bold")
    table.add_column("Number / ID", no_wrap=True)
    table.add_column("Name")
    for row in result.numbers:
        table.add_row("[green]number[/green]", row.number, Text(row.name))
    for row in result.hidden_ids:
        table.add_row("[yellow]hidden[/yellow]", row.id, Text(row.name))
    return table


def combined_summary(combined: CombinedView) -> Table:
    table = Table(title="Combined", show_header=True, header_style="bold cyan")
    table.add_column("All", justify="right")
    table.add_column("Numbers", justify="right")
    table.add_column("Hidden", justify="right")
    table.add_row(str(len(combined.all)), str(len(combined.numbers)), str(len(combined.hidden)))
    return table


def render_extraction(console: Console, result: ExtractionResult) -> None:
    for group_result in result.per_group_results:
        if group_result.error is not None:
            console.print(
                Text.assemble(
                    ("Failed: ", "bold red"),
                    f"{group_result.group_id}: {group_result.error}",
                )
            )
            continue
        console.print(group_result_table(group_result))
    console.print(combined_summary(result.combined))
