# Copyright (c) 2025 Trae AI. All rights reserved.

import logging
import sys
import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ..core.config import Config
from ..core.languages import LANGUAGE_ALIASES
from ..core.models import DirectoryReport
from ..services.link_service import LinkService

app = typer.Typer(
    help="sublink - Expose external subtitles under media server names.\n\n"
    "Usage: sublink link DIR... (each DIR is a folder holding videos)"
)
console = Console()


@app.callback()
def main():
    """
    Symlink subtitles next to their videos as <video>.<language>.<ext>.
    """


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def _summary_table(reports: List[DirectoryReport]) -> Table:
    table = Table(title="Subtitle Links")
    table.add_column("Directory", style="magenta")
    table.add_column("Mode", style="green")
    table.add_column("Subtitles", justify="right")
    table.add_column("Created", style="cyan", justify="right")
    table.add_column("Skipped", style="yellow", justify="right")
    table.add_column("Failed", style="red", justify="right")
    table.add_column("Note")

    for report in reports:
        table.add_row(
            escape(str(report.directory)),
            report.mode.value if report.mode else "-",
            str(report.subtitle_count),
            str(report.created),
            str(report.skipped),
            str(report.failed),
            escape(report.reason or ""),
        )
    return table


def _planned_table(reports: List[DirectoryReport]) -> Table:
    table = Table(title="Planned Links")
    table.add_column("Link", style="yellow")
    table.add_column("Subtitle", style="magenta")
    table.add_column("Status", style="cyan")

    for report in reports:
        for result in report.results:
            table.add_row(
                escape(str(result.assignment.target)),
                escape(str(result.assignment.source)),
                result.status.value,
            )
    return table


@app.command("link")
def link_subtitles(
    directories: List[Path] = typer.Argument(..., help="Directories holding the videos to link subtitles for."),
    config_path: Optional[str] = typer.Option(None, "--config", help="YAML config file."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the links without creating them."),
    relative: bool = typer.Option(False, "--relative", help="Create links relative to the video folder."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every decision."),
):
    """
    Create <video>.<language>.<ext> symlinks for the subtitles found in each directory.
    """
    try:
        config = Config.load(config_path)
    except Exception as e:
        console.print(f"[red]Error loading config:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if relative:
        config.relative_links = True
    setup_logging(verbose or config.verbose)

    service = LinkService(config, dry_run=dry_run)
    reports = service.process(directories)

    if dry_run:
        console.print(_planned_table(reports))
        console.print("[yellow]Dry run completed. No links created.[/yellow]")
        return

    console.print(_summary_table(reports))
    created = sum(r.created for r in reports)
    failed = sum(r.failed for r in reports)
    skipped_dirs = sum(1 for r in reports if r.skipped_directory)
    console.print(f"[green]Successfully created {created} links.[/green]")
    if failed:
        console.print(f"[red]{failed} links could not be created (see log).[/red]")
    if skipped_dirs:
        console.print(f"[yellow]{skipped_dirs} directories were skipped (see log).[/yellow]")


@app.command("languages")
def list_languages():
    """
    List the language labels recognized in subtitle filenames.
    """
    table = Table(title="Recognized Languages")
    table.add_column("Code", style="cyan")
    table.add_column("Labels", style="magenta")
    for code, aliases in sorted(LANGUAGE_ALIASES.items()):
        table.add_row(code, ", ".join(aliases))
    console.print(table)


if __name__ == "__main__":
    app()
