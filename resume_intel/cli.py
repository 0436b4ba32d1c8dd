"""
resume-intel Command Line Interface

Provides CLI commands for running the extraction engine over plain-text
resumes and inspecting the effective configuration.
"""

import json
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-intel",
    help="Resume Text Intelligence Extraction Engine CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Configure logging before any command runs."""
    from resume_intel.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from resume_intel import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective configuration."""
    from resume_intel.utils.config import get_settings

    settings = get_settings()

    table = Table(title="resume-intel Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Cache Size", str(settings.extraction.cache_size))
    table.add_row("Max Text Length", str(settings.extraction.max_text_length))
    table.add_row("Log Level", settings.logging.level)
    table.add_row("Log File", str(settings.logging.file_path) if settings.logging.file_output else "disabled")

    console.print(table)


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Error: --today must be YYYY-MM-DD, got: {value}[/red]")
        raise typer.Exit(1)


def _read_text(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()

    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)
    if not path.is_file():
        console.print(f"[red]Error: Not a file: {path}[/red]")
        raise typer.Exit(1)

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {path}: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def extract(
    path: Path = typer.Argument(..., help="Plain-text resume file, or - for stdin"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the result as JSON"),
    today: Optional[str] = typer.Option(
        None, "--today", help="Date used for open-ended ranges (YYYY-MM-DD)"
    ),
):
    """Extract structured facts from a plain-text resume."""
    from resume_intel.nlp import ResumeExtractor

    text = _read_text(path)
    extractor = ResumeExtractor(today=_parse_today(today), cache_size=0)
    result = extractor.extract(text)

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
        return

    _print_contact(result)
    _print_experience(result)
    _print_work_entries(result)
    _print_sections(result)

    if result.job_titles:
        console.print("\n[bold]Title Candidates:[/bold]")
        for title in result.job_titles:
            console.print(f"  {title}")

    if result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [dim]{warning}[/dim]")


def _print_contact(result) -> None:
    contact = result.contact

    table = Table(title="Contact Information")
    table.add_column("Channel", style="cyan")
    table.add_column("Values", style="green")

    table.add_row("Emails", ", ".join(contact.emails) or "-")
    table.add_row("Phones", ", ".join(contact.phones) or "-")
    table.add_row("LinkedIn", ", ".join(contact.professional_handles) or "-")
    table.add_row("Locations", ", ".join(contact.locations) or "-")

    console.print(table)


def _print_experience(result) -> None:
    experience = result.experience

    console.print("\n[bold]Experience Summary:[/bold]")
    console.print(
        f"  Total: [cyan]{experience.estimated_years}[/cyan] years "
        f"[cyan]{experience.estimated_months}[/cyan] months "
        f"({experience.total_months} months)"
    )
    if experience.earliest_year is not None:
        console.print(f"  Years mentioned: {experience.earliest_year} - {experience.latest_year}")

    if experience.date_ranges:
        table = Table(title="Date Ranges")
        table.add_column("Text", style="cyan")
        table.add_column("Start")
        table.add_column("End")
        table.add_column("Months", justify="right", style="green")

        for date_range in experience.date_ranges:
            table.add_row(
                date_range.raw_text,
                str(date_range.start),
                str(date_range.end),
                str(date_range.months),
            )
        console.print(table)


def _print_work_entries(result) -> None:
    if not result.work_entries:
        return

    table = Table(title="Work Experience")
    table.add_column("Title", style="cyan")
    table.add_column("Company")
    table.add_column("Duration")
    table.add_column("Location")
    table.add_column("Bullets", justify="right", style="green")

    for entry in result.work_entries:
        table.add_row(
            entry.title,
            entry.company or "-",
            entry.duration or "-",
            entry.location or "-",
            str(len(entry.description_bullets)),
        )
    console.print(table)


def _print_sections(result) -> None:
    if not result.sections:
        return

    table = Table(title="Sections")
    table.add_column("Name", style="cyan")
    table.add_column("Lines", justify="right", style="green")
    table.add_column("Preview", style="dim")

    for name, content in result.sections.items():
        lines = content.split("\n")
        preview = lines[0][:60] if lines else ""
        table.add_row(name, str(len(lines)), preview)
    console.print(table)


if __name__ == "__main__":
    app()
