"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Annotated

import pendulum
import typer
from pendulum import DateTime, WeekDay
from rich.console import Console
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import LunchTimeError
from ..services.lunch_time import LunchTimeService

app = typer.Typer(
    name="lunchtime",
    help="Measure how much of a time span falls into the daily lunch break",
    add_completion=False
)

console = Console()


def _parse_timestamp(value: str, label: str) -> DateTime:
    """Parse a wall-clock timestamp; the time zone, if any, is dropped."""
    try:
        return pendulum.parse(value).naive()
    except Exception as e:
        console.print(f"[red]Could not parse {label} '{value}': {e}[/red]")
        raise typer.Exit(1)


def _format_minutes(duration) -> str:
    minutes = duration.total_seconds() / 60
    if minutes == int(minutes):
        return f"{int(minutes)} min"
    return f"{minutes:.2f} min"


def _load_config(config_file: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def compute(
    start: Annotated[str, typer.Argument(help="Span start, e.g. '2018-08-10 09:00'")],
    end: Annotated[str, typer.Argument(help="Span end, e.g. '2018-08-10 18:30'")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./lunchtime.yaml")] = None,
    holiday: Annotated[Optional[List[str]], typer.Option("--holiday", help="Extra holiday (YYYY-MM-DD). Repeatable.")] = None,
    net: Annotated[bool, typer.Option("--net", help="Also show the span length minus lunch time.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log the per-day breakdown.")] = False,
):
    """
    Compute the lunch time inside a span.

    Examples:

        lunchtime compute "2018-08-10 12:00" "2018-08-10 18:30"

        lunchtime compute "2018-12-24 09:30" "2018-12-26 18:30" --holiday 2018-12-25
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = _load_config(config_file)
    calculator = config.build_calculator()

    for value in holiday or []:
        calculator.holidays.append(_parse_timestamp(value, "holiday").date())

    span_start = _parse_timestamp(start, "start")
    span_end = _parse_timestamp(end, "end")

    service = LunchTimeService(calculator)
    try:
        lunch = service.lunch_time(span_start, span_end)
    except LunchTimeError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(
        f"Lunch time {span_start.format('DD.MM.YYYY HH:mm')} - "
        f"{span_end.format('DD.MM.YYYY HH:mm')}: [bold green]{_format_minutes(lunch)}[/bold green]"
    )
    if net:
        net_time = service.net_working_time(span_start, span_end)
        console.print(f"Net working time: [bold]{_format_minutes(net_time)}[/bold]")


@app.command()
def show_config(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    Show the lunch window, work days and holidays in effect.
    """
    config = _load_config(config_file)
    calculator_config = config.to_calculator_config()

    window = calculator_config.window
    console.print(
        f"\n[bold]Lunch window:[/bold] {window} ({_format_minutes(window.duration())})"
    )
    if not calculator_config.inclusive_end_minute:
        console.print("[dim]Inclusive end minute disabled[/dim]")

    table = Table(
        title="Work days",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Weekday", style="bold yellow")
    table.add_column("Counts")

    work_weekdays = calculator_config.weekdays.work_weekdays()
    for day in WeekDay:
        counts = day in work_weekdays
        table.add_row(day.name.capitalize(), "[green]yes[/green]" if counts else "[dim]no[/dim]")

    console.print()
    console.print(table)

    if calculator_config.holidays:
        console.print("\n[bold]Holidays:[/bold]")
        for day in calculator_config.holidays:
            console.print(f"  {day.isoformat()}")
    else:
        console.print("\n[yellow]No holidays configured.[/yellow]")
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]lunchtime[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
