"""Mood commands for Momento CLI.

Handles the daily mood check-in and the mood trend view.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_config() -> dict:
    """Lazily load configuration."""
    from momento.config import load_config

    return load_config()


def _get_session(config: dict):
    """Open a journal session from config."""
    from momento.journal.session import JournalSession

    return JournalSession.open(config)


def _mood_bar(rating: int, max_rating: int, width: int = 20) -> str:
    """Render a rating as a fixed-width bar."""
    if max_rating <= 0:
        return ""
    filled = round(width * max(rating, 0) / max_rating)
    return "█" * filled + "·" * (width - filled)


@click.command()
@click.argument("rating", type=int)
@click.option(
    "--date", "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day to record (YYYY-MM-DD, default: today).",
)
def checkin(rating: int, on_date: Optional[datetime]) -> None:
    """Rate your mood for the day.

    RATING is a whole number on the configured scale (default 0-10).
    Checking in again on the same day replaces the earlier rating.
    Negative values must follow -- so they are not read as options.

    \b
    Examples:
      momento checkin 7
      momento checkin 4 --date 2025-03-01
    """
    config = _get_config()
    min_rating = config["mood"]["min_rating"]
    max_rating = config["mood"]["max_rating"]

    if not min_rating <= rating <= max_rating:
        console.print(Panel(
            f"[red]Rating must be between {min_rating} and {max_rating}.[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    day = on_date.date() if on_date else date.today()

    with _get_session(config) as session:
        replaced = session.ledger.get(day)
        record = session.record_mood(rating, day)

    verb = "Updated" if replaced else "Recorded"
    console.print(Panel(
        f"{verb} mood for [bold]{record.day.isoformat()}[/bold]\n\n"
        f"[cyan]{_mood_bar(record.rating, max_rating)}[/cyan] {record.rating}/{max_rating}",
        title="[bold green]Mood Check-in[/bold green]",
        border_style="green",
    ))


@click.command()
@click.option(
    "--days",
    type=click.IntRange(min=0),
    default=None,
    help="Number of days to look back (default from config, 30).",
)
@click.option(
    "--date", "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Last day of the window (YYYY-MM-DD, default: today).",
)
def trend(days: Optional[int], on_date: Optional[datetime]) -> None:
    """Show your mood trend over recent days.

    \b
    Examples:
      momento trend
      momento trend --days 7
    """
    from momento.recap.trend import is_nan, mood_trend, summarize_moods

    config = _get_config()
    mood_config = config["mood"]
    window = days if days is not None else mood_config["trend_window_days"]
    reference = on_date.date() if on_date else date.today()

    with _get_session(config) as session:
        records = session.recent_moods(reference, window)

    if not records:
        console.print(Panel(
            f"[dim]No mood check-ins in the last {window} days[/dim]\n\n"
            "[dim]Run 'momento checkin <rating>' to start tracking[/dim]",
            title="[bold]Mood Trend[/bold]",
            border_style="dim",
        ))
        return

    max_rating = mood_config["max_rating"]
    table = Table(title=f"Mood Trend - last {window} days")
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Rating", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("")

    for point in mood_trend(records, mood_config["trend_smoothing"]):
        avg = "-" if is_nan(point.average) else f"{point.average:.1f}"
        table.add_row(
            point.day.isoformat(),
            str(point.rating),
            avg,
            _mood_bar(point.rating, max_rating),
        )

    console.print(table)

    summary = summarize_moods(records)
    console.print(
        f"[bold]Check-ins:[/bold] {summary['count']}  "
        f"[bold]Mean:[/bold] {summary['mean']:.1f}  "
        f"[bold]Range:[/bold] {summary['min']}-{summary['max']}"
    )
