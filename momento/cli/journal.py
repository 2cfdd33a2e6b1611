"""Journal commands for Momento CLI.

Handles photo capture, the monthly recap and the archive by month.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_session():
    """Open a journal session from config."""
    from momento.config import load_config
    from momento.journal.session import JournalSession

    return JournalSession.open(load_config())


def _entries_table(title: str, entries: list) -> Table:
    table = Table(title=title)
    table.add_column("Captured", style="cyan", no_wrap=True)
    table.add_column("Image")
    table.add_column("ID", style="dim")
    for entry in entries:
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d %H:%M"),
            entry.image_ref,
            entry.id[:8],
        )
    return table


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--date", "on_date",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M"]),
    default=None,
    help="Capture time (YYYY-MM-DD or YYYY-MM-DDTHH:MM, default: now).",
)
def capture(image: Path, on_date: Optional[datetime]) -> None:
    """Add a photo to your journal.

    IMAGE is the path of the photo to store.

    \b
    Examples:
      momento capture ~/Pictures/sunset.jpg
      momento capture beach.jpg --date 2025-03-01
    """
    data = image.read_bytes()
    if not data:
        console.print(Panel(
            f"[red]Image file is empty:[/red] {image}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    with _get_session() as session:
        entry = session.capture(data, on_date)
        results = session.wait_for_uploads()

    uploaded = results and results[0].success
    status = (
        "[green]Image stored.[/green]" if uploaded
        else "[yellow]Entry saved, but the image upload failed.[/yellow]"
    )
    console.print(Panel(
        f"Captured [bold]{entry.timestamp.strftime('%Y-%m-%d %H:%M')}[/bold]\n"
        f"Image: {entry.image_ref}\n\n{status}",
        title="[bold green]New Journal Entry[/bold green]",
        border_style="green",
    ))


@click.command()
@click.option(
    "--date", "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Any day in the month to recap (YYYY-MM-DD, default: today).",
)
def recap(on_date: Optional[datetime]) -> None:
    """Show this month's journal entries.

    \b
    Examples:
      momento recap
      momento recap --date 2025-03-01
    """
    from momento.recap.grouping import month_label

    reference = on_date.date() if on_date else date.today()
    label = month_label(reference)

    with _get_session() as session:
        entries = session.month_entries(reference)
        records = session.recent_moods(reference, reference.day - 1)

    if not entries:
        console.print(Panel(
            f"[dim]No journal entries for {label}[/dim]\n\n"
            "[dim]Run 'momento capture <image>' to add one[/dim]",
            title="[bold]Monthly Recap[/bold]",
            border_style="dim",
        ))
        return

    console.print(_entries_table(f"Monthly Recap - {label}", entries))
    if records:
        mean = sum(r.rating for r in records) / len(records)
        console.print(f"[bold]Mood check-ins:[/bold] {len(records)}  [bold]Mean:[/bold] {mean:.1f}")


@click.command()
def archive() -> None:
    """Show every journal entry grouped by month, newest first."""
    with _get_session() as session:
        grouper = session.recap()

    if grouper.is_empty:
        console.print(Panel(
            "[dim]Your journal archive is empty[/dim]\n\n"
            "[dim]Run 'momento capture <image>' to add an entry[/dim]",
            title="[bold]Journal Archive[/bold]",
            border_style="dim",
        ))
        return

    for bucket in grouper.buckets():
        console.print(_entries_table(f"{bucket.label} ({len(bucket.entries)})", list(bucket.entries)))
