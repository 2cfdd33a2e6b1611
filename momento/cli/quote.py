"""Quote command for Momento CLI."""

import click
from rich.console import Console
from rich.panel import Panel

console = Console()


@click.command()
def quote() -> None:
    """Show an inspirational quote."""
    from momento.quotes import QuoteProvider

    current = QuoteProvider().fetch_new()
    console.print(Panel(
        f"[italic]\"{current.text}\"[/italic]\n\n[dim]- {current.author}[/dim]",
        title="[bold magenta]Daily Quote[/bold magenta]",
        border_style="magenta",
    ))
