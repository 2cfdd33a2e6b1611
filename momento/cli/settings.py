"""Settings commands for Momento CLI."""

import click
from rich.console import Console
from rich.panel import Panel

console = Console()


@click.command()
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing config file.",
)
def init(force: bool) -> None:
    """Create a template configuration file.

    \b
    Examples:
      momento init          # Write ~/.config/momento/config.toml
      momento init --force  # Overwrite an existing file
    """
    from momento.config import create_template_config, get_config_path

    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] {config_path}\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Init[/bold yellow]",
            border_style="yellow",
        ))
        return

    path = create_template_config(config_path)
    console.print(Panel(
        f"[green]Config written to[/green] {path}",
        title="[bold green]Init[/bold green]",
        border_style="green",
    ))
