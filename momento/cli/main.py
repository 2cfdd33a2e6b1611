"""Main CLI entry point for Momento.

This module provides the main click group and lazy loading
of command modules.
"""

import importlib
import logging

import click
from rich.console import Console

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """Click group whose subcommands are imported on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        module_path = self._lazy_subcommands.get(cmd_name)
        if cmd_name in self.commands or module_path is None:
            return super().get_command(ctx, cmd_name)

        # each command is a module attribute named after it
        cmd = getattr(importlib.import_module(module_path), cmd_name, None)
        if not isinstance(cmd, click.Command):
            raise click.ClickException(f"{module_path} has no command '{cmd_name}'")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "momento.cli.settings",
    "checkin": "momento.cli.mood",
    "trend": "momento.cli.mood",
    "capture": "momento.cli.journal",
    "recap": "momento.cli.journal",
    "archive": "momento.cli.journal",
    "quote": "momento.cli.quote",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="momento")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Momento - capture your moments, moods, and memories.

    Rate your mood once a day, keep photos as journal entries,
    and look back with monthly recaps and a mood trend.

    \b
    Quick Start:
      momento init             # Create a config file
      momento checkin 7        # Rate today's mood
      momento capture pic.jpg  # Add a photo entry
      momento recap            # This month's entries
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
