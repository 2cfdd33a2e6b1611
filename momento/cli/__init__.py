"""CLI commands for Momento.

This package provides the command-line interface for Momento,
including mood check-ins, photo capture, recaps and quotes.
"""

from momento.cli.main import cli, main

__all__ = ["cli", "main"]
