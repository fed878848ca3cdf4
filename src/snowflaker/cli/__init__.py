"""Command-line interface for snowflaker.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Sequential or parallel generation with timing
- Strategy comparison mode
- JSON point output
"""

from snowflaker.cli.app import cli, main

__all__ = ["cli", "main"]
