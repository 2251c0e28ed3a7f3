"""Command-line interface for strokefont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Builds regular and bold fonts from stroke snapshots
- Progress bars for glyph synthesis
- Coverage report of the drawn repertoire
- Verbose/quiet output modes
"""

from strokefont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
