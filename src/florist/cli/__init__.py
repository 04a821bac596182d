"""Command-line interface for florist.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Seeded, reproducible generation
- JSON export of resolved shapes
- Character preview of the visible regions
- Verbose/quiet output modes
"""

from florist.cli.app import cli, main

__all__ = ["cli", "main"]
