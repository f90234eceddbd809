"""Command-line interface for font2css.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Files, directories and glob patterns as input
- Embedded data URIs or external --dest references
- Per-file error reporting without aborting the run
- Optional single-file bundle output
"""

from font2css.cli.app import cli, main

__all__ = ["cli", "main"]
