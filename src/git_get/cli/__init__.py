"""CLI layer for git-get.

This module provides the command-line interface for git-get, using Typer for
the command definition and Rich for formatted console output.

Links to third-party package documentation:
- Typer: https://typer.tiangolo.com/
- Rich: https://rich.readthedocs.io/en/latest/

Exports:
- app: The Typer application instance
- formatters: Rich-based formatters and the console progress observer
- validators: Option validation callbacks

Usage example:
    >>> from git_get.cli import app
    >>> app()  # Run the CLI application
"""

from .app import app
from . import formatters
from . import validators

__all__ = ["app", "formatters", "validators"]
