"""Rich-based formatters for CLI output in git-get.

This module provides formatted console output for the git-get CLI using the Rich
library, plus the ConsoleObserver that routes pipeline progress to the console.

Links to third-party package documentation:
- Rich: https://rich.readthedocs.io/en/latest/
- Rich Console: https://rich.readthedocs.io/en/latest/console.html

Sample input:
    print_success("Subdirectory copied to: util")
    print_error("Destination directory already exists and is not empty: util")

Expected output:
    ✅ Subdirectory copied to: util
    ❌ Error: Destination directory already exists and is not empty: util
"""

from rich.console import Console
from rich.filesize import decimal
from rich.panel import Panel
from rich.text import Text
from loguru import logger

from git_get.core.models import RetrievalResult
from git_get.core.observer import ProgressObserver

# Create console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message to the console with a green checkmark.

    Args:
        message: The success message to display
    """
    console.print(Text.assemble("✅ ", (message, "bold green")))
    logger.debug(message)


def print_error(message: str) -> None:
    """Print an error message to the console with a red X.

    Args:
        message: The error message to display
    """
    console.print(Text.assemble("❌ ", ("Error:", "bold red"), f" {message}"))
    logger.debug(message)


def print_warning(message: str) -> None:
    """Print a warning message to the console with a yellow warning sign."""
    console.print(Text.assemble("⚠️  ", ("Warning:", "bold yellow"), f" {message}"))
    logger.debug(message)


def print_info(message: str) -> None:
    console.print(Text.assemble("ℹ️  ", message))
    logger.debug(message)


def print_retrieval_summary(result: RetrievalResult) -> None:
    """Print a summary panel for a finished retrieval.

    Args:
        result: The pipeline result
    """
    request = result.request
    panel = Panel(
        Text.from_markup(
            f"[bold blue]Repository:[/] {result.clone_url}\n"
            f"[bold blue]Branch:[/] {result.fetched_branch}\n"
            f"[bold blue]Subdirectory:[/] {request.subpath or '<whole repository>'}\n"
            f"[bold blue]Destination:[/] {result.destination}\n"
            f"[bold blue]Files:[/] {result.file_count}\n"
            f"[bold blue]Total Size:[/] {decimal(result.total_size)}"
        ),
        title="Retrieval Summary",
        border_style="green"
    )
    console.print(panel)


class ConsoleObserver(ProgressObserver):
    """Pipeline observer that renders progress on the Rich console."""

    def info(self, message: str) -> None:
        print_info(message)

    def warning(self, message: str) -> None:
        print_warning(message)

    def success(self, message: str) -> None:
        print_success(message)
