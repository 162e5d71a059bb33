"""Command-line interface for git-get.

This module provides the Typer-based `git-get` command, which downloads a single
subdirectory (or a whole repository) from GitHub without leaving any .git
metadata behind.

Links to third-party package documentation:
- Typer: https://typer.tiangolo.com/
- Rich: https://rich.readthedocs.io/en/latest/
- Loguru: https://loguru.readthedocs.io/en/stable/

Sample input:
    $ git-get https://github.com/acme/tools/tree/dev/lib/util
    $ git-get --repo acme/tools --path lib/util --dest vendor/util
    $ git-get acme/tools --json

Expected output:
    ✅ Done! Subdirectory copied to: util
    ✅ Done! Subdirectory copied to: vendor/util
    {"request": {...}, "destination": "tools", ...}

Exit codes: 0 on success, 1 when the retrieval fails, 2 when the files were
copied but .gitignore could not be updated.
"""

import sys
from typing import Optional

import typer
from loguru import logger

from git_get import __version__
from git_get.core.config import CONFIG
from git_get.core.errors import IgnoreFileError, RetrievalError
from git_get.core.observer import ProgressObserver
from git_get.core.pipeline import retrieve

from .formatters import ConsoleObserver, console, print_error, print_retrieval_summary
from .validators import validate_branch_name, validate_log_level, validate_subpath

EXIT_RETRIEVAL_FAILED = 1
EXIT_IGNORE_FILE_FAILED = 2

# Create Typer app
app = typer.Typer(
    name="git-get",
    help="Download a subdirectory or a whole repository from GitHub without its .git metadata",
    rich_markup_mode="rich",
    add_completion=False
)


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the requested level."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=level,
        format=CONFIG["logging"]["format"],
        backtrace=False,
        diagnose=False,
    )


def version_callback(value: bool) -> None:
    if value:
        console.print(f"git-get {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: Optional[str] = typer.Argument(
        None,
        metavar="URL",
        help="GitHub URL, e.g. https://github.com/owner/repo/tree/main/examples/servers, or owner/repo"
    ),
    repo: Optional[str] = typer.Option(
        None,
        "--repo", "-r",
        help="Repository: owner/repo, https://github.com/owner/repo.git or a full tree URL"
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch", "-b",
        callback=validate_branch_name,
        help="Branch name (extracted automatically from tree URLs; defaults to main)"
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path", "-p",
        callback=validate_subpath,
        help="Subdirectory inside the repository (omit for the whole repository)"
    ),
    dest: Optional[str] = typer.Option(
        None,
        "--dest", "-d",
        help="Local destination (defaults to the last segment of the path or the repository name)"
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        envvar="GITHUB_TOKEN",
        help="GitHub access token (reserved for private repositories)"
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON"
    ),
    no_gitignore: bool = typer.Option(
        False,
        "--no-gitignore",
        help="Do not add the destination to an existing .gitignore"
    ),
    log_level: str = typer.Option(
        CONFIG["logging"]["level"],
        "--log-level", "-l",
        envvar="LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
) -> None:
    """Download a GitHub subdirectory (or whole repository) into a local directory.

    Examples:
        [bold]$ git-get https://github.com/owner/repo/tree/main/path/to/dir[/bold]

        [bold]$ git-get --repo owner/repo --path path/to/dir[/bold]

        [bold]$ git-get owner/repo --branch develop --dest vendor/repo[/bold]
    """
    configure_logging(validate_log_level(log_level))

    observer = ProgressObserver() if json_output else ConsoleObserver()

    try:
        result = retrieve(
            url=url,
            repo=repo,
            branch=branch,
            path=path,
            dest=dest,
            token=token,
            observer=observer,
            update_ignore=not no_gitignore,
        )
    except IgnoreFileError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_IGNORE_FILE_FAILED)
    except RetrievalError as e:
        logger.debug(f"Retrieval failed ({e.kind})")
        print_error(str(e))
        raise typer.Exit(code=EXIT_RETRIEVAL_FAILED)

    if json_output:
        console.print_json(result.model_dump_json())
    else:
        print_retrieval_summary(result)


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
