"""Input validators for the git-get CLI.

Typer option callbacks that reject malformed branch names and subpaths before
the pipeline starts.

Links to third-party package documentation:
- Typer: https://typer.tiangolo.com/

Sample input:
    validate_branch_name("feature/x")
    validate_subpath("lib/util")

Expected output:
    The validated value, or typer.BadParameter with a helpful message
"""

import os
from typing import Optional

import typer
from loguru import logger

INVALID_BRANCH_CHARS = [' ', '~', '^', ':', '?', '*', '[', '\\']

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def validate_branch_name(branch: Optional[str]) -> Optional[str]:
    """Validate a Git branch name.

    Args:
        branch: The branch name to validate (None means "use the default")

    Returns:
        The validated branch name

    Raises:
        typer.BadParameter: If the branch name is invalid
    """
    if branch is None:
        return None

    if not branch:
        raise typer.BadParameter("Branch name cannot be empty")

    # Git branch naming rules (simplified)
    if any(char in branch for char in INVALID_BRANCH_CHARS):
        raise typer.BadParameter(
            f"Invalid branch name '{branch}'. Cannot contain any of these characters: {' '.join(INVALID_BRANCH_CHARS)}"
        )

    if branch.startswith('/') or branch.endswith('/'):
        raise typer.BadParameter(f"Invalid branch name '{branch}'. Cannot start or end with '/'")

    if branch.endswith('.lock'):
        raise typer.BadParameter(f"Invalid branch name '{branch}'. Cannot end with '.lock'")

    if branch in ('.', '..'):
        raise typer.BadParameter(f"Invalid branch name '{branch}'")

    return branch


def validate_subpath(path: Optional[str]) -> Optional[str]:
    """Validate a repository subpath.

    Raises:
        typer.BadParameter: If the path is absolute or escapes the repository
    """
    if path is None:
        return None

    if os.path.isabs(path):
        raise typer.BadParameter(f"Path '{path}' cannot be absolute")

    if '..' in path.replace('\\', '/').split('/'):
        raise typer.BadParameter(f"Path '{path}' cannot contain '..'")

    return path


def validate_log_level(level: str) -> str:
    """Normalize a loguru level name, falling back to WARNING."""
    level = level.upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Invalid log level '{level}'. Defaulting to WARNING.")
        return "WARNING"
    return level
