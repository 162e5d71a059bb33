#!/usr/bin/env python3
"""
Ignore Registrar

Appends the destination to an existing .gitignore so the retrieved files do
not end up tracked by the caller's own repository. The file is never created
and existing lines are never touched; running twice is a no-op.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    register_ignore("./vendor/util")

Expected output (appended to .gitignore, returns True):

    # Added by git-get
    vendor/util
"""

import os
from typing import Optional

from loguru import logger

from git_get.core.config import CONFIG
from git_get.core.errors import IgnoreFileError


def normalize_ignore_entry(destination: str) -> str:
    """Strip a leading ./ so entries are written consistently."""
    while destination.startswith("./"):
        destination = destination[2:]
    return destination


def is_registered(content: str, entry: str) -> bool:
    """True if a non-comment line already names entry (with or without ./)."""
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped in (entry, f"./{entry}"):
            return True
    return False


def register_ignore(destination: str, base_dir: Optional[str] = None) -> bool:
    """
    Add destination to the ignore file in base_dir, if that file exists.

    Args:
        destination: Destination path as the user gave it
        base_dir: Directory holding the ignore file (defaults to the cwd)

    Returns:
        True if a new entry was appended, False otherwise

    Raises:
        IgnoreFileError: If the ignore file cannot be read or written
    """
    ignore_path = os.path.join(base_dir or os.getcwd(), CONFIG["ignore"]["filename"])
    if not os.path.isfile(ignore_path):
        return False

    entry = normalize_ignore_entry(destination)

    try:
        with open(ignore_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(f"Unable to read {ignore_path}: {e}") from e

    if is_registered(content, entry):
        logger.debug(f"{entry} already listed in {ignore_path}")
        return False

    addition = ""
    if content and not content.endswith("\n"):
        addition += "\n"
    addition += f"\n{CONFIG['ignore']['comment']}\n{entry}\n"

    try:
        with open(ignore_path, "a", encoding="utf-8", newline="") as f:
            f.write(addition)
    except OSError as e:
        raise IgnoreFileError(f"Unable to write {ignore_path}: {e}") from e

    logger.info(f"Added '{entry}' to {ignore_path}")
    return True
