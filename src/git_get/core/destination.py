#!/usr/bin/env python3
"""
Destination Guard

Checks that the local destination can be written without overwriting anything:
it must either not exist, or be an existing empty directory. Runs before any
git process is started.

A directory holding only hidden entries (.DS_Store, .keep, ...) is not empty.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    check_destination("vendor/util")

Expected output:
    None, or DestinationIsFileError / DestinationNotEmptyError
"""

import os

from loguru import logger

from git_get.core.errors import CopyFailedError, DestinationIsFileError, DestinationNotEmptyError


def check_destination(destination: str) -> None:
    """
    Fail fast if writing into destination could clobber existing data.

    Raises:
        DestinationIsFileError: If the path exists and is not a directory
        DestinationNotEmptyError: If the path is a directory with any entry
        CopyFailedError: If the directory cannot be listed
    """
    if not os.path.lexists(destination):
        return

    if not os.path.isdir(destination):
        logger.error(f"Destination is not a directory: {destination}")
        raise DestinationIsFileError(destination)

    try:
        with os.scandir(destination) as entries:
            has_entries = any(True for _ in entries)
    except OSError as e:
        raise CopyFailedError(f"Unable to read destination directory {destination}: {e}") from e

    if has_entries:
        logger.error(f"Destination is not empty: {destination}")
        raise DestinationNotEmptyError(destination)

    logger.debug(f"Reusing existing empty directory: {destination}")
