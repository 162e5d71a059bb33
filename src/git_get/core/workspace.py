#!/usr/bin/env python3
"""
Ephemeral workspace

A temporary directory owned by exactly one pipeline run. It is removed on
every exit path of the `with` block: success, early return or exception.
A process killed by a signal leaves it behind.

Sample input:
    with ephemeral_workspace() as workspace:
        ...

Expected output:
    workspace == "/tmp/git-get-k2j3h4"  (gone after the block)
"""

import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger

from git_get.core.config import CONFIG
from git_get.core.errors import WorkspaceCreationError


@contextmanager
def ephemeral_workspace(base_dir: Optional[str] = None) -> Iterator[str]:
    """
    Allocate a disposable staging directory for the duration of the block.

    Raises:
        WorkspaceCreationError: If the temporary directory cannot be created
    """
    try:
        temp_dir = tempfile.TemporaryDirectory(
            prefix=CONFIG["workspace"]["prefix"],
            dir=base_dir or CONFIG["workspace"]["base_dir"],
        )
    except OSError as e:
        raise WorkspaceCreationError(f"Unable to create temporary directory: {e}") from e

    with temp_dir as path:
        logger.debug(f"Created workspace {path}")
        yield path
    logger.debug(f"Removed workspace {path}")
