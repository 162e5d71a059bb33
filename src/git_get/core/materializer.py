#!/usr/bin/env python3
"""
Materializer

Copies the staged subtree (or whole checkout) into the destination, skipping
the .git metadata directory wherever it appears. The destination directory is
created when missing and reused when the destination guard already found it
empty. Symbolic links are reproduced as links and never followed, so nothing
outside the checkout ends up in the destination.

A failed copy is not rolled back; the destination may be left partially
populated.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links to documentation:
- shutil.copytree: https://docs.python.org/3/library/shutil.html#shutil.copytree

Sample input:
    materialize("/tmp/git-get-x/lib/util", "util")

Expected output:
    CopyStats(file_count=12, total_size=48213)
"""

import os
import shutil

from loguru import logger

from git_get.core.config import GIT_METADATA_DIR
from git_get.core.errors import CopyFailedError
from git_get.core.models import CopyStats


def collect_stats(root: str) -> CopyStats:
    """Count files and bytes under root, ignoring git metadata."""
    file_count = 0
    total_size = 0
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d != GIT_METADATA_DIR]
        for filename in filenames:
            file_count += 1
            total_size += os.lstat(os.path.join(dirpath, filename)).st_size
    return CopyStats(file_count=file_count, total_size=total_size)


def materialize(source_root: str, destination: str) -> CopyStats:
    """
    Copy source_root into destination without version-control metadata.

    A source_root that is a single file (or a symbolic link) is copied into
    the destination directory.

    Raises:
        CopyFailedError: If any entry cannot be read or written
    """
    logger.info(f"Copying {source_root} -> {destination}")

    try:
        os.makedirs(destination, exist_ok=True)
        if os.path.isdir(source_root) and not os.path.islink(source_root):
            shutil.copytree(
                source_root,
                destination,
                symlinks=True,
                ignore=shutil.ignore_patterns(GIT_METADATA_DIR),
                dirs_exist_ok=True,
            )
        else:
            shutil.copy2(
                source_root,
                os.path.join(destination, os.path.basename(source_root)),
                follow_symlinks=False,
            )
        stats = collect_stats(destination)
    except (OSError, shutil.Error) as e:
        logger.error(f"Copy into {destination} failed: {e}")
        raise CopyFailedError(f"Unable to copy files into {destination}: {e}") from e

    logger.debug(f"Copied {stats.file_count} files ({stats.total_size} bytes)")
    return stats
