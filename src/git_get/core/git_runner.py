#!/usr/bin/env python3
"""
Git command runner

Thin wrapper around subprocess for invoking the git executable in a given
working directory. A non-zero exit status is raised as ExternalToolError with
git's stderr attached verbatim.

Calls block until git exits; there is no timeout.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links to documentation:
- Git: https://git-scm.com/docs
- subprocess: https://docs.python.org/3/library/subprocess.html

Sample input:
    GitRunner().run(["init"], cwd="/tmp/git-get-abc123")

Expected output:
    CompletedProcess(args=['git', 'init'], returncode=0, ...)
"""

import subprocess
from typing import List, Optional, Sequence

from loguru import logger

from git_get.core.config import CONFIG
from git_get.core.errors import ExternalToolError


class GitRunner:
    """Runs git subcommands and raises on failure."""

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or CONFIG["git"]["executable"]

    def command(self, args: Sequence[str]) -> List[str]:
        return [self.executable, *args]

    def run(self, args: Sequence[str], cwd: str) -> subprocess.CompletedProcess:
        """
        Run `git <args>` inside cwd.

        Args:
            args: git subcommand and its arguments
            cwd: Working directory for the process

        Returns:
            The completed process (stdout/stderr captured as text)

        Raises:
            ExternalToolError: If git cannot be started or exits non-zero
        """
        cmd = self.command(args)
        logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd})")

        try:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
        except OSError as e:
            logger.error(f"Unable to execute {' '.join(cmd)}: {e}")
            raise ExternalToolError(cmd, None, str(e)) from e

        if result.returncode != 0:
            logger.debug(f"{' '.join(cmd)} exited {result.returncode}: {result.stderr.strip()}")
            raise ExternalToolError(cmd, result.returncode, result.stderr)

        return result
