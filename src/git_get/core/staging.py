#!/usr/bin/env python3
"""
Staging Orchestrator

Populates an ephemeral workspace with exactly the requested content using a
depth-1 fetch, plus sparse checkout when only a subdirectory is wanted:

    git init
    git remote add origin <url>
    git config core.sparseCheckout true      (subpath only)
    write .git/info/sparse-checkout          (subpath only)
    git fetch --depth=1 origin <branch>      (main -> master retried once)
    git checkout FETCH_HEAD

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links to documentation:
- git sparse-checkout: https://git-scm.com/docs/git-sparse-checkout
- git fetch: https://git-scm.com/docs/git-fetch

Sample input:
    stage_repository("/tmp/git-get-x", CloneTarget(clone_url="https://github.com/acme/tools.git"),
                     "dev", "lib/util")

Expected output:
    StagingOutcome(fetched_branch='dev', source_root='/tmp/git-get-x/lib/util')
"""

import os
import re
from typing import Optional

from loguru import logger

from git_get.core.config import CONFIG, DEFAULT_BRANCH, FALLBACK_BRANCH, GIT_METADATA_DIR
from git_get.core.errors import (
    ExternalToolError,
    FetchFailedError,
    SubpathNotFoundError,
    WorkspaceCreationError,
)
from git_get.core.git_runner import GitRunner
from git_get.core.models import CloneTarget, StagingOutcome
from git_get.core.observer import ProgressObserver

# Characters git reads as wildcards or escapes in sparse-checkout patterns
PATTERN_SPECIAL_CHARS = re.compile(r"([\\\[\]*?])")


def sparse_pattern(subpath: str) -> str:
    """
    Turn a repository-relative path into a pattern matching only that path.

    The pattern is anchored at the repository root, which also keeps a
    leading "#" or "!" from reading as a comment or a negation.
    """
    return "/" + PATTERN_SPECIAL_CHARS.sub(r"\\\1", subpath)


def write_sparse_checkout(workspace: str, subpath: str) -> str:
    """Write the single sparse-checkout pattern and return the file path."""
    sparse_file = os.path.join(workspace, GIT_METADATA_DIR, "info", "sparse-checkout")
    try:
        os.makedirs(os.path.dirname(sparse_file), exist_ok=True)
        with open(sparse_file, "w", encoding="utf-8") as f:
            f.write(f"{sparse_pattern(subpath)}\n")
    except OSError as e:
        raise WorkspaceCreationError(f"Unable to write sparse-checkout configuration: {e}") from e
    return sparse_file


def fetch_branch(
    runner: GitRunner,
    workspace: str,
    branch: str,
    observer: ProgressObserver,
    default_branch: str = DEFAULT_BRANCH,
) -> str:
    """
    Fetch `branch` at depth 1, falling back to master once for the default branch.

    Returns:
        The branch that was actually fetched

    Raises:
        FetchFailedError: If the fetch (and the fallback, if any) failed
    """
    remote = CONFIG["git"]["remote_name"]
    tried = [branch]
    try:
        runner.run(["fetch", "--depth=1", remote, branch], cwd=workspace)
        return branch
    except ExternalToolError as e:
        if branch != default_branch:
            raise FetchFailedError(e.command, e.returncode, e.stderr, tried) from e
        logger.debug(f"Fetch of '{branch}' failed: {e.stderr}")

    observer.warning(f"Branch '{branch}' does not exist, trying '{FALLBACK_BRANCH}'...")
    tried.append(FALLBACK_BRANCH)
    try:
        runner.run(["fetch", "--depth=1", remote, FALLBACK_BRANCH], cwd=workspace)
    except ExternalToolError as e:
        raise FetchFailedError(e.command, e.returncode, e.stderr, tried) from e
    return FALLBACK_BRANCH


def stage_repository(
    workspace: str,
    target: CloneTarget,
    branch: str,
    subpath: Optional[str] = None,
    token: Optional[str] = None,
    runner: Optional[GitRunner] = None,
    observer: Optional[ProgressObserver] = None,
) -> StagingOutcome:
    """
    Check out the requested branch (and subpath) into workspace.

    Args:
        workspace: Empty directory owned by the caller
        target: Clone URL to fetch from
        branch: Branch to fetch
        subpath: Restrict the checkout to this directory (None for everything)
        token: Accepted for private repositories; not used yet
        runner: Git runner (defaults to GitRunner())
        observer: Progress observer (defaults to loguru)

    Returns:
        StagingOutcome with the fetched branch and the directory to copy from

    Raises:
        ExternalToolError: If any git step fails
        FetchFailedError: If the branch cannot be fetched
        SubpathNotFoundError: If subpath is absent after checkout
    """
    runner = runner or GitRunner()
    observer = observer or ProgressObserver()
    if token:
        logger.debug("Access token supplied; private repository authentication is not implemented")

    observer.info("Initializing repository...")
    runner.run(["init"], cwd=workspace)
    runner.run(["remote", "add", CONFIG["git"]["remote_name"], target.clone_url], cwd=workspace)

    if subpath:
        runner.run(["config", "core.sparseCheckout", "true"], cwd=workspace)
        write_sparse_checkout(workspace, subpath)
        observer.info("Fetching repository (requested subdirectory only)...")
    else:
        observer.info("Fetching repository (whole repository)...")

    fetched = fetch_branch(runner, workspace, branch, observer)
    runner.run(["checkout", "FETCH_HEAD"], cwd=workspace)
    observer.info("Fetch complete")

    source_root = workspace
    if subpath:
        source_root = os.path.join(workspace, *subpath.split("/"))
        if not os.path.lexists(source_root):
            logger.error(f"Subpath {subpath} missing after checkout of {target.clone_url}@{fetched}")
            raise SubpathNotFoundError(subpath)

    return StagingOutcome(fetched_branch=fetched, source_root=source_root)
