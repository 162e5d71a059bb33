#!/usr/bin/env python3
"""
Retrieval pipeline

Runs the whole retrieval strictly in order:

    resolve request -> normalize locator -> guard destination
        -> [workspace: stage -> materialize] -> register ignore entry

The first failure aborts the run. The workspace is released whatever happens
inside its block.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    retrieve(url="https://github.com/acme/tools/tree/dev/lib/util")

Expected output:
    RetrievalResult(destination='util', fetched_branch='dev', clone_url='https://github.com/acme/tools.git', ...)
"""

from typing import Optional

from loguru import logger

from git_get.core.config import CONFIG
from git_get.core.destination import check_destination
from git_get.core.errors import IgnoreFileError
from git_get.core.git_runner import GitRunner
from git_get.core.ignore_registrar import normalize_ignore_entry, register_ignore
from git_get.core.locator import normalize_locator
from git_get.core.materializer import materialize
from git_get.core.models import RetrievalResult
from git_get.core.observer import ProgressObserver
from git_get.core.resolver import derive_destination, resolve_request
from git_get.core.staging import stage_repository
from git_get.core.workspace import ephemeral_workspace


def retrieve(
    url: Optional[str] = None,
    repo: Optional[str] = None,
    branch: Optional[str] = None,
    path: Optional[str] = None,
    dest: Optional[str] = None,
    token: Optional[str] = None,
    observer: Optional[ProgressObserver] = None,
    runner: Optional[GitRunner] = None,
    ignore_base: Optional[str] = None,
    update_ignore: bool = True,
    workspace_dir: Optional[str] = None,
) -> RetrievalResult:
    """
    Retrieve a subdirectory (or whole repository) into a local directory.

    Args:
        url: Browsable URL or locator given positionally
        repo: Explicit locator (used when url is absent)
        branch: Branch override
        path: Subpath override
        dest: Local destination (derived when omitted)
        token: Access token; accepted but not used
        observer: Receives progress messages
        runner: Git runner used for every git step
        ignore_base: Directory whose ignore file is updated (defaults to cwd)
        update_ignore: Set False to skip the ignore file step
        workspace_dir: Parent directory for the temporary workspace

    Returns:
        RetrievalResult describing what was fetched and copied

    Raises:
        RetrievalError: Any failure of the retrieval itself
        IgnoreFileError: The files were copied but the ignore file could not be updated
    """
    observer = observer or ProgressObserver()

    request = resolve_request(url=url, repo=repo, branch=branch, path=path)
    destination = derive_destination(request, dest)
    target = normalize_locator(request.repository_locator)

    observer.info(f"Repository: {target.clone_url}")
    observer.info(f"Branch: {request.branch}")
    observer.info(f"Subdirectory: {request.subpath or '<whole repository>'}")
    observer.info(f"Destination: {destination}")

    check_destination(destination)

    with ephemeral_workspace(workspace_dir) as workspace:
        observer.info(f"Workspace: {workspace}")
        staged = stage_repository(
            workspace,
            target,
            request.branch,
            request.subpath,
            token=token,
            runner=runner,
            observer=observer,
        )
        observer.info("Copying files...")
        stats = materialize(staged.source_root, destination)

    if request.subpath:
        observer.success(f"Done! Subdirectory copied to: {destination}")
    else:
        observer.success(f"Done! Repository copied to: {destination}")

    logger.debug(f"Retrieved {stats.file_count} files from {target.clone_url}@{staged.fetched_branch}")
    result = RetrievalResult(
        request=request,
        clone_url=target.clone_url,
        destination=destination,
        fetched_branch=staged.fetched_branch,
        file_count=stats.file_count,
        total_size=stats.total_size,
        ignore_registered=False,
    )

    if update_ignore:
        try:
            registered = register_ignore(destination, ignore_base)
        except IgnoreFileError as e:
            e.result = result
            raise
        if registered:
            observer.info(f"Added '{normalize_ignore_entry(destination)}' to {CONFIG['ignore']['filename']}")
            result = result.model_copy(update={"ignore_registered": True})

    return result
