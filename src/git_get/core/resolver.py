#!/usr/bin/env python3
"""
Request Resolver

Turns the raw strings a user typed (a browsable GitHub URL, or separate
repository/branch/path arguments) into a canonical RetrievalRequest, and
derives the local destination path when none was given.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    resolve_request(url="https://github.com/acme/tools/tree/dev/lib/util")
    resolve_request(repo="acme/tools", path="lib/util")

Expected output:
    RetrievalRequest(repository_locator='acme/tools', branch='dev', subpath='lib/util')
    RetrievalRequest(repository_locator='acme/tools', branch='main', subpath='lib/util')
"""

import re
from typing import NamedTuple, Optional

from loguru import logger

from git_get.core.config import DEFAULT_BRANCH, DEFAULT_DESTINATION, HOST_MARKER
from git_get.core.errors import InvalidLocatorError, MissingInputError
from git_get.core.models import RetrievalRequest

BROWSABLE_SEGMENTS = ("tree", "blob")


class ParsedUrl(NamedTuple):
    """Pieces extracted from a browsable URL; branch/subpath may be absent."""

    repository_locator: str
    branch: Optional[str]
    subpath: Optional[str]


def normalize_subpath(subpath: Optional[str]) -> Optional[str]:
    """
    Clean a repository-relative path.

    Backslashes become slashes, repeated slashes collapse, and surrounding
    slashes are stripped. An empty result means "whole repository".

    Raises:
        InvalidLocatorError: If the path tries to leave the repository
    """
    if subpath is None:
        return None

    cleaned = subpath.replace("\\", "/")
    cleaned = re.sub(r"/+", "/", cleaned).strip("/")
    if not cleaned:
        return None

    if ".." in cleaned.split("/"):
        raise InvalidLocatorError(f"Subpath cannot contain '..': {subpath}")

    return cleaned


def is_browsable_url(value: str, host: str = HOST_MARKER) -> bool:
    """True when value looks like https://<host>/owner/name/tree|blob/..."""
    return host in value and any(f"/{segment}/" in value for segment in BROWSABLE_SEGMENTS)


def parse_browsable_url(url: str, host: str = HOST_MARKER) -> ParsedUrl:
    """
    Parse a browsable repository URL.

    Supports https://github.com/owner/repo/tree/branch/path/to/dir, the same
    with /blob/, and plain https://github.com/owner/repo.

    Raises:
        InvalidLocatorError: If the URL is not a parseable repository URL
    """
    url = url.rstrip("/")

    if host not in url:
        raise InvalidLocatorError(f"Not a valid {host} URL: {url}")

    parts = url.split(f"{host}/")
    if len(parts) != 2:
        raise InvalidLocatorError(f"Unable to parse {host} URL: {url}")

    segments = parts[1].split("/")
    if len(segments) < 2:
        raise InvalidLocatorError(f"Malformed URL, cannot extract repository: {url}")

    owner = segments[0]
    name = segments[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    locator = f"{owner}/{name}"

    branch = None
    subpath = None
    if len(segments) > 3 and segments[2] in BROWSABLE_SEGMENTS:
        branch = segments[3]
        if len(segments) > 4:
            subpath = "/".join(segments[4:])

    logger.debug(f"Parsed {url} -> locator={locator} branch={branch} subpath={subpath}")
    return ParsedUrl(locator, branch, subpath)


def resolve_request(
    url: Optional[str] = None,
    repo: Optional[str] = None,
    branch: Optional[str] = None,
    path: Optional[str] = None,
    default_branch: str = DEFAULT_BRANCH,
) -> RetrievalRequest:
    """
    Build the canonical request from user input.

    The positional url wins over repo. Values parsed out of a browsable URL
    are only defaults; explicit branch/path arguments override them.

    Raises:
        MissingInputError: If neither url nor repo was supplied
        InvalidLocatorError: If a browsable URL cannot be parsed
    """
    value = url or repo
    if not value:
        raise MissingInputError()

    if is_browsable_url(value):
        parsed = parse_browsable_url(value)
        locator = parsed.repository_locator
        resolved_branch = branch or parsed.branch or default_branch
        resolved_path = path if path is not None else parsed.subpath
    else:
        locator = value
        resolved_branch = branch or default_branch
        resolved_path = path

    return RetrievalRequest(
        repository_locator=locator,
        branch=resolved_branch,
        subpath=normalize_subpath(resolved_path),
    )


def derive_destination(request: RetrievalRequest, dest: Optional[str] = None) -> str:
    """
    Pick the local destination path.

    An explicit dest wins; otherwise the last segment of the subpath, or of
    the repository locator with any .git suffix removed.

    For a blob URL the subpath names a file, so the default destination is a
    directory named after that file (blob/main/README.md -> README.md/README.md).
    """
    if dest:
        return dest

    if request.subpath:
        last = request.subpath.split("/")[-1]
    else:
        last = request.repository_locator.rstrip("/").split("/")[-1]
        if last.endswith(".git"):
            last = last[: -len(".git")]

    return last or DEFAULT_DESTINATION
