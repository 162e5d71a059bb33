#!/usr/bin/env python3
"""
Locator Normalizer

Maps a repository locator (short owner/name form or full clone URL) to a
fetchable CloneTarget.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    normalize_locator("acme/tools")
    normalize_locator("git@github.com:acme/tools.git")

Expected output:
    CloneTarget(clone_url='https://github.com/acme/tools.git')
    CloneTarget(clone_url='git@github.com:acme/tools.git')
"""

from loguru import logger

from git_get.core.config import CONFIG, HOST_MARKER
from git_get.core.errors import InvalidLocatorError
from git_get.core.models import CloneTarget


def normalize_locator(locator: str, host: str = HOST_MARKER) -> CloneTarget:
    """
    Turn a locator into a clone URL.

    Full URLs (https:// or git@) pass through unchanged, which makes the
    function idempotent on its own output.

    Raises:
        InvalidLocatorError: If the locator is neither a full URL nor owner/name
    """
    if locator.startswith(CONFIG["host"]["url_prefixes"]):
        return CloneTarget(clone_url=locator)

    parts = locator.split("/")
    if len(parts) == 2 and all(parts):
        owner, name = parts
        clone_url = CONFIG["host"]["clone_url_template"].format(host=host, owner=owner, name=name)
        logger.debug(f"Normalized {locator} -> {clone_url}")
        return CloneTarget(clone_url=clone_url)

    raise InvalidLocatorError(
        f"Invalid repository format: {locator}. "
        f"Supported formats: owner/repo or https://{host}/owner/repo.git"
    )
