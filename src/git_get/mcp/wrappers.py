#!/usr/bin/env python3
"""
MCP Wrappers for git-get

Wraps the core retrieval pipeline for MCP use: errors are converted into
response dictionaries instead of propagating, and progress goes to the log.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
    git_get_wrapper(url="https://github.com/acme/tools/tree/dev/lib/util", dest="vendor/util")

Expected output:
    {"success": True, "destination": "vendor/util", "fetched_branch": "dev", ...}
    {"success": True, ..., "ignore_error": "Unable to write .gitignore ..."}
    {"success": False, "error": "...", "error_type": "DestinationNotEmpty"}
"""

from typing import Any, Dict, Optional

from loguru import logger

from git_get.core.errors import GitGetError, IgnoreFileError
from git_get.core.pipeline import retrieve


def format_mcp_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None,
    error_type: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Format a response in MCP-compatible format.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)
        error_type: Stable error kind (for failed operations)

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    response: Dict[str, Any] = {"success": success}

    if success and data is not None:
        response.update(data)
    elif not success and error is not None:
        response["error"] = error
        if error_type:
            response["error_type"] = error_type

    return response


def git_get_wrapper(
    url: Optional[str] = None,
    repo: Optional[str] = None,
    branch: Optional[str] = None,
    path: Optional[str] = None,
    dest: Optional[str] = None,
    update_ignore: bool = True,
) -> Dict[str, Any]:
    """
    MCP wrapper for the retrieval pipeline.

    Returns:
        Dict[str, Any]: The RetrievalResult fields with success=True, or an
        error response with the error kind. A copy that succeeded but could
        not be registered in the ignore file is still a success and carries
        ignore_error.
    """
    logger.info(f"git_get requested: url={url} repo={repo} branch={branch} path={path} dest={dest}")
    try:
        result = retrieve(
            url=url,
            repo=repo,
            branch=branch,
            path=path,
            dest=dest,
            update_ignore=update_ignore,
        )
    except IgnoreFileError as e:
        logger.warning(f"git_get copied files but the ignore file was not updated: {e}")
        data = e.result.model_dump() if e.result is not None else {}
        data["ignore_error"] = str(e)
        return format_mcp_response(True, data=data)
    except GitGetError as e:
        logger.error(f"git_get failed ({e.kind}): {e}")
        return format_mcp_response(False, error=str(e), error_type=e.kind)

    return format_mcp_response(True, data=result.model_dump())
