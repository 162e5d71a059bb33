#!/usr/bin/env python3
"""
MCP Tools for git-get

Builds a FastMCP server exposing the retrieval pipeline as the `git_get` tool.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Links to third-party package documentation:
- MCP Python SDK: https://github.com/modelcontextprotocol/python-sdk

Sample input:
- create_mcp_server("git-get")

Expected output:
- Configured FastMCP server with the git_get tool registered
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from git_get.mcp.wrappers import git_get_wrapper


def create_mcp_server(name: str = "git-get", log_level: str = "INFO") -> FastMCP:
    """
    Create and configure the MCP server.

    Args:
        name: Name for the MCP server
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name)

    # stdout carries the MCP protocol; logs go to stderr
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
    )
    logger.info(f"Initialized FastMCP server: {name}")

    register_git_get_tool(mcp)
    return mcp


def register_git_get_tool(mcp: FastMCP) -> None:
    """
    Register the git_get tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    def git_get(
        url: Optional[str] = None,
        repo: Optional[str] = None,
        branch: Optional[str] = None,
        path: Optional[str] = None,
        dest: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Download a subdirectory (or the whole repository) from GitHub into a local
        directory, without any .git metadata.

        Args:
            url (str, optional): Browsable URL such as
                https://github.com/owner/repo/tree/main/path/to/dir, or owner/repo.
            repo (str, optional): Repository as owner/repo or a clone URL (used when url is omitted).
            branch (str, optional): Branch to fetch. Defaults to the one in the URL, else main
                (falling back to master once).
            path (str, optional): Subdirectory inside the repository. Omit for the whole repository.
            dest (str, optional): Local destination. Must not exist or be an empty directory.

        Returns:
            dict: success flag plus destination, clone_url, fetched_branch, file_count
            and total_size (plus ignore_error when the files were copied but
            .gitignore could not be updated); on error, error and error_type.
        """
        return git_get_wrapper(url=url, repo=repo, branch=branch, path=path, dest=dest)


def main() -> None:
    """Run the MCP server over stdio."""
    create_mcp_server().run()


if __name__ == "__main__":
    main()
