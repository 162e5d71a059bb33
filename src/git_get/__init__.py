"""
git-get

Download a single subdirectory (or a whole repository) from GitHub into a local
directory, without pulling the remote's .git metadata into your own tree.

The package follows a three-layer layout:

1. Core Layer: the retrieval pipeline (git_get.core)
2. Presentation Layer: Typer CLI with Rich output (git_get.cli)
3. Integration Layer: FastMCP tool (git_get.mcp)

Usage:
    # Direct API usage (Core Layer)
    from git_get import retrieve
    result = retrieve(url="https://github.com/acme/tools/tree/dev/lib/util")

    # CLI usage (Presentation Layer)
    # git-get https://github.com/acme/tools/tree/dev/lib/util

    # MCP server usage (Integration Layer)
    # git-get-mcp
"""

__version__ = "0.1.0"

from git_get.core import (
    GitGetError,
    IgnoreFileError,
    RetrievalError,
    RetrievalRequest,
    RetrievalResult,
    retrieve,
)

__all__ = [
    'retrieve',
    'RetrievalRequest',
    'RetrievalResult',
    'GitGetError',
    'RetrievalError',
    'IgnoreFileError',
    '__version__',
]
