"""MCP integration layer for git-get.

Exposes the retrieval pipeline as a tool for MCP-compatible assistants.

Links to third-party package documentation:
- MCP Python SDK: https://github.com/modelcontextprotocol/python-sdk

Exports:
- create_mcp_server: Build the FastMCP server with the git_get tool
- git_get_wrapper: Error-safe wrapper around the pipeline

Usage example:
    >>> from git_get.mcp import create_mcp_server
    >>> create_mcp_server().run()
"""

from .mcp_tools import create_mcp_server
from .wrappers import format_mcp_response, git_get_wrapper

__all__ = ["create_mcp_server", "format_mcp_response", "git_get_wrapper"]
