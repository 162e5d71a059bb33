#!/usr/bin/env python3
"""
Pydantic models for the git-get retrieval pipeline.

Links to third-party package documentation:
- Pydantic: https://docs.pydantic.dev/latest/

Sample input:
    request = RetrievalRequest(repository_locator="acme/tools", branch="dev", subpath="lib/util")
    target = CloneTarget(clone_url="https://github.com/acme/tools.git")

Expected output:
    request.model_dump()
    # {'repository_locator': 'acme/tools', 'branch': 'dev', 'subpath': 'lib/util'}
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RetrievalRequest(BaseModel):
    """Canonical (locator, branch, subpath) triple produced by the resolver."""

    model_config = ConfigDict(frozen=True)

    repository_locator: str = Field(..., description="owner/name or full clone URL")
    branch: str = Field(..., description="Branch to fetch")
    subpath: Optional[str] = Field(None, description="Subtree inside the repository; None for the whole repository")

    @field_validator("branch")
    @classmethod
    def branch_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("branch cannot be empty")
        return v

    @field_validator("subpath")
    @classmethod
    def subpath_is_relative(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and (not v or v.startswith("/")):
            raise ValueError("subpath must be a non-empty relative path")
        return v


class CloneTarget(BaseModel):
    """Fetchable clone URL derived from a repository locator."""

    model_config = ConfigDict(frozen=True)

    clone_url: str


class StagingOutcome(BaseModel):
    """What the staging orchestrator left in the workspace."""

    model_config = ConfigDict(frozen=True)

    fetched_branch: str
    source_root: str


class CopyStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_count: int = 0
    total_size: int = 0


class RetrievalResult(BaseModel):
    """Summary of one completed pipeline run."""

    model_config = ConfigDict(frozen=True)

    request: RetrievalRequest
    clone_url: str
    destination: str
    fetched_branch: str
    file_count: int = Field(0, description="Number of files copied")
    total_size: int = Field(0, description="Total bytes copied")
    ignore_registered: bool = Field(False, description="Whether the destination was appended to the ignore file")
