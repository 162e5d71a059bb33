#!/usr/bin/env python3
"""
Error types for git-get

Every failure of the retrieval pipeline is raised as a subclass of
RetrievalError. Problems registering the destination in the ignore file happen
after the retrieval has already succeeded, so IgnoreFileError sits beside
RetrievalError rather than under it.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    raise DestinationNotEmptyError("vendor/util")

Expected output:
    str(err) == "Destination directory already exists and is not empty: vendor/util ..."
    err.kind == "DestinationNotEmpty"
"""

from typing import List, Optional, Sequence


class GitGetError(Exception):
    """Base class for all git-get errors."""

    kind = "GitGetError"


class RetrievalError(GitGetError):
    """The primary retrieval failed; nothing usable was produced."""

    kind = "RetrievalError"


class MissingInputError(RetrievalError):
    kind = "MissingInput"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or (
            "Missing input! Provide a GitHub URL or use --repo.\n\n"
            "Examples:\n"
            "  git-get https://github.com/owner/repo/tree/main/path/to/dir\n"
            "  git-get --repo owner/repo --path path/to/dir"
        ))


class InvalidLocatorError(RetrievalError):
    kind = "InvalidLocator"


class DestinationIsFileError(RetrievalError):
    kind = "DestinationIsFile"

    def __init__(self, destination: str):
        self.destination = destination
        super().__init__(f"Destination path already exists and is not a directory: {destination}")


class DestinationNotEmptyError(RetrievalError):
    kind = "DestinationNotEmpty"

    def __init__(self, destination: str):
        self.destination = destination
        super().__init__(
            f"Destination directory already exists and is not empty: {destination}\n"
            "Hint: git-get only writes into an empty or non-existent directory"
        )


class WorkspaceCreationError(RetrievalError):
    kind = "WorkspaceCreationFailed"


class ExternalToolError(RetrievalError):
    """A git invocation exited non-zero (or could not be started)."""

    kind = "ExternalToolFailed"

    def __init__(self, args: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.command: List[str] = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"{' '.join(self.command)} failed"
        if returncode is not None:
            message += f" (exit status {returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class FetchFailedError(ExternalToolError):
    """Fetching the requested branch failed, fallback included."""

    kind = "FetchFailed"

    def __init__(self, args: Sequence[str], returncode: Optional[int], stderr: str = "",
                 branches_tried: Sequence[str] = ()):
        self.branches_tried = list(branches_tried)
        super().__init__(args, returncode, stderr)

    def __str__(self) -> str:
        tried = ", ".join(self.branches_tried)
        return (
            f"Unable to fetch repository (branches tried: {tried}); "
            f"check the repository address and branch name. {super().__str__()}"
        )


class SubpathNotFoundError(RetrievalError):
    kind = "SubpathNotFound"

    def __init__(self, subpath: str):
        self.subpath = subpath
        super().__init__(f"Subdirectory not found in remote repository: {subpath}")


class CopyFailedError(RetrievalError):
    kind = "CopyFailed"


class IgnoreFileError(GitGetError):
    """Reading or writing the ignore file failed after a successful retrieval."""

    kind = "IgnoreFileError"

    # RetrievalResult of the copy that did succeed; set by the pipeline
    result = None
