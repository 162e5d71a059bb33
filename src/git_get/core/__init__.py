"""
Core Layer for git-get

Pure retrieval logic: resolving user input, staging the remote content in a
temporary workspace with a sparse depth-1 checkout, copying the subtree out and
registering it in .gitignore. Nothing here prints; progress goes through a
ProgressObserver.

Usage:
    from git_get.core import retrieve
    result = retrieve(url="https://github.com/acme/tools/tree/dev/lib/util")
"""

from git_get.core.destination import check_destination
from git_get.core.errors import (
    CopyFailedError,
    DestinationIsFileError,
    DestinationNotEmptyError,
    ExternalToolError,
    FetchFailedError,
    GitGetError,
    IgnoreFileError,
    InvalidLocatorError,
    MissingInputError,
    RetrievalError,
    SubpathNotFoundError,
    WorkspaceCreationError,
)
from git_get.core.git_runner import GitRunner
from git_get.core.ignore_registrar import register_ignore
from git_get.core.locator import normalize_locator
from git_get.core.materializer import materialize
from git_get.core.models import CloneTarget, RetrievalRequest, RetrievalResult
from git_get.core.observer import ProgressObserver
from git_get.core.pipeline import retrieve
from git_get.core.resolver import derive_destination, parse_browsable_url, resolve_request
from git_get.core.staging import stage_repository
from git_get.core.workspace import ephemeral_workspace

__all__ = [
    # Pipeline
    'retrieve',
    'resolve_request',
    'parse_browsable_url',
    'derive_destination',
    'normalize_locator',
    'check_destination',
    'stage_repository',
    'materialize',
    'register_ignore',
    'ephemeral_workspace',
    'GitRunner',
    'ProgressObserver',

    # Models
    'RetrievalRequest',
    'CloneTarget',
    'RetrievalResult',

    # Errors
    'GitGetError',
    'RetrievalError',
    'MissingInputError',
    'InvalidLocatorError',
    'DestinationIsFileError',
    'DestinationNotEmptyError',
    'WorkspaceCreationError',
    'ExternalToolError',
    'FetchFailedError',
    'SubpathNotFoundError',
    'CopyFailedError',
    'IgnoreFileError',
]
