#!/usr/bin/env python3
"""
Configuration for git-get

Defines the central configuration dictionary (CONFIG) for git-get. Values are
read from environment variables, with a local .env file loaded first through
python-dotenv.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links:
- python-dotenv: https://github.com/theskumar/python-dotenv

Sample Input/Output:

- Accessing config values:
  from git_get.core.config import CONFIG
  git_bin = CONFIG["git"]["executable"]        # "git"
  default_branch = CONFIG["branch"]["default"]  # "main"
"""

import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

CONFIG: Dict[str, Dict[str, Any]] = {
    "git": {
        "executable": os.getenv("GIT_GET_GIT", "git"),
        "remote_name": "origin",
        "metadata_dir": ".git",
    },
    "host": {
        "marker": os.getenv("GIT_GET_HOST", "github.com"),
        "clone_url_template": "https://{host}/{owner}/{name}.git",
        "url_prefixes": ("https://", "git@"),
    },
    "branch": {
        "default": os.getenv("GIT_GET_DEFAULT_BRANCH", "main"),
        # Tried once, and only when the default branch fetch fails
        "fallback": "master",
    },
    "workspace": {
        "prefix": "git-get-",
        "base_dir": os.getenv("GIT_GET_TMPDIR") or None,
    },
    "ignore": {
        "filename": os.getenv("GIT_GET_IGNORE_FILE", ".gitignore"),
        "comment": "# Added by git-get",
    },
    "logging": {
        "level": os.getenv("LOG_LEVEL", "WARNING").upper(),
        "format": "{time:HH:mm:ss} | {level: <7} | {message}",
    },
}

DEFAULT_BRANCH: str = CONFIG["branch"]["default"]
FALLBACK_BRANCH: str = CONFIG["branch"]["fallback"]
HOST_MARKER: str = CONFIG["host"]["marker"]
GIT_METADATA_DIR: str = CONFIG["git"]["metadata_dir"]
DEFAULT_DESTINATION: str = "download"
