"""
Shared fixtures for the git-get test suite.

Links:
- pytest: https://docs.pytest.org/
"""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from git_get.core.errors import ExternalToolError
from git_get.core.git_runner import GitRunner

GIT_AVAILABLE = shutil.which("git") is not None

requires_git = pytest.mark.skipif(not GIT_AVAILABLE, reason="git executable not available")

GIT_ENV = {
    "GIT_AUTHOR_NAME": "git-get tests",
    "GIT_AUTHOR_EMAIL": "tests@example.com",
    "GIT_COMMITTER_NAME": "git-get tests",
    "GIT_COMMITTER_EMAIL": "tests@example.com",
}

# Files committed to the source repository used by the integration tests
SOURCE_FILES = {
    "README.md": "# tools\n",
    "lib/util/strings.py": "def shout(s):\n    return s.upper()\n",
    "lib/util/nested/deep.txt": "deep\n",
    "lib/other/skip.txt": "not requested\n",
    "docs/index.md": "docs\n",
}


class FakeGitRunner(GitRunner):
    """
    Records git invocations instead of running them.

    fail: maps an argument tuple to the stderr git should "print"
    checkout_files: files written into the workspace on `git checkout`
    """

    def __init__(
        self,
        fail: Optional[Dict[Tuple[str, ...], str]] = None,
        checkout_files: Optional[Dict[str, str]] = None,
    ):
        super().__init__(executable="git")
        self.fail = fail or {}
        self.checkout_files = checkout_files if checkout_files is not None else {}
        self.calls: List[Tuple[Tuple[str, ...], str]] = []

    def run(self, args: Sequence[str], cwd: str) -> subprocess.CompletedProcess:
        key = tuple(args)
        self.calls.append((key, cwd))

        if key in self.fail:
            raise ExternalToolError(self.command(args), 128, self.fail[key])

        if key == ("init",):
            os.makedirs(os.path.join(cwd, ".git"), exist_ok=True)
        elif key[0] == "checkout":
            for rel_path, content in self.checkout_files.items():
                full_path = os.path.join(cwd, *rel_path.split("/"))
                os.makedirs(os.path.dirname(full_path), exist_ok=True)
                with open(full_path, "w", encoding="utf-8") as f:
                    f.write(content)

        return subprocess.CompletedProcess(self.command(args), 0, stdout="", stderr="")

    @property
    def commands(self) -> List[Tuple[str, ...]]:
        return [args for args, _ in self.calls]

    @property
    def workspaces(self) -> List[str]:
        return sorted({cwd for _, cwd in self.calls})


@pytest.fixture
def fake_git() -> Callable[..., FakeGitRunner]:
    """Factory for FakeGitRunner instances preloaded with SOURCE_FILES."""
    def factory(fail=None, checkout_files=None) -> FakeGitRunner:
        files = dict(SOURCE_FILES) if checkout_files is None else checkout_files
        return FakeGitRunner(fail=fail, checkout_files=files)
    return factory


def _git(args: Sequence[str], cwd: Path) -> None:
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        env={**os.environ, **GIT_ENV},
    )


@pytest.fixture
def make_source_repo(tmp_path: Path) -> Callable[..., str]:
    """
    Factory building a local repository with SOURCE_FILES committed on `branch`.

    extra_files: more rel_path -> content entries to commit
    symlinks: rel_path -> link target, committed as symbolic links

    Returns a file:// URL so shallow fetches behave like a remote.
    """
    def factory(
        branch: str = "main",
        extra_files: Optional[Dict[str, str]] = None,
        symlinks: Optional[Dict[str, str]] = None,
    ) -> str:
        repo_dir = tmp_path / f"remote-{branch}"
        repo_dir.mkdir()
        _git(["init"], repo_dir)
        _git(["symbolic-ref", "HEAD", f"refs/heads/{branch}"], repo_dir)
        for rel_path, content in {**SOURCE_FILES, **(extra_files or {})}.items():
            file_path = repo_dir / rel_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        for rel_path, target in (symlinks or {}).items():
            link_path = repo_dir / rel_path
            link_path.parent.mkdir(parents=True, exist_ok=True)
            os.symlink(target, link_path)
        _git(["add", "."], repo_dir)
        _git(["commit", "-m", "initial"], repo_dir)
        return repo_dir.as_uri()
    return factory
