"""
Tests for the staging orchestrator.

The first group drives a FakeGitRunner to check the exact git protocol; the
second fetches from a real local repository over file:// (skipped without git).
"""

import os

import pytest

from conftest import SOURCE_FILES, requires_git
from git_get.core.errors import (
    ExternalToolError,
    FetchFailedError,
    SubpathNotFoundError,
    WorkspaceCreationError,
)
from git_get.core.materializer import materialize
from git_get.core.models import CloneTarget
from git_get.core.staging import sparse_pattern, stage_repository, write_sparse_checkout

TARGET = CloneTarget(clone_url="https://github.com/acme/tools.git")

FETCH_MAIN = ("fetch", "--depth=1", "origin", "main")
FETCH_MASTER = ("fetch", "--depth=1", "origin", "master")


# === Protocol (fake git) ===

def test_subpath_mode_runs_sparse_protocol(tmp_path, fake_git):
    runner = fake_git()
    outcome = stage_repository(str(tmp_path), TARGET, "dev", "lib/util", runner=runner)

    assert runner.commands == [
        ("init",),
        ("remote", "add", "origin", "https://github.com/acme/tools.git"),
        ("config", "core.sparseCheckout", "true"),
        ("fetch", "--depth=1", "origin", "dev"),
        ("checkout", "FETCH_HEAD"),
    ]
    assert runner.workspaces == [str(tmp_path)]
    assert (tmp_path / ".git" / "info" / "sparse-checkout").read_text() == "/lib/util\n"
    assert outcome.fetched_branch == "dev"
    assert outcome.source_root == os.path.join(str(tmp_path), "lib", "util")


def test_whole_repository_mode_skips_sparse_configuration(tmp_path, fake_git):
    runner = fake_git()
    outcome = stage_repository(str(tmp_path), TARGET, "main", None, runner=runner)

    assert ("config", "core.sparseCheckout", "true") not in runner.commands
    assert not (tmp_path / ".git" / "info" / "sparse-checkout").exists()
    assert outcome.source_root == str(tmp_path)


def test_main_falls_back_to_master_once(tmp_path, fake_git):
    runner = fake_git(fail={FETCH_MAIN: "fatal: couldn't find remote ref main"})
    outcome = stage_repository(str(tmp_path), TARGET, "main", "lib/util", runner=runner)

    assert outcome.fetched_branch == "master"
    assert runner.commands[-3:] == [FETCH_MAIN, FETCH_MASTER, ("checkout", "FETCH_HEAD")]


def test_failed_fallback_raises_fetch_failed(tmp_path, fake_git):
    runner = fake_git(fail={
        FETCH_MAIN: "fatal: couldn't find remote ref main",
        FETCH_MASTER: "fatal: couldn't find remote ref master",
    })

    with pytest.raises(FetchFailedError) as exc_info:
        stage_repository(str(tmp_path), TARGET, "main", None, runner=runner)

    err = exc_info.value
    assert err.branches_tried == ["main", "master"]
    assert "couldn't find remote ref master" in str(err)
    assert err.kind == "FetchFailed"
    assert ("checkout", "FETCH_HEAD") not in runner.commands


def test_non_default_branch_is_not_retried(tmp_path, fake_git):
    fetch_dev = ("fetch", "--depth=1", "origin", "dev")
    runner = fake_git(fail={fetch_dev: "fatal: couldn't find remote ref dev"})

    with pytest.raises(FetchFailedError) as exc_info:
        stage_repository(str(tmp_path), TARGET, "dev", None, runner=runner)

    assert exc_info.value.branches_tried == ["dev"]
    assert [c for c in runner.commands if c[0] == "fetch"] == [fetch_dev]


def test_failing_step_surfaces_stderr(tmp_path, fake_git):
    runner = fake_git(fail={("init",): "fatal: cannot mkdir"})

    with pytest.raises(ExternalToolError) as exc_info:
        stage_repository(str(tmp_path), TARGET, "main", None, runner=runner)

    assert "fatal: cannot mkdir" in str(exc_info.value)
    assert runner.commands == [("init",)]


def test_missing_subpath_after_checkout(tmp_path, fake_git):
    runner = fake_git()

    with pytest.raises(SubpathNotFoundError) as exc_info:
        stage_repository(str(tmp_path), TARGET, "main", "no/such/dir", runner=runner)
    assert exc_info.value.subpath == "no/such/dir"


def test_fallback_is_reported_to_observer(tmp_path, fake_git):
    class Recorder:
        def __init__(self):
            self.warnings = []

        def info(self, message):
            pass

        def warning(self, message):
            self.warnings.append(message)

        def success(self, message):
            pass

    recorder = Recorder()
    runner = fake_git(fail={FETCH_MAIN: "fatal"})
    stage_repository(str(tmp_path), TARGET, "main", None, runner=runner, observer=recorder)

    assert len(recorder.warnings) == 1
    assert "master" in recorder.warnings[0]


def test_write_sparse_checkout_creates_info_dir(tmp_path):
    path = write_sparse_checkout(str(tmp_path), "docs")
    with open(path, encoding="utf-8") as f:
        assert f.read() == "/docs\n"


@pytest.mark.parametrize("subpath, expected", [
    ("lib/util", "/lib/util"),
    ("lib/a[1]", "/lib/a\\[1\\]"),
    ("src/*.py", "/src/\\*.py"),
    ("what?", "/what\\?"),
    ("#notes", "/#notes"),
    ("!important/x", "/!important/x"),
])
def test_sparse_pattern_matches_path_literally(subpath, expected):
    assert sparse_pattern(subpath) == expected


def test_unwritable_sparse_file_is_a_workspace_error(tmp_path):
    (tmp_path / ".git").write_text("not a directory")

    with pytest.raises(WorkspaceCreationError) as exc_info:
        write_sparse_checkout(str(tmp_path), "docs")
    assert exc_info.value.kind == "WorkspaceCreationFailed"


# === Real git over file:// ===

@requires_git
def test_sparse_fetch_checks_out_only_the_subpath(tmp_path, make_source_repo):
    url = make_source_repo("main")
    workspace = tmp_path / "ws"
    workspace.mkdir()

    outcome = stage_repository(str(workspace), CloneTarget(clone_url=url), "main", "lib/util")

    assert (workspace / "lib" / "util" / "strings.py").read_text() == SOURCE_FILES["lib/util/strings.py"]
    assert (workspace / "lib" / "util" / "nested" / "deep.txt").exists()
    assert not (workspace / "lib" / "other").exists()
    assert not (workspace / "README.md").exists()
    assert outcome.fetched_branch == "main"


@requires_git
def test_out_of_tree_symlink_is_copied_as_a_link(tmp_path, make_source_repo):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "id_rsa").write_text("PRIVATE KEY\n")
    url = make_source_repo("main", symlinks={"lib/util/leak": str(outside)})
    workspace = tmp_path / "ws"
    workspace.mkdir()
    dest = tmp_path / "util"

    outcome = stage_repository(str(workspace), CloneTarget(clone_url=url), "main", "lib/util")
    materialize(outcome.source_root, str(dest))

    assert os.path.islink(dest / "leak")
    assert os.readlink(dest / "leak") == str(outside)
    assert all("id_rsa" not in files for _, _, files in os.walk(dest))
    assert (dest / "strings.py").exists()


@requires_git
@pytest.mark.parametrize("subpath, decoy", [
    ("lib/a[1]", "lib/a1"),
    ("#notes", "notes"),
    ("!keep", "keep"),
])
def test_special_characters_in_subpath_match_literally(tmp_path, make_source_repo, subpath, decoy):
    url = make_source_repo("main", extra_files={
        f"{subpath}/wanted.txt": "wanted\n",
        f"{decoy}/unwanted.txt": "unwanted\n",
    })
    workspace = tmp_path / "ws"
    workspace.mkdir()

    outcome = stage_repository(str(workspace), CloneTarget(clone_url=url), "main", subpath)

    assert os.path.isfile(os.path.join(outcome.source_root, "wanted.txt"))
    assert not (workspace / decoy).exists()


@requires_git
def test_real_fallback_to_master(tmp_path, make_source_repo):
    url = make_source_repo("master")
    workspace = tmp_path / "ws"
    workspace.mkdir()

    outcome = stage_repository(str(workspace), CloneTarget(clone_url=url), "main", None)

    assert outcome.fetched_branch == "master"
    assert (workspace / "README.md").exists()
    assert (workspace / "docs" / "index.md").exists()


@requires_git
def test_real_missing_branch_fails(tmp_path, make_source_repo):
    url = make_source_repo("main")
    workspace = tmp_path / "ws"
    workspace.mkdir()

    with pytest.raises(FetchFailedError):
        stage_repository(str(workspace), CloneTarget(clone_url=url), "no-such-branch", None)


@requires_git
def test_real_missing_subpath(tmp_path, make_source_repo):
    url = make_source_repo("main")
    workspace = tmp_path / "ws"
    workspace.mkdir()

    # Older git refuses a sparse checkout that matches nothing
    with pytest.raises((SubpathNotFoundError, ExternalToolError)):
        stage_repository(str(workspace), CloneTarget(clone_url=url), "main", "does/not/exist")
