#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for depgit tests."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from depgit.config import DriverConfig, GitCredentials
from depgit.engines.git import GitCmdDriver
from depgit.folder import WorkingFolder
from tests.helpers.fake_runner import FakeProcessRunner


def _git(args: list[str], cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)


def _configure_identity(repo_path: Path) -> None:
    _git(["config", "user.name", "Depgit Test Bot"], repo_path)
    _git(["config", "user.email", "test@depgit.example.com"], repo_path)
    # Disable GPG signing to prevent tests from failing if user has global GPG config
    _git(["config", "commit.gpgsign", "false"], repo_path)


@pytest.fixture
def git_executable() -> str:
    """Path to a real git binary, skipping the test when none is installed."""
    path = shutil.which("git")
    if path is None:
        pytest.skip("Git is not available for testing")
    try:
        subprocess.run([path, "--version"], check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        pytest.skip(f"Git is not available or `git --version` failed: {e}")
    return path


@pytest.fixture
def temp_git_repo(tmp_path: Path, git_executable: str) -> Path:
    """Create a temporary Git repository with one commit on ``main``."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    _git(["init"], repo_path)
    _git(["checkout", "-b", "main"], repo_path)
    _configure_identity(repo_path)

    (repo_path / "README.md").write_text("initial commit")
    _git(["add", "README.md"], repo_path)
    _git(["commit", "-m", "Initial commit"], repo_path)
    return repo_path


@pytest.fixture
def bare_remote(tmp_path: Path, temp_git_repo: Path) -> Path:
    """A bare clone of ``temp_git_repo`` to act as the network remote."""
    remote_path = tmp_path / "remote.git"
    _git(["clone", "--bare", str(temp_git_repo), str(remote_path)], tmp_path)
    return remote_path


@pytest.fixture
def configure_identity():
    """Expose identity setup for repositories created by the driver itself."""
    return _configure_identity


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def driver_config() -> DriverConfig:
    return DriverConfig(git_path="/usr/bin/git")


@pytest.fixture
def credentials() -> GitCredentials:
    return GitCredentials(username="bot", password="abc")


@pytest.fixture
def fake_driver(
    tmp_path: Path, driver_config: DriverConfig, credentials: GitCredentials, fake_runner: FakeProcessRunner
) -> GitCmdDriver:
    """A driver whose processes are served by ``fake_runner``."""
    return GitCmdDriver(driver_config, WorkingFolder(tmp_path), credentials, runner=fake_runner)


# 🔼⚙️🔚
