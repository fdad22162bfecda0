#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""End-to-end tests for GitCmdDriver driving a real git binary."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from depgit.config import DriverConfig, GitCredentials
from depgit.engines.git import BranchCreationStatus, GitCmdDriver
from depgit.exceptions import ProcessExecutionError
from depgit.folder import WorkingFolder


def _git_output(args: list[str], cwd: Path) -> str:
    return subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True).stdout.strip()


@pytest.fixture
def make_driver(tmp_path: Path, git_executable: str):
    def factory(name: str) -> GitCmdDriver:
        folder = WorkingFolder(tmp_path / name).create()
        return GitCmdDriver(DriverConfig(git_path=git_executable), folder, GitCredentials())

    return factory


@pytest.fixture
async def cloned_driver(make_driver, bare_remote: Path, configure_identity) -> GitCmdDriver:
    driver = make_driver("work")
    await driver.clone(str(bare_remote))
    configure_identity(driver.working_folder.full_path)
    return driver


async def _commit_change(driver: GitCmdDriver, text: str, message: str) -> None:
    (driver.working_folder.full_path / "README.md").write_text(text)
    await driver.commit(message)


@pytest.mark.asyncio
class TestGitCmdDriverIntegration:
    async def test_clone_populates_working_folder(self, cloned_driver: GitCmdDriver) -> None:
        folder = cloned_driver.working_folder.full_path

        assert (folder / "README.md").read_text() == "initial commit"
        assert (folder / ".git").is_dir()
        assert await cloned_driver.get_current_head() == "main"

    async def test_clone_specific_branch(
        self, make_driver, bare_remote: Path, temp_git_repo: Path
    ) -> None:
        subprocess.run(["git", "push", str(bare_remote), "main:release"], cwd=temp_git_repo, check=True)
        driver = make_driver("release")

        await driver.clone(str(bare_remote), "release")

        assert await driver.get_current_head() == "release"

    async def test_clone_missing_remote_fails(self, make_driver, tmp_path: Path) -> None:
        driver = make_driver("broken")

        with pytest.raises(ProcessExecutionError) as exc_info:
            await driver.clone(str(tmp_path / "does-not-exist.git"))

        assert exc_info.value.exit_code == 128
        assert exc_info.value.error_output

    async def test_new_branch_then_head(self, cloned_driver: GitCmdDriver) -> None:
        result = await cloned_driver.checkout_new_branch("feature")

        assert result
        assert await cloned_driver.get_current_head() == "feature"

    async def test_new_branch_already_exists(self, cloned_driver: GitCmdDriver) -> None:
        await cloned_driver.checkout_new_branch("feature")
        await cloned_driver.checkout("main")

        result = await cloned_driver.checkout_new_branch("feature")

        assert not result
        assert result.status is BranchCreationStatus.ALREADY_EXISTS
        assert await cloned_driver.get_current_head() == "main"

    async def test_checkout_missing_branch_raises(self, cloned_driver: GitCmdDriver) -> None:
        with pytest.raises(ProcessExecutionError):
            await cloned_driver.checkout("no-such-branch")

    async def test_detached_head_returns_commit_hash(self, cloned_driver: GitCmdDriver) -> None:
        folder = cloned_driver.working_folder.full_path
        sha = _git_output(["rev-parse", "HEAD"], folder)

        await cloned_driver.checkout(sha)

        assert await cloned_driver.get_current_head() == sha

    async def test_new_commit_messages(self, cloned_driver: GitCmdDriver) -> None:
        await cloned_driver.checkout_new_branch("feature")
        await _commit_change(cloned_driver, "first", "Fix bug")
        await _commit_change(cloned_driver, "second", "Add feature")

        messages = await cloned_driver.get_new_commit_messages("main", "feature")

        assert messages == ("Add feature", "Fix bug")
        assert await cloned_driver.get_new_commit_messages("main", "main") == ()
        assert await cloned_driver.get_new_commit_messages("feature", "main") == ()

    async def test_push_and_checkout_remote_to_local(
        self, cloned_driver: GitCmdDriver, make_driver, bare_remote: Path
    ) -> None:
        await cloned_driver.checkout_new_branch("depgit-update")
        await _commit_change(cloned_driver, "bumped", "Automatic update of Foo to 2.0")
        await cloned_driver.push("origin", "depgit-update")

        assert "depgit-update" in _git_output(["branch", "--list"], bare_remote)

        other = make_driver("other")
        await other.clone(str(bare_remote))
        await other.checkout_remote_to_local("depgit-update")

        assert await other.get_current_head() == "depgit-update"
        assert await other.get_new_commit_messages("main", "depgit-update") == ("Automatic update of Foo to 2.0",)

    async def test_add_remote(self, cloned_driver: GitCmdDriver, bare_remote: Path) -> None:
        folder = cloned_driver.working_folder.full_path

        await cloned_driver.add_remote("fork", str(bare_remote))
        await cloned_driver.add_remote("ignored", None)

        assert _git_output(["remote", "get-url", "fork"], folder) == str(bare_remote)
        assert "ignored" not in _git_output(["remote"], folder).split()

    async def test_commit_without_changes_fails(self, cloned_driver: GitCmdDriver) -> None:
        with pytest.raises(ProcessExecutionError):
            await cloned_driver.commit("nothing changed")


# 🔼⚙️🔚
