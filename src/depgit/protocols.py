#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Protocols for the seams between the git driver and its collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from depgit.engines.git.driver import BranchCreationResult
    from depgit.process.runner import ProcessResult


@runtime_checkable
class Folder(Protocol):
    """Anything exposing the absolute path of a working folder."""

    @property
    def full_path(self) -> Path: ...


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs an external executable and captures its output.

    Implementations must raise ``ProcessExecutionError`` when
    ``ensure_success`` is set and the process exits non-zero.
    """

    async def run(
        self,
        cwd: Path,
        executable: str,
        arguments: Sequence[str],
        ensure_success: bool,
        timeout: float | None = None,
    ) -> ProcessResult: ...


@runtime_checkable
class GitDriver(Protocol):
    """The operation surface a dependency-update workflow depends on."""

    @property
    def working_folder(self) -> Folder: ...

    async def add_remote(self, name: str, endpoint: str | None) -> None: ...

    async def checkout(self, branch_name: str) -> None: ...

    async def checkout_remote_to_local(self, branch_name: str) -> None: ...

    async def checkout_new_branch(self, branch_name: str) -> BranchCreationResult: ...

    async def clone(self, pull_endpoint: str | None, branch_name: str | None = None) -> None: ...

    async def commit(self, message: str) -> None: ...

    async def push(self, remote_name: str, branch_name: str) -> None: ...

    async def get_current_head(self) -> str: ...

    async def get_new_commit_messages(
        self, base_branch_name: str, head_branch_name: str
    ) -> tuple[str, ...]: ...


# 🔼⚙️🔚
