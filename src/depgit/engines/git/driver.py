#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command-line git driver used by the dependency-update workflow.

Each public operation runs (at most) one git process in the working folder and
awaits its exit. Operations on a single driver must be issued one at a time;
git's own index lock is the only guard against concurrent mutation.
"""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from attrs import define, field
from provide.foundation.logger import get_logger

from depgit.config.models import CredentialMode, DriverConfig, GitCredentials
from depgit.engines.git.commands import GitCommandBuilder
from depgit.engines.git.credentials import credentials_uri, redact
from depgit.engines.git.parsing import is_branch_exists_error, parse_commit_messages, resolve_head
from depgit.exceptions import ConfigurationError, ProcessExecutionError
from depgit.process.runner import ExternalProcess
from depgit.protocols import Folder, ProcessRunner

log = get_logger(__name__)


class BranchCreationStatus(Enum):
    CREATED = auto()
    ALREADY_EXISTS = auto()
    FAILED = auto()


@define(frozen=True)
class BranchCreationResult:
    """Outcome of ``checkout_new_branch``. Truthy only when the branch was created."""

    branch_name: str
    status: BranchCreationStatus
    error_output: str = field(default="")

    @property
    def created(self) -> bool:
        return self.status is BranchCreationStatus.CREATED

    def __bool__(self) -> bool:
        return self.created


class GitCmdDriver:
    """Runs git operations against one working folder with one credential set."""

    def __init__(
        self,
        config: DriverConfig | None,
        working_folder: Folder | None,
        credentials: GitCredentials | None,
        runner: ProcessRunner | None = None,
    ) -> None:
        if config is None:
            raise ConfigurationError("A DriverConfig with the path to git is required")
        if working_folder is None:
            raise ConfigurationError("A working folder is required")
        if credentials is None:
            raise ConfigurationError("Credentials are required (use GitCredentials() for none)")

        self._config = config
        self._working_folder = working_folder
        self._credentials = credentials
        self._runner = runner or ExternalProcess(redactor=redact)
        self._commands = GitCommandBuilder(ssl_verify=config.ssl_verify)
        self._log = log.bind(working_folder=str(working_folder.full_path))

        if not config.ssl_verify:
            self._log.warning("TLS certificate verification is disabled for clone and push")

    @property
    def working_folder(self) -> Folder:
        return self._working_folder

    @property
    def config(self) -> DriverConfig:
        return self._config

    async def add_remote(self, name: str, endpoint: str | None) -> None:
        if endpoint is None:
            return
        uri = self._credentials_uri(endpoint)
        await self._run_git(self._commands.remote_add(name, uri), ensure_success=True)

    async def checkout(self, branch_name: str) -> None:
        await self._run_git(self._commands.checkout(branch_name), ensure_success=True)

    async def checkout_remote_to_local(self, branch_name: str) -> None:
        args = self._commands.checkout_remote_to_local(branch_name, self._config.default_remote)
        await self._run_git(args, ensure_success=True)

    async def checkout_new_branch(self, branch_name: str) -> BranchCreationResult:
        """Create and switch to ``branch_name``.

        Failure is reported through the returned result, never raised.
        """
        try:
            await self._run_git(self._commands.checkout_new_branch(branch_name), ensure_success=True)
        except ProcessExecutionError as e:
            status = (
                BranchCreationStatus.ALREADY_EXISTS
                if is_branch_exists_error(e.error_output)
                else BranchCreationStatus.FAILED
            )
            self._log.info(
                "Could not create branch", branch=branch_name, status=status.name, error=e.error_output
            )
            return BranchCreationResult(branch_name, status, e.error_output)
        return BranchCreationResult(branch_name, BranchCreationStatus.CREATED)

    async def clone(self, pull_endpoint: str | None, branch_name: str | None = None) -> None:
        if pull_endpoint is None:
            return

        args = self._commands.clone(pull_endpoint, branch_name, self._credentials.password)
        self._log.info(
            "Cloning repository",
            endpoint=redact([pull_endpoint])[0],
            branch=branch_name or "default",
            folder=str(self._working_folder.full_path),
        )
        await self._run_git(args, ensure_success=True)
        self._log.debug("Git clone complete")

    async def commit(self, message: str) -> None:
        self._log.debug("Git commit", message=message)
        await self._run_git(self._commands.commit(message), ensure_success=True)

    async def push(self, remote_name: str, branch_name: str) -> None:
        self._log.debug("Git push", target=f"{remote_name}/{branch_name}")
        args = self._commands.push(remote_name, branch_name, self._credentials.password)
        await self._run_git(args, ensure_success=True)

    async def get_current_head(self) -> str:
        symbolic = await self._run_git(self._commands.symbolic_ref_head(), ensure_success=False)

        async def rev_parse() -> str:
            return await self._run_git(self._commands.rev_parse_head(), ensure_success=True)

        return await resolve_head(symbolic, rev_parse)

    async def get_new_commit_messages(self, base_branch_name: str, head_branch_name: str) -> tuple[str, ...]:
        commit_log = await self._run_git(
            self._commands.log_new_commits(base_branch_name, head_branch_name), ensure_success=True
        )
        return parse_commit_messages(commit_log)

    def _credentials_uri(self, endpoint: str) -> str:
        if self._credentials.username is None:
            return endpoint
        self._log.debug("Using git credentials", username=self._credentials.username)
        if self._config.credential_mode is CredentialMode.URI:
            return credentials_uri(endpoint, self._credentials)
        return endpoint

    async def _run_git(self, arguments: list[str], ensure_success: bool) -> str:
        result = await self._runner.run(
            Path(self._working_folder.full_path),
            self._config.git_path,
            arguments,
            ensure_success,
            timeout=self._config.process_timeout,
        )
        return result.output


# 🔼⚙️🔚
