#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception hierarchy for depgit.

Two kinds of failure surface from the driver:

- ``ConfigurationError`` is raised while building a driver or loading its
  configuration. Nothing can run until it is fixed.
- ``ProcessExecutionError`` is raised when a git invocation that must succeed
  exits with a non-zero status. It carries the captured error output so the
  caller can decide whether to retry or discard the working folder.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence


class DepgitError(Exception):
    """Base exception for depgit errors."""


class ConfigurationError(DepgitError):
    """Raised for an invalid git path, working folder, credentials or config file."""


class ProcessExecutionError(DepgitError):
    """Raised when an external process exits with a non-zero status."""

    def __init__(self, args: Sequence[str], exit_code: int, error_output: str) -> None:
        self.command = list(args)
        self.exit_code = exit_code
        self.error_output = error_output
        message = f"Command '{shlex.join(self.command)}' failed with exit code {exit_code}"
        if error_output:
            message = f"{message}: {error_output}"
        super().__init__(message)


class ProcessTimeoutError(ProcessExecutionError):
    """Raised when an external process is killed after exceeding its timeout."""

    def __init__(self, args: Sequence[str], timeout: float, error_output: str = "") -> None:
        self.timeout = timeout
        super().__init__(args, -1, error_output or f"timed out after {timeout}s")


# 🔼⚙️🔚
