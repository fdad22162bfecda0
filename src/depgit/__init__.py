#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Drive the git command-line tool for dependency-update workflows."""

from provide.foundation.utils.versioning import get_version

from depgit.config import CredentialMode, DriverConfig, GitCredentials
from depgit.engines.git import BranchCreationResult, BranchCreationStatus, GitCmdDriver
from depgit.exceptions import (
    ConfigurationError,
    DepgitError,
    ProcessExecutionError,
    ProcessTimeoutError,
)
from depgit.folder import WorkingFolder

__version__ = get_version("depgit", caller_file=__file__)

__all__ = [
    "BranchCreationResult",
    "BranchCreationStatus",
    "ConfigurationError",
    "CredentialMode",
    "DepgitError",
    "DriverConfig",
    "GitCmdDriver",
    "GitCredentials",
    "ProcessExecutionError",
    "ProcessTimeoutError",
    "WorkingFolder",
    "__version__",
]

# 🔼⚙️🔚
