#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for depgit.

Re-exports the configuration models and loading functions."""

from __future__ import annotations

from depgit.config.models import (
    CredentialMode,
    DriverConfig,
    GitCredentials,
    find_git_executable,
    load_config,
)
from depgit.exceptions import ConfigurationError

__all__ = [
    "ConfigurationError",
    "CredentialMode",
    "DriverConfig",
    "GitCredentials",
    "find_git_executable",
    "load_config",
]

# 🔼⚙️🔚
