#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command-line git engine for depgit."""

from .commands import GitCommandBuilder
from .driver import BranchCreationResult, BranchCreationStatus, GitCmdDriver

__all__ = ["BranchCreationResult", "BranchCreationStatus", "GitCmdDriver", "GitCommandBuilder"]

# 🔼⚙️🔚
