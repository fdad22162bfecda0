#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""External process execution for depgit."""

from depgit.process.runner import ExternalProcess, ProcessResult, normalize_output

__all__ = ["ExternalProcess", "ProcessResult", "normalize_output"]

# 🔼⚙️🔚
