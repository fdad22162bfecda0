#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Depgit Engines Package.

This package contains implementations of the repository driver protocol
(``depgit.protocols.GitDriver``) used by depgit."""

# 🔼⚙️🔚
