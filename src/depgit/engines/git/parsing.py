#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Parsers for git's textual output."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

BRANCH_EXISTS_MARKER = "already exists"


async def resolve_head(symbolic_ref: str, rev_parse: Callable[[], Awaitable[str]]) -> str:
    """Return the branch name from ``symbolic-ref``, or the commit hash when detached.

    ``rev_parse`` is only awaited when ``symbolic_ref`` is empty.
    """
    if symbolic_ref.strip():
        return symbolic_ref.strip()
    return (await rev_parse()).strip()


def parse_commit_messages(commit_log: str) -> tuple[str, ...]:
    """Extract messages from ``git log --oneline`` output.

    The abbreviated hash leading each line is dropped. Order is kept as git
    emitted it (most recent first).
    """
    messages = []
    for raw in commit_log.splitlines():
        line = raw.strip()
        if not line:
            continue
        message = " ".join(line.split(" ")[1:]).strip()
        if message:
            messages.append(message)
    return tuple(messages)


def is_branch_exists_error(error_output: str) -> bool:
    """True when git refused to create a branch because the name is taken."""
    return BRANCH_EXISTS_MARKER in error_output.lower()


# 🔼⚙️🔚
