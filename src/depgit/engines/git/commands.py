#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Argument vectors for each git operation the driver performs."""

from __future__ import annotations

from depgit.engines.git.credentials import auth_header_args

SSL_NO_VERIFY_ARGS = ("-c", "http.sslVerify=false")


class GitCommandBuilder:
    """Builds git argument vectors. Order and flag names must match git's CLI."""

    def __init__(self, ssl_verify: bool = True) -> None:
        self.ssl_verify = ssl_verify

    def _network_prefix(self, token: str | None) -> list[str]:
        prefix = [] if self.ssl_verify else list(SSL_NO_VERIFY_ARGS)
        return [*prefix, *auth_header_args(token)]

    def remote_add(self, name: str, uri: str) -> list[str]:
        return ["remote", "add", name, uri]

    def checkout(self, branch_name: str) -> list[str]:
        return ["checkout", branch_name]

    def checkout_remote_to_local(self, branch_name: str, remote: str = "origin") -> list[str]:
        return ["checkout", "-b", branch_name, f"{remote}/{branch_name}"]

    def checkout_new_branch(self, branch_name: str) -> list[str]:
        return ["checkout", "-b", branch_name]

    def clone(self, endpoint: str, branch_name: str | None = None, token: str | None = None) -> list[str]:
        """Clone into the current directory (``.``) rather than a new subdirectory."""
        args = [*self._network_prefix(token), "clone"]
        if branch_name is not None:
            args += ["-b", branch_name]
        return [*args, endpoint, "."]

    def commit(self, message: str) -> list[str]:
        return ["commit", "-a", "-m", message]

    def push(self, remote_name: str, branch_name: str, token: str | None = None) -> list[str]:
        return [*self._network_prefix(token), "push", remote_name, branch_name]

    def symbolic_ref_head(self) -> list[str]:
        return ["symbolic-ref", "-q", "--short", "HEAD"]

    def rev_parse_head(self) -> list[str]:
        return ["rev-parse", "HEAD"]

    def log_new_commits(self, base_branch_name: str, head_branch_name: str) -> list[str]:
        return [
            "log",
            "--oneline",
            "--no-decorate",
            "--right-only",
            f"{base_branch_name}...{head_branch_name}",
        ]


# 🔼⚙️🔚
