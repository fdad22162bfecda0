#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Transient credential injection for git network operations.

Tokens are passed as a command-level ``-c http.extraHeader=...`` override, so
they never land in ``.git/config`` or the process environment.
"""

from __future__ import annotations

import base64
import re
from collections.abc import Sequence
from urllib.parse import quote, urlsplit, urlunsplit

from depgit.config.models import GitCredentials
from depgit.exceptions import ConfigurationError

AUTH_HEADER_KEY = "http.extraHeader"
AUTH_HEADER_PREFIX = f"{AUTH_HEADER_KEY}=Authorization: "
REDACTED = "***"

_URI_PASSWORD = re.compile(r"(?P<prefix>[a-zA-Z][a-zA-Z0-9+.-]*://[^/@:\s]*:)[^/@\s]*(?P<suffix>@)")


def basic_auth_value(token: str) -> str:
    """Return ``Basic <base64(":" + token)>`` for the given token."""
    encoded = base64.b64encode(f":{token}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def auth_header_args(token: str | None) -> list[str]:
    """Return the ``-c`` override that adds an Authorization header, or nothing."""
    if not token:
        return []
    return ["-c", f"{AUTH_HEADER_PREFIX}{basic_auth_value(token)}"]


def credentials_uri(endpoint: str, credentials: GitCredentials) -> str:
    """Embed username and password into ``endpoint``'s user-info part."""
    if credentials.username is None:
        return endpoint

    parts = urlsplit(endpoint)
    if not parts.scheme or not parts.hostname:
        raise ConfigurationError(f"Endpoint '{endpoint}' must be an absolute URI")

    userinfo = quote(credentials.username, safe="")
    if credentials.password:
        userinfo = f"{userinfo}:{quote(credentials.password, safe='')}"
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, f"{userinfo}@{host}", parts.path, parts.query, parts.fragment))


def redact(args: Sequence[str]) -> list[str]:
    """Mask auth headers and URI passwords in an argument vector."""
    redacted = []
    for arg in args:
        if arg.startswith(AUTH_HEADER_PREFIX):
            arg = f"{AUTH_HEADER_PREFIX}{REDACTED}"
        else:
            arg = _URI_PASSWORD.sub(rf"\g<prefix>{REDACTED}\g<suffix>", arg)
        redacted.append(arg)
    return redacted


# 🔼⚙️🔚
