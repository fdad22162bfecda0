#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration models for the git driver and the TOML loader that builds them."""

from __future__ import annotations

import shutil
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from attrs import define, field, validators
from provide.foundation.logger import get_logger

from depgit.exceptions import ConfigurationError

log = get_logger(__name__)

GIT_EXECUTABLE_NAME = "git"
DEFAULT_REMOTE = "origin"


class CredentialMode(Enum):
    """How credentials reach the remote."""

    # Per-invocation ``-c http.extraHeader=...`` override.
    HEADER = "header"
    # user:password embedded in the remote URI (visible in .git/config).
    URI = "uri"


def _validate_git_path(instance: Any, attribute: Any, value: str) -> None:
    if not value or not str(value).strip():
        raise ConfigurationError("git_path must be a non-empty path to the git executable")
    if Path(value).stem != GIT_EXECUTABLE_NAME:
        raise ConfigurationError(f"Invalid path '{value}'. Path must point to '{GIT_EXECUTABLE_NAME}' cmd")


def _validate_timeout(instance: Any, attribute: Any, value: float | None) -> None:
    if value is not None and value <= 0:
        raise ConfigurationError(f"{attribute.name} must be positive, got {value}")


@define(frozen=True)
class GitCredentials:
    """Username and secret token consumed, never stored, by the driver."""

    username: str | None = field(default=None)
    password: str | None = field(default=None, repr=lambda v: "***" if v else "None")

    @property
    def has_secret(self) -> bool:
        return bool(self.password)


@define(frozen=True)
class DriverConfig:
    """Immutable settings for one ``GitCmdDriver`` instance."""

    git_path: str = field(converter=str, validator=_validate_git_path)
    # TLS verification for clone/push. Disabling it is opt-in.
    ssl_verify: bool = field(default=True, validator=validators.instance_of(bool))
    credential_mode: CredentialMode = field(default=CredentialMode.HEADER, converter=CredentialMode)
    process_timeout: float | None = field(default=None, validator=_validate_timeout)
    default_remote: str = field(default=DEFAULT_REMOTE)


def find_git_executable() -> str:
    """Locate ``git`` on PATH."""
    path = shutil.which(GIT_EXECUTABLE_NAME)
    if path is None:
        raise ConfigurationError("Could not find 'git' on PATH")
    return path


def load_config(config_path: Path) -> DriverConfig:
    """Load a ``DriverConfig`` from the ``[git]`` table of a TOML file.

    ``git_path`` falls back to the ``git`` found on PATH when the file omits it.
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    section = data.get("git", {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[git] in {config_path} must be a table")

    known = {"git_path", "ssl_verify", "credential_mode", "process_timeout", "default_remote"}
    unknown = set(section) - known
    if unknown:
        log.warning("Ignoring unknown git config keys", keys=sorted(unknown), path=str(config_path))

    kwargs = {k: v for k, v in section.items() if k in known}
    if "git_path" not in kwargs:
        kwargs["git_path"] = find_git_executable()

    try:
        config = DriverConfig(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid git configuration in {config_path}: {e}") from e

    log.debug("Loaded driver configuration", path=str(config_path), ssl_verify=config.ssl_verify)
    return config


# 🔼⚙️🔚
