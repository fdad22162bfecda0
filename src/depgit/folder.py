#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Working folder abstraction used as the cwd of every git invocation."""

from __future__ import annotations

import shutil
from pathlib import Path

from attrs import define, field
from provide.foundation.logger import get_logger

log = get_logger(__name__)


@define(frozen=True)
class WorkingFolder:
    """A filesystem directory that git operations run against."""

    path: Path = field(converter=Path)

    @property
    def full_path(self) -> Path:
        return self.path.expanduser().resolve()

    def exists(self) -> bool:
        return self.full_path.is_dir()

    def create(self) -> WorkingFolder:
        """Create the directory (and parents) if it is missing."""
        self.full_path.mkdir(parents=True, exist_ok=True)
        return self

    def try_delete(self) -> bool:
        """Remove the folder tree, returning False instead of raising on failure."""
        if not self.full_path.exists():
            return True
        try:
            shutil.rmtree(self.full_path)
            return True
        except OSError as e:
            log.warning("Failed to delete working folder", path=str(self.full_path), error=str(e))
            return False

    def __str__(self) -> str:
        return str(self.full_path)


# 🔼⚙️🔚
