#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Async execution of external processes with captured output."""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Callable, Sequence
from pathlib import Path

from attrs import define, field
from provide.foundation.logger import get_logger

from depgit.exceptions import ProcessExecutionError, ProcessTimeoutError

log = get_logger(__name__)

# Exit status a shell reports for a command that cannot be found.
EXIT_COMMAND_NOT_FOUND = 127
# Exit status a shell reports for a command that was found but could not run.
EXIT_CANNOT_EXECUTE = 126


def normalize_output(raw: bytes | None) -> str:
    """Decode process output, normalize line endings and trim trailing newlines."""
    if not raw:
        return ""
    text = raw.decode("utf-8", errors="replace")
    return text.replace("\r\n", "\n").rstrip("\r\n")


@define(frozen=True)
class ProcessResult:
    """Exit status and captured output of one finished process."""

    args: tuple[str, ...] = field(converter=tuple)
    exit_code: int
    output: str = ""
    error_output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class ExternalProcess:
    """Spawns one OS process per ``run`` call and waits for it to exit.

    ``redactor`` rewrites the argument vector before it is logged or put into
    an exception message, so secrets passed on the command line stay out of
    logs.
    """

    def __init__(self, redactor: Callable[[Sequence[str]], list[str]] | None = None) -> None:
        self._redact = redactor or list
        self._log = log.bind(runner_id=id(self))

    async def run(
        self,
        cwd: Path,
        executable: str,
        arguments: Sequence[str],
        ensure_success: bool,
        timeout: float | None = None,
    ) -> ProcessResult:
        argv = [executable, *arguments]
        display = self._redact(argv)
        self._log.debug("Starting process", command=shlex.join(display), cwd=str(cwd))

        if not Path(cwd).is_dir():
            self._log.error("Working directory does not exist", cwd=str(cwd))
            raise ProcessExecutionError(display, EXIT_CANNOT_EXECUTE, f"working directory not found: {cwd}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
        except FileNotFoundError as e:
            self._log.error("Executable not found", executable=executable, error=str(e))
            raise ProcessExecutionError(display, EXIT_COMMAND_NOT_FOUND, str(e)) from e
        except OSError as e:
            self._log.error("Could not start process", executable=executable, error=str(e))
            raise ProcessExecutionError(display, EXIT_CANNOT_EXECUTE, str(e)) from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except TimeoutError:
            await self._kill(proc)
            self._log.error("Process timed out", command=shlex.join(display), timeout=timeout)
            raise ProcessTimeoutError(display, timeout) from None
        except asyncio.CancelledError:
            await self._kill(proc)
            raise

        exit_code = proc.returncode if proc.returncode is not None else 0
        result = ProcessResult(
            args=display,
            exit_code=exit_code,
            output=normalize_output(stdout),
            error_output=normalize_output(stderr),
        )

        if exit_code != 0:
            if ensure_success:
                self._log.warning(
                    "Process failed",
                    command=shlex.join(display),
                    exit_code=exit_code,
                    stderr=result.error_output,
                )
                raise ProcessExecutionError(display, exit_code, result.error_output or result.output)
            self._log.debug("Process exited non-zero", command=shlex.join(display), exit_code=exit_code)

        return result

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                return
            await proc.wait()


# 🔼⚙️🔚
