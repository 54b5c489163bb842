# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation of the external CaptainHook runner."""

from __future__ import annotations

import subprocess  # nosec B404
import sys
from enum import Enum
from pathlib import Path
from typing import Protocol

from .errors import RunnerProcessError
from .logging import PluginLogger


class RunnerOperation(str, Enum):
    """Named operations understood by the runner."""

    CONFIGURE = "configure"
    INSTALL = "install"


class HookRunner(Protocol):
    """Narrow interface over the external runner."""

    def configure(
        self,
        executable: Path,
        configuration: Path,
        git_dir: Path,
        *,
        output: PluginLogger,
    ) -> None:
        """Create the configuration file; raise :class:`RunnerProcessError` on failure."""

    def install(
        self,
        executable: Path,
        configuration: Path,
        git_dir: Path,
        *,
        output: PluginLogger,
    ) -> None:
        """Write hook scripts into ``git_dir``; raise :class:`RunnerProcessError` on failure."""


def build_runner_command(
    operation: RunnerOperation,
    executable: Path,
    configuration: Path,
    git_dir: Path,
    *,
    decorated: bool,
) -> list[str]:
    """Return the argument vector used to start the runner.

    Python scripts are started through the current interpreter so they do not
    need an executable bit.
    """

    prefix = [sys.executable] if executable.suffix == ".py" else []
    return [
        *prefix,
        str(executable),
        operation.value,
        "--ansi" if decorated else "--no-ansi",
        "--no-interaction",
        f"--configuration={configuration}",
        f"--git-directory={git_dir}",
    ]


class SubprocessHookRunner:
    """Run the CaptainHook executable as a blocking child process.

    The child shares the host's stdin, stdout and stderr. There is no timeout.
    With ``verbose`` the command line is shown before the process starts.
    """

    def __init__(self, *, decorated: bool = False, verbose: bool = False, cwd: Path | None = None) -> None:
        self._decorated = decorated
        self._verbose = verbose
        self._cwd = cwd

    def configure(
        self,
        executable: Path,
        configuration: Path,
        git_dir: Path,
        *,
        output: PluginLogger,
    ) -> None:
        self._run(RunnerOperation.CONFIGURE, executable, configuration, git_dir, output=output)

    def install(
        self,
        executable: Path,
        configuration: Path,
        git_dir: Path,
        *,
        output: PluginLogger,
    ) -> None:
        self._run(RunnerOperation.INSTALL, executable, configuration, git_dir, output=output)

    def _run(
        self,
        operation: RunnerOperation,
        executable: Path,
        configuration: Path,
        git_dir: Path,
        *,
        output: PluginLogger,
    ) -> None:
        command = build_runner_command(
            operation,
            executable,
            configuration,
            git_dir,
            decorated=self._decorated,
        )
        if self._verbose:
            output.command(command)
        try:
            # Bandit: the argument vector is built from resolved paths; no shell is involved.
            completed = subprocess.run(  # nosec B603
                command,
                cwd=str(self._cwd) if self._cwd is not None else None,
                check=False,
            )
        except OSError as exc:
            raise RunnerProcessError(command, None, reason="no process") from exc
        if completed.returncode != 0:
            raise RunnerProcessError(command, completed.returncode)


__all__ = ["HookRunner", "RunnerOperation", "SubprocessHookRunner", "build_runner_command"]
