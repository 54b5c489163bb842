# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-provided inputs for one orchestration session."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import load_project_metadata
from .environment import default_bin_dir
from .logging import PluginLogger, stdout_is_terminal


@dataclass(frozen=True, slots=True)
class HostContext:
    """Everything the dependency manager hands the plugin for a lifecycle event.

    Attributes:
        cwd: Working directory of the host process, used as the search start.
        metadata: ``[tool]`` table of the host project's ``pyproject.toml``.
        bin_dir: Directory the dependency manager installs executables into.
        environ: Environment variables visible to the host process.
        logger: Output sink for status lines and runner progress.
        decorated: ``True`` when the runner should emit ANSI output.
        verbose: ``True`` when runner command lines should be shown.
    """

    cwd: Path
    metadata: Mapping[str, Any]
    bin_dir: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    logger: PluginLogger = field(default_factory=PluginLogger)
    decorated: bool = False
    verbose: bool = False


def build_host_context(
    root: Path,
    *,
    bin_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
    logger: PluginLogger | None = None,
    decorated: bool | None = None,
    verbose: bool = False,
) -> HostContext:
    """Return a :class:`HostContext` for the project rooted at ``root``.

    Args:
        root: Project directory holding ``pyproject.toml``.
        bin_dir: Optional binary directory, resolved against the process working
            directory like ``root``; defaults to the project's virtualenv.
        environ: Optional environment mapping; defaults to ``os.environ``.
        logger: Optional output sink.
        decorated: Optional ANSI preference; defaults to TTY detection.
        verbose: Whether runner command lines are shown.

    Returns:
        HostContext: Immutable context for the session.

    Raises:
        PluginConfigError: Raised when ``pyproject.toml`` is not valid TOML.
    """

    cwd = root.resolve()
    return HostContext(
        cwd=cwd,
        metadata=load_project_metadata(cwd),
        bin_dir=bin_dir.resolve() if bin_dir is not None else default_bin_dir(cwd),
        environ=dict(os.environ if environ is None else environ),
        logger=logger or PluginLogger(),
        decorated=stdout_is_terminal() if decorated is None else decorated,
        verbose=verbose,
    )


__all__ = ["HostContext", "build_host_context"]
