# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered go/no-go checks deciding whether hooks are provisioned."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from .config import EXTRA_NAMESPACE, read_extra_config, resolve_configuration_path
from .context import HostContext
from .environment import is_ci
from .executable import executable_exists, resolve_executable
from .git import locate_git_directory
from .session import PluginRunState


class GateDecision(str, Enum):
    """Outcome of the gate sequence."""

    PROCEED = "proceed"
    SKIP_DISABLED = "skip-disabled"
    SKIP_CI = "skip-ci"
    SKIP_WORKTREE = "skip-worktree"
    SKIP_EXECUTABLE_MISSING = "skip-executable-missing"


GATE_MESSAGES: Final[dict[GateDecision, str]] = {
    GateDecision.PROCEED: "Using CaptainHook executable: {executable}",
    GateDecision.SKIP_DISABLED: "plugin is disabled",
    GateDecision.SKIP_CI: "disabling plugin for CI builds",
    GateDecision.SKIP_WORKTREE: "ARRRRR! We ARRR in a worktree, no install attempted",
    GateDecision.SKIP_EXECUTABLE_MISSING: "CaptainHook executable not found",
}

EXECUTABLE_GUIDANCE: Final[str] = (
    "Make sure you have installed the captainhook runner. "
    "If it lives somewhere else, configure its path in pyproject.toml, e.g. "
    f'[tool.{EXTRA_NAMESPACE}] exec = "tools/captainhook"'
)


@dataclass(frozen=True, slots=True)
class GateOutcome:
    """Decision, its status line and, on ``PROCEED``, the resolved run state."""

    decision: GateDecision
    message: str
    run_state: PluginRunState | None = None
    guidance: str | None = None

    @property
    def proceed(self) -> bool:
        """Return ``True`` when provisioning should continue."""

        return self.decision is GateDecision.PROCEED


def evaluate_gates(context: HostContext) -> GateOutcome:
    """Run the gate checks in order, stopping at the first that fails.

    The order is: disable flag, CI environment, worktree detection, then
    executable presence.

    Args:
        context: Host inputs for the current lifecycle event.

    Returns:
        GateOutcome: ``PROCEED`` with a populated run state, or a skip decision.

    Raises:
        GitDirectoryNotFoundError: Raised when no git directory can be located;
            this is fatal rather than a skip.
    """

    extra = read_extra_config(context.metadata)
    if extra.disable_plugin:
        return _skip(GateDecision.SKIP_DISABLED)
    if is_ci(context.environ):
        return _skip(GateDecision.SKIP_CI)

    git_directory = locate_git_directory(context.cwd)
    if git_directory.is_worktree:
        return _skip(GateDecision.SKIP_WORKTREE)

    executable = _anchor(resolve_executable(extra, context.bin_dir), context.cwd)
    if not executable_exists(executable):
        return _skip(GateDecision.SKIP_EXECUTABLE_MISSING, guidance=EXECUTABLE_GUIDANCE)

    run_state = PluginRunState(
        configuration_path=resolve_configuration_path(extra, context.cwd),
        git_directory=git_directory,
        executable_path=executable,
    )
    message = GATE_MESSAGES[GateDecision.PROCEED].format(executable=executable)
    return GateOutcome(decision=GateDecision.PROCEED, message=message, run_state=run_state)


def _skip(decision: GateDecision, *, guidance: str | None = None) -> GateOutcome:
    return GateOutcome(decision=decision, message=GATE_MESSAGES[decision], guidance=guidance)


def _anchor(path: Path, cwd: Path) -> Path:
    return path if path.is_absolute() else cwd / path


__all__ = ["EXECUTABLE_GUIDANCE", "GATE_MESSAGES", "GateDecision", "GateOutcome", "evaluate_gates"]
