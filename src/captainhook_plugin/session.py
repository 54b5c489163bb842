# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""State carried between the lifecycle events of one orchestration session."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from .git import GitDirectoryDescriptor


@dataclass(frozen=True, slots=True)
class PluginRunState:
    """Values resolved by the gates, consumed by the provisioning phases."""

    configuration_path: Path
    git_directory: GitDirectoryDescriptor
    executable_path: Path
    is_deferred_install_pending: bool = False


@dataclass(frozen=True, slots=True)
class PluginSession:
    """Session value threaded through every handler of one host session.

    Handlers never mutate a session; they return an updated copy.
    """

    run_state: PluginRunState | None = None

    @property
    def is_deferred_install_pending(self) -> bool:
        """Return whether a package event armed the deferred install phase."""

        return self.run_state is not None and self.run_state.is_deferred_install_pending

    def with_pending_install(self, run_state: PluginRunState) -> PluginSession:
        """Return a session whose install phase will run on the next finalize event."""

        return replace(self, run_state=replace(run_state, is_deferred_install_pending=True))

    def with_install_done(self) -> PluginSession:
        """Return a session with the deferred install flag cleared."""

        if self.run_state is None:
            return self
        return replace(self, run_state=replace(self.run_state, is_deferred_install_pending=False))


__all__ = ["PluginRunState", "PluginSession"]
