# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the CaptainHook plugin."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Final

PLUGIN_ERROR_PREFIX: Final[str] = "Shiver me timbers! CaptainHook could not install yer git hooks!"


def plugin_error_message(reason: str) -> str:
    """Return the branded, user-facing message for a fatal plugin failure.

    Args:
        reason: Short description of what went wrong.

    Returns:
        str: Message carrying the plugin prefix and the reason in parentheses.
    """

    return f"{PLUGIN_ERROR_PREFIX} ({reason})"


class PluginError(RuntimeError):
    """Base class for fatal failures that must abort the lifecycle event."""

    def __init__(self, reason: str) -> None:
        super().__init__(plugin_error_message(reason))
        self.reason = reason


class PluginConfigError(PluginError):
    """Raised when the project metadata cannot be read."""


class GitDirectoryNotFoundError(PluginError):
    """Raised when no git metadata directory exists above the working directory."""

    def __init__(self, start: Path, *, reason: str = "git directory not found") -> None:
        super().__init__(reason)
        self.start = start


class RunnerProcessError(PluginError):
    """Raised when the external runner could not start or exited abnormally."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        *,
        reason: str = "installation process failed",
    ) -> None:
        super().__init__(reason)
        self.command = tuple(command)
        self.returncode = returncode


__all__ = [
    "GitDirectoryNotFoundError",
    "PLUGIN_ERROR_PREFIX",
    "PluginConfigError",
    "PluginError",
    "RunnerProcessError",
    "plugin_error_message",
]
