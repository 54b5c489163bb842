# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (errors, logger construction)."""

from __future__ import annotations

from ..logging import PluginLogger


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def build_cli_logger(*, emoji: bool, color: bool | None = None) -> PluginLogger:
    """Return a ``PluginLogger`` configured from CLI presentation flags."""

    return PluginLogger(use_emoji=emoji, use_color=color)


__all__ = ["CLIError", "build_cli_logger"]
