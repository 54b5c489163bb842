# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status output for the plugin, rendered through a rich console."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.text import Text


def stdout_is_terminal() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class StatusKind(Enum):
    """Kinds of status line with their emoji prefix and colour."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "bold red")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


@dataclass(slots=True)
class PluginLogger:
    """Output sink for one orchestration session.

    The logger owns a single rich console built from its own colour and emoji
    settings. ``use_color=None`` follows whether stdout is a terminal.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    _console: Console | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def color_enabled(self) -> bool:
        """Return whether status lines are styled."""

        return stdout_is_terminal() if self.use_color is None else self.use_color

    @property
    def console(self) -> Console:
        """Return the console, creating it on first use.

        The console writes to whatever ``sys.stdout`` is at print time.
        """

        if self._console is None:
            color = self.color_enabled
            self._console = Console(
                color_system="auto" if color else None,
                force_terminal=True if color else None,
                no_color=not color,
                emoji=self.use_emoji,
                soft_wrap=True,
                highlight=False,
            )
        return self._console

    def section(self, title: str) -> None:
        """Print the banner opening the plugin's output block."""

        if self.color_enabled:
            self.console.print()
            self.console.rule(title, style="blue")
        else:
            self.console.print(Text(f"\n--- {title} ---"))

    def info(self, message: str) -> None:
        """Log an informational status line."""

        self._emit(StatusKind.INFO, message)

    def ok(self, message: str) -> None:
        """Log a success status line."""

        self._emit(StatusKind.OK, message)

    def warn(self, message: str) -> None:
        """Log a warning or guidance line."""

        self._emit(StatusKind.WARN, message)

    def fail(self, message: str) -> None:
        """Log a fatal failure line."""

        self._emit(StatusKind.FAIL, message)

    def command(self, argv: Sequence[str]) -> None:
        """Show the command line a runner process is started with."""

        text = Text("Running process: ")
        text.append(shlex.join(argv), style="bold blue" if self.color_enabled else "")
        self.console.print(text)

    def _emit(self, kind: StatusKind, message: str) -> None:
        prefix = kind.prefix if self.use_emoji else ""
        text = Text(f"{prefix}{message}")
        if self.color_enabled:
            text.stylize(kind.style)
        self.console.print(text)


__all__ = ["PluginLogger", "StatusKind", "stdout_is_terminal"]
