# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the plugin commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..context import build_host_context
from ..errors import PluginError
from ..events import DEFAULT_EVENT_SEQUENCE, EventDispatcher, LifecycleEvent, subscribed_events
from ..logging import PluginLogger
from ..orchestrator import ProvisioningOrchestrator
from ..session import PluginSession
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="captainhook-plugin",
    help="Provision CaptainHook git hooks from dependency-manager lifecycle events.",
    no_args_is_help=True,
    add_completion=False,
)

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root (defaults to the current directory)."),
]
EVENT_OPTION = Annotated[
    list[LifecycleEvent] | None,
    typer.Option(
        "--event",
        "-e",
        help="Lifecycle event to dispatch; repeat to dispatch several in order.",
        case_sensitive=False,
    ),
]
BIN_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--bin-dir", help="Directory holding the captainhook executable."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
ANSI_OPTION = Annotated[
    bool,
    typer.Option("--ansi/--no-ansi", help="Toggle ANSI output for the plugin and the runner."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show the runner command lines."),
]


@app.command("configure")
def configure() -> None:
    """Configure hooks."""

    typer.echo("Configuring hooks")


@app.command("install")
def install() -> None:
    """Install hooks."""

    typer.echo("Installing hooks")


@app.command("dispatch")
def dispatch(
    root: ROOT_OPTION = None,
    event: EVENT_OPTION = None,
    bin_dir: BIN_DIR_OPTION = None,
    emoji: EMOJI_OPTION = True,
    ansi: ANSI_OPTION = False,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Dispatch lifecycle events to the plugin as the dependency manager would."""

    logger = build_cli_logger(emoji=emoji, color=ansi)
    events = tuple(event) if event else DEFAULT_EVENT_SEQUENCE
    try:
        run_session(
            root or Path.cwd(),
            events,
            bin_dir=bin_dir,
            logger=logger,
            decorated=ansi,
            verbose=verbose,
        )
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc


def run_session(
    root: Path,
    events: tuple[LifecycleEvent, ...],
    *,
    bin_dir: Path | None,
    logger: PluginLogger,
    decorated: bool,
    verbose: bool = False,
) -> PluginSession:
    """Dispatch ``events`` through a fresh orchestration session.

    Args:
        root: Project root used as the working directory of the session.
        events: Lifecycle events dispatched in order.
        bin_dir: Optional binary directory override.
        logger: Output sink.
        decorated: ANSI preference forwarded to the runner.
        verbose: Whether runner command lines are shown.

    Returns:
        PluginSession: Session value after the last event.

    Raises:
        CLIError: Raised when the plugin reports a fatal failure.
    """

    try:
        context = build_host_context(
            root,
            bin_dir=bin_dir,
            logger=logger,
            decorated=decorated,
            verbose=verbose,
        )
        dispatcher = EventDispatcher(subscribed_events(ProvisioningOrchestrator()))
        return dispatcher.run(events, context)
    except PluginError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main", "run_session"]
