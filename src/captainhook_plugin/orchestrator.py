# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-phase provisioning: ensure the configuration exists, then install hooks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from .context import HostContext
from .gating import GateOutcome, evaluate_gates
from .logging import PluginLogger
from .runner import HookRunner, SubprocessHookRunner
from .session import PluginRunState, PluginSession

PLUGIN_TITLE: Final[str] = "CaptainHook Plugin"

RunnerFactory = Callable[[HostContext], HookRunner]


def subprocess_runner_factory(context: HostContext) -> HookRunner:
    """Return the default runner, started from the host's working directory."""

    return SubprocessHookRunner(decorated=context.decorated, verbose=context.verbose, cwd=context.cwd)


def ensure_configuration(run_state: PluginRunState, runner: HookRunner, logger: PluginLogger) -> bool:
    """Create the configuration through the runner unless it already exists.

    Args:
        run_state: Resolved paths for the session.
        runner: Runner used for the ``configure`` operation.
        logger: Output sink.

    Returns:
        bool: ``True`` when the runner was invoked.
    """

    configuration = run_state.configuration_path
    if configuration.exists():
        logger.info(f"Using CaptainHook config: {configuration}")
        return False
    logger.info("CaptainHook config file not found")
    runner.configure(
        run_state.executable_path,
        configuration,
        run_state.git_directory.path,
        output=logger,
    )
    return True


def install_hooks(run_state: PluginRunState, runner: HookRunner, logger: PluginLogger) -> None:
    """Have the runner write or refresh the hook scripts in the common git directory."""

    logger.info("Installing CaptainHook hooks")
    runner.install(
        run_state.executable_path,
        run_state.configuration_path,
        run_state.git_directory.path,
        output=logger,
    )
    logger.ok(f"CaptainHook hooks installed into {run_state.git_directory.hooks_dir}")


class ProvisioningOrchestrator:
    """Entry points the lifecycle events dispatch to.

    Handlers are stateless: each takes the session value produced by the
    previous handler and returns the next one.
    """

    def __init__(self, runner_factory: RunnerFactory = subprocess_runner_factory) -> None:
        self._runner_factory = runner_factory

    def on_package_event(self, context: HostContext, session: PluginSession) -> PluginSession:
        """Evaluate the gates and ensure the configuration exists.

        Raises:
            GitDirectoryNotFoundError: Propagated from the gates.
            RunnerProcessError: Raised when the ``configure`` operation fails.
        """

        if session.is_deferred_install_pending:
            return session

        logger = context.logger
        logger.section(PLUGIN_TITLE)
        outcome = evaluate_gates(context)
        run_state = outcome.run_state
        if not outcome.proceed or run_state is None:
            _report_skip(outcome, logger)
            return session

        logger.info(outcome.message)
        ensure_configuration(run_state, self._runner_factory(context), logger)
        return session.with_pending_install(run_state)

    def on_dependencies_resolved(self, context: HostContext, session: PluginSession) -> PluginSession:
        """Install the hooks when a package event of this session armed the install.

        Raises:
            RunnerProcessError: Raised when the ``install`` operation fails.
        """

        run_state = session.run_state
        if run_state is None or not run_state.is_deferred_install_pending:
            return session
        install_hooks(run_state, self._runner_factory(context), context.logger)
        return session.with_install_done()


def _report_skip(outcome: GateOutcome, logger: PluginLogger) -> None:
    logger.info(outcome.message)
    if outcome.guidance:
        logger.warn(outcome.guidance)


__all__ = [
    "PLUGIN_TITLE",
    "ProvisioningOrchestrator",
    "RunnerFactory",
    "ensure_configuration",
    "install_hooks",
    "subprocess_runner_factory",
]
