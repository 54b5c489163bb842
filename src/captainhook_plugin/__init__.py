# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CaptainHook plugin: provision git hooks from dependency-manager lifecycle events."""

from __future__ import annotations

from importlib import metadata

from .config import ExtraConfig, read_extra_config
from .context import HostContext, build_host_context
from .errors import GitDirectoryNotFoundError, PluginConfigError, PluginError, RunnerProcessError
from .events import EventDispatcher, LifecycleEvent, subscribed_events
from .gating import GateDecision, GateOutcome, evaluate_gates
from .git import GitDirectoryDescriptor, locate_git_directory
from .orchestrator import ProvisioningOrchestrator
from .runner import HookRunner, SubprocessHookRunner
from .session import PluginRunState, PluginSession

__all__ = [
    "EventDispatcher",
    "ExtraConfig",
    "GateDecision",
    "GateOutcome",
    "GitDirectoryDescriptor",
    "GitDirectoryNotFoundError",
    "HookRunner",
    "HostContext",
    "LifecycleEvent",
    "PluginConfigError",
    "PluginError",
    "PluginRunState",
    "PluginSession",
    "ProvisioningOrchestrator",
    "RunnerProcessError",
    "SubprocessHookRunner",
    "__version__",
    "build_host_context",
    "evaluate_gates",
    "locate_git_directory",
    "read_extra_config",
    "subscribed_events",
]

try:
    __version__ = metadata.version("captainhook-plugin")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
