# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lifecycle event subscriptions and the dispatcher threading the session through them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum

from .context import HostContext
from .orchestrator import ProvisioningOrchestrator
from .session import PluginSession

Handler = Callable[[HostContext, PluginSession], PluginSession]
SubscriptionTable = dict[str, list[Handler]]


class LifecycleEvent(str, Enum):
    """Host lifecycle events the plugin reacts to."""

    POST_PACKAGE_INSTALL = "post-package-install"
    POST_PACKAGE_UPDATE = "post-package-update"
    POST_AUTOLOAD_DUMP = "post-autoload-dump"


PACKAGE_EVENTS: tuple[LifecycleEvent, ...] = (
    LifecycleEvent.POST_PACKAGE_INSTALL,
    LifecycleEvent.POST_PACKAGE_UPDATE,
)
DEFAULT_EVENT_SEQUENCE: tuple[LifecycleEvent, ...] = (
    LifecycleEvent.POST_PACKAGE_INSTALL,
    LifecycleEvent.POST_AUTOLOAD_DUMP,
)


def subscribed_events(
    orchestrator: ProvisioningOrchestrator,
    base: Mapping[str, Sequence[Handler]] | None = None,
) -> SubscriptionTable:
    """Return the event table, appending the plugin handlers after any ``base`` handlers.

    Args:
        orchestrator: Provides the two handler entry points.
        base: Handlers already registered by the host or a parent mechanism.

    Returns:
        SubscriptionTable: Fresh mapping of event names to ordered handler lists.
    """

    table: SubscriptionTable = {name: list(handlers) for name, handlers in (base or {}).items()}
    for event in PACKAGE_EVENTS:
        table.setdefault(event.value, []).append(orchestrator.on_package_event)
    table.setdefault(LifecycleEvent.POST_AUTOLOAD_DUMP.value, []).append(orchestrator.on_dependencies_resolved)
    return table


class EventDispatcher:
    """Dispatch host lifecycle events for one orchestration session."""

    def __init__(self, subscriptions: Mapping[str, Sequence[Handler]]) -> None:
        self._subscriptions = subscriptions

    def dispatch(self, event: str | LifecycleEvent, context: HostContext, session: PluginSession) -> PluginSession:
        """Run the handlers subscribed to ``event`` in order; unknown events are ignored."""

        for handler in self._subscriptions.get(_event_name(event), ()):
            session = handler(context, session)
        return session

    def run(self, events: Iterable[str | LifecycleEvent], context: HostContext) -> PluginSession:
        """Dispatch ``events`` in order starting from a fresh session."""

        session = PluginSession()
        for event in events:
            session = self.dispatch(event, context, session)
        return session


def _event_name(event: str | LifecycleEvent) -> str:
    return event.value if isinstance(event, LifecycleEvent) else event


__all__ = [
    "DEFAULT_EVENT_SEQUENCE",
    "EventDispatcher",
    "Handler",
    "LifecycleEvent",
    "PACKAGE_EVENTS",
    "SubscriptionTable",
    "subscribed_events",
]
