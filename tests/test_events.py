# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for lifecycle subscriptions and session dispatch."""

from __future__ import annotations

from captainhook_plugin.context import HostContext
from captainhook_plugin.events import EventDispatcher, LifecycleEvent, subscribed_events
from captainhook_plugin.orchestrator import ProvisioningOrchestrator
from captainhook_plugin.session import PluginSession


def _orchestrator(runner) -> ProvisioningOrchestrator:
    return ProvisioningOrchestrator(runner_factory=lambda _context: runner)


def test_table_registers_both_entry_points(fake_runner) -> None:
    orchestrator = _orchestrator(fake_runner)
    table = subscribed_events(orchestrator)

    assert table["post-package-install"] == [orchestrator.on_package_event]
    assert table["post-package-update"] == [orchestrator.on_package_event]
    assert table["post-autoload-dump"] == [orchestrator.on_dependencies_resolved]


def test_base_handlers_are_kept_first(fake_runner) -> None:
    def base_handler(context: HostContext, session: PluginSession) -> PluginSession:
        return session

    base = {"post-package-install": [base_handler], "pre-uninstall": [base_handler]}
    orchestrator = _orchestrator(fake_runner)

    table = subscribed_events(orchestrator, base)

    assert table["post-package-install"] == [base_handler, orchestrator.on_package_event]
    assert table["pre-uninstall"] == [base_handler]
    assert base["post-package-install"] == [base_handler]


def test_dispatch_defers_install_to_later_event(make_context, fake_runner) -> None:
    dispatcher = EventDispatcher(subscribed_events(_orchestrator(fake_runner)))
    context = make_context()

    session = dispatcher.dispatch(LifecycleEvent.POST_PACKAGE_UPDATE, context, PluginSession())
    assert fake_runner.operations == ["configure"]

    session = dispatcher.dispatch("post-autoload-dump", context, session)
    assert fake_runner.operations == ["configure", "install"]
    assert session.is_deferred_install_pending is False


def test_run_sequence_installs_exactly_once(make_context, fake_runner) -> None:
    dispatcher = EventDispatcher(subscribed_events(_orchestrator(fake_runner)))

    dispatcher.run(
        [
            LifecycleEvent.POST_PACKAGE_INSTALL,
            LifecycleEvent.POST_PACKAGE_UPDATE,
            LifecycleEvent.POST_AUTOLOAD_DUMP,
            LifecycleEvent.POST_AUTOLOAD_DUMP,
        ],
        make_context(),
    )

    assert fake_runner.operations == ["configure", "install"]


def test_unknown_events_are_ignored(make_context, fake_runner) -> None:
    dispatcher = EventDispatcher(subscribed_events(_orchestrator(fake_runner)))

    session = dispatcher.run(["post-create-project-cmd"], make_context())

    assert session == PluginSession()
    assert fake_runner.calls == []


def test_autoload_dump_alone_does_nothing(make_context, fake_runner) -> None:
    dispatcher = EventDispatcher(subscribed_events(_orchestrator(fake_runner)))

    dispatcher.run([LifecycleEvent.POST_AUTOLOAD_DUMP], make_context())

    assert fake_runner.calls == []
