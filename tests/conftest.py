# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from captainhook_plugin.context import HostContext
from captainhook_plugin.logging import PluginLogger


@dataclass
class RunnerCall:
    operation: str
    executable: Path
    configuration: Path
    git_dir: Path


@dataclass
class FakeRunner:
    """Runner double recording invocations instead of spawning processes."""

    calls: list[RunnerCall] = field(default_factory=list)
    create_configuration: bool = True

    def configure(self, executable: Path, configuration: Path, git_dir: Path, *, output: PluginLogger) -> None:
        self.calls.append(RunnerCall("configure", executable, configuration, git_dir))
        if self.create_configuration:
            configuration.write_text("{}", encoding="utf-8")

    def install(self, executable: Path, configuration: Path, git_dir: Path, *, output: PluginLogger) -> None:
        self.calls.append(RunnerCall("install", executable, configuration, git_dir))

    @property
    def operations(self) -> list[str]:
        return [call.operation for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Return a primary checkout with a ``.git`` directory."""

    root = tmp_path / "repo"
    (root / ".git" / "hooks").mkdir(parents=True)
    return root


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Return a binary directory holding a ``captainhook`` executable."""

    directory = tmp_path / "vendor" / "bin"
    directory.mkdir(parents=True)
    executable = directory / "captainhook"
    executable.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    executable.chmod(0o755)
    return directory


@pytest.fixture
def make_context(repo: Path, bin_dir: Path) -> Callable[..., HostContext]:
    """Return a factory building host contexts with quiet output."""

    def _factory(
        *,
        cwd: Path | None = None,
        metadata: dict[str, Any] | None = None,
        environ: dict[str, str] | None = None,
        bin_dir_override: Path | None = None,
    ) -> HostContext:
        return HostContext(
            cwd=cwd or repo,
            metadata=metadata or {},
            bin_dir=bin_dir_override or bin_dir,
            environ=environ or {},
            logger=PluginLogger(use_emoji=False, use_color=False),
        )

    return _factory
