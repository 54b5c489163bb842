# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess-backed runner."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from captainhook_plugin.errors import RunnerProcessError
from captainhook_plugin.logging import PluginLogger
from captainhook_plugin.runner import RunnerOperation, SubprocessHookRunner, build_runner_command

STUB = """\
import json
import sys
from pathlib import Path

Path(sys.argv[0]).with_name("calls.jsonl").open("a", encoding="utf-8").write(json.dumps(sys.argv[1:]) + "\\n")
sys.exit({code})
"""


def _write_stub(directory: Path, *, code: int = 0) -> Path:
    stub = directory / "captainhook.py"
    stub.write_text(STUB.format(code=code), encoding="utf-8")
    return stub


def _quiet() -> PluginLogger:
    return PluginLogger(use_emoji=False, use_color=False)


def test_build_command_for_binary() -> None:
    command = build_runner_command(
        RunnerOperation.INSTALL,
        Path("/proj/bin/captainhook"),
        Path("/proj/captainhook.json"),
        Path("/proj/.git"),
        decorated=False,
    )

    assert command == [
        "/proj/bin/captainhook",
        "install",
        "--no-ansi",
        "--no-interaction",
        "--configuration=/proj/captainhook.json",
        "--git-directory=/proj/.git",
    ]


def test_build_command_runs_python_scripts_through_interpreter() -> None:
    command = build_runner_command(
        RunnerOperation.CONFIGURE,
        Path("/proj/tools/captainhook.py"),
        Path("/proj/captainhook.json"),
        Path("/proj/.git"),
        decorated=True,
    )

    assert command[:4] == [sys.executable, "/proj/tools/captainhook.py", "configure", "--ansi"]


def test_runner_passes_operation_and_paths(tmp_path: Path) -> None:
    stub = _write_stub(tmp_path)
    runner = SubprocessHookRunner(cwd=tmp_path)

    runner.configure(stub, tmp_path / "captainhook.json", tmp_path / ".git", output=_quiet())
    runner.install(stub, tmp_path / "captainhook.json", tmp_path / ".git", output=_quiet())

    calls = [json.loads(line) for line in (tmp_path / "calls.jsonl").read_text(encoding="utf-8").splitlines()]
    assert [call[0] for call in calls] == ["configure", "install"]
    assert f"--git-directory={tmp_path / '.git'}" in calls[1]


def test_non_zero_exit_is_fatal(tmp_path: Path) -> None:
    stub = _write_stub(tmp_path, code=3)

    with pytest.raises(RunnerProcessError) as excinfo:
        SubprocessHookRunner().install(stub, tmp_path / "c.json", tmp_path / ".git", output=_quiet())

    assert excinfo.value.returncode == 3
    assert excinfo.value.command[1] == str(stub)


def test_unstartable_executable_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(RunnerProcessError, match="no process"):
        SubprocessHookRunner().configure(
            tmp_path / "missing-captainhook",
            tmp_path / "c.json",
            tmp_path / ".git",
            output=_quiet(),
        )


def test_verbose_logs_command_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    stub = _write_stub(tmp_path)

    SubprocessHookRunner(verbose=True).install(stub, tmp_path / "c.json", tmp_path / ".git", output=_quiet())

    output = capsys.readouterr().out
    assert "Running process:" in output
    assert f"--git-directory={tmp_path / '.git'}" in output


def test_command_line_hidden_by_default(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    stub = _write_stub(tmp_path)

    SubprocessHookRunner().install(stub, tmp_path / "c.json", tmp_path / ".git", output=_quiet())

    assert "Running process:" not in capsys.readouterr().out
