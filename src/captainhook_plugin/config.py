# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin overrides read from the ``[tool.captainhook]`` table of ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import PluginConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
EXTRA_NAMESPACE: Final[str] = "captainhook"
DEFAULT_CONFIGURATION_NAME: Final[str] = "captainhook.json"


class ExtraConfig(BaseModel):
    """Read-only snapshot of the plugin overrides declared by the host project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    config_path_override: str | None = Field(default=None, alias="config")
    exec_path_override: str | None = Field(default=None, alias="exec")
    disable_plugin: bool = Field(default=False, alias="disable-plugin")


def load_project_metadata(root: Path) -> Mapping[str, Any]:
    """Return the ``[tool]`` table of ``root/pyproject.toml``.

    Args:
        root: Directory expected to hold the project's ``pyproject.toml``.

    Returns:
        Mapping[str, Any]: Tool table, empty when the file or table is absent.

    Raises:
        PluginConfigError: Raised when the file exists but is not valid TOML.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return {}
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise PluginConfigError(f"unable to read {pyproject}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    return dict(tool_section)


def read_extra_config(metadata: Mapping[str, Any]) -> ExtraConfig:
    """Return the plugin overrides stored under the ``captainhook`` namespace.

    Args:
        metadata: Mapping-of-mappings taken from the host project metadata.

    Returns:
        ExtraConfig: Overrides with documented defaults for missing keys.

    Raises:
        PluginConfigError: Raised when a key holds a value of the wrong type.
    """

    section = metadata.get(EXTRA_NAMESPACE)
    if not isinstance(section, Mapping):
        return ExtraConfig()
    try:
        return ExtraConfig.model_validate(dict(section))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise PluginConfigError(f"invalid [tool.{EXTRA_NAMESPACE}] settings: {problems}") from exc


def resolve_configuration_path(extra: ExtraConfig, cwd: Path) -> Path:
    """Return the absolute configuration file path for the current run.

    Args:
        extra: Overrides read from the project metadata.
        cwd: Working directory of the lifecycle event.

    Returns:
        Path: ``config`` override resolved against ``cwd``, else ``cwd/captainhook.json``.
    """

    if extra.config_path_override:
        candidate = Path(extra.config_path_override)
        return candidate if candidate.is_absolute() else cwd / candidate
    return cwd / DEFAULT_CONFIGURATION_NAME


__all__ = [
    "DEFAULT_CONFIGURATION_NAME",
    "EXTRA_NAMESPACE",
    "ExtraConfig",
    "load_project_metadata",
    "read_extra_config",
    "resolve_configuration_path",
]
