# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the path of the external CaptainHook runner."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from .config import ExtraConfig

BINARY_NAME: Final[str] = "captainhook"


def resolve_executable(extra: ExtraConfig, bin_dir: Path) -> Path:
    """Return the ``exec`` override verbatim, else ``bin_dir/captainhook``.

    No existence check happens here.
    """

    if extra.exec_path_override:
        return Path(extra.exec_path_override)
    return bin_dir / BINARY_NAME


def executable_exists(path: Path) -> bool:
    """Return whether ``path`` names an existing file the runner can be started from."""

    if path.is_file():
        return True
    # Windows installs console scripts with an ``.exe`` suffix.
    return os.name == "nt" and path.with_suffix(".exe").is_file()


__all__ = ["BINARY_NAME", "executable_exists", "resolve_executable"]
