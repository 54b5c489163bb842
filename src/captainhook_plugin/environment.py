# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment probes: CI detection and the default binary directory."""

from __future__ import annotations

import os
import sysconfig
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CI_ENV_VAR: Final[str] = "CI"
CI_SENTINEL: Final[str] = "true"
WINDOWS_OS_NAME: Final[str] = "nt"
VENV_DIRNAMES: Final[tuple[str, ...]] = (".venv", "venv")


def is_ci(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``CI`` is set to exactly ``"true"``."""

    env = os.environ if environ is None else environ
    return env.get(CI_ENV_VAR) == CI_SENTINEL


def find_venv_bin(start: Path) -> Path | None:
    """Return the scripts directory of the nearest project virtualenv at or above ``start``."""

    scripts = "Scripts" if os.name == WINDOWS_OS_NAME else "bin"
    candidates = (directory / name / scripts for directory in (start, *start.parents) for name in VENV_DIRNAMES)
    return next((candidate for candidate in candidates if candidate.is_dir()), None)


def default_bin_dir(root: Path) -> Path:
    """Return the directory the dependency manager installs console scripts into.

    A project virtualenv wins over the running interpreter's scripts directory.
    """

    venv_bin = find_venv_bin(root)
    if venv_bin is not None:
        return venv_bin
    return Path(sysconfig.get_path("scripts"))


__all__ = ["CI_ENV_VAR", "CI_SENTINEL", "default_bin_dir", "find_venv_bin", "is_ci"]
