# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the authoritative git metadata directory, following linked worktrees."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import GitDirectoryNotFoundError

DOT_GIT: Final[str] = ".git"
GITDIR_PREFIX: Final[str] = "gitdir:"
COMMONDIR_FILENAME: Final[str] = "commondir"
WORKTREES_SEGMENT: Final[str] = "worktrees"


@dataclass(frozen=True, slots=True)
class GitDirectoryDescriptor:
    """Resolved git metadata directory and whether it was reached through a worktree.

    When ``is_worktree`` is ``True`` the ``path`` is the common directory shared
    with the primary checkout, never the worktree-local stub.
    """

    path: Path
    is_worktree: bool

    @property
    def hooks_dir(self) -> Path:
        """Return the directory the runner writes hook scripts into."""

        return self.path / "hooks"


def locate_git_directory(start: Path) -> GitDirectoryDescriptor:
    """Return the nearest git metadata directory at or above ``start``.

    The nearest ``.git`` entry wins. A directory identifies a primary
    checkout; a file is a worktree pointer resolved to the common directory.

    Args:
        start: Absolute directory the search begins in.

    Returns:
        GitDirectoryDescriptor: Located directory and its classification.

    Raises:
        GitDirectoryNotFoundError: Raised when the filesystem root is reached
            without a match, or when a worktree pointer cannot be resolved.
    """

    current = Path(os.path.abspath(start))
    while True:
        candidate = current / DOT_GIT
        if candidate.is_dir():
            return GitDirectoryDescriptor(path=candidate, is_worktree=False)
        if candidate.is_file():
            return GitDirectoryDescriptor(path=_resolve_pointer(candidate, start), is_worktree=True)
        parent = current.parent
        if parent == current:
            raise GitDirectoryNotFoundError(start)
        current = parent


def _resolve_pointer(pointer: Path, start: Path) -> Path:
    """Return the common git directory referenced by a ``.git`` pointer file.

    Args:
        pointer: ``.git`` file holding a ``gitdir: <path>`` line.
        start: Original search start, reported on failure.

    Returns:
        Path: Existing common git directory.

    Raises:
        GitDirectoryNotFoundError: Raised for malformed or dangling pointers.
    """

    try:
        first_line = pointer.read_text(encoding="utf-8").splitlines()[0]
    except (OSError, IndexError, UnicodeDecodeError) as exc:
        raise GitDirectoryNotFoundError(start, reason=f"unreadable worktree pointer {pointer}") from exc
    if not first_line.startswith(GITDIR_PREFIX):
        raise GitDirectoryNotFoundError(start, reason=f"malformed worktree pointer {pointer}")

    target = Path(first_line[len(GITDIR_PREFIX) :].strip())
    if not target.is_absolute():
        target = pointer.parent / target
    target = _normalise(target)

    common = _common_directory(target, start)
    if not common.is_dir():
        raise GitDirectoryNotFoundError(start)
    return common


def _common_directory(target: Path, start: Path) -> Path:
    commondir = target / COMMONDIR_FILENAME
    if commondir.is_file():
        try:
            value = Path(commondir.read_text(encoding="utf-8").strip())
        except (OSError, UnicodeDecodeError) as exc:
            raise GitDirectoryNotFoundError(start, reason=f"unreadable commondir file {commondir}") from exc
        return _normalise(value if value.is_absolute() else target / value)
    parts = target.parts
    if WORKTREES_SEGMENT in parts[1:]:
        index = len(parts) - 1 - parts[::-1].index(WORKTREES_SEGMENT)
        return Path(*parts[:index])
    return target


def _normalise(path: Path) -> Path:
    # Collapse ``..`` segments without following symlinks.
    return Path(os.path.normpath(path))


__all__ = ["DOT_GIT", "GitDirectoryDescriptor", "locate_git_directory"]
