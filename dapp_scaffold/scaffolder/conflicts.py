"""Detect pre-existing files that would clash with a generated project."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from ..utils import remove_path

# Entries that may already exist in the target directory without counting
# as a conflict.
VALID_FILES: frozenset[str] = frozenset({
    ".DS_Store",
    ".git",
    ".gitattributes",
    ".gitignore",
    ".gitlab-ci.yml",
    ".hg",
    ".hgcheck",
    ".hgignore",
    ".idea",
    ".npmignore",
    ".travis.yml",
    "LICENSE",
    "Thumbs.db",
    "docs",
    "mkdocs.yml",
    "npm-debug.log",
    "yarn-debug.log",
    "yarn-error.log",
    "pnpm-debug.log",
    "bun.lockb",
})


def is_ignorable(name: str) -> bool:
    """Return ``True`` if *name* is harmless scaffolding residue."""
    # IntelliJ-based editors drop a <project>.iml next to .idea/
    return name in VALID_FILES or name.endswith(".iml")


def get_conflicting_files(root: str | Path) -> list[str]:
    """Return the entries of *root* that would conflict, in listing order."""
    return [name for name in os.listdir(root) if not is_ignorable(name)]


def is_folder_empty(root: str | Path) -> bool:
    """Return ``True`` if *root* holds nothing but ignorable entries."""
    return not get_conflicting_files(root)


def remove_conflicts(root: str | Path, conflicts: Iterable[str]) -> None:
    """Force-delete each conflicting entry (recursively for directories)."""
    root_path = Path(root)
    for name in conflicts:
        remove_path(root_path / name)


def format_conflicts(conflicts: list[str], limit: int = 5) -> str:
    """Render the first *limit* conflicts plus an overflow count.

    Example::

        format_conflicts(["a", "b", "c"], limit=2) -> "a, b, and 1 more"
    """
    shown = ", ".join(conflicts[:limit])
    overflow = len(conflicts) - limit
    if overflow > 0:
        return f"{shown}, and {overflow} more"
    return shown
