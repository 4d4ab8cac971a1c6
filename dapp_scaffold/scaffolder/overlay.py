"""Directory overlay engine.

A generated project is the composition of three template layers copied on
top of each other into the destination: the base template, the chain
template and the wallet provider template.  Each layer may overwrite files
placed by the previous one; no layer ever deletes anything.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..registry import WalletProvider

# Directory inside a chain root that is never part of the chain layer.
BASE_MARKER = "base"

_PROVIDER_DIR_NAMES: frozenset[str] = frozenset(w.value for w in WalletProvider)


def copy_dir(src: str | Path, dest: str | Path, excludes: Iterable[str] = ()) -> None:
    """Recursively overlay *src* onto *dest*.

    Entries whose name is in *excludes* are skipped at every level, files
    are copied byte-for-byte and overwrite whatever is already at the
    target path, and files in *dest* that *src* does not have are left
    untouched.

    Raises:
        OSError: If *src* cannot be listed or *dest* cannot be created.
    """
    src_path = Path(src)
    dest_path = Path(dest)
    excluded = frozenset(excludes)

    dest_path.mkdir(parents=True, exist_ok=True)

    with os.scandir(src_path) as entries:
        for entry in entries:
            if entry.name in excluded:
                continue
            target = dest_path / entry.name
            if entry.is_dir():
                copy_dir(entry.path, target, excluded)
            else:
                shutil.copyfile(entry.path, target)


def overlay_base(base_dir: str | Path, dest: str | Path, excludes: Iterable[str]) -> None:
    """Layer 1: copy the base template, minus build output and VCS metadata."""
    copy_dir(base_dir, dest, excludes)


def overlay_chain(chain_dir: str | Path, dest: str | Path) -> None:
    """Layer 2: copy the chain-wide files of a chain template.

    A chain root mixes chain-wide shared files with one subtree per wallet
    provider.  Plain files are copied individually; subdirectories are
    overlaid recursively unless they are a provider subtree or the ``base``
    marker.  A missing chain root is not an error.
    """
    chain_path = Path(chain_dir)
    dest_path = Path(dest)
    if not chain_path.is_dir():
        return

    dest_path.mkdir(parents=True, exist_ok=True)
    with os.scandir(chain_path) as entries:
        for entry in entries:
            if not entry.is_dir():
                shutil.copyfile(entry.path, dest_path / entry.name)
            elif entry.name not in _PROVIDER_DIR_NAMES and entry.name != BASE_MARKER:
                copy_dir(entry.path, dest_path / entry.name)


def overlay_wallet(wallet_dir: str | Path, dest: str | Path) -> None:
    """Layer 3: copy the wallet provider subtree with highest precedence."""
    copy_dir(wallet_dir, dest)
